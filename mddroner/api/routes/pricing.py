from fastapi import APIRouter, Query
from ...core.constants import BASE_PRICE
from ...db import schemas
from ...services import pricing

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.get("/estimate", response_model=schemas.PriceEstimate)
def estimate_price(
    multiple_vehicles: bool = Query(False, alias="multipleVehicles"),
    extra_vehicle_count: str | None = Query(None, alias="extraVehicleCount"),
    video_upgrade: bool = Query(False, alias="videoUpgrade"),
    video_location_count: str | None = Query(None, alias="videoLocationCount"),
):
    # Counts arrive as raw strings; the calculator ignores anything that is
    # not a positive integer.
    return schemas.PriceEstimate(
        base_price=BASE_PRICE,
        vehicles_amount=pricing.vehicles_amount(extra_vehicle_count, multiple_vehicles),
        video_amount=pricing.video_amount(video_location_count, video_upgrade),
        total=pricing.estimate(
            extra_vehicle_count=extra_vehicle_count,
            video_location_count=video_location_count,
            multiple_vehicles=multiple_vehicles,
            video_upgrade=video_upgrade,
        ),
    )
