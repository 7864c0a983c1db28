from fastapi import APIRouter
from ...core.constants import LOCATIONS
from ...db import schemas

router = APIRouter(tags=["misc"])


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/locations", response_model=list[schemas.Location])
def list_locations():
    return [{"key": key, **location} for key, location in LOCATIONS.items()]
