from .booking import CamelModel


class PriceEstimate(CamelModel):
    base_price: int
    vehicles_amount: int
    video_amount: int
    total: int
