"""Common application-wide constants."""

# Package pricing, in HKD
BASE_PRICE = 2800
EXTRA_VEHICLE_PRICE = 800
VIDEO_LOCATION_PRICE = 500

# Shoot locations offered on the booking form
LOCATIONS = {
    "classic": {
        "name": "經典山道",
        "description": "大帽山 / 飛鵝山 / 汀九",
    },
    "industrial": {
        "name": "工業美學",
        "description": "大潭 / 昂船洲 / 欣澳",
    },
    "coastal": {
        "name": "海岸秘境",
        "description": "東壩 / 布袋澳 / 清水灣",
    },
}
ROUTE_SEPARATOR = "、"

STATUS_FILTER_ALL = "all"

OWNER_NOTIFICATION_TITLE = "新的 MDDroner 預約申請"
YES_LABEL = "是"
NO_LABEL = "否"
NOT_PROVIDED_LABEL = "未提供"

LOCAL_DATETIME_FORMAT = "%d/%m/%Y %H:%M:%S"


__all__ = [
    "BASE_PRICE",
    "EXTRA_VEHICLE_PRICE",
    "VIDEO_LOCATION_PRICE",
    "LOCATIONS",
    "ROUTE_SEPARATOR",
    "STATUS_FILTER_ALL",
    "OWNER_NOTIFICATION_TITLE",
    "YES_LABEL",
    "NO_LABEL",
    "NOT_PROVIDED_LABEL",
    "LOCAL_DATETIME_FORMAT",
]
