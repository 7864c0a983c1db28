from __future__ import annotations

import logging
from datetime import datetime

import httpx

from ..config import get_settings
from ..core.constants import NO_LABEL, NOT_PROVIDED_LABEL, YES_LABEL
from ..core.localtime import format_local
from ..db import models, schemas

logger = logging.getLogger(__name__)


class NotificationError(Exception):
    pass


def _yes_no(flag: bool) -> str:
    return YES_LABEL if flag else NO_LABEL


def build_booking_summary(
    booking: models.Booking | schemas.BookingSubmit, submitted_at: datetime
) -> str:
    lines = [
        "新的預約申請",
        "",
        f"• 地點: {booking.route}",
        f"• 姓名: {booking.name}",
        f"• 聯絡電話: {booking.phone}",
        f"• 車型: {booking.car_model}",
        f"• 車牌: {booking.car_plate or NOT_PROVIDED_LABEL}",
        f"• 預期拍攝日期: {booking.booking_date}",
        f"• 多台車: {_yes_no(booking.multiple_vehicles)}",
        f"• 動態影片: {_yes_no(booking.video_upgrade)}",
    ]
    if booking.special_requests:
        lines.append(f"• 特別要求: {booking.special_requests}")
    lines.append(f"• 提交時間: {format_local(submitted_at)}")
    return "\n".join(lines)


def notify_owner(title: str, content: str) -> None:
    """Deliver a message to the studio owner's Telegram chat.

    Raises ``NotificationError`` when the Bot API call fails. A missing bot
    token or chat id is treated as "notifications disabled" and only logged.
    """

    settings = get_settings()
    token = settings.telegram_bot_token
    if not token or not settings.owner_chat_id:
        logger.warning("Owner notifications are not configured; skipping '%s'", title)
        return

    api_url = f"https://api.telegram.org/bot{token}/sendMessage"
    with httpx.Client(timeout=10) as client:
        try:
            response = client.post(
                api_url,
                json={
                    "chat_id": settings.owner_chat_id,
                    "text": f"{title}\n\n{content}",
                    "disable_web_page_preview": True,
                },
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise NotificationError(f"Failed to notify owner: {exc}") from exc
