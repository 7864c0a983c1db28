from datetime import datetime, timezone

import httpx
import pytest

from mddroner.config import Settings
from mddroner.db import schemas
from mddroner.services import notification_service


SUBMITTED_AT = datetime(2025, 2, 10, 7, 30, tzinfo=timezone.utc)


def make_payload(**overrides) -> schemas.BookingSubmit:
    data = {
        "route": "工業美學",
        "name": "王芳",
        "phone": "+852 9876 5432",
        "carModel": "Honda Civic FL5",
        "bookingDate": "2025-02-20",
        "multipleVehicles": False,
        "videoUpgrade": True,
    }
    data.update(overrides)
    return schemas.BookingSubmit.model_validate(data)


def test_summary_format():
    content = notification_service.build_booking_summary(make_payload(), SUBMITTED_AT)

    assert content.splitlines() == [
        "新的預約申請",
        "",
        "• 地點: 工業美學",
        "• 姓名: 王芳",
        "• 聯絡電話: +852 9876 5432",
        "• 車型: Honda Civic FL5",
        "• 車牌: 未提供",
        "• 預期拍攝日期: 2025-02-20",
        "• 多台車: 否",
        "• 動態影片: 是",
        "• 提交時間: 10/02/2025 15:30:00",
    ]


def test_summary_includes_special_requests_line():
    content = notification_service.build_booking_summary(
        make_payload(specialRequests="日落時段"), SUBMITTED_AT
    )
    assert "• 特別要求: 日落時段" in content


def _patch_client(monkeypatch, handler):
    real_client = httpx.Client

    def client_factory(**kwargs):
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(notification_service.httpx, "Client", client_factory)


def _configured_settings():
    return Settings(TELEGRAM_BOT_TOKEN="bot-token", OWNER_CHAT_ID="42")


def test_notify_owner_posts_to_telegram(monkeypatch):
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"ok": True})

    _patch_client(monkeypatch, handler)
    monkeypatch.setattr(notification_service, "get_settings", _configured_settings)

    notification_service.notify_owner("title", "body")

    assert len(requests) == 1
    assert requests[0].url.path == "/botbot-token/sendMessage"
    assert b'"chat_id":"42"' in requests[0].content.replace(b" ", b"")


def test_notify_owner_raises_on_http_error(monkeypatch):
    _patch_client(monkeypatch, lambda request: httpx.Response(502))
    monkeypatch.setattr(notification_service, "get_settings", _configured_settings)

    with pytest.raises(notification_service.NotificationError):
        notification_service.notify_owner("title", "body")


def test_notify_owner_skips_when_not_configured(monkeypatch, caplog):
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not run
        raise AssertionError("unexpected request")

    _patch_client(monkeypatch, handler)
    monkeypatch.setattr(notification_service, "get_settings", lambda: Settings())

    notification_service.notify_owner("title", "body")

    assert "not configured" in caplog.text
