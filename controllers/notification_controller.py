"""notification_controller: 알림 관련 컨트롤러."""

from fastapi import Request

from dependencies.request_context import get_request_timestamp
from schemas.common import create_response, serialize_notification
from services.user_service import UserDirectory


async def get_notifications(
    directory: UserDirectory, request: Request, offset: int = 0, limit: int = 20
) -> dict:
    """최근 알림 목록을 최신순으로 조회합니다."""
    timestamp = get_request_timestamp(request)
    notifications, total_count = directory.notifications.recent(offset, limit)
    has_more = offset + limit < total_count
    return create_response(
        "NOTIFICATIONS_LOADED",
        "알림 목록을 조회했습니다.",
        data={
            "notifications": [serialize_notification(n) for n in notifications],
            "pagination": {"total_count": total_count, "has_more": has_more},
        },
        timestamp=timestamp,
    )


async def clear_notifications(directory: UserDirectory, request: Request) -> dict:
    """모든 알림을 삭제합니다."""
    timestamp = get_request_timestamp(request)
    count = directory.notifications.clear()
    return create_response(
        "NOTIFICATIONS_CLEARED",
        f"{count}개의 알림을 삭제했습니다.",
        timestamp=timestamp,
    )
