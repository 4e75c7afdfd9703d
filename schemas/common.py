"""common: 공통 응답 유틸리티 모듈.

API 응답 생성 및 공통 데이터 변환 함수를 정의합니다.
"""

from datetime import datetime, timezone
from typing import Any


def create_response(
    code: str,
    message: str,
    data: dict[str, Any] | None = None,
    timestamp: str | None = None,
) -> dict[str, Any]:
    """표준 API 응답 딕셔너리를 생성합니다.

    Args:
        code: 응답 코드 (예: "QUERY_SUCCESS", "USER_CREATED").
        message: 사용자에게 표시할 메시지.
        data: 응답 데이터 (기본값: 빈 딕셔너리).
        timestamp: 타임스탬프 (기본값: 현재 시간).

    Returns:
        표준 형식의 응답 딕셔너리.
    """
    return {
        "code": code,
        "message": message,
        "data": data if data is not None else {},
        "errors": [],
        "timestamp": timestamp or datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }


def serialize_user(user) -> dict[str, Any]:
    """User 객체를 API 응답용 딕셔너리로 변환합니다.

    원격 디렉터리 서비스와 같은 형태(company, address 중첩)를 유지합니다.

    Args:
        user: User 데이터 객체.

    Returns:
        사용자 정보 딕셔너리.
    """
    return {
        "id": user.id,
        "name": user.name,
        "username": user.username,
        "email": user.email,
        "phone": user.phone,
        "website": user.website,
        "company": {"name": user.company.name},
        "address": {
            "street": user.address.street,
            "city": user.address.city,
            "zipcode": user.address.zipcode,
        },
    }


def serialize_notification(notification) -> dict[str, Any]:
    """Notification 객체를 API 응답용 딕셔너리로 변환합니다."""
    return {
        "notification_id": notification.id,
        "message": notification.message,
        "severity": notification.severity,
        "created_at": notification.created_at.strftime("%Y-%m-%dT%H:%M:%SZ"),
    }
