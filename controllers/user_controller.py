"""user_controller: 사용자 관련 컨트롤러 모듈.

사용자 목록 검색, 상세 조회, 추가, 수정, 삭제 기능을 제공합니다.
응답 메시지는 화면에 표시할 알림 문구와 같습니다.
"""

from fastapi import Request

from dependencies.request_context import get_request_timestamp
from schemas.common import create_response, serialize_user
from schemas.user_schemas import CreateUserRequest, UpdateUserRequest
from services.user_service import (
    USER_ADDED_MESSAGE,
    USER_DELETED_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
    USER_UPDATED_MESSAGE,
    UserDirectory,
)
from utils.exceptions import bad_request_error, not_found_error


def _validate_user_id(user_id: int, timestamp: str) -> None:
    if user_id < 1:
        raise bad_request_error("invalid_user_id", timestamp)


async def list_users(directory: UserDirectory, search: str, request: Request) -> dict:
    """검색어에 맞는 사용자 목록과 로딩 상태를 반환합니다.

    Args:
        directory: 사용자 디렉터리 서비스.
        search: 이름 검색어 (빈 문자열이면 전체).
        request: FastAPI Request 객체.

    Returns:
        users, loading, total_count가 포함된 응답 딕셔너리.
    """
    timestamp = get_request_timestamp(request)
    users = directory.search_users(search)

    message = "사용자 목록 조회에 성공했습니다."
    if not users and search.strip():
        message = USER_NOT_FOUND_MESSAGE

    return create_response(
        "QUERY_SUCCESS",
        message,
        data={
            "users": [serialize_user(user) for user in users],
            "loading": directory.loading,
            "total_count": len(directory.collection),
        },
        timestamp=timestamp,
    )


async def get_user(directory: UserDirectory, user_id: int, request: Request) -> dict:
    """사용자 상세 정보를 반환합니다.

    Raises:
        HTTPException: 잘못된 ID면 400, 사용자가 없으면 404.
    """
    timestamp = get_request_timestamp(request)
    _validate_user_id(user_id, timestamp)

    user = directory.get_user(user_id)
    if not user:
        raise not_found_error("user", timestamp)

    return create_response(
        "QUERY_SUCCESS",
        "사용자 조회에 성공했습니다.",
        data={"user": serialize_user(user)},
        timestamp=timestamp,
    )


async def create_user(
    directory: UserDirectory, user_data: CreateUserRequest, request: Request
) -> dict:
    """사용자를 추가합니다."""
    timestamp = get_request_timestamp(request)
    user = directory.add_user(user_data.model_dump())

    return create_response(
        "USER_CREATED",
        USER_ADDED_MESSAGE,
        data={"user": serialize_user(user)},
        timestamp=timestamp,
    )


async def update_user(
    directory: UserDirectory,
    user_id: int,
    user_data: UpdateUserRequest,
    request: Request,
) -> dict:
    """사용자 정보를 교체합니다.

    Raises:
        HTTPException: 잘못된 ID면 400, 사용자가 없으면 404.
    """
    timestamp = get_request_timestamp(request)
    _validate_user_id(user_id, timestamp)

    user = directory.update_user(user_id, user_data.model_dump())
    if not user:
        raise not_found_error("user", timestamp)

    return create_response(
        "USER_UPDATED",
        USER_UPDATED_MESSAGE,
        data={"user": serialize_user(user)},
        timestamp=timestamp,
    )


async def delete_user(directory: UserDirectory, user_id: int, request: Request) -> dict:
    """사용자를 삭제합니다.

    Raises:
        HTTPException: 잘못된 ID면 400, 사용자가 없으면 404.
    """
    timestamp = get_request_timestamp(request)
    _validate_user_id(user_id, timestamp)

    if not directory.delete_user(user_id):
        raise not_found_error("user", timestamp)

    return create_response("USER_DELETED", USER_DELETED_MESSAGE, timestamp=timestamp)
