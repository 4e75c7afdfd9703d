"""user_router: 사용자 관련 라우터 모듈.

사용자 목록 검색, 상세 조회, 추가, 수정, 삭제 엔드포인트를 제공합니다.
"""

from fastapi import APIRouter, Depends, Query, Request, status

from controllers import user_controller
from dependencies.directory import get_user_directory
from schemas.user_schemas import CreateUserRequest, UpdateUserRequest
from services.user_service import UserDirectory


user_router = APIRouter(prefix="/v1/users", tags=["users"])
"""사용자 관련 라우터 인스턴스."""


@user_router.get("/", status_code=status.HTTP_200_OK)
async def list_users(
    request: Request,
    search: str = Query("", max_length=100, description="이름 검색어"),
    directory: UserDirectory = Depends(get_user_directory),
) -> dict:
    """사용자 목록을 조회합니다.

    Args:
        request: FastAPI Request 객체.
        search: 이름 검색어 (대소문자 구분 없음).
        directory: 사용자 디렉터리 서비스.

    Returns:
        검색된 사용자 목록과 로딩 상태가 포함된 응답.
    """
    return await user_controller.list_users(directory, search, request)


@user_router.post("/", status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: CreateUserRequest,
    request: Request,
    directory: UserDirectory = Depends(get_user_directory),
) -> dict:
    """새 사용자를 추가합니다 (메모리에만 저장).

    Args:
        user_data: 추가할 사용자 정보.
        request: FastAPI Request 객체.
        directory: 사용자 디렉터리 서비스.

    Returns:
        추가된 사용자 정보가 포함된 응답.
    """
    return await user_controller.create_user(directory, user_data, request)


@user_router.get("/{user_id}", status_code=status.HTTP_200_OK)
async def get_user(
    user_id: int,
    request: Request,
    directory: UserDirectory = Depends(get_user_directory),
) -> dict:
    """특정 사용자의 상세 정보를 조회합니다."""
    return await user_controller.get_user(directory, user_id, request)


@user_router.put("/{user_id}", status_code=status.HTTP_200_OK)
async def update_user(
    user_id: int,
    user_data: UpdateUserRequest,
    request: Request,
    directory: UserDirectory = Depends(get_user_directory),
) -> dict:
    """사용자 정보를 교체합니다.

    Args:
        user_id: 수정할 사용자 ID.
        user_data: 새 사용자 정보.
        request: FastAPI Request 객체.
        directory: 사용자 디렉터리 서비스.

    Returns:
        수정된 사용자 정보가 포함된 응답.
    """
    return await user_controller.update_user(directory, user_id, user_data, request)


@user_router.delete("/{user_id}", status_code=status.HTTP_200_OK)
async def delete_user(
    user_id: int,
    request: Request,
    directory: UserDirectory = Depends(get_user_directory),
) -> dict:
    """사용자를 삭제합니다."""
    return await user_controller.delete_user(directory, user_id, request)
