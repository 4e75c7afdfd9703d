"""notification_router: 알림 API 라우터."""

from fastapi import APIRouter, Depends, Query, Request

from controllers import notification_controller
from dependencies.directory import get_user_directory
from services.user_service import UserDirectory

router = APIRouter(prefix="/v1/notifications", tags=["notifications"])


@router.get("/")
async def get_notifications(
    request: Request,
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    directory: UserDirectory = Depends(get_user_directory),
):
    return await notification_controller.get_notifications(
        directory, request, offset, limit
    )


@router.delete("/")
async def clear_notifications(
    request: Request,
    directory: UserDirectory = Depends(get_user_directory),
):
    return await notification_controller.clear_notifications(directory, request)
