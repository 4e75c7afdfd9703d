"""routers: FastAPI 라우터 패키지.

사용자, 알림 관련 API 엔드포인트를 정의하는 라우터 모듈을 제공합니다.
"""

from .user_router import user_router
from . import notification_router

__all__ = [
    "user_router",
    "notification_router",
]
