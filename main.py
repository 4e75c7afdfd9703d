"""main: FastAPI 애플리케이션의 메인 진입점.

애플리케이션 설정, 미들웨어 구성, 라우터 등록, 전역 예외 핸들러를 설정합니다.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from routers.user_router import user_router
from routers import notification_router
from middleware import LoggingMiddleware
from middleware.exception_handler import (
    global_exception_handler,
    request_validation_exception_handler,
)
from core.config import settings
from dependencies.directory import get_user_directory
from services.directory_client import DirectoryClient
from services.notification_service import NotificationCenter
from services.user_service import UserDirectory
from fastapi.exceptions import RequestValidationError
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from mangum import Mangum


logger = logging.getLogger("api")


def create_directory() -> UserDirectory:
    """설정값으로 비어 있는 UserDirectory를 생성합니다."""
    return UserDirectory(
        notifications=NotificationCenter(max_size=settings.NOTIFICATION_HISTORY_SIZE)
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리.

    시작 시 사용자 디렉터리를 생성하고 원격 목록 로딩을 백그라운드 작업으로 시작하며,
    종료 시 아직 끝나지 않은 로딩 작업을 취소합니다.
    """
    directory = create_directory()
    app.state.directory = directory

    load_task = None
    if settings.LOAD_ON_STARTUP:
        directory.loading = True
        load_task = asyncio.create_task(
            directory.load_from_remote(DirectoryClient.from_settings())
        )
    yield
    if load_task and not load_task.done():
        load_task.cancel()


app = FastAPI(
    title="User Directory API",
    description="원격 디렉터리에서 불러온 사용자를 메모리에서 관리하는 API 서버",
    version="1.0.0",
    lifespan=lifespan,
)

# 요청 시각을 request.state에 기록하고 요청/응답을 로깅
app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# nginx 등 리버스 프록시 뒤에서 X-Forwarded-Proto를 신뢰.
# trusted_hosts="*"는 IP 스푸핑 위험이 있으므로 명시적 IP만 허용
_proxy_trusted_hosts = list(settings.TRUSTED_PROXIES) if settings.TRUSTED_PROXIES else ["127.0.0.1", "::1"]
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=_proxy_trusted_hosts)

app.include_router(user_router)
app.include_router(notification_router.router)


@app.get("/health", status_code=200)
async def health_check(directory: UserDirectory = Depends(get_user_directory)):
    """서버 상태 및 사용자 디렉터리 로딩 상태 확인."""
    if directory.load_error:
        return {"status": "degraded", "loading": False, "error": directory.load_error}
    return {
        "status": "ok",
        "loading": directory.loading,
        "user_count": len(directory.collection),
    }


app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)  # type: ignore[arg-type]

# AWS 핸들러 설정
handler = Mangum(app)
