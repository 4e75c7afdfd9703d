# logging: 요청/응답 로깅 미들웨어
# 요청 시각을 request.state에 기록하고, 모든 HTTP 요청과 응답에 로그를 남긴다.

import logging
import time
from datetime import datetime, timezone
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from core.config import settings

logger = logging.getLogger("api")
logger.setLevel(settings.LOG_LEVEL)

# 콘솔 핸들러 추가 (없는 경우)
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    요청/응답 로깅 미들웨어

    컨트롤러가 일관된 타임스탬프를 쓰도록 요청 시각(UTC)을 request.state에 저장하고,
    요청의 메소드, 경로, 상태 코드, 처리 시간을 로그로 남긴다.
    """

    async def dispatch(self, request: Request, call_next):
        request.state.request_time = datetime.now(timezone.utc)
        start_time = time.perf_counter()

        logger.info(f"-> {request.method} {request.url.path}")

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        logger.info(
            f"<- {request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.3f}s"
        )

        return response
