"""exception_handler: 전역 예외 처리 핸들러 모듈.

처리되지 않은 예외를 일관된 형식의 응답으로 변환합니다.
"""

import uuid
import logging
import traceback
from logging.handlers import RotatingFileHandler
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

from core.config import settings
from dependencies.request_context import get_request_timestamp


logger = logging.getLogger("api")

# 에러 전용 파일 로거
error_logger = logging.getLogger("api.error")
error_logger.setLevel(logging.ERROR)


def _ensure_error_file_handler() -> None:
    """에러 로그 파일 핸들러를 처음 필요할 때 등록합니다.

    RotatingFileHandler: 10MB 단위로 로테이션, 최대 5개 백업 파일.
    """
    if error_logger.handlers:
        return
    error_file_handler = RotatingFileHandler(
        settings.ERROR_LOG_FILE,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    error_file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    error_logger.addHandler(error_file_handler)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """전역 예외 처리 핸들러.

    모든 예외를 잡아서 일관된 형식의 500 에러 응답을 반환합니다.
    프로덕션 환경(DEBUG=False)에서는 상세 에러 정보를 숨깁니다.

    Args:
        request: FastAPI Request 객체.
        exc: 발생한 예외.

    Returns:
        500 에러 JSON 응답.
    """
    tracking_id = str(uuid.uuid4())
    timestamp = get_request_timestamp(request)

    logger.error(f"[{tracking_id}] Unhandled exception: {exc}")

    _ensure_error_file_handler()
    error_logger.error(
        f"[{tracking_id}] Unhandled exception: {exc}\n"
        f"{''.join(traceback.format_exception(exc))}"
    )

    content = {
        "trackingID": tracking_id,
        "error": "Internal Server Error",
        "timestamp": timestamp,
    }

    # DEBUG 모드에서만 상세 정보 포함
    if settings.DEBUG:
        content["detail"] = str(exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 데이터 유효성 검사 예외 처리 핸들러.

    Pydantic 유효성 검사 실패 시 호출됩니다.
    오류 정보의 ctx에 예외 객체 등 직렬화할 수 없는 값이 있으면 문자열로 바꿉니다.

    Args:
        request: FastAPI Request 객체.
        exc: 발생한 Validation 예외.

    Returns:
        422 Unprocessable Entity 에러 JSON 응답.
    """
    timestamp = get_request_timestamp(request)

    sanitized_errors = []
    for error in exc.errors():
        error_copy = dict(error)
        if isinstance(error_copy.get("ctx"), dict):
            error_copy["ctx"] = {k: str(v) for k, v in error_copy["ctx"].items()}
        sanitized_errors.append(error_copy)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={"detail": jsonable_encoder(sanitized_errors), "timestamp": timestamp},
    )
