"""dependencies: FastAPI 의존성 주입 패키지.

사용자 디렉터리 및 요청 컨텍스트 관련 의존성 함수를 제공합니다.
"""

from .directory import get_user_directory
from .request_context import get_request_timestamp, get_request_time

__all__ = [
    "get_user_directory",
    "get_request_timestamp",
    "get_request_time",
]
