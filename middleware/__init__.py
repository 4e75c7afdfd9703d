"""middleware: 미들웨어 패키지.

요청 타임스탬프 기록과 로깅 등 HTTP 요청/응답 처리를 위한 미들웨어를 제공합니다.
"""

from .logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
]
