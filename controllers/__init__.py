"""controllers: 비즈니스 로직 및 요청 핸들러 패키지.

사용자, 알림 관련 컨트롤러 모듈을 제공합니다.
"""

from . import user_controller
from . import notification_controller

__all__ = [
    "user_controller",
    "notification_controller",
]
