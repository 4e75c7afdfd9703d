"""notification_service: 사용자에게 표시할 알림(토스트)을 관리하는 서비스."""

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

logger = logging.getLogger(__name__)

Severity = Literal["success", "info", "warning", "error"]


@dataclass(frozen=True)
class Notification:
    """알림 데이터 클래스.

    Attributes:
        id: 발행 순서대로 증가하는 알림 ID.
        message: 사용자에게 표시할 메시지.
        severity: 심각도 (success, info, warning, error).
        created_at: 발행 시간 (UTC).
    """

    id: int
    message: str
    severity: Severity
    created_at: datetime


class NotificationCenter:
    """최근 알림을 메모리에 보관하는 알림 센터.

    max_size를 넘으면 가장 오래된 알림부터 버립니다.
    """

    def __init__(self, max_size: int = 100):
        self._notifications: deque[Notification] = deque(maxlen=max_size)
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._notifications)

    def publish(self, message: str, severity: Severity = "info") -> Notification:
        """알림을 발행합니다.

        Args:
            message: 사용자에게 표시할 메시지.
            severity: 심각도.

        Returns:
            생성된 알림.
        """
        notification = Notification(
            id=self._next_id,
            message=message,
            severity=severity,
            created_at=datetime.now(timezone.utc),
        )
        self._next_id += 1
        self._notifications.append(notification)
        logger.debug(f"알림 발행 [{severity}]: {message}")
        return notification

    def latest(self) -> Notification | None:
        return self._notifications[-1] if self._notifications else None

    def recent(self, offset: int = 0, limit: int = 20) -> tuple[list[Notification], int]:
        """최신순 알림 목록과 총 개수를 반환합니다."""
        newest_first = list(reversed(self._notifications))
        return newest_first[offset : offset + limit], len(newest_first)

    def clear(self) -> int:
        """모든 알림을 삭제하고 삭제한 개수를 반환합니다."""
        count = len(self._notifications)
        self._notifications.clear()
        return count
