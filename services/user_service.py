"""user_service: 사용자 디렉터리 비즈니스 로직을 처리하는 서비스."""

import logging
from typing import Any

from models.user_collection import (
    EVENT_ADDED,
    EVENT_DELETED,
    EVENT_LOADED,
    EVENT_UPDATED,
    CollectionEvent,
    UserCollection,
)
from models.user_models import User
from services.directory_client import DirectoryClient, LoadFailure
from services.notification_service import NotificationCenter

logger = logging.getLogger(__name__)

USER_ADDED_MESSAGE = "User added successfully!"
USER_UPDATED_MESSAGE = "User updated successfully!"
USER_DELETED_MESSAGE = "User deleted successfully!"
USER_NOT_FOUND_MESSAGE = "No such user found!"
LOAD_FAILED_PREFIX = "Error fetching users: "

_EVENT_MESSAGES = {
    EVENT_ADDED: USER_ADDED_MESSAGE,
    EVENT_UPDATED: USER_UPDATED_MESSAGE,
    EVENT_DELETED: USER_DELETED_MESSAGE,
}


class UserDirectory:
    """사용자 관리 서비스.

    세션 동안의 사용자 컬렉션, 초기 로딩 상태, 알림 센터를 소유합니다.
    컬렉션 변경 이벤트를 구독하여 추가/수정/삭제마다 성공 알림을 발행합니다.
    """

    def __init__(
        self,
        collection: UserCollection | None = None,
        notifications: NotificationCenter | None = None,
    ):
        self.collection = collection if collection is not None else UserCollection()
        self.notifications = (
            notifications if notifications is not None else NotificationCenter()
        )
        self.loading = False
        self.load_error: str | None = None
        self.collection.subscribe(self._on_collection_changed)

    def _on_collection_changed(self, event: CollectionEvent) -> None:
        if event.kind == EVENT_LOADED:
            logger.info(f"사용자 컬렉션 로드 완료: {event.size}명")
            return
        logger.info(f"사용자 {event.user_id} {event.kind} (현재 {event.size}명)")
        self.notifications.publish(_EVENT_MESSAGES[event.kind], "success")

    async def load_from_remote(self, client: DirectoryClient) -> None:
        """원격 디렉터리 서비스에서 초기 사용자 목록을 불러옵니다.

        실패하면 컬렉션은 비어 있는 상태로 남고 오류 알림을 발행합니다.
        재시도하지 않습니다.
        성공하면 컬렉션 전체를 교체하므로 로딩 중에 추가한 사용자는 사라집니다.

        Args:
            client: 원격 디렉터리 클라이언트.
        """
        self.loading = True
        try:
            users = await client.fetch_users()
            self.collection.load(users)
            self.load_error = None
        except LoadFailure as e:
            logger.error(f"Error fetching users: {e}")
            self.load_error = str(e)
            self.notifications.publish(f"{LOAD_FAILED_PREFIX}{e}", "error")
        finally:
            self.loading = False

    def search_users(self, term: str = "") -> list[User]:
        """이름으로 사용자를 검색합니다.

        공백이 아닌 검색어에 일치하는 사용자가 없으면 안내 알림을 발행합니다.
        """
        users = self.collection.filter(term)
        if not users and term.strip():
            self.notifications.publish(USER_NOT_FOUND_MESSAGE, "info")
        return users

    def get_user(self, user_id: int) -> User | None:
        return self.collection.get(user_id)

    def add_user(self, data: dict[str, Any]) -> User:
        """사용자를 추가하고 새로 추가된 레코드를 반환합니다."""
        return self.collection.add(data)[-1]

    def update_user(self, user_id: int, data: dict[str, Any]) -> User | None:
        """사용자를 수정합니다. 없으면 None을 반환합니다."""
        return self.collection.update(user_id, data)

    def delete_user(self, user_id: int) -> User | None:
        """사용자를 삭제합니다. 없으면 None을 반환합니다."""
        return self.collection.delete(user_id)
