"""user_collection: 메모리 기반 사용자 컬렉션 모듈.

세션 동안 사용자 레코드를 보관하며, 추가/수정/삭제/이름 검색을 제공합니다.
변경이 일어날 때마다 구독자에게 CollectionEvent를 전달합니다.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from models.user_models import User, dict_to_user

logger = logging.getLogger(__name__)

EVENT_LOADED = "loaded"
EVENT_ADDED = "added"
EVENT_UPDATED = "updated"
EVENT_DELETED = "deleted"


@dataclass(frozen=True)
class CollectionEvent:
    """컬렉션 변경 이벤트.

    Attributes:
        kind: 이벤트 종류 (loaded, added, updated, deleted).
        user_id: 대상 사용자 ID (loaded 이벤트는 None).
        size: 변경 후 컬렉션 크기.
    """

    kind: str
    user_id: int | None
    size: int


CollectionListener = Callable[[CollectionEvent], None]


class UserCollection:
    """식별자 → 사용자 레코드의 순서 있는 메모리 저장소.

    반복 순서는 삽입 순서이며, 수정은 위치를 유지합니다.
    새 식별자는 단조 증가 카운터로 발급하므로 삭제 후에도 재사용되지 않습니다.
    일치하는 레코드가 없는 수정/삭제는 아무 것도 하지 않습니다.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 1
        self._listeners: list[CollectionListener] = []

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self):
        return iter(list(self._users.values()))

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def subscribe(self, listener: CollectionListener) -> Callable[[], None]:
        """변경 이벤트 구독자를 등록합니다.

        Args:
            listener: CollectionEvent를 받는 콜백.

        Returns:
            구독을 해제하는 함수.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, kind: str, user_id: int | None) -> None:
        event = CollectionEvent(kind=kind, user_id=user_id, size=len(self._users))
        for listener in list(self._listeners):
            listener(event)

    def load(self, records: Iterable[User]) -> None:
        """컬렉션 전체를 주어진 레코드로 교체합니다 (병합하지 않음).

        Args:
            records: 순서대로 저장할 사용자 레코드.
        """
        users: dict[int, User] = {}
        for user in records:
            if user.id in users:
                logger.warning(f"중복된 사용자 ID {user.id}: 이후 레코드로 대체합니다.")
            users[user.id] = user

        self._users = users
        self._next_id = max(users, default=0) + 1
        self._emit(EVENT_LOADED, None)

    def add(self, data: dict[str, Any]) -> list[User]:
        """새 식별자를 부여한 사용자를 끝에 추가합니다.

        Args:
            data: 사용자 필드 딕셔너리 (id는 무시됨).

        Returns:
            추가 후의 전체 사용자 목록.
        """
        user_id = self._next_id
        self._next_id += 1
        self._users[user_id] = dict_to_user(data, user_id=user_id)
        self._emit(EVENT_ADDED, user_id)
        return self.all_users()

    def update(self, user_id: int, data: dict[str, Any]) -> User | None:
        """user_id 레코드를 data로 교체합니다.

        Args:
            user_id: 교체할 사용자 ID.
            data: 새 사용자 필드 딕셔너리 (id는 user_id로 고정).

        Returns:
            교체된 사용자, 일치하는 레코드가 없으면 None.
        """
        if user_id not in self._users:
            return None
        user = dict_to_user(data, user_id=user_id)
        self._users[user_id] = user
        self._emit(EVENT_UPDATED, user_id)
        return user

    def delete(self, user_id: int) -> User | None:
        """user_id 레코드를 삭제합니다.

        Returns:
            삭제된 사용자, 일치하는 레코드가 없으면 None.
        """
        user = self._users.pop(user_id, None)
        if user is None:
            return None
        self._emit(EVENT_DELETED, user_id)
        return user

    def get(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def all_users(self) -> list[User]:
        return list(self._users.values())

    def filter(self, substring: str = "") -> list[User]:
        """이름에 substring이 포함된 사용자를 대소문자 구분 없이 반환합니다.

        호출할 때마다 현재 상태로 다시 계산합니다.
        빈 문자열(공백만 있는 경우 포함)이면 전체 목록을 순서대로 반환합니다.
        그 외에는 검색어의 앞뒤 공백까지 포함하여 비교합니다.
        """
        if not substring.strip():
            return self.all_users()
        term = substring.lower()
        return [user for user in self._users.values() if term in user.name.lower()]
