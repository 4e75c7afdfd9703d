"""models: 데이터 클래스 및 메모리 컬렉션 패키지.

사용자 데이터 클래스와 세션 동안 사용자를 보관하는 컬렉션을 제공합니다.
"""

from .user_models import (
    Address,
    Company,
    User,
    dict_to_user,
)

from .user_collection import (
    CollectionEvent,
    UserCollection,
)

__all__ = [
    "Address",
    "Company",
    "User",
    "dict_to_user",
    "CollectionEvent",
    "UserCollection",
]
