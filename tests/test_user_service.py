"""test_user_service: UserDirectory 서비스 테스트."""

import httpx
import pytest

from services.directory_client import DirectoryClient
from services.notification_service import NotificationCenter
from services.user_service import (
    USER_ADDED_MESSAGE,
    USER_DELETED_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
    USER_UPDATED_MESSAGE,
    UserDirectory,
)

DIRECTORY_URL = "https://directory.test/users"


def _messages(directory):
    notifications, _ = directory.notifications.recent(limit=100)
    return [(n.message, n.severity) for n in reversed(notifications)]


class TestLoadFromRemote:
    """초기 로딩 테스트."""

    @pytest.mark.asyncio
    async def test_load_success(self, remote_transport):
        directory = UserDirectory()
        client = DirectoryClient(DIRECTORY_URL, transport=remote_transport())

        await directory.load_from_remote(client)

        assert [user.id for user in directory.collection] == [1, 2, 3]
        assert directory.loading is False
        assert directory.load_error is None
        # 초기 로딩은 알림을 발행하지 않음
        assert _messages(directory) == []

    @pytest.mark.asyncio
    async def test_loading_flag_set_during_fetch(self):
        directory = UserDirectory()
        observed = []

        def handler(request: httpx.Request) -> httpx.Response:
            observed.append(directory.loading)
            return httpx.Response(200, json=[])

        client = DirectoryClient(DIRECTORY_URL, transport=httpx.MockTransport(handler))
        await directory.load_from_remote(client)

        assert observed == [True]
        assert directory.loading is False

    @pytest.mark.asyncio
    async def test_load_failure_keeps_collection_empty(self, remote_transport):
        """실패하면 컬렉션은 비어 있고 오류 알림이 발행됩니다."""
        directory = UserDirectory()
        client = DirectoryClient(
            DIRECTORY_URL, transport=remote_transport(status_code=500, json={})
        )

        await directory.load_from_remote(client)

        assert len(directory.collection) == 0
        assert directory.loading is False
        assert "500" in directory.load_error
        [(message, severity)] = _messages(directory)
        assert message.startswith("Error fetching users: ")
        assert severity == "error"

    @pytest.mark.asyncio
    async def test_load_failure_is_not_retried(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("down")

        directory = UserDirectory()
        client = DirectoryClient(DIRECTORY_URL, transport=httpx.MockTransport(handler))
        await directory.load_from_remote(client)

        assert len(calls) == 1
        assert len(directory.collection) == 0

    @pytest.mark.asyncio
    async def test_user_added_while_loading_is_replaced(self, remote_transport):
        """로딩 중 추가된 사용자는 성공 알림 후 원격 목록으로 교체됩니다."""
        directory = UserDirectory()
        inner = remote_transport()

        def handler(request: httpx.Request) -> httpx.Response:
            directory.add_user({"name": "Dana"})
            return inner.handler(request)

        client = DirectoryClient(DIRECTORY_URL, transport=httpx.MockTransport(handler))
        await directory.load_from_remote(client)

        assert [user.id for user in directory.collection] == [1, 2, 3]
        assert directory.search_users("dana") == []
        assert (USER_ADDED_MESSAGE, "success") in _messages(directory)


class TestMutations:
    """추가/수정/삭제 알림 테스트."""

    def test_add_user_publishes_success(self, directory, user_payload):
        user = directory.add_user(user_payload)

        assert user.id == 4
        assert user.name == user_payload["name"]
        assert _messages(directory) == [(USER_ADDED_MESSAGE, "success")]

    def test_update_user_publishes_success(self, directory, user_payload):
        user = directory.update_user(1, user_payload)

        assert user.id == 1
        assert directory.get_user(1).email == user_payload["email"]
        assert _messages(directory) == [(USER_UPDATED_MESSAGE, "success")]

    def test_delete_user_publishes_success(self, directory):
        assert directory.delete_user(3).name == "Clementine Bauch"
        assert directory.get_user(3) is None
        assert _messages(directory) == [(USER_DELETED_MESSAGE, "success")]

    def test_noop_mutations_publish_nothing(self, directory, user_payload):
        assert directory.update_user(99, user_payload) is None
        assert directory.delete_user(99) is None
        assert _messages(directory) == []


class TestSearch:
    """검색 테스트."""

    def test_search_match(self, directory):
        users = directory.search_users("HOWELL")

        assert [user.id for user in users] == [2]
        assert _messages(directory) == []

    def test_search_no_match_publishes_info(self, directory):
        assert directory.search_users("zzz") == []
        assert _messages(directory) == [(USER_NOT_FOUND_MESSAGE, "info")]

    def test_blank_search_returns_all_without_notification(self, directory):
        assert len(directory.search_users("  ")) == 3
        assert _messages(directory) == []

    def test_blank_search_on_empty_directory_is_silent(self):
        directory = UserDirectory()

        assert directory.search_users("") == []
        assert _messages(directory) == []


def test_shared_notification_center_is_used():
    notifications = NotificationCenter(max_size=5)
    directory = UserDirectory(notifications=notifications)

    directory.add_user({"name": "Dana"})

    assert len(notifications) == 1
