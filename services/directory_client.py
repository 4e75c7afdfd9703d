"""directory_client: 원격 디렉터리 서비스 클라이언트.

원격 REST 엔드포인트에서 초기 사용자 목록을 한 번 가져옵니다.
"""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from core.config import settings
from models.user_models import User, dict_to_user
from schemas.user_schemas import RemoteUser

logger = logging.getLogger(__name__)

_REMOTE_USERS = TypeAdapter(list[RemoteUser])


class LoadFailure(Exception):
    """초기 사용자 목록을 불러오지 못했을 때 발생하는 예외.

    네트워크 오류, 2xx가 아닌 응답, 형식이 잘못된 응답 본문이 원인입니다.
    """


class DirectoryClient:
    """원격 디렉터리 서비스에 대한 HTTP 클라이언트.

    Attributes:
        url: 사용자 목록 엔드포인트.
        timeout: 요청 타임아웃 (초).
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            url: 사용자 목록 엔드포인트.
            timeout: 요청 타임아웃 (초).
            transport: httpx 전송 계층 (테스트에서 MockTransport 주입).
        """
        self.url = url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls) -> "DirectoryClient":
        return cls(settings.USER_DIRECTORY_URL, settings.USER_DIRECTORY_TIMEOUT_SECONDS)

    async def fetch_users(self) -> list[User]:
        """원격 사용자 목록을 조회합니다.

        Returns:
            응답 순서를 유지한 사용자 목록.

        Raises:
            LoadFailure: 네트워크 오류, 2xx가 아닌 상태 코드, 잘못된 응답 본문.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LoadFailure(
                f"Failed to load users (status {e.response.status_code})"
            ) from e
        except httpx.HTTPError as e:
            raise LoadFailure(f"Failed to load users ({e.__class__.__name__})") from e

        try:
            remote_users = _REMOTE_USERS.validate_json(response.content)
        except ValidationError as e:
            raise LoadFailure("Failed to load users (malformed response)") from e

        logger.info(f"원격 디렉터리에서 사용자 {len(remote_users)}명 조회: {self.url}")
        return [dict_to_user(user.model_dump()) for user in remote_users]
