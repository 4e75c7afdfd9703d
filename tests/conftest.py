import copy
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from faker import Faker

from main import app, create_directory
from models.user_models import dict_to_user


# 원격 디렉터리 서비스 응답 형식 (사용하지 않는 필드 포함)
REMOTE_USERS = [
    {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "address": {
            "street": "Kulas Light",
            "suite": "Apt. 556",
            "city": "Gwenborough",
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "phone": "1-770-736-8031 x56442",
        "website": "hildegard.org",
        "company": {
            "name": "Romaguera-Crona",
            "catchPhrase": "Multi-layered client-server neural-net",
            "bs": "harness real-time e-markets",
        },
    },
    {
        "id": 2,
        "name": "Ervin Howell",
        "username": "Antonette",
        "email": "Shanna@melissa.tv",
        "address": {
            "street": "Victor Plains",
            "suite": "Suite 879",
            "city": "Wisokyburgh",
            "zipcode": "90566-7771",
        },
        "phone": "010-692-6593 x09125",
        "website": "anastasia.net",
        "company": {"name": "Deckow-Crist"},
    },
    {
        "id": 3,
        "name": "Clementine Bauch",
        "username": "Samantha",
        "email": "Nathan@yesenia.net",
        "address": {
            "street": "Douglas Extension",
            "suite": "Suite 847",
            "city": "McKenziehaven",
            "zipcode": "59590-4157",
        },
        "phone": "1-463-123-4447",
        "website": "ramiro.info",
        "company": {"name": "Romaguera-Jacobson"},
    },
]


def make_transport(status_code: int = 200, json=None, content: bytes | None = None, exc=None):
    """원격 디렉터리 서비스를 흉내내는 httpx MockTransport를 생성합니다."""

    def handler(request: httpx.Request) -> httpx.Response:
        if exc is not None:
            raise exc
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(
            status_code, json=json if json is not None else copy.deepcopy(REMOTE_USERS)
        )

    return httpx.MockTransport(handler)


@pytest.fixture
def remote_payload():
    return copy.deepcopy(REMOTE_USERS)


@pytest.fixture
def sample_users(remote_payload):
    """ID 1~3의 사용자 레코드"""
    return [dict_to_user(user) for user in remote_payload]


@pytest.fixture
def directory(sample_users):
    """샘플 사용자가 로드된 UserDirectory"""
    directory = create_directory()
    directory.collection.load(sample_users)
    return directory


@pytest_asyncio.fixture
async def client(directory):
    """API 테스트를 위한 Async Client"""
    app.state.directory = directory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def fake():
    return Faker("en_US")


@pytest.fixture
def user_payload(fake):
    """사용자 추가/수정용 페이로드 생성"""
    return {
        "name": fake.name(),
        "username": fake.user_name(),
        "email": fake.free_email(),
        "phone": fake.phone_number(),
        "website": fake.domain_name(),
        "company": {"name": fake.company()},
        "address": {
            "street": fake.street_name(),
            "city": fake.city(),
            "zipcode": fake.postcode(),
        },
    }


@pytest.fixture
def remote_transport():
    """make_transport 팩토리"""
    return make_transport
