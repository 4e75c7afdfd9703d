"""user_models: 사용자 데이터 클래스 모듈.

원격 디렉터리 서비스와 로컬 수정에서 공통으로 사용하는 사용자 레코드를 정의합니다.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Address:
    """주소 데이터 클래스.

    Attributes:
        street: 도로명.
        city: 도시.
        zipcode: 우편번호.
    """

    street: str = ""
    city: str = ""
    zipcode: str = ""


@dataclass(frozen=True)
class Company:
    """회사 데이터 클래스."""

    name: str = ""


@dataclass(frozen=True)
class User:
    """사용자 데이터 클래스.

    Attributes:
        id: 사용자 고유 식별자.
        name: 표시 이름 (검색 대상).
        username: 사용자명.
        email: 이메일 주소.
        phone: 전화번호.
        website: 웹사이트.
        company: 소속 회사.
        address: 주소.
    """

    id: int
    name: str
    username: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    company: Company = field(default_factory=Company)
    address: Address = field(default_factory=Address)


def dict_to_user(data: dict[str, Any], user_id: int | None = None) -> User:
    """원격 응답 또는 요청 본문 딕셔너리를 User 객체로 변환합니다.

    Args:
        data: name, username, email 등의 키를 가진 딕셔너리.
            company, address는 중첩 딕셔너리입니다.
        user_id: 지정하면 data의 id 대신 사용합니다.

    Returns:
        User 객체.
    """
    company = data.get("company") or {}
    address = data.get("address") or {}
    return User(
        id=user_id if user_id is not None else data["id"],
        name=data["name"],
        username=data.get("username") or "",
        email=data.get("email") or "",
        phone=data.get("phone") or "",
        website=data.get("website") or "",
        company=Company(name=company.get("name") or ""),
        address=Address(
            street=address.get("street") or "",
            city=address.get("city") or "",
            zipcode=address.get("zipcode") or "",
        ),
    )
