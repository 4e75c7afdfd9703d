"""user_schemas: 사용자 관련 Pydantic 모델 모듈.

원격 디렉터리 응답 파싱 스키마와 사용자 추가/수정 요청 스키마를 정의합니다.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class AddressSchema(BaseModel):
    """주소 스키마. suite, geo 등 나머지 원격 필드는 무시합니다."""

    model_config = ConfigDict(extra="ignore")

    street: str = ""
    city: str = ""
    zipcode: str = ""


class CompanySchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""


class RemoteUser(BaseModel):
    """원격 디렉터리 서비스가 반환하는 사용자 객체.

    서버 데이터는 형식 검증을 느슨하게 적용합니다 (이메일 형식 검증 없음).
    """

    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., ge=1)
    name: str
    username: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    company: CompanySchema = Field(default_factory=CompanySchema)
    address: AddressSchema = Field(default_factory=AddressSchema)


class CreateUserRequest(BaseModel):
    """사용자 추가 요청 모델.

    Attributes:
        name: 표시 이름 (1~100자).
        username: 사용자명.
        email: 이메일 주소.
        phone: 전화번호 (선택).
        website: 웹사이트 (선택).
        company: 소속 회사 (선택).
        address: 주소 (선택).
    """

    name: str = Field(..., min_length=1, max_length=100)
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    phone: str = ""
    website: str = ""
    company: CompanySchema = Field(default_factory=CompanySchema)
    address: AddressSchema = Field(default_factory=AddressSchema)

    @field_validator("name", "username")
    @classmethod
    def strip_required(cls, v: str) -> str:
        """앞뒤 공백을 제거하고 빈 값을 거부합니다."""
        v = v.strip()
        if not v:
            raise ValueError("값은 공백만으로 구성될 수 없습니다.")
        return v


class UpdateUserRequest(CreateUserRequest):
    """사용자 수정 요청 모델.

    수정은 레코드 전체를 교체하므로 추가 요청과 같은 필드를 받습니다.
    """
