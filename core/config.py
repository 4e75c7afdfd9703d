from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정을 관리하는 클래스.

    환경 변수에서 설정을 로드하며, 기본값을 제공합니다.

    Attributes:
        USER_DIRECTORY_URL: 초기 사용자 목록을 가져올 원격 REST 엔드포인트.
        USER_DIRECTORY_TIMEOUT_SECONDS: 원격 요청 타임아웃 (초).
        LOAD_ON_STARTUP: 애플리케이션 시작 시 원격 목록을 불러올지 여부.
        NOTIFICATION_HISTORY_SIZE: 보관할 최근 알림 수.
        ALLOWED_ORIGINS: CORS 허용 오리진 목록.
    """

    USER_DIRECTORY_URL: str = "https://jsonplaceholder.typicode.com/users"
    USER_DIRECTORY_TIMEOUT_SECONDS: float = 10.0
    LOAD_ON_STARTUP: bool = True

    NOTIFICATION_HISTORY_SIZE: int = 100

    ALLOWED_ORIGINS: list[str] = [
        "http://127.0.0.1:5173",  # 로컬 개발 (프론트엔드)
        "http://localhost:5173",  # 로컬 개발 (프론트엔드)
    ]
    TRUSTED_PROXIES: set[str] = set()  # 프로덕션에서 nginx 등의 프록시 IP 설정 필요

    # 프로덕션에서는 False로 설정하여 상세 에러 메시지 노출 방지
    DEBUG: bool = True

    LOG_LEVEL: str = "INFO"
    ERROR_LOG_FILE: str = "server_error.log"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
