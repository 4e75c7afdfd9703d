# directory: 사용자 디렉터리 의존성
# lifespan에서 app.state에 등록한 UserDirectory를 핸들러에 주입합니다.

from fastapi import Request

from services.user_service import UserDirectory


def get_user_directory(request: Request) -> UserDirectory:
    """현재 애플리케이션이 소유한 UserDirectory를 반환합니다."""
    return request.app.state.directory
