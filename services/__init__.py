"""services: 사용자 디렉터리, 원격 클라이언트, 알림 서비스 패키지."""
