"""schemas: 요청/응답 Pydantic 스키마 패키지."""
