"""utils: 유틸리티 함수들을 모아놓은 패키지.

Modules:
    exceptions: HTTP 에러 헬퍼
"""
