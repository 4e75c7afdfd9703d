"""test_common: 공통 응답 유틸리티 테스트."""

from datetime import datetime, timezone

from schemas.common import create_response


def test_create_response_default_timestamp_is_utc():
    """타임스탬프 기본값은 UTC 기준이어야 합니다 (Z 접미사)."""
    response = create_response("QUERY_SUCCESS", "ok")

    stamped = datetime.strptime(response["timestamp"], "%Y-%m-%dT%H:%M:%SZ").replace(
        tzinfo=timezone.utc
    )
    assert abs((datetime.now(timezone.utc) - stamped).total_seconds()) < 5


def test_create_response_keeps_given_timestamp():
    response = create_response("QUERY_SUCCESS", "ok", timestamp="2024-01-01T00:00:00Z")

    assert response["timestamp"] == "2024-01-01T00:00:00Z"
    assert response["data"] == {}
    assert response["errors"] == []
