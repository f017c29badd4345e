"""Shared pytest fixtures for all test suites."""

from datetime import UTC, datetime

import pytest

from backend.planner.config import Settings
from backend.planner.models.common import Coordinate


@pytest.fixture
def seoul_station() -> Coordinate:
    return Coordinate(
        lat=37.5546788,
        lng=126.9709914,
        address="서울특별시 중구 봉래동2가 122",
        name="서울역",
    )


@pytest.fixture
def gangnam_station() -> Coordinate:
    return Coordinate(
        lat=37.4979462,
        lng=127.0276368,
        address="서울특별시 강남구 역삼동 737",
        name="강남역",
    )


@pytest.fixture
def seoul() -> Coordinate:
    return Coordinate(lat=37.57, lng=126.98, address="서울특별시", name="서울")


@pytest.fixture
def busan() -> Coordinate:
    return Coordinate(lat=35.18, lng=129.08, address="부산광역시", name="부산")


@pytest.fixture
def suwon() -> Coordinate:
    return Coordinate(lat=37.2636, lng=127.0286, address="경기도 수원시", name="수원")


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 11, 9, 13, 0, tzinfo=UTC)


@pytest.fixture
def mock_settings() -> Settings:
    """Keyless settings - feeds serve fixtures with no delay."""
    return Settings(public_data_api_key="", mock_feed_delay_ms=0)


@pytest.fixture
def keyed_settings() -> Settings:
    """Settings with API keys - feeds call the (mocked) HTTP APIs."""
    return Settings(
        public_data_api_key="test-key",
        kakao_api_key="kakao-key",
        public_data_base_url="http://public-data.test",
        kakao_base_url="http://kakao.test",
        mock_feed_delay_ms=0,
    )
