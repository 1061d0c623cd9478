import pytest

from chromabyte import Color


@pytest.fixture
def orange() -> Color:
    return Color.rgba(255, 128, 0, 200)


@pytest.fixture(params=[0, 1, 127, 128, 254, 255])
def byte(request) -> int:
    return request.param
