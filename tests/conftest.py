from datetime import date

import pytest

from tests.helpers import StubSource


@pytest.fixture
def zero_source() -> StubSource:
    return StubSource(0.0)


@pytest.fixture
def today() -> date:
    return date(2024, 3, 15)
