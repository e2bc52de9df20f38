import pytest

from quickconvert.config import get_settings
from quickconvert.core.format.formatter import MeasureFormatter


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def formatter():
    return MeasureFormatter(2)
