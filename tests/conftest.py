import httpx
import pytest

from aimodel_client.stats import reset_stats

from .helpers import COMPLETION


@pytest.fixture
def ok_handler():
    return lambda request: httpx.Response(200, json=COMPLETION)


@pytest.fixture(autouse=True)
def fresh_stats():
    reset_stats()
    yield
    reset_stats()
