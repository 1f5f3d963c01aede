import pytest

from aimodel_client import factory
from aimodel_client.provider import AIModelClient, InvocationOutcome, InvocationResult
from aimodel_client.stats import InvocationStats


class FakeClient(AIModelClient):
    instances = 0

    def __init__(self):
        FakeClient.instances += 1
        self.provider_name = "fake"
        self.initialized = 0
        self.closed = False
        self._stats = InvocationStats()

    def initialize(self):
        self.initialized += 1

    def shutdown(self):
        self.closed = True

    @property
    def default_model(self):
        return None

    @property
    def stats(self):
        return self._stats

    def invoke_detailed(self, request):
        return InvocationResult(InvocationOutcome.SUCCESS, content='{"ok":true}')


@pytest.fixture
def fake_provider(monkeypatch):
    FakeClient.instances = 0
    monkeypatch.setitem(factory.PROVIDERS, "fake", FakeClient)
    factory.reset_model_clients()
    yield
    factory.reset_model_clients()


def test_client_is_created_and_initialized_once(fake_provider):
    first = factory.get_model_client("fake")
    second = factory.get_model_client("FAKE")

    assert first is second
    assert FakeClient.instances == 1
    assert first.initialized == 1


def test_invoke_collapses_detailed_result(fake_provider):
    assert factory.get_model_client("fake").invoke(None) == '{"ok":true}'


def test_reset_shuts_clients_down(fake_provider):
    client = factory.get_model_client("fake")

    factory.reset_model_clients()

    assert client.closed
    assert factory.get_model_client("fake") is not client


def test_unknown_provider_raises():
    with pytest.raises(ValueError, match="Unknown model provider"):
        factory.get_model_client("bedrock")
