"""Shared builders for the test suite."""
import json

import httpx

from aimodel_client.azure import AzureOpenAIClient
from aimodel_client.config import Settings
from aimodel_client.stats import InvocationStats


GPT_4O_URL = "https://unit.openai.azure.com/openai/deployments/gpt-4o/chat/completions"

COMPLETION = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "model": "gpt-4o",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello there."},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 9, "completion_tokens": 3, "total_tokens": 12},
}


def make_settings(**overrides) -> Settings:
    values = {
        "azure_llm_model": "",
        "azure_credentials": {"gpt-4o": {"url": GPT_4O_URL, "key": "test-key"}},
        "azure_endpoint_template": "",
        "azure_api_key": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class RecordingTransport:
    """Collects every request and answers with the given handler."""

    def __init__(self, handler):
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


def make_client(handler, settings=None, stats=None) -> tuple[AzureOpenAIClient, RecordingTransport]:
    transport = RecordingTransport(handler)
    client = AzureOpenAIClient(
        settings=settings or make_settings(),
        http_client=httpx.Client(transport=httpx.MockTransport(transport)),
        stats=stats or InvocationStats(),
    )
    client.initialize()
    return client, transport

