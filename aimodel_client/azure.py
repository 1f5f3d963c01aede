"""
Azure OpenAI implementation of the model client.

Builds an Azure chat-completions payload from a ModelRequest, posts it once
with httpx and hands back the raw response body as JSON text.
"""
import copy
import json
import logging
import time
from typing import Any, Optional

import httpx

from .config import Settings, get_settings
from .credentials import KEY, URL, CredentialResolver, SettingsCredentialResolver
from .errors import ConfigurationError, ProviderError, is_context_length_exceeded
from .models import AIModelID, Message, ModelRequest, ModelUsageType, ModuleContext
from .provider import AIModelClient, InvocationOutcome, InvocationResult
from .stats import InvocationStats, get_stats

logger = logging.getLogger(__name__)

AZURE = "azure"
DEFAULT_MODEL_PROPERTY = "AZURE_LLM_MODEL"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def build_messages(request: ModelRequest) -> list[dict[str, Any]]:
    """
    System prompt, then user input, then prior function responses in order.

    Caller-supplied records are copied so the request stays unchanged.
    """
    messages: list[dict[str, Any]] = []

    if not _is_blank(request.prompt):
        messages.append(Message(role="system", content=request.prompt).model_dump())

    if not _is_blank(request.input):
        messages.append(Message(role="user", content=request.input).model_dump())

    if request.function_responses:
        messages.extend(copy.deepcopy(request.function_responses))

    return messages


def build_payload(request: ModelRequest) -> dict[str, Any]:
    """Chat-completions body; optional parameters only when set."""
    payload: dict[str, Any] = {"messages": build_messages(request)}

    if request.max_tokens > 0:
        payload["max_tokens"] = request.max_tokens
    if request.temperature > 0:
        payload["temperature"] = request.temperature
    if request.top_p > 0:
        payload["top_p"] = request.top_p

    if request.has_functions:
        payload["functions"] = copy.deepcopy(request.functions)
        payload["function_call"] = "auto"

    return payload


def serialize_body(body: Any) -> str:
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


class ModelConfig:
    """Endpoint and key for one call. Resolved per invocation, never cached."""

    def __init__(self, endpoint: Optional[str], api_key: Optional[str]):
        self.endpoint = endpoint
        self.api_key = api_key

    @property
    def is_complete(self) -> bool:
        return not _is_blank(self.endpoint) and not _is_blank(self.api_key)


class AzureOpenAIClient(AIModelClient):
    """Model client for Azure OpenAI chat-completion deployments."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        credential_resolver: Optional[CredentialResolver] = None,
        http_client: Optional[httpx.Client] = None,
        stats: Optional[InvocationStats] = None,
    ):
        self.provider_name = AZURE
        self._settings = settings or get_settings()
        self._credentials = credential_resolver or SettingsCredentialResolver(self._settings)
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=self._settings.request_timeout_seconds)
        self._stats = stats or get_stats()
        self._default_model: Optional[AIModelID] = None

    def initialize(self) -> None:
        """Load the default model. A bad name is logged and leaves no default."""
        try:
            name = self._settings.get_property(DEFAULT_MODEL_PROPERTY)
            if not _is_blank(name):
                self._default_model = AIModelID.parse(name)
                logger.info("Default model: %s", self._default_model.name)
        except Exception:
            logger.error("Error initializing default AI model", exc_info=True)

    def shutdown(self) -> None:
        if self._owns_client:
            self._http.close()

    @property
    def default_model(self) -> Optional[AIModelID]:
        return self._default_model

    @property
    def stats(self) -> InvocationStats:
        return self._stats

    def invoke_detailed(self, request: ModelRequest) -> InvocationResult:
        start_time = time.time()
        result = self._invoke(request)
        result.latency_ms = int((time.time() - start_time) * 1000)
        self._stats.record(result.outcome, result.latency_ms, result.tokens_used)
        return result

    def _invoke(self, request: ModelRequest) -> InvocationResult:
        try:
            model = request.model or self._default_model
            if model is None:
                raise ConfigurationError("no model specified and no default model configured")

            config = self._load_model_config(model)
            if not config.is_complete:
                raise ConfigurationError(f"missing configuration for model: {model.name}")

            headers = {
                "Content-Type": "application/json",
                "Authorization": f"Bearer {config.api_key}",
            }
            payload = build_payload(request)

            logger.debug(
                "Azure request: model=%s, messages=%d, functions=%s",
                model.name, len(payload["messages"]), request.has_functions,
            )

            response = self._http.post(config.endpoint, headers=headers, json=payload)
            if response.is_error:
                raise ProviderError(response.status_code, response.text)

            if response.status_code != httpx.codes.OK or not response.content:
                logger.debug("Azure returned no body: status=%d", response.status_code)
                return InvocationResult(outcome=InvocationOutcome.EMPTY)

            body = response.json()
            if body is None:
                return InvocationResult(outcome=InvocationOutcome.EMPTY)

            return InvocationResult(
                outcome=InvocationOutcome.SUCCESS,
                content=serialize_body(body),
                tokens_used=_total_tokens(body),
            )

        except Exception as e:
            return self._classify_failure(e)

    def _classify_failure(self, error: Exception) -> InvocationResult:
        if is_context_length_exceeded(error):
            logger.warning("Azure OpenAI rejected the request: context length exceeded")
            return InvocationResult(outcome=InvocationOutcome.CONTEXT_LENGTH_EXCEEDED, error=error)

        if isinstance(error, ConfigurationError):
            logger.error("Azure OpenAI configuration error: %s", error)
            return InvocationResult(outcome=InvocationOutcome.CONFIGURATION_ERROR, error=error)

        logger.error("Error while invoking Azure OpenAI model: %s", error, exc_info=error)
        return InvocationResult(outcome=InvocationOutcome.FAILED, error=error)

    def _load_model_config(self, model: AIModelID) -> ModelConfig:
        credential = self._credentials.get_credentials(
            AZURE, model.model_id, ModuleContext.MODEL_CLIENT, {}, ModelUsageType.CHAT,
        )
        if not credential:
            return ModelConfig(None, None)
        return ModelConfig(credential.get(URL), credential.get(KEY))


def _total_tokens(body: Any) -> Optional[int]:
    if not isinstance(body, dict):
        return None
    usage = body.get("usage")
    if isinstance(usage, dict) and isinstance(usage.get("total_tokens"), int):
        return usage["total_tokens"]
    return None
