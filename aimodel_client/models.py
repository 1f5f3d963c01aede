"""
Pydantic models and enums shared by the model client and its HTTP surface.
"""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class AIModelID(str, Enum):
    """Deployed model configurations. The value is the provider-side model id."""
    GPT_4O = "gpt-4o"
    GPT_4O_MINI = "gpt-4o-mini"
    GPT_4_1 = "gpt-4.1"
    GPT_4_1_MINI = "gpt-4.1-mini"
    GPT_4_TURBO = "gpt-4-turbo"
    GPT_35_TURBO = "gpt-35-turbo"

    @property
    def model_id(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "AIModelID":
        """Look a model up by member name, falling back to its model id."""
        text = text.strip()
        try:
            return cls[text]
        except KeyError:
            return cls(text)


class ModuleContext(str, Enum):
    """Calling module, passed through to the credential resolver."""
    MODEL_CLIENT = "model_client"


class ModelUsageType(str, Enum):
    CHAT = "chat"


class Message(BaseModel):
    """A single chat message."""
    role: str  # "system", "user" or "function"
    content: str


class ModelRequest(BaseModel):
    """
    One model invocation.

    Numeric generation parameters at or below zero mean "unset": the provider's
    default is used. function_responses are appended to the conversation as-is.
    """
    model_config = ConfigDict(frozen=True)

    model: Optional[AIModelID] = None
    prompt: Optional[str] = None
    input: Optional[str] = None
    function_responses: list[dict[str, Any]] = []
    max_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    functions: list[dict[str, Any]] = []

    @field_validator("model", mode="before")
    @classmethod
    def _parse_model(cls, value):
        if isinstance(value, str):
            return AIModelID.parse(value)
        return value

    @property
    def has_functions(self) -> bool:
        return bool(self.functions)


class InvokeResponse(BaseModel):
    """Response body for POST /invoke."""
    outcome: str
    content: Optional[str] = None
    latency_ms: Optional[int] = None


class HealthResponse(BaseModel):
    """Response body for GET /health."""
    status: str  # "ok" or "degraded"
    provider: str
    default_model: Optional[str] = None
    error: Optional[str] = None


class ModelInfo(BaseModel):
    """Entry in the GET /models listing."""
    name: str
    model_id: str
