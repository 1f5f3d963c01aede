"""
Abstract base class for model clients.

Implementations must subclass AIModelClient and implement the abstract methods.
The factory module selects an implementation by provider key.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from .errors import (
    AIModelError,
    ConfigurationError,
    ContextLengthExceededError,
    ProviderError,
)
from .models import AIModelID, ModelRequest

if TYPE_CHECKING:
    from .stats import InvocationStats


CONTEXT_LENGTH_EXCEEDED = "CONTEXT_LENGTH_EXCEEDED"


class InvocationOutcome(str, Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    CONTEXT_LENGTH_EXCEEDED = "context_length_exceeded"
    CONFIGURATION_ERROR = "configuration_error"
    FAILED = "failed"


@dataclass
class InvocationResult:
    """Result from one model invocation."""
    outcome: InvocationOutcome
    content: Optional[str] = None
    error: Optional[BaseException] = None
    latency_ms: Optional[int] = None
    tokens_used: Optional[int] = None

    def as_text(self) -> Optional[str]:
        """Collapse to the plain invoke() result: body, sentinel or None."""
        if self.outcome == InvocationOutcome.SUCCESS:
            return self.content
        if self.outcome == InvocationOutcome.CONTEXT_LENGTH_EXCEEDED:
            return CONTEXT_LENGTH_EXCEEDED
        return None

    def raise_for_outcome(self) -> Optional[str]:
        """Return the content, or raise an error describing the failure."""
        if self.outcome in (InvocationOutcome.SUCCESS, InvocationOutcome.EMPTY):
            return self.content
        if self.outcome == InvocationOutcome.CONTEXT_LENGTH_EXCEEDED:
            if isinstance(self.error, ProviderError):
                raise ContextLengthExceededError(self.error.status_code, self.error.body)
            raise ContextLengthExceededError(400, str(self.error or ""))
        if isinstance(self.error, AIModelError):
            raise self.error
        if self.outcome == InvocationOutcome.CONFIGURATION_ERROR:
            raise ConfigurationError(str(self.error or "configuration error"))
        raise AIModelError(str(self.error or "model invocation failed"))


class AIModelClient(ABC):
    """
    Capability interface that every provider client must satisfy.

    Implementations should:
    1. Set provider_name in __init__
    2. Load process-wide defaults in initialize()
    3. Never let an error escape invoke()
    """

    provider_name: str  # e.g. "azure"

    @abstractmethod
    def initialize(self) -> None:
        """Called once at startup, before the first invocation."""
        pass

    @abstractmethod
    def shutdown(self) -> None:
        """Release transport resources."""
        pass

    @property
    @abstractmethod
    def default_model(self) -> Optional[AIModelID]:
        """Model used when a request does not name one."""
        pass

    @property
    @abstractmethod
    def stats(self) -> "InvocationStats":
        """Statistics this client records its invocations into."""
        pass

    @abstractmethod
    def invoke_detailed(self, request: ModelRequest) -> InvocationResult:
        """Perform one call and report how it ended."""
        pass

    def invoke(self, request: ModelRequest) -> Optional[str]:
        """
        Perform one call.

        Returns:
            The response body as text, CONTEXT_LENGTH_EXCEEDED when the
            provider rejected the input as too long, or None otherwise
        """
        return self.invoke_detailed(request).as_text()
