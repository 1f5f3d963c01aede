"""
Exception types raised inside the model client.

None of these escape AIModelClient.invoke(); they are caught at that boundary
and turned into an outcome. InvocationResult.raise_for_outcome() re-raises them
for callers that prefer exceptions.
"""
from typing import Optional


CONTEXT_LENGTH_EXCEEDED_CODE = "context_length_exceeded"


class AIModelError(Exception):
    pass


class ConfigurationError(AIModelError):
    pass


class ProviderError(AIModelError):
    """The provider answered with an error status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class ContextLengthExceededError(ProviderError):
    pass


def is_context_length_exceeded(error: Optional[BaseException]) -> bool:
    """True when the error text names the provider's context overflow code."""
    if error is None:
        return False
    return CONTEXT_LENGTH_EXCEEDED_CODE in str(error).lower()
