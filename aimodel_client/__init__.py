"""
Model client - single-model invocation adapter.

This package provides:
- The AIModelClient interface and its Azure OpenAI implementation
- Pydantic request/response models
- Credential resolution and settings
- Invocation statistics
- FastAPI app factory exposing a client over HTTP
"""

from .models import AIModelID, Message, ModelRequest, ModelUsageType, ModuleContext
from .errors import (
    AIModelError,
    ConfigurationError,
    ContextLengthExceededError,
    ProviderError,
    is_context_length_exceeded,
)
from .provider import (
    CONTEXT_LENGTH_EXCEEDED,
    AIModelClient,
    InvocationOutcome,
    InvocationResult,
)
from .config import Settings, get_settings
from .credentials import CredentialResolver, SettingsCredentialResolver
from .azure import AzureOpenAIClient, ModelConfig, build_messages, build_payload
from .factory import get_model_client, reset_model_clients
from .stats import InvocationStats, get_stats
from .server import create_app

__all__ = [
    # Models
    "AIModelID",
    "Message",
    "ModelRequest",
    "ModelUsageType",
    "ModuleContext",
    # Errors
    "AIModelError",
    "ConfigurationError",
    "ContextLengthExceededError",
    "ProviderError",
    "is_context_length_exceeded",
    # Client interface
    "CONTEXT_LENGTH_EXCEEDED",
    "AIModelClient",
    "InvocationOutcome",
    "InvocationResult",
    # Configuration
    "Settings",
    "get_settings",
    "CredentialResolver",
    "SettingsCredentialResolver",
    # Azure
    "AzureOpenAIClient",
    "ModelConfig",
    "build_messages",
    "build_payload",
    # Registry
    "get_model_client",
    "reset_model_clients",
    # Stats
    "InvocationStats",
    "get_stats",
    # App factory
    "create_app",
]
