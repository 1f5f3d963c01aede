"""
Registry of model clients by provider key.
"""
import logging
import threading
from typing import Callable, Optional

from .provider import AIModelClient

logger = logging.getLogger(__name__)

_clients: dict[str, AIModelClient] = {}
_lock = threading.Lock()


def _create_azure() -> AIModelClient:
    from .azure import AzureOpenAIClient
    return AzureOpenAIClient()


PROVIDERS: dict[str, Callable[[], AIModelClient]] = {
    "azure": _create_azure,
}


def get_model_client(provider: str = "azure") -> AIModelClient:
    """
    Get the initialized client for a provider.

    Clients are created and initialized once per process and reused.
    """
    key = provider.lower()
    with _lock:
        client = _clients.get(key)
        if client is not None:
            return client

        factory: Optional[Callable[[], AIModelClient]] = PROVIDERS.get(key)
        if factory is None:
            raise ValueError(
                f"Unknown model provider: {provider}. "
                f"Supported providers: {', '.join(sorted(PROVIDERS))}"
            )

        logger.info("Initializing model client: %s", key)
        client = factory()
        client.initialize()
        _clients[key] = client
        return client


def reset_model_clients() -> None:
    """Shut down and forget every cached client."""
    with _lock:
        for client in _clients.values():
            client.shutdown()
        _clients.clear()
