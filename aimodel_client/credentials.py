"""
Credential lookup for model endpoints.

A resolver maps (provider, model id, module, usage) to a dict with "url" and
"key" entries. Either entry may be missing or blank; the client treats that as
a configuration error.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from .config import Settings, get_settings
from .errors import ConfigurationError
from .models import ModelUsageType, ModuleContext

logger = logging.getLogger(__name__)

URL = "url"
KEY = "key"


class CredentialResolver(ABC):
    """Abstract credential store."""

    @abstractmethod
    def get_credentials(
        self,
        provider: str,
        model_id: str,
        module: ModuleContext,
        additional_info: dict[str, Any],
        usage: ModelUsageType,
    ) -> dict[str, str]:
        """
        Resolve connection details for a model.

        Returns:
            Dict with optional "url" and "key" entries
        """
        pass


class SettingsCredentialResolver(CredentialResolver):
    """Resolves credentials from Settings.azure_credentials, then the shared fallbacks."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def get_credentials(
        self,
        provider: str,
        model_id: str,
        module: ModuleContext,
        additional_info: dict[str, Any],
        usage: ModelUsageType,
    ) -> dict[str, str]:
        entry = self._settings.azure_credentials.get(model_id, {})
        url = entry.get(URL) or ""
        key = entry.get(KEY) or ""

        if not url and self._settings.azure_endpoint_template:
            try:
                url = self._settings.azure_endpoint_template.format(model_id=model_id)
            except (KeyError, IndexError, ValueError) as e:
                raise ConfigurationError(
                    f"invalid AZURE_ENDPOINT_TEMPLATE, only {{model_id}} may be used: {e}"
                ) from e
        if not key:
            key = self._settings.azure_api_key

        logger.debug(
            "Credentials for %s/%s (%s, %s): url=%s, key=%s",
            provider, model_id, module.value, usage.value,
            url or "<missing>", "set" if key else "<missing>",
        )
        return {URL: url, KEY: key}
