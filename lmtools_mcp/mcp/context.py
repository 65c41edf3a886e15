"""Process-wide server context holding the capability provider handle."""

import logging

from lmtools_mcp.config.loader import Settings, get_enabled_providers, load_tools_config
from lmtools_mcp.host.local import LocalToolProvider
from lmtools_mcp.host.provider import CapabilityProvider
from lmtools_mcp.host.remote import RemoteToolProvider

logger = logging.getLogger(__name__)


def build_provider(settings: Settings) -> CapabilityProvider:
    """Create the capability provider selected by settings."""
    if settings.uses_remote_provider:
        logger.info(f"Using host bridge at {settings.host_bridge_url}")
        return RemoteToolProvider(base_url=settings.host_bridge_url)

    provider = LocalToolProvider()
    config = load_tools_config(settings.tools_config_path)
    for name, loaded in provider.load_providers(get_enabled_providers(config)).items():
        if not loaded:
            logger.warning(f"Failed to load tool provider: {name}")
    return provider


class ServerContext:
    """
    Holds the live capability provider for the dispatcher.

    The provider is only exposed between init() and shutdown(); requests
    arriving outside that window are answered with an internal error.
    """

    def __init__(self, settings: Settings, provider: CapabilityProvider | None = None):
        self.settings = settings
        self._configured_provider = provider
        self.provider: CapabilityProvider | None = None

    @property
    def is_initialized(self) -> bool:
        return self.provider is not None

    async def init(self) -> None:
        """Attach the capability provider. Safe to call more than once."""
        if self.provider is not None:
            return
        self.provider = self._configured_provider or build_provider(self.settings)
        logger.info("Server context initialized")

    async def shutdown(self) -> None:
        """Drop the provider handle, closing it if it holds resources."""
        provider, self.provider = self.provider, None
        if provider is None:
            return
        # Providers passed in by the caller stay open; the caller owns them.
        aclose = getattr(provider, "aclose", None)
        if aclose is not None and provider is not self._configured_provider:
            await aclose()
        logger.info("Server context shut down")
