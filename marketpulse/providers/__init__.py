"""Competitor data providers.

Providers implement CompetitorDataProvider and are injected into the
market research stage. Use create_provider() to build the one selected by
configuration.
"""

import logging

from marketpulse.config import Config, get_config
from marketpulse.providers.base_provider import CompetitorDataProvider
from marketpulse.providers.cache import CachingProvider
from marketpulse.providers.http_provider import HttpDataProvider
from marketpulse.providers.sample_provider import SampleDataProvider

logger = logging.getLogger(__name__)

__all__ = [
    "CompetitorDataProvider",
    "SampleDataProvider",
    "HttpDataProvider",
    "CachingProvider",
    "create_provider",
]


def create_provider(config: Config | None = None) -> CompetitorDataProvider:
    """Build the competitor data provider selected by configuration.
    
    Args:
        config: Optional Config instance. If not provided, uses get_config()
    
    Returns:
        Configured provider, wrapped in a CachingProvider when
        provider_cache_enabled is set
    """
    if config is None:
        config = get_config()
    
    provider: CompetitorDataProvider
    if config.data_provider == "http":
        provider = HttpDataProvider(
            base_url=config.provider_base_url or "",
            api_key=config.provider_api_key,
            timeout=config.provider_timeout,
        )
    else:
        provider = SampleDataProvider()
    
    if config.provider_cache_enabled:
        provider = CachingProvider(provider, max_size=config.provider_cache_size)
    
    logger.info(f"Using competitor data provider: {provider.name}")
    return provider
