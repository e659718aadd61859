"""Shared FastAPI dependencies."""

import logging
from functools import lru_cache
from typing import Callable

from poster_extractor.adapters import VisionAdapter, get_adapter
from poster_extractor.errors import ProviderNotConfigured
from poster_extractor.schemas import DEFAULT_REGISTRY, SchemaRegistry

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_vision_adapter() -> VisionAdapter:
    """Create the configured adapter once, on first use."""
    return get_adapter()


def load_adapter() -> VisionAdapter:
    """Return the shared adapter, reporting missing provider settings.

    Raises:
        ProviderNotConfigured: If the adapter cannot be constructed
    """
    try:
        return get_vision_adapter()
    except ValueError as e:
        logger.error(f"Model provider is not configured: {e}")
        raise ProviderNotConfigured(str(e)) from e


def get_adapter_loader() -> Callable[[], VisionAdapter]:
    """Hand routes a loader so input is validated before the adapter is built."""
    return load_adapter


def get_registry() -> SchemaRegistry:
    return DEFAULT_REGISTRY
