"""Adapter factory and exports."""
from poster_extractor.adapters.base import VisionAdapter
from poster_extractor.config import EXTRACTOR_PROVIDER


def get_adapter() -> VisionAdapter:
    """Get the configured vision model adapter.

    Returns:
        VisionAdapter instance based on EXTRACTOR_PROVIDER config
    """
    if EXTRACTOR_PROVIDER == "anthropic":
        from poster_extractor.adapters.anthropic import AnthropicAdapter
        return AnthropicAdapter()
    elif EXTRACTOR_PROVIDER == "openai":
        from poster_extractor.adapters.openai import OpenAIAdapter
        return OpenAIAdapter()
    elif EXTRACTOR_PROVIDER == "ollama":
        from poster_extractor.adapters.ollama import OllamaAdapter
        return OllamaAdapter()
    else:
        # Default to Workers AI
        from poster_extractor.adapters.workers_ai import WorkersAIAdapter
        return WorkersAIAdapter()


__all__ = ["VisionAdapter", "get_adapter"]
