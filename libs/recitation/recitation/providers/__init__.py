"""Provider abstractions for external services."""

from recitation.providers.registry import get_comparison_provider

__all__ = ["get_comparison_provider"]
