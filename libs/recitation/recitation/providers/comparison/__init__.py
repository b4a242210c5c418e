"""Comparison providers (local aligner, remote service, fallback wrapper)."""

from recitation.providers.comparison.base import ComparisonProvider
from recitation.providers.comparison.fallback import FallbackComparisonProvider
from recitation.providers.comparison.local import LocalComparisonProvider
from recitation.providers.comparison.remote import RemoteComparisonProvider

__all__ = [
    "ComparisonProvider",
    "FallbackComparisonProvider",
    "LocalComparisonProvider",
    "RemoteComparisonProvider",
]
