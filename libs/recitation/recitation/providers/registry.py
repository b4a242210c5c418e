"""Provider factory and registry."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from recitation.exceptions import ConfigurationError
from recitation.providers.comparison.base import ComparisonProvider


def get_comparison_provider(config: Mapping[str, Any]) -> ComparisonProvider:
    """Get comparison provider based on configuration.

    A remote provider is always wrapped so that a local aligner takes over when
    the service is unreachable.
    """
    provider_type = str(config.get("provider", "local")).strip().lower()

    from recitation.providers.comparison.local import LocalComparisonProvider

    local = LocalComparisonProvider(aligner_config=config.get("aligner_config"))

    match provider_type:
        case "local":
            return local
        case "remote":
            from recitation.providers.comparison.fallback import FallbackComparisonProvider
            from recitation.providers.comparison.remote import RemoteComparisonProvider

            base_url = str(config.get("base_url") or "").strip()
            if not base_url:
                raise ConfigurationError("Remote comparison provider requires base_url")
            remote = RemoteComparisonProvider(
                base_url=base_url,
                timeout=float(config.get("timeout", 10.0)),
                max_attempts=int(config.get("max_attempts", 3)),
            )
            return FallbackComparisonProvider(primary=remote, fallback=local)
        case _:
            raise ConfigurationError(f"Unknown comparison provider: {provider_type}")
