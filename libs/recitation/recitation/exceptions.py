"""Recitation exception hierarchy."""

from __future__ import annotations

from recitation.error_codes import ErrorCode


class RecitationError(Exception):
    """Base error for the recitation engine."""


class ConfigurationError(RecitationError):
    """Raised when configuration or inputs are invalid."""


class ReferenceTextError(RecitationError):
    """Raised when a reference text cannot be read."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message
        self.error_code = ErrorCode.REFERENCE_UNAVAILABLE


class ProviderError(RecitationError):
    """Raised when an external provider call fails."""

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        error_code: ErrorCode | str | None = None,
    ) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.message = message
        self.error_code = error_code
