"""Canonical error codes surfaced to API/UI."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    UNKNOWN = "UNKNOWN"
    INVALID_INPUT = "INVALID_INPUT"

    REFERENCE_UNAVAILABLE = "REFERENCE_UNAVAILABLE"
    COMPARISON_FAILED = "COMPARISON_FAILED"

    PROVIDER_FAILED = "PROVIDER_FAILED"
