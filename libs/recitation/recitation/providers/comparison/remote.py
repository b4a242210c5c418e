"""Remote comparison service client (HTTP JSON)."""

from __future__ import annotations

import logging
import time

import httpx
from tenacity import RetryCallState, retry, retry_if_exception_type, wait_exponential

from recitation.error_codes import ErrorCode
from recitation.exceptions import ProviderError
from recitation.models.alignment import AlignmentResult
from recitation.models.serializers import deserialize_alignment_result
from recitation.providers.comparison.base import ComparisonProvider

logger = logging.getLogger(__name__)

COMPARE_PATH = "/api/compare"

_WAIT_DEFAULT = wait_exponential(multiplier=0.5, max=5)


class _RetryableComparisonError(ProviderError):
    pass


def _stop_retry(state: RetryCallState) -> bool:
    max_attempts = 3
    if state.args:
        max_attempts = int(getattr(state.args[0], "max_attempts", max_attempts))
    return state.attempt_number >= max_attempts


def _wait_retry(state: RetryCallState) -> float:
    wait = getattr(state.args[0], "retry_wait", None) if state.args else None
    return (wait or _WAIT_DEFAULT)(state)


def _log_retry(state: RetryCallState) -> None:
    exc = state.outcome.exception() if state.outcome else None
    base_url = getattr(state.args[0], "base_url", None) if state.args else None
    wait_s = state.next_action.sleep if state.next_action else None
    logger.warning(
        "comparison retrying (base_url=%s, attempt=%s, wait_s=%s, error=%s)",
        base_url,
        state.attempt_number,
        wait_s,
        exc,
    )


def _format_http_error(response: httpx.Response) -> str:
    status = response.status_code
    reason = response.reason_phrase
    detail = response.text.strip()
    if detail:
        if len(detail) > 500:
            detail = detail[:500] + "…"
        return f"HTTP {status} {reason}: {detail}"
    return f"HTTP {status} {reason}"


class RemoteComparisonProvider(ComparisonProvider):
    """Calls a comparison service exposing `POST /api/compare`.

    Request body: `{"recognizedText": ..., "referenceText": ...}`; the response
    is an alignment result (`words`, `errors`, `warnings`).
    """

    name = "remote"

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        max_attempts: int = 3,
        retry_base_wait_s: float = 0.5,
        retry_max_wait_s: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max(1, int(max_attempts))
        self.retry_wait = wait_exponential(multiplier=retry_base_wait_s, max=retry_max_wait_s)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def compare(self, recognized_text: str, reference_text: str) -> AlignmentResult:
        try:
            return await self._post_compare(recognized_text, reference_text)
        except _RetryableComparisonError as exc:
            raise ProviderError(
                self.name, exc.message, error_code=ErrorCode.COMPARISON_FAILED
            ) from exc

    @retry(
        retry=retry_if_exception_type(_RetryableComparisonError),
        stop=_stop_retry,
        wait=_wait_retry,
        before_sleep=_log_retry,
        reraise=True,
    )
    async def _post_compare(self, recognized_text: str, reference_text: str) -> AlignmentResult:
        client = await self._get_client()
        payload = {"recognizedText": recognized_text, "referenceText": reference_text}
        started = time.perf_counter()
        try:
            response = await client.post(f"{self.base_url}{COMPARE_PATH}", json=payload)
        except httpx.HTTPError as exc:
            raise _RetryableComparisonError(
                self.name,
                f"request failed: {exc!r}",
                error_code=ErrorCode.PROVIDER_FAILED,
            ) from exc

        if response.status_code == 429 or response.status_code >= 500:
            raise _RetryableComparisonError(
                self.name, _format_http_error(response), error_code=ErrorCode.PROVIDER_FAILED
            )
        if response.status_code >= 400:
            raise ProviderError(
                self.name, _format_http_error(response), error_code=ErrorCode.COMPARISON_FAILED
            )

        try:
            result = deserialize_alignment_result(response.json())
        except ValueError as exc:
            raise ProviderError(
                self.name, f"invalid response: {exc}", error_code=ErrorCode.COMPARISON_FAILED
            ) from exc

        logger.debug(
            "remote comparison ok (words=%d, latency_ms=%d)",
            len(result.words),
            int((time.perf_counter() - started) * 1000),
        )
        return result

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
