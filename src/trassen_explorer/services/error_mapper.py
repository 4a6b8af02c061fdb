"""Centralized exception mapping for consistent user-facing errors."""

from dataclasses import dataclass

import httpx

from ..domain import StationReferenceError
from .infrastructure_client import ApiFormatError, ApiTransportError


@dataclass(frozen=True)
class ErrorMapping:
    """Normalized user-facing error payload shown by the TUI and CLI."""

    code: str
    message: str
    hint: str = ""
    retryable: bool = False


def _map_transport_error(error: ApiTransportError) -> ErrorMapping:
    """Classify a transport failure by the httpx exception it wraps."""
    cause = error.__cause__

    if isinstance(cause, httpx.TimeoutException):
        return ErrorMapping(
            code="api_timeout",
            message="The infrastructure API did not answer in time.",
            hint="Retry, or raise the timeout with --timeout / API_TIMEOUT.",
            retryable=True,
        )

    if isinstance(cause, httpx.NetworkError):
        return ErrorMapping(
            code="api_connection_error",
            message="Could not connect to the infrastructure API.",
            hint="Check the network and the --api-url / API_BASE_URL setting.",
            retryable=True,
        )

    if isinstance(cause, httpx.HTTPStatusError):
        return ErrorMapping(
            code="api_http_error",
            message=(
                "The infrastructure API answered with status "
                f"{cause.response.status_code}."
            ),
            hint="Retry shortly; the service may be temporarily unavailable.",
            retryable=True,
        )

    return ErrorMapping(
        code="api_http_error",
        message="The infrastructure API request failed.",
        hint=str(error),
        retryable=True,
    )


def map_exception(error: BaseException) -> ErrorMapping:
    """Map raised exceptions into stable user-facing error semantics."""
    if isinstance(error, StationReferenceError):
        return ErrorMapping(
            code="dangling_reference",
            message=(
                f"Infrastructure is inconsistent: station '{error.code}' "
                f"for segment '{error.segment_label}' not found."
            ),
            hint="Pick another infrastructure version.",
        )

    if isinstance(error, ApiFormatError):
        return ErrorMapping(
            code="invalid_document",
            message="The infrastructure API returned an unexpected document.",
            hint=str(error),
        )

    if isinstance(error, ApiTransportError):
        return _map_transport_error(error)

    if error.__cause__ is not None:
        return map_exception(error.__cause__)

    return ErrorMapping(
        code="internal_error",
        message="Internal error",
        hint=str(error).strip(),
    )
