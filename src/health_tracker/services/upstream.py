"""Shared handling for upstream provider failures."""

import httpx

# Transport errors, non-2xx statuses, and JSON decode failures.
UPSTREAM_ERRORS: tuple[type[Exception], ...] = (httpx.HTTPError, ValueError)


def status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
