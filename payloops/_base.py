"""Shared constants and helpers used by both sync and async clients."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from payloops.config import LoopConfig
from payloops.exceptions import LoopError

logger = logging.getLogger("payloops.client")

SDK_VERSION = "0.1.0"
USER_AGENT = f"payloops-python/{SDK_VERSION}"

UNKNOWN_ERROR_BODY = {"code": "unknown", "message": "An error occurred"}


def _build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "X-API-Key": api_key,
        "User-Agent": USER_AGENT,
    }


def _build_request_kwargs(
    config: LoopConfig, method: str, path: str, body: Any
) -> Dict[str, Any]:
    """Arguments for ``httpx.Client.request``.

    Mutating calls always carry a JSON object, ``{}`` when no body is given.
    """
    method = method.upper()
    kwargs: Dict[str, Any] = {
        "method": method,
        "url": f"{config.base_url}{path}",
        "headers": _build_headers(config.api_key),
        "timeout": httpx.Timeout(config.timeout_seconds),
    }
    if method != "GET":
        kwargs["json"] = body if body is not None else {}
    return kwargs


def _extract_error(resp: httpx.Response) -> Dict[str, Any]:
    """Pull ``code``/``message`` from an error response, or a generic body."""
    try:
        body = resp.json()
    except ValueError:
        return dict(UNKNOWN_ERROR_BODY)
    if not isinstance(body, dict):
        return dict(UNKNOWN_ERROR_BODY)
    return body


def _classify_error(resp: httpx.Response) -> LoopError:
    """Map a non-2xx response to a :class:`LoopError`."""
    body = _extract_error(resp)
    message: Optional[str] = body.get("message")
    status = resp.status_code

    if status == 401:
        return LoopError.authentication(message) if message else LoopError.authentication()
    if status == 400:
        return LoopError.validation(message or UNKNOWN_ERROR_BODY["message"])
    if status == 404:
        # The status alone does not say which resource was missing.
        return LoopError.not_found("Resource")
    if status == 429:
        return LoopError.rate_limit()
    return LoopError(
        str(body.get("code", UNKNOWN_ERROR_BODY["code"])),
        message or UNKNOWN_ERROR_BODY["message"],
        status,
    )


def _handle_response(resp: httpx.Response) -> Any:
    """Return the decoded success value or raise the classified error."""
    logger.debug("%s %s -> %s", resp.request.method, resp.request.url, resp.status_code)

    if not resp.is_success:
        error = _classify_error(resp)
        logger.debug("Request failed: %r", error)
        raise error

    if resp.status_code == 204:
        return None
    try:
        return resp.json()
    except ValueError as exc:
        raise LoopError.network(f"Invalid JSON in response: {exc}") from exc


def _transport_error(exc: httpx.RequestError) -> LoopError:
    if isinstance(exc, httpx.TimeoutException):
        logger.warning("Request timed out: %s", exc)
        return LoopError.timeout()
    logger.warning("Network error: %s", exc)
    return LoopError.network(str(exc) or "Network error")
