"""``requests``-backed transport for the Twilio REST API.

This module is the **only** place in the codebase that imports
``requests``.  Every transport or HTTP failure is caught here and
re-raised as a :class:`~twilio_browse.exceptions.ClassifiedError`
subclass — nothing raw escapes the infrastructure boundary.

Classification
--------------
* HTTP 404 → :class:`~twilio_browse.exceptions.ResourceNotFoundError`
* any other non-2xx status, a transport error, or an undecodable body
  → :class:`~twilio_browse.exceptions.RemoteFailureError`
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import requests

from twilio_browse.config import Settings
from twilio_browse.exceptions import RemoteFailureError, ResourceNotFoundError
from twilio_browse.version import __version__

logger = logging.getLogger(__name__)

USER_AGENT: str = f"twilio-browse/{__version__}"

_STATUS_HINTS: dict[int, str] = {
    401: "Check TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN.",
    403: "The credentials are valid but lack permission for this resource.",
    429: "Too many requests. Wait a moment and try again.",
}


class TwilioHttpClient:
    """Thin JSON-over-HTTP client with Twilio error classification.

    Parameters
    ----------
    settings:
        Credentials and timeouts.
    session:
        Optional pre-built ``requests.Session`` (injected in tests).
    """

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self._settings = settings
        self._session = session or requests.Session()
        self._session.auth = settings.auth
        self._session.headers.update({"Accept": "application/json", "User-Agent": USER_AGENT})

    def request(
        self,
        method: str,
        url: str,
        params: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | None:
        """Send one request and return the decoded JSON body.

        Returns ``None`` for bodiless success responses (``204``).

        Raises
        ------
        ResourceNotFoundError
            On HTTP 404.
        RemoteFailureError
            On any other failure.
        """
        logger.debug("%s %s params=%s", method, url, dict(params or {}))
        try:
            response = self._session.request(
                method,
                url,
                params=dict(params) if params else None,
                timeout=self._settings.timeout,
            )
        except requests.RequestException as exc:
            raise RemoteFailureError(
                f"Request to {url} failed: {exc}",
                raw=exc,
                hint="Check your network connection.",
            ) from exc

        status = int(response.status_code)
        logger.debug("%s %s -> %d", method, url, status)

        if not 200 <= status < 300:
            self._raise_mapped(response)

        if status == 204 or not response.content:
            return None

        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteFailureError(
                f"Malformed JSON in response from {url}",
                status=status,
                raw=response.text,
            ) from exc

        if not isinstance(payload, dict):
            raise RemoteFailureError(
                f"Unexpected response structure from {url}",
                status=status,
                raw=payload,
            )
        return payload

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _raise_mapped(response: requests.Response) -> None:
        """Translate a non-2xx response into a classified error.

        Always raises.
        """
        status = int(response.status_code)
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text

        code: int | None = None
        message = f"HTTP {status} from {response.url}"
        if isinstance(body, dict):
            raw_code = body.get("code")
            code = raw_code if isinstance(raw_code, int) else None
            if body.get("message"):
                message = f"{body['message']} (HTTP {status})"

        if status == 404:
            raise ResourceNotFoundError(message, status=status, code=code, raw=body)

        logger.error("Twilio API error: %s (code=%s)", message, code)
        raise RemoteFailureError(
            message,
            status=status,
            code=code,
            raw=body,
            hint=_STATUS_HINTS.get(status),
        )
