"""Runtime settings sourced from the environment and CLI flags.

Credentials follow the conventions of the official Twilio tooling:
``TWILIO_ACCOUNT_SID`` plus either ``TWILIO_AUTH_TOKEN`` or an API key pair
(``TWILIO_API_KEY`` / ``TWILIO_API_SECRET``).  Explicit CLI flags take
precedence over the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from twilio_browse.exceptions import ConfigurationError

ACCOUNT_SID_PREFIX: str = "AC"
ACCOUNT_SID_LENGTH: int = 34

DEFAULT_CONNECT_TIMEOUT: float = 5.0
DEFAULT_READ_TIMEOUT: float = 30.0

_CREDENTIALS_HINT = (
    "Export TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN, "
    "or pass --account-sid / --auth-token."
)


@dataclass(frozen=True, slots=True)
class Settings:
    """Validated, immutable runtime configuration."""

    account_sid: str
    auth_token: str | None = None
    api_key: str | None = None
    api_secret: str | None = None
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT

    @property
    def auth(self) -> tuple[str, str]:
        """HTTP basic-auth pair; an API key pair wins over the auth token."""
        if self.api_key and self.api_secret:
            return self.api_key, self.api_secret
        return self.account_sid, self.auth_token or ""

    @property
    def timeout(self) -> tuple[float, float]:
        return self.connect_timeout, self.read_timeout


def load_settings(
    environ: Mapping[str, str] | None = None,
    *,
    account_sid: str | None = None,
    auth_token: str | None = None,
) -> Settings:
    """Build :class:`Settings` from *environ* (default ``os.environ``).

    Raises
    ------
    ConfigurationError
        If the account SID is missing or malformed, if no usable secret is
        configured, or if ``TWILIO_BROWSE_TIMEOUT`` is not a positive number.
    """
    env = os.environ if environ is None else environ

    sid = (account_sid or env.get("TWILIO_ACCOUNT_SID") or "").strip()
    token = (auth_token or env.get("TWILIO_AUTH_TOKEN") or "").strip() or None
    api_key = (env.get("TWILIO_API_KEY") or "").strip() or None
    api_secret = (env.get("TWILIO_API_SECRET") or "").strip() or None

    if not sid:
        raise ConfigurationError("No Twilio account SID configured.", hint=_CREDENTIALS_HINT)
    if not sid.startswith(ACCOUNT_SID_PREFIX) or len(sid) != ACCOUNT_SID_LENGTH:
        raise ConfigurationError(
            f"Invalid account SID: {sid}",
            hint="Account SIDs start with 'AC' and are 34 characters long.",
        )
    if token is None and not (api_key and api_secret):
        raise ConfigurationError("No Twilio auth token configured.", hint=_CREDENTIALS_HINT)

    return Settings(
        account_sid=sid,
        auth_token=token,
        api_key=api_key,
        api_secret=api_secret,
        read_timeout=_read_timeout(env.get("TWILIO_BROWSE_TIMEOUT")),
    )


def _read_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_READ_TIMEOUT
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid TWILIO_BROWSE_TIMEOUT: {raw!r}",
            hint="Use a number of seconds, e.g. TWILIO_BROWSE_TIMEOUT=30",
        ) from exc
    if value <= 0:
        raise ConfigurationError(
            f"Invalid TWILIO_BROWSE_TIMEOUT: {raw!r}",
            hint="The timeout must be greater than zero.",
        )
    return value
