"""Custom exception hierarchy for twilio-browse.

All exceptions that cross layer boundaries must inherit from
:class:`TwilioBrowseError`.  Raw third-party exceptions (e.g. from
``requests``) must NEVER propagate beyond the infrastructure layer — they
are caught there and re-raised as a :class:`ClassifiedError` subclass.

Hierarchy
---------
TwilioBrowseError
├── ConfigurationError
├── EnvironmentError
├── InputChannelClosedError
└── ClassifiedError
    ├── ResourceNotFoundError
    └── RemoteFailureError

Recovery categories
-------------------
* :class:`ResourceNotFoundError` is recoverable: the navigation loop
  reports it and resumes the enclosing menu.
* :class:`RemoteFailureError` and :class:`InputChannelClosedError` are
  fatal: nothing in the core catches them, the CLI error boundary prints
  them and ends the process.
"""

from __future__ import annotations

from enum import Enum


class TwilioBrowseError(Exception):
    """Base exception for all twilio-browse errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration / environment --------------------------------------------

class ConfigurationError(TwilioBrowseError):
    """Raised when credentials or settings are missing or malformed."""


class EnvironmentError(TwilioBrowseError):
    """Raised when a required runtime dependency is not available."""


# --- Interactive session -----------------------------------------------------

class InputChannelClosedError(TwilioBrowseError):
    """Raised when the interactive input stream is closed mid-session."""


# --- Remote API ----------------------------------------------------------------

class ErrorKind(Enum):
    """Recovery category attached to every remote error."""

    NOT_FOUND = "not_found"
    REMOTE_FAILURE = "remote_failure"


class ClassifiedError(TwilioBrowseError):
    """A remote API error tagged with its recovery category.

    Only the infrastructure layer constructs these.  ``raw`` keeps the
    untouched detail (decoded response body or transport exception) for
    logging and debugging.
    """

    kind: ErrorKind = ErrorKind.REMOTE_FAILURE

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        code: int | None = None,
        raw: object = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status: int | None = status
        self.code: int | None = code
        self.raw: object = raw


class ResourceNotFoundError(ClassifiedError):
    """Raised when the requested remote resource does not exist (HTTP 404)."""

    kind = ErrorKind.NOT_FOUND


class RemoteFailureError(ClassifiedError):
    """Raised for every other remote, transport or decoding failure."""

    kind = ErrorKind.REMOTE_FAILURE
