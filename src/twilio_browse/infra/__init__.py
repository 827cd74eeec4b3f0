"""Infrastructure layer — Twilio REST API integration.

This layer wraps all interaction with the network.  Every raw
``requests`` exception and every non-2xx response is caught here and
re-raised as a :class:`~twilio_browse.exceptions.ClassifiedError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from twilio_browse.infra.http import TwilioHttpClient
from twilio_browse.infra.twilio_client import (
    ConversationsClient,
    TwilioClient,
    TwilioCollection,
    TwilioSyncApi,
)

__all__: list[str] = [
    "ConversationsClient",
    "TwilioClient",
    "TwilioCollection",
    "TwilioHttpClient",
    "TwilioSyncApi",
]
