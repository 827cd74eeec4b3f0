"""twilio-browse — interactive browser for Twilio Conversations and Sync.

Navigate remote resources from the terminal, filter listings, and delete
what is no longer needed after explicit confirmation.
"""

from twilio_browse.version import __version__

__all__: list[str] = ["__version__"]
