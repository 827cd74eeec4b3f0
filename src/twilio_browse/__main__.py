"""Allow ``python -m twilio_browse`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m twilio_browse`` behaves identically to the ``twilio-browse``
console script.
"""

from __future__ import annotations

from twilio_browse.cli.app import cli

if __name__ == "__main__":
    cli()
