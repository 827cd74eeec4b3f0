"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — the user chose Exit, or backed out of the top menu."""

GENERAL_ERROR: int = 1
"""A known TwilioBrowseError was caught (remote failure, closed input,
bad configuration).  The error detail was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C outside a prompt.  POSIX convention (128 + SIGINT=2)."""
