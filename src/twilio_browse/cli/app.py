"""CLI application entry point and command routing for twilio-browse.

This module is the **sole error boundary** for the entire application.
It catches :class:`~twilio_browse.exceptions.TwilioBrowseError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No navigation logic lives here — menus are core objects driven by an
  injected prompter and resource clients.
* Menus never end the process.  Choosing Exit anywhere returns
  ``Control.EXIT`` up the stack to :func:`main`, which turns it into an
  exit code.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from twilio_browse.cli import exit_codes
from twilio_browse.cli.console import console
from twilio_browse.exceptions import TwilioBrowseError
from twilio_browse.version import __version__

if TYPE_CHECKING:
    from twilio_browse.core.models import Control
    from twilio_browse.core.protocols import Prompter
    from twilio_browse.infra.twilio_client import TwilioClient

logger = logging.getLogger(__name__)

TARGET_CONVERSATIONS: str = "conversations"
TARGET_SYNC: str = "sync"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``twilio-browse``                      — choose a resource family
    * ``twilio-browse conversations``        — Conversations menu
    * ``twilio-browse sync [--service IS…]`` — Sync menu
    """
    parser = argparse.ArgumentParser(
        prog="twilio-browse",
        description="Interactive browser for Twilio Conversations and Sync resources.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        choices=(TARGET_CONVERSATIONS, TARGET_SYNC),
        help="Resource family to open directly.",
    )
    parser.add_argument(
        "--service",
        metavar="SID",
        default=None,
        help="Open a single Sync Service (implies 'sync').",
    )
    parser.add_argument(
        "--account-sid",
        default=None,
        help="Twilio account SID (default: $TWILIO_ACCOUNT_SID).",
    )
    parser.add_argument(
        "--auth-token",
        default=None,
        help="Twilio auth token (default: $TWILIO_AUTH_TOKEN).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on stderr.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    return parser


# ---------------------------------------------------------------------------
# Navigation dispatch
# ---------------------------------------------------------------------------

def run_navigation(
    prompter: Prompter,
    client: TwilioClient,
    *,
    target: str | None = None,
    service_sid: str | None = None,
) -> Control:
    """Run the requested menu and return its final ``Control``.

    Without a *target* the user first picks a resource family; Back from
    that menu ends the session like Exit does.
    """
    from twilio_browse.core.choices import choose_action
    from twilio_browse.core.conversation_menu import ConversationMenu
    from twilio_browse.core.models import Control, ResourceKind, Selected
    from twilio_browse.core.sync_menu import SyncMenu

    if service_sid is not None:
        return SyncMenu(prompter, client.sync).open_service(service_sid)
    if target == TARGET_CONVERSATIONS:
        return ConversationMenu(prompter, client.conversations).run()
    if target == TARGET_SYNC:
        return SyncMenu(prompter, client.sync).services()

    while True:
        outcome = choose_action(prompter, "Select a resource:", ResourceKind)
        if not isinstance(outcome, Selected):
            return outcome

        if outcome.value is ResourceKind.CONVERSATIONS:
            result = ConversationMenu(prompter, client.conversations).run()
        else:
            result = SyncMenu(prompter, client.sync).services()

        if result is Control.EXIT:
            return Control.EXIT


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the twilio-browse CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    from twilio_browse.cli.prompter import QuestionaryPrompter
    from twilio_browse.config import load_settings
    from twilio_browse.infra.twilio_client import TwilioClient
    from twilio_browse.utils.log import setup_logging

    setup_logging(verbose=args.verbose, log_file=args.log_file)
    settings = load_settings(account_sid=args.account_sid, auth_token=args.auth_token)
    logger.debug("Using account %s", settings.account_sid)

    outcome = run_navigation(
        QuestionaryPrompter(),
        TwilioClient(settings),
        target=args.target,
        service_sid=args.service,
    )
    logger.debug("Navigation finished with %s", outcome)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Remote failures and a closed input stream are deliberately not
    handled anywhere below this function: they end the session here, with
    the error detail printed first.
    """
    try:
        code = main()
        sys.exit(code)
    except TwilioBrowseError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
