"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined and produced by the error boundary.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from twilio_browse import __version__
from twilio_browse.cli import exit_codes
from twilio_browse.cli.app import cli, main, run_navigation
from twilio_browse.core.models import Control, ResourcePage, SyncService
from twilio_browse.exceptions import (
    ClassifiedError,
    ConfigurationError,
    EnvironmentError,
    ErrorKind,
    InputChannelClosedError,
    RemoteFailureError,
    ResourceNotFoundError,
    TwilioBrowseError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ConfigurationError,
            EnvironmentError,
            InputChannelClosedError,
            ClassifiedError,
            ResourceNotFoundError,
            RemoteFailureError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[TwilioBrowseError]
    ) -> None:
        assert issubclass(exc_class, TwilioBrowseError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(TwilioBrowseError, Exception)

    def test_hint_is_stored(self) -> None:
        err = TwilioBrowseError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = TwilioBrowseError("boom")
        assert err.hint is None

    def test_classified_kinds(self) -> None:
        assert ResourceNotFoundError("x").kind is ErrorKind.NOT_FOUND
        assert RemoteFailureError("x").kind is ErrorKind.REMOTE_FAILURE

    def test_classified_detail(self) -> None:
        err = RemoteFailureError("x", status=500, code=20500, raw={"a": 1})
        assert (err.status, err.code, err.raw) == (500, 20500, {"a": 1})


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_unknown_target_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["calls"])
        assert exc_info.value.code == 2

    @patch("twilio_browse.cli.app.run_navigation", return_value=Control.EXIT)
    @patch("twilio_browse.infra.twilio_client.TwilioClient")
    @patch("twilio_browse.cli.prompter.QuestionaryPrompter")
    @patch("twilio_browse.config.load_settings")
    @patch("twilio_browse.utils.log.setup_logging")
    def test_main_wires_dependencies(
        self,
        mock_logging: MagicMock,
        mock_settings: MagicMock,
        mock_prompter: MagicMock,
        mock_client: MagicMock,
        mock_run: MagicMock,
        tmp_path: Path,
    ) -> None:
        code = main(
            [
                "sync",
                "--service",
                "IS1",
                "--account-sid",
                "AC" + "0" * 32,
                "--auth-token",
                "tok",
                "-v",
                "--log-file",
                str(tmp_path / "browse.log"),
            ]
        )

        assert code == exit_codes.SUCCESS
        mock_logging.assert_called_once_with(verbose=True, log_file=tmp_path / "browse.log")
        mock_settings.assert_called_once_with(account_sid="AC" + "0" * 32, auth_token="tok")
        mock_client.assert_called_once_with(mock_settings.return_value)
        mock_run.assert_called_once_with(
            mock_prompter.return_value,
            mock_client.return_value,
            target="sync",
            service_sid="IS1",
        )

    @patch("twilio_browse.utils.log.setup_logging")
    def test_configuration_error_surfaces(self, _mock_logging: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TWILIO_ACCOUNT_SID", raising=False)
        with pytest.raises(ConfigurationError):
            main([])


# ---------------------------------------------------------------------------
# Navigation dispatch
# ---------------------------------------------------------------------------

class TestRunNavigation:
    def test_exit_at_top_level(self, make_prompter) -> None:
        prompter = make_prompter(("select", "Exit"))
        assert run_navigation(prompter, MagicMock()) is Control.EXIT
        assert prompter.options[0] == ["Conversations", "Sync", "Back", "Exit"]

    def test_back_from_conversations_returns_to_top(self, make_prompter) -> None:
        prompter = make_prompter(
            ("select", "Conversations"),
            ("select", "Back"),
            ("select", "Back"),
        )
        assert run_navigation(prompter, MagicMock()) is Control.BACK
        assert [message for _, message in prompter.prompts] == [
            "Select a resource:",
            "Select an action:",
            "Select a resource:",
        ]

    def test_exit_inside_sync_ends_session(self, make_prompter) -> None:
        client = MagicMock()
        client.sync.services.return_value.list.return_value = ResourcePage(
            items=(SyncService("IS1", "orders", None, "c", "u"),),
        )
        prompter = make_prompter(("select", "Sync"), ("select", "Exit"))

        assert run_navigation(prompter, client) is Control.EXIT
        assert prompter.remaining == []

    def test_target_skips_top_level(self, make_prompter) -> None:
        prompter = make_prompter(("select", "Exit"))
        assert run_navigation(prompter, MagicMock(), target="conversations") is Control.EXIT
        assert prompter.prompts == [("select", "Select an action:")]

    def test_service_sid_opens_fixed_service(self, make_prompter) -> None:
        client = MagicMock()
        client.sync.services.return_value.get.return_value = SyncService("IS1", None, None, "c", "u")
        prompter = make_prompter(("select", "Back"))

        assert run_navigation(prompter, client, service_sid="IS1") is Control.BACK
        client.sync.services.return_value.list.assert_not_called()


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    @pytest.mark.parametrize(
        ("side_effect", "expected"),
        [
            (RemoteFailureError("boom", status=500), exit_codes.GENERAL_ERROR),
            (InputChannelClosedError("closed"), exit_codes.GENERAL_ERROR),
            (ConfigurationError("missing", hint="set it"), exit_codes.GENERAL_ERROR),
            (KeyboardInterrupt(), exit_codes.KEYBOARD_INTERRUPT),
            (RuntimeError("bug"), exit_codes.UNEXPECTED_ERROR),
        ],
    )
    def test_exit_codes(self, side_effect: BaseException, expected: int) -> None:
        with patch("twilio_browse.cli.app.main", side_effect=side_effect):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == expected

    def test_success(self) -> None:
        with patch("twilio_browse.cli.app.main", return_value=exit_codes.SUCCESS):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_error_and_hint_printed(self, capsys: pytest.CaptureFixture[str]) -> None:
        error = RemoteFailureError("Authenticate (HTTP 401)", hint="Check TWILIO_AUTH_TOKEN.")
        with patch("twilio_browse.cli.app.main", side_effect=error):
            with pytest.raises(SystemExit):
                cli()
        err = capsys.readouterr().err
        assert "Authenticate (HTTP 401)" in err
        assert "Check TWILIO_AUTH_TOKEN." in err
