import json
import logging
from pathlib import Path

import pytest
from conftest import MockConsole
from typer.testing import CliRunner

import portfolio_terminal.console.console as console_module
import portfolio_terminal.console.rendering as rendering
from portfolio_terminal.cli import create_app, default_console_factory, resolve_log_level
from portfolio_terminal.console.console import Console, HeadlessConsole, TerminalConsole
from portfolio_terminal.runtime_config import RuntimeConfig
from portfolio_terminal.terminal.executor import TerminalSession


@pytest.fixture
def mock_consoles() -> list[MockConsole]:
    """Track created mock consoles."""
    return []


@pytest.fixture
def mock_app(mock_consoles: list[MockConsole]):  # type: ignore[no-untyped-def]
    def test_console_factory(session: TerminalSession, config: RuntimeConfig) -> Console:
        console = MockConsole(session, config)
        mock_consoles.append(console)
        return console

    return create_app(test_console_factory)


@pytest.fixture(autouse=True)
def quiet_rendering(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(console_module, "clear_terminal", lambda: None)


def test_cli_opens_terminal_with_default_profile(
    mock_app, mock_consoles: list[MockConsole]  # type: ignore[no-untyped-def]
) -> None:
    result = CliRunner().invoke(mock_app, [])
    assert result.exit_code == 0, result.output

    assert len(mock_consoles) == 1
    console = mock_consoles[0]
    assert console.run_called
    assert console.config.command is None
    assert console.config.profile_path is None
    assert "Welcome to Alex Carter's Terminal" in str(
        console.session.transcript.entries[0].output
    )


def test_cli_profile_option(
    mock_app, mock_consoles: list[MockConsole], tmp_path: Path  # type: ignore[no-untyped-def]
) -> None:
    profile = tmp_path / "me.json"
    profile.write_text(json.dumps({"name": "Sam Lee"}))

    result = CliRunner().invoke(mock_app, ["--profile", str(profile)])
    assert result.exit_code == 0, result.output

    console = mock_consoles[0]
    assert console.config.profile_path == profile
    assert "Sam Lee" in str(console.session.transcript.entries[0].output)


def test_cli_profile_from_env(
    mock_app,  # type: ignore[no-untyped-def]
    mock_consoles: list[MockConsole],
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    profile = tmp_path / "env.json"
    profile.write_text(json.dumps({"name": "Env Person"}))
    monkeypatch.setenv("PORTFOLIO_PROFILE", str(profile))

    result = CliRunner().invoke(mock_app, [])
    assert result.exit_code == 0, result.output
    assert mock_consoles[0].config.profile_path == profile


def test_cli_bad_profile_exits_with_error(
    mock_app, mock_consoles: list[MockConsole], tmp_path: Path  # type: ignore[no-untyped-def]
) -> None:
    profile = tmp_path / "broken.json"
    profile.write_text("{not json")

    result = CliRunner().invoke(mock_app, ["--profile", str(profile)])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert mock_consoles == []


def test_cli_command_passed_to_config(
    mock_app, mock_consoles: list[MockConsole]  # type: ignore[no-untyped-def]
) -> None:
    result = CliRunner().invoke(mock_app, ["-c", "whoami"])
    assert result.exit_code == 0, result.output
    assert mock_consoles[0].config.command == "whoami"


def test_cli_command_from_stdin(
    mock_app, mock_consoles: list[MockConsole]  # type: ignore[no-untyped-def]
) -> None:
    result = CliRunner().invoke(mock_app, ["-c", "-"], input="help\nskills\n")
    assert result.exit_code == 0, result.output
    assert mock_consoles[0].config.command == "help\nskills\n"


def test_cli_verbose_sets_debug(
    mock_app, mock_consoles: list[MockConsole]  # type: ignore[no-untyped-def]
) -> None:
    result = CliRunner().invoke(mock_app, ["--verbose"])
    assert result.exit_code == 0, result.output
    assert mock_consoles[0].config.log_level == logging.DEBUG


def test_commands_subcommand_lists_everything(
    mock_app, mock_consoles: list[MockConsole]  # type: ignore[no-untyped-def]
) -> None:
    result = CliRunner().invoke(mock_app, ["commands"])
    assert result.exit_code == 0, result.output
    assert mock_consoles == []

    names = [line.split(" - ")[0].strip() for line in result.output.splitlines()]
    assert names == [
        "help",
        "whoami",
        "skills",
        "projects",
        "contact",
        "social",
        "date",
        "neofetch",
        "matrix",
        "clear",
        "echo",
        "history",
    ]


def test_cli_headless_runs_real_commands(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    from rich.console import Console as RichConsole

    recorder = RichConsole(record=True, width=80)
    monkeypatch.setattr(rendering, "console", recorder)

    app = create_app()
    result = CliRunner().invoke(app, ["-c", "echo Hi There"])
    assert result.exit_code == 0, result.output
    assert "hi there" in recorder.export_text()


def test_cli_headless_unknown_command_exits_one(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    from rich.console import Console as RichConsole

    recorder = RichConsole(record=True, width=80)
    monkeypatch.setattr(rendering, "console", recorder)

    result = CliRunner().invoke(create_app(), ["-c", "zzz"])
    assert result.exit_code == 1
    assert "Command not found: zzz" in recorder.export_text()


def test_cli_headless_blank_command_is_an_error() -> None:
    result = CliRunner().invoke(create_app(), ["-c", "  "])
    assert result.exit_code == 1
    assert "Command text is required" in result.output


@pytest.mark.parametrize(
    "args,stdin",
    [(["-c", ""], None), (["-c", "-"], "")],
)
def test_cli_headless_empty_command_is_an_error(args: list[str], stdin: str) -> None:
    result = CliRunner().invoke(create_app(), args, input=stdin)
    assert result.exit_code == 1
    assert "Command text is required" in result.output


def test_default_console_factory(session: TerminalSession) -> None:
    assert isinstance(
        default_console_factory(session, RuntimeConfig(command="help")), HeadlessConsole
    )
    assert isinstance(
        default_console_factory(session, RuntimeConfig(command="")), HeadlessConsole
    )
    assert isinstance(default_console_factory(session, RuntimeConfig()), TerminalConsole)


@pytest.mark.parametrize(
    "verbose,env,expected",
    [
        (True, "WARNING", logging.DEBUG),
        (False, "warning", logging.WARNING),
        (False, "nonsense", logging.INFO),
        (False, None, logging.INFO),
    ],
)
def test_resolve_log_level(
    verbose: bool, env: str, expected: int, monkeypatch: pytest.MonkeyPatch
) -> None:
    if env is not None:
        monkeypatch.setenv("PORTFOLIO_LOG_LEVEL", env)
    assert resolve_log_level(verbose) == expected
