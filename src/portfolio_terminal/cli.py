import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Optional

import typer
from typing_extensions import Annotated

from portfolio_terminal.console.console import Console, HeadlessConsole, TerminalConsole
from portfolio_terminal.logger import setup_logging
from portfolio_terminal.profile import Profile, ProfileError, load_profile
from portfolio_terminal.runtime_config import (
    PORTFOLIO_LOG_LEVEL_ENV,
    PORTFOLIO_PROFILE_ENV,
    RuntimeConfig,
    load_envs,
)
from portfolio_terminal.terminal.commands import build_default_registry
from portfolio_terminal.terminal.executor import BUILTIN_COMMANDS, TerminalSession

# Global factory function - set by create_app()
_console_factory: Optional[Callable[[TerminalSession, RuntimeConfig], Console]] = None

BUILTIN_DESCRIPTIONS = {
    "clear": "Clear the terminal",
    "echo": "Echo back text",
    "history": "Show command history",
}


def default_console_factory(session: TerminalSession, config: RuntimeConfig) -> Console:
    """Default factory for creating Console instances."""
    if config.command is not None:
        return HeadlessConsole(session, config.command)
    else:
        return TerminalConsole(session)


def resolve_log_level(verbose: bool) -> int:
    """DEBUG when verbose, else PORTFOLIO_LOG_LEVEL if it names a level, else INFO."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get(PORTFOLIO_LOG_LEVEL_ENV, "")
    level = getattr(logging, name.upper(), None) if name else None
    return level if isinstance(level, int) else logging.INFO


def list_commands() -> None:
    """List the commands available inside the terminal."""
    registry = build_default_registry(Profile())
    for spec in registry:
        typer.echo(f"{spec.name:<10} - {spec.description}")
    for name in BUILTIN_COMMANDS:
        typer.echo(f"{name:<10} - {BUILTIN_DESCRIPTIONS[name]}")


def create_app(
    console_factory: Optional[
        Callable[[TerminalSession, RuntimeConfig], Console]
    ] = None,
) -> typer.Typer:
    """
    Create and configure the Typer application.

    Args:
        console_factory: Factory function to create Console instances

    Returns:
        Typer application
    """
    # Load settings from .env if not already set in the environment
    load_envs()

    def main(
        ctx: typer.Context,
        profile: Annotated[
            Optional[Path],
            typer.Option(
                "--profile",
                envvar=PORTFOLIO_PROFILE_ENV,
                help="JSON file with the author profile shown by the commands",
            ),
        ] = None,
        command: Annotated[
            Optional[str],
            typer.Option(
                "--command",
                "-c",
                help="Run command line(s) without opening the terminal; use '-' to read from stdin",
            ),
        ] = None,
        verbose: Annotated[
            bool, typer.Option("--verbose", "-v", help="Write debug logs")
        ] = False,
    ) -> None:
        """PORTFOLIO TERMINAL - the interactive portfolio shell"""
        if ctx.invoked_subcommand is not None:
            return

        command_text = sys.stdin.read() if command == "-" else command
        cfg = RuntimeConfig(
            profile_path=profile,
            command=command_text,
            log_level=resolve_log_level(verbose),
        )
        setup_logging(cfg.log_level)
        logger = logging.getLogger(__name__)

        try:
            author = load_profile(cfg.profile_path)
        except ProfileError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

        if cfg.command is None:
            logger.info("Opening terminal for %s", author.name)
        else:
            logger.info("Running headless: %r", cfg.command)

        session = TerminalSession.for_profile(author)
        factory = _console_factory or default_console_factory
        console = factory(session, cfg)
        try:
            asyncio.run(console.run())
        except KeyboardInterrupt:
            typer.echo("\nExiting...")
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

        if isinstance(console, HeadlessConsole) and console.had_errors:
            raise typer.Exit(code=1)

    # Set global factory function
    global _console_factory
    _console_factory = console_factory

    app = typer.Typer(rich_markup_mode=None)
    app.command("commands")(list_commands)
    app.callback(invoke_without_command=True)(main)

    return app


# Create default app instance
app = create_app()


if __name__ == "__main__":
    app()
