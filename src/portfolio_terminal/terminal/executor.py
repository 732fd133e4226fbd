"""
Line executor and the keyboard-facing terminal session.

``LineExecutor`` turns one submitted line into a transcript entry.
``TerminalSession`` owns everything a mounted terminal holds (input buffer,
command history, transcript) and exposes it through three events:
``on_submit``, ``on_arrow`` and ``on_tab``. Nothing here knows about
prompt_toolkit, so it can be driven directly from tests.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from portfolio_terminal.profile import Profile
from portfolio_terminal.terminal.autocomplete import format_candidates
from portfolio_terminal.terminal.commands import (
    CommandRegistry,
    Output,
    build_default_registry,
)
from portfolio_terminal.terminal.history import CommandHistory
from portfolio_terminal.terminal.transcript import HistoryItem, Transcript

logger = logging.getLogger(__name__)

BUILTIN_COMMANDS = ("clear", "echo", "history")
TERMINAL_VERSION = "1.0.0"


class Direction(str, Enum):
    """Arrow keys used for history recall."""

    up = "up"
    down = "down"


def welcome_message(name: str) -> str:
    return (
        f"Welcome to {name}'s Terminal v{TERMINAL_VERSION}\n"
        "Type 'help' for available commands.\n"
    )


def not_found_message(command: str) -> str:
    return f"Command not found: {command}. Type 'help' for available commands."


class LineExecutor:
    """Parses and runs submitted lines against a registry."""

    def __init__(
        self,
        registry: CommandRegistry,
        history: CommandHistory,
        transcript: Transcript,
    ) -> None:
        self.registry = registry
        self.history = history
        self.transcript = transcript

    def execute(self, raw: str) -> Optional[HistoryItem]:
        """
        Run one line and record it.

        Matching is done on the trimmed, lowercased text while the transcript
        keeps ``raw`` as typed. Returns the appended entry, or None when
        nothing was appended (blank input or ``clear``).
        """
        trimmed = raw.strip().lower()
        if not trimmed:
            return None

        command, *args = trimmed.split()
        logger.debug("Dispatching %r with args %r", command, args)
        if command == "clear":
            # Not recorded, so the arrow keys still recall what was cleared
            self.history.reset()
            self.transcript.clear()
            return None

        # ``history`` lists what came before this submission
        previous = self.history.render()
        self.history.append(trimmed)

        output: Output
        is_error = False
        if command == "history":
            output = previous
        elif command == "echo":
            output = " ".join(args)
        else:
            spec = self.registry.lookup(command)
            if spec is not None:
                output = spec.action()
            else:
                output = not_found_message(command)
                is_error = True

        item = HistoryItem(command=raw, output=output, is_error=is_error)
        self.transcript.append(item)
        return item


class TerminalSession:
    """State of one mounted terminal, driven by keyboard events."""

    def __init__(self, registry: CommandRegistry, welcome: Optional[str] = None) -> None:
        self.registry = registry
        self.history = CommandHistory()
        self.transcript = Transcript()
        self.executor = LineExecutor(registry, self.history, self.transcript)
        self._input = ""
        if welcome is not None:
            self.transcript.append(HistoryItem(command="", output=welcome))

    @classmethod
    def for_profile(
        cls, profile: Profile, clock: Callable[[], datetime] = datetime.now
    ) -> "TerminalSession":
        """Mount a session with the default commands and welcome banner."""
        logger.info("Mounting terminal session for %s", profile.name)
        return cls(build_default_registry(profile, clock), welcome_message(profile.name))

    @property
    def input(self) -> str:
        return self._input

    def set_input(self, text: str) -> None:
        self._input = text

    def on_submit(self, text: Optional[str] = None) -> Optional[HistoryItem]:
        """Execute ``text`` (default: the current input) and clear the input."""
        line = self._input if text is None else text
        item = self.executor.execute(line)
        self._input = ""
        return item

    def on_arrow(self, direction: Direction) -> None:
        if direction is Direction.up:
            recalled = self.history.older()
            if recalled is not None:
                self._input = recalled
        else:
            self._input = self.history.newer()

    def on_tab(self) -> None:
        matches = self.registry.complete(self._input)
        if len(matches) == 1:
            self._input = matches[0]
        elif len(matches) > 1:
            self.transcript.append(
                HistoryItem(command="", output=format_candidates(matches))
            )
