import sys
from typing import Protocol

from portfolio_terminal.console.rendering import clear_terminal, print_entry
from portfolio_terminal.console.terminal_console import TerminalConsole
from portfolio_terminal.terminal.executor import TerminalSession
from portfolio_terminal.terminal.transcript import Transcript

__all__ = ["Console", "HeadlessConsole", "TerminalConsole"]


def stdout_is_terminal() -> bool:
    return sys.stdout.isatty()


class Console(Protocol):
    """Common interface for console interactions."""

    session: TerminalSession

    async def run(self) -> None:
        pass


class HeadlessConsole(Console):
    """Console that submits a fixed list of lines and prints what they produce."""

    def __init__(self, session: TerminalSession, command: str) -> None:
        self.session = session
        self.command = command
        self.had_errors = False

    def _on_transcript_changed(self, transcript: Transcript) -> None:
        if not len(transcript):
            # Piped output gets no screen control codes
            if stdout_is_terminal():
                clear_terminal()
            return
        entry = transcript.entries[-1]
        self.had_errors = self.had_errors or entry.is_error
        print_entry(entry)

    async def run(self) -> None:
        """
        Submit each line of the command text in order and render every
        transcript entry it appends.
        """
        if not self.command.strip():
            raise ValueError("Command text is required for headless mode")

        unsubscribe = self.session.transcript.subscribe(self._on_transcript_changed)
        try:
            for line in self.command.splitlines():
                self.session.on_submit(line)
        finally:
            unsubscribe()
