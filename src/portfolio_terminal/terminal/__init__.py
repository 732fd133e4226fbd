"""
Terminal subpackage: command registry, history, transcript and the session that ties them together.
"""

from portfolio_terminal.terminal.commands import (
    CommandRegistry,
    CommandSpec,
    build_default_registry,
)
from portfolio_terminal.terminal.executor import Direction, LineExecutor, TerminalSession
from portfolio_terminal.terminal.history import CommandHistory
from portfolio_terminal.terminal.transcript import HistoryItem, Transcript

__all__ = [
    "CommandHistory",
    "CommandRegistry",
    "CommandSpec",
    "Direction",
    "HistoryItem",
    "LineExecutor",
    "TerminalSession",
    "Transcript",
    "build_default_registry",
]
