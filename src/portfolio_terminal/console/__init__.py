"""
Console subpackage: holds the full-screen terminal, headless runner, rendering and key bindings.
"""

from portfolio_terminal.console.console import Console, HeadlessConsole
from portfolio_terminal.console.terminal_console import TerminalConsole

__all__ = ["Console", "HeadlessConsole", "TerminalConsole"]
