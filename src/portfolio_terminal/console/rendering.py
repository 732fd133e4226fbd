import io
import os
from typing import Iterable

from rich.console import Console, Group, RenderableType
from rich.text import Text

from portfolio_terminal.terminal.transcript import HistoryItem

PROMPT_SYMBOL = "❯"

PROMPT_STYLE = "green"
COMMAND_STYLE = "grey85"
OUTPUT_STYLE = "grey62"
ERROR_STYLE = "red"


console = Console()


def clear_terminal() -> None:
    """Clear the terminal screen."""
    os.system("cls" if os.name == "nt" else "clear")


def render_entry(entry: HistoryItem) -> RenderableType:
    """Build the Rich renderable for one transcript entry.

    Plain string output is never parsed as markup, so ``[1]`` stays literal.
    """
    parts: list[RenderableType] = []
    if entry.command:
        prompt_line = Text()
        prompt_line.append(f"{PROMPT_SYMBOL} ", style=PROMPT_STYLE)
        prompt_line.append(entry.command, style=COMMAND_STYLE)
        parts.append(prompt_line)

    style = ERROR_STYLE if entry.is_error else OUTPUT_STYLE
    if isinstance(entry.output, Text):
        output = entry.output.copy()
        output.style = style
    else:
        output = Text(entry.output, style=style)
    parts.append(output)
    return Group(*parts)


def print_entry(entry: HistoryItem) -> None:
    """Render a single transcript entry via Rich, followed by a spacer line."""
    console.print(render_entry(entry))
    console.print()


def render_transcript_ansi(entries: Iterable[HistoryItem], width: int) -> str:
    """Render ``entries`` top to bottom into an ANSI string ``width`` columns wide."""
    buf = io.StringIO()
    ansi_console = Console(
        file=buf,
        width=width,
        force_terminal=True,
        color_system="256",
        legacy_windows=False,
    )
    for entry in entries:
        ansi_console.print(render_entry(entry))
        ansi_console.print()
    return buf.getvalue()
