"""
Full-screen terminal window using prompt_toolkit Application.

Layout, top to bottom:
- title bar
- transcript (Rich-rendered ANSI), always scrolled to the latest entry
- single-line input with the prompt symbol
- footer with key hints
"""

import logging
from typing import Optional

from prompt_toolkit import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.data_structures import Point
from prompt_toolkit.formatted_text import ANSI, AnyFormattedText, FormattedText
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.styles import Style

from portfolio_terminal.console.key_bindings import get_key_bindings
from portfolio_terminal.console.rendering import PROMPT_SYMBOL, render_transcript_ansi
from portfolio_terminal.terminal.executor import TerminalSession
from portfolio_terminal.terminal.transcript import Transcript

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "terminal@portfolio"


class TerminalConsole:
    """Full-screen console hosting one mounted terminal session."""

    style: Style = Style.from_dict(
        {
            "title": "bg:#2d2d2d #9e9e9e",
            "title.icon": "bg:#2d2d2d #22c55e",
            "prompt": "#22c55e",
            "input": "#d1d5db",
            "footer": "#6b7280",
        }
    )

    def __init__(self, session: TerminalSession, title: str = DEFAULT_TITLE) -> None:
        self.session = session
        self.title = title
        self.app: Optional[Application[None]] = None

        self.input_buffer = Buffer(multiline=False)
        self.kb = get_key_bindings(session)

        self._transcript_ansi = ""
        self._line_count = 1
        self._rendered_width = 0
        self._unsubscribe = session.transcript.subscribe(self._on_transcript_changed)
        self._refresh_transcript()

    def _get_terminal_width(self) -> int:
        """Get the current terminal width."""
        if self.app and self.app.output:
            return self.app.output.get_size().columns
        return 80  # Default fallback

    def _refresh_transcript(self) -> None:
        """Re-render every entry; scrolling follows the last line."""
        width = self._get_terminal_width()
        text = render_transcript_ansi(self.session.transcript.entries, width)
        self._transcript_ansi = text.rstrip("\n")
        self._line_count = self._transcript_ansi.count("\n") + 1
        self._rendered_width = width

    def _on_transcript_changed(self, _: Transcript) -> None:
        self._refresh_transcript()
        if self.app:
            self.app.invalidate()

    def _transcript_fragments(self) -> AnyFormattedText:
        if self._get_terminal_width() != self._rendered_width:
            self._refresh_transcript()
        return ANSI(self._transcript_ansi)

    def _transcript_cursor(self) -> Point:
        return Point(x=0, y=max(self._line_count - 1, 0))

    def _title_fragments(self) -> AnyFormattedText:
        return FormattedText(
            [("class:title.icon", " >_ "), ("class:title", self.title)]
        )

    def _footer_fragments(self) -> AnyFormattedText:
        return FormattedText(
            [("class:footer", "Tab autocomplete · ↑↓ history · Ctrl-D close")]
        )

    def _create_layout(self) -> Layout:
        input_window = Window(
            BufferControl(buffer=self.input_buffer), height=1, style="class:input"
        )
        container = HSplit(
            [
                Window(
                    FormattedTextControl(self._title_fragments),
                    height=1,
                    style="class:title",
                ),
                Window(
                    FormattedTextControl(
                        self._transcript_fragments,
                        focusable=False,
                        get_cursor_position=self._transcript_cursor,
                    ),
                    wrap_lines=True,
                ),
                VSplit(
                    [
                        Window(
                            FormattedTextControl(f"{PROMPT_SYMBOL} "),
                            width=2,
                            style="class:prompt",
                        ),
                        input_window,
                    ]
                ),
                Window(FormattedTextControl(self._footer_fragments), height=1),
            ]
        )
        return Layout(container, focused_element=input_window)

    def create_application(self) -> Application[None]:
        return Application(
            layout=self._create_layout(),
            key_bindings=self.kb,
            style=self.style,
            full_screen=True,
        )

    async def run(self) -> None:
        """Open the terminal and block until it is closed."""
        self.app = self.create_application()
        logger.info("Terminal opened")
        try:
            await self.app.run_async()
        except (KeyboardInterrupt, EOFError):
            pass
        finally:
            # Closing unmounts: the session and its state are dropped with us
            self._unsubscribe()
            self.app = None
            logger.info("Terminal closed")
