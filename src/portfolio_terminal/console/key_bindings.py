from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys

from portfolio_terminal.terminal.executor import Direction, TerminalSession


def _pull_input(session: TerminalSession, buffer: Buffer) -> None:
    session.set_input(buffer.text)


def _push_input(session: TerminalSession, buffer: Buffer) -> None:
    text = session.input
    buffer.set_document(Document(text, cursor_position=len(text)), bypass_readonly=True)


def get_key_bindings(session: TerminalSession) -> KeyBindings:
    """Return the KeyBindings that drive ``session`` from the input buffer.

    The buffer is copied into the session before each event and the
    session's input is written back afterwards.
    """
    kb = KeyBindings()

    @kb.add(Keys.Enter, eager=True)
    def _(event: KeyPressEvent) -> None:
        """Submit the current line."""
        buffer = event.current_buffer
        _pull_input(session, buffer)
        session.on_submit()
        _push_input(session, buffer)

    @kb.add(Keys.Up)
    def _(event: KeyPressEvent) -> None:
        """Recall an older command."""
        buffer = event.current_buffer
        _pull_input(session, buffer)
        session.on_arrow(Direction.up)
        _push_input(session, buffer)

    @kb.add(Keys.Down)
    def _(event: KeyPressEvent) -> None:
        """Recall a newer command, or clear the line past the newest."""
        buffer = event.current_buffer
        _pull_input(session, buffer)
        session.on_arrow(Direction.down)
        _push_input(session, buffer)

    @kb.add(Keys.Tab)
    def _(event: KeyPressEvent) -> None:
        """Autocomplete the command name."""
        buffer = event.current_buffer
        _pull_input(session, buffer)
        session.on_tab()
        _push_input(session, buffer)

    @kb.add("c-c")
    @kb.add("c-d")
    def _(event: KeyPressEvent) -> None:
        """Close the terminal."""
        event.app.exit()

    return kb
