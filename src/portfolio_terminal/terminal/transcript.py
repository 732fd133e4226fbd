"""
Transcript of a terminal session: what was typed and what came back.
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from portfolio_terminal.terminal.commands import Output

TranscriptListener = Callable[["Transcript"], None]


@dataclass(frozen=True)
class HistoryItem:
    """One transcript entry. ``command`` is empty for system messages."""

    command: str
    output: Output
    is_error: bool = False


class Transcript:
    """Ordered, append-only list of entries; only ``clear`` removes them.

    Listeners run after every change so a view can redraw and scroll to the
    latest entry.
    """

    def __init__(self) -> None:
        self._entries: List[HistoryItem] = []
        self._listeners: List[TranscriptListener] = []

    @property
    def entries(self) -> Tuple[HistoryItem, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def subscribe(self, listener: TranscriptListener) -> Callable[[], None]:
        """Register ``listener``; returns a function that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def append(self, item: HistoryItem) -> None:
        self._entries.append(item)
        self._notify()

    def clear(self) -> None:
        self._entries.clear()
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
