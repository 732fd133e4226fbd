from typing import List, Optional, Tuple


class CommandHistory:
    """Append-only log of submitted commands with an up/down recall cursor.

    Cursor 0 is the most recent entry; -1 means not browsing.
    """

    def __init__(self) -> None:
        self._entries: List[str] = []
        self._cursor = -1

    @property
    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, command: str) -> None:
        """Record a submission and stop browsing."""
        self._entries.append(command)
        self.reset()

    def reset(self) -> None:
        self._cursor = -1

    def older(self) -> Optional[str]:
        """Step one entry into the past. Returns None when there is no history."""
        if not self._entries:
            return None
        if self._cursor < len(self._entries) - 1:
            self._cursor += 1
        return self._entries[len(self._entries) - 1 - self._cursor]

    def newer(self) -> str:
        """Step one entry toward the present; past the newest, return ''."""
        if self._cursor > 0:
            self._cursor -= 1
            return self._entries[len(self._entries) - 1 - self._cursor]
        self.reset()
        return ""

    def render(self) -> str:
        """Numbered listing, oldest first."""
        if not self._entries:
            return "No commands in history"
        return "\n".join(f"  {i}  {cmd}" for i, cmd in enumerate(self._entries, start=1))
