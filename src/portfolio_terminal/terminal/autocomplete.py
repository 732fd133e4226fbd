from typing import Iterable, List


def complete(partial: str, names: Iterable[str]) -> List[str]:
    """Return the names starting with ``partial``, ignoring case."""
    prefix = partial.lower()
    return [name for name in names if name.lower().startswith(prefix)]


def format_candidates(matches: Iterable[str]) -> str:
    return "  ".join(matches)
