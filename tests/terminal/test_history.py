from portfolio_terminal.terminal.history import CommandHistory


def _history(*commands: str) -> CommandHistory:
    history = CommandHistory()
    for cmd in commands:
        history.append(cmd)
    return history


def test_new_history_is_empty_and_not_browsing() -> None:
    history = CommandHistory()
    assert len(history) == 0
    assert history.cursor == -1
    assert history.older() is None
    assert history.cursor == -1


def test_older_walks_back_and_clamps_at_oldest() -> None:
    history = _history("help", "whoami", "skills")
    assert history.older() == "skills"
    assert history.older() == "whoami"
    assert history.older() == "help"
    assert history.older() == "help"
    assert history.cursor == 2


def test_newer_walks_forward_then_clears() -> None:
    history = _history("help", "whoami", "skills")
    for _ in range(3):
        history.older()
    assert history.newer() == "whoami"
    assert history.newer() == "skills"
    assert history.newer() == ""
    assert history.cursor == -1
    assert history.newer() == ""
    assert history.cursor == -1


def test_append_resets_cursor_and_keeps_order() -> None:
    history = _history("help", "whoami")
    history.older()
    history.append("help")
    assert history.cursor == -1
    assert history.entries == ("help", "whoami", "help")
    assert history.older() == "help"


def test_navigation_does_not_mutate_entries() -> None:
    history = _history("a", "b")
    before = history.entries
    history.older()
    history.older()
    history.newer()
    assert history.entries == before


def test_cursor_stays_in_range() -> None:
    history = _history("a", "b", "c")
    for step in ["up"] * 5 + ["down"] * 5 + ["up"] * 2:
        if step == "up":
            history.older()
        else:
            history.newer()
        assert -1 <= history.cursor <= len(history) - 1


def test_render_numbers_from_one() -> None:
    assert CommandHistory().render() == "No commands in history"
    assert _history("help", "echo hi").render() == "  1  help\n  2  echo hi"
