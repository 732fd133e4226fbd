import logging
from datetime import datetime
from pathlib import Path
from typing import Iterator

import pytest

from portfolio_terminal.profile import Profile
from portfolio_terminal.runtime_config import RuntimeConfig
from portfolio_terminal.terminal.executor import TerminalSession

FIXED_NOW = datetime(2026, 10, 18, 15, 4, 5)


class MockConsole:
    """Mock console for testing."""

    def __init__(self, session: TerminalSession, config: RuntimeConfig):
        self.session = session
        self.config = config
        self.run_called = False

    async def run(self) -> None:
        self.run_called = True


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[None]:
    """Keep config, data dirs and logging handlers out of the real home."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for name in ("PORTFOLIO_PROFILE", "PORTFOLIO_LOG_LEVEL"):
        # setenv first so teardown also drops values written by load_envs
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield
    package_logger = logging.getLogger("portfolio_terminal")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def session() -> TerminalSession:
    """A freshly mounted terminal with the default profile and a fixed clock."""
    return TerminalSession.for_profile(Profile(), clock=lambda: FIXED_NOW)
