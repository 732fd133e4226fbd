import logging
import os
from pathlib import Path

import pytest

import portfolio_terminal.runtime_config as config_module
from portfolio_terminal.runtime_config import (
    PORTFOLIO_LOG_LEVEL_ENV,
    PORTFOLIO_PROFILE_ENV,
    RuntimeConfig,
    get_config_dir,
    get_data_dir,
    load_envs,
)


def test_runtime_config_defaults() -> None:
    cfg = RuntimeConfig()
    assert cfg.profile_path is None
    assert cfg.command is None
    assert cfg.log_level == logging.INFO


def test_runtime_config_is_frozen(tmp_path: Path) -> None:
    cfg = RuntimeConfig(profile_path=tmp_path / "p.json", command="whoami")
    with pytest.raises(AttributeError):
        cfg.command = "help"  # type: ignore[misc]


def test_load_envs_fills_missing_values(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        f"{PORTFOLIO_PROFILE_ENV}=/tmp/me.json\n{PORTFOLIO_LOG_LEVEL_ENV}=DEBUG\n"
    )
    load_envs(str(env_file))
    assert os.environ[PORTFOLIO_PROFILE_ENV] == "/tmp/me.json"
    assert os.environ[PORTFOLIO_LOG_LEVEL_ENV] == "DEBUG"


def test_load_envs_does_not_override_existing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(PORTFOLIO_PROFILE_ENV, "/already/set.json")
    env_file = tmp_path / ".env"
    env_file.write_text(f"{PORTFOLIO_PROFILE_ENV}=/from/env/file.json\n")
    load_envs(str(env_file))
    assert os.environ[PORTFOLIO_PROFILE_ENV] == "/already/set.json"


def test_load_envs_without_file_argument(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        config_module, "dotenv_values", lambda *a: {PORTFOLIO_LOG_LEVEL_ENV: "WARNING"}
    )
    load_envs()
    assert os.environ[PORTFOLIO_LOG_LEVEL_ENV] == "WARNING"


@pytest.mark.parametrize(
    "func,env_var,fallback,leaf",
    [
        (get_config_dir, "XDG_CONFIG_HOME", ".config", "portfolio_terminal"),
        (get_data_dir, "XDG_DATA_HOME", ".local/share", "portfolio_terminal"),
    ],
)
def test_xdg_dirs(
    func, env_var: str, fallback: str, leaf: str, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(env_var, str(tmp_path / "xdg"))
    assert func() == tmp_path / "xdg" / leaf

    monkeypatch.delenv(env_var)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    assert func() == tmp_path / fallback / leaf
