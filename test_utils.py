"""
Test Configuration Helpers

Database path resolution and environment-driven settings
"""

import sys
from pathlib import Path

import pytest

from indexedrag import utils
from indexedrag.utils import Settings, get_config_dir, get_db_path


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ["INDEXEDRAG_DB_PATH", "INDEXEDRAG_LOG_LEVEL", "INDEXEDRAG_WINDOW_WIDTH"]:
        monkeypatch.delenv(name, raising=False)


def test_linux_config_dir_prefers_xdg():
    path = get_config_dir(platform="linux", env={"XDG_CONFIG_HOME": "/xdg"}, home=Path("/home/ada"))
    assert path == Path("/xdg/indexedrag")


def test_linux_config_dir_falls_back_to_dot_config():
    path = get_config_dir(platform="linux", env={}, home=Path("/home/ada"))
    assert path == Path("/home/ada/.config/indexedrag")


def test_windows_config_dir_uses_appdata():
    appdata = "C:/Users/ada/AppData/Roaming"
    path = get_config_dir(platform="win32", env={"APPDATA": appdata}, home=Path("/home/ada"))
    assert path == Path(appdata) / "aaugustyniak" / "indexedRAG" / "config"


def test_macos_config_dir():
    path = get_config_dir(platform="darwin", env={}, home=Path("/Users/ada"))
    assert path == Path("/Users/ada/Library/Application Support/pl.aaugustyniak.indexedRAG")


def test_config_dir_without_home(monkeypatch):
    def no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(no_home))
    assert get_config_dir(platform="linux", env={}) is None
    assert get_config_dir(platform="darwin", env={}) is None


def test_db_path_override():
    settings = Settings(db_path="/tmp/custom/indexedRAG.db")
    assert get_db_path(settings) == Path("/tmp/custom/indexedRAG.db")


def test_db_path_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("INDEXEDRAG_DB_PATH", str(tmp_path / "env.db"))
    assert get_db_path(Settings()) == tmp_path / "env.db"


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout is Linux-only")
def test_db_path_in_platform_config_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    assert get_db_path(Settings()) == tmp_path / "xdg" / "indexedrag" / "indexedRAG.db"


def test_db_path_falls_back_to_current_directory(monkeypatch):
    monkeypatch.setattr(utils, "get_config_dir", lambda: None)
    assert get_db_path(Settings()) == Path("indexedRAG.db")


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("INDEXEDRAG_WINDOW_WIDTH", "1200")
    monkeypatch.setenv("INDEXEDRAG_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.window_width == 1200
    assert settings.window_height == 800
    assert settings.log_level == "DEBUG"
    assert settings.appearance_mode == "dark"
