"""
Test Command Line Interface
"""

import sqlite3
import sys

import pytest
from loguru import logger

import main
from indexedrag.storage import Database


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def db_env(tmp_path, monkeypatch):
    db_path = tmp_path / "config" / "indexedRAG.db"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INDEXEDRAG_DB_PATH", str(db_path))
    monkeypatch.setenv("INDEXEDRAG_LOG_DIR", str(tmp_path / "logs"))
    return db_path


def test_info_prints_settings(db_env, capsys):
    main.main(["info"])

    out = capsys.readouterr().out
    assert str(db_env) in out
    assert "60 minutes" in out
    assert "/path/to/somewhere" in out
    assert "Messages: 1" in out


def test_reset_conversation(db_env, capsys):
    db = Database(db_env)
    conversation = db.load_or_create_default_conversation()
    conversation.messages = []
    db.save_conversation(conversation)

    main.main(["--log-level", "DEBUG", "reset-conversation"])

    assert len(db.load_or_create_default_conversation().messages) == 1
    assert "Conversation reset" in capsys.readouterr().out


def test_storage_failure_exits_with_status_1(tmp_path, monkeypatch):
    db_dir = tmp_path / "indexedRAG.db"
    db_dir.mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INDEXEDRAG_DB_PATH", str(db_dir))
    monkeypatch.setenv("INDEXEDRAG_LOG_DIR", str(tmp_path / "logs"))

    with pytest.raises(SystemExit) as exc_info:
        main.main(["info"])

    assert exc_info.value.code == 1


def test_parser_defaults_to_gui():
    args = main.build_parser().parse_args([])
    assert args.command is None
    assert args.log_level is None


def test_corrupt_interval_exits_with_status_1(db_env):
    db = Database(db_env)
    db.load_or_create_default_settings()

    conn = sqlite3.connect(db_env)
    conn.execute("UPDATE settings SET index_interval_minutes = 'hourly' WHERE id = 1")
    conn.commit()
    conn.close()

    with pytest.raises(SystemExit) as exc_info:
        main.main(["info"])

    assert exc_info.value.code == 1
