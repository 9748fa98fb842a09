"""
Test Local Storage

Bootstrap, defaults, save/load and unreadable-column handling
"""

import sqlite3

import pytest
from loguru import logger

from indexedrag.storage import Database
from indexedrag.models import Message, Conversation, AppSettings


def _count_rows(db_path, table):
    conn = sqlite3.connect(db_path)
    try:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    finally:
        conn.close()


def test_creates_parent_directory_and_tables(tmp_path):
    db_path = tmp_path / "nested" / "config" / "indexedRAG.db"
    Database(db_path)

    assert db_path.exists()
    conn = sqlite3.connect(db_path)
    try:
        tables = {row[0] for row in conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table'"
        )}
    finally:
        conn.close()
    assert {"settings", "conversation"} <= tables


def test_default_conversation_is_inserted_once(tmp_path):
    db_path = tmp_path / "indexedRAG.db"
    db = Database(db_path)

    conversation = db.load_or_create_default_conversation()
    assert conversation.id == 1
    assert conversation.messages == [Message(role="system", content="Welcome to Indexedrag!")]

    # Second bootstrap reads the existing row
    again = Database(db_path).load_or_create_default_conversation()
    assert again == conversation
    assert _count_rows(db_path, "conversation") == 1


def test_default_settings_are_inserted_once(tmp_path):
    db_path = tmp_path / "indexedRAG.db"
    db = Database(db_path)

    settings = db.load_or_create_default_settings()
    assert settings.id == 1
    assert settings.root_paths == ["/path/to/somewhere"]
    assert settings.index_interval_minutes == 60

    db.load_or_create_default_settings()
    assert _count_rows(db_path, "settings") == 1


def test_conversation_round_trip(tmp_path):
    db = Database(tmp_path / "indexedRAG.db")
    conversation = db.load_or_create_default_conversation()
    conversation.messages.append(Message(role="user", content="Zażółć gęślą jaźń"))
    conversation.messages.append(Message(role="assistant", content="quote ' and \" inside"))

    db.save_conversation(conversation)
    reloaded = Database(tmp_path / "indexedRAG.db").load_or_create_default_conversation()

    logger.info(f"Reloaded {len(reloaded.messages)} messages")
    assert reloaded == conversation


def test_settings_round_trip(tmp_path):
    db = Database(tmp_path / "indexedRAG.db")
    settings = db.load_or_create_default_settings()
    settings.root_paths = ["/home/user/docs", "", "C:\\Data"]
    settings.index_interval_minutes = 15

    db.save_settings(settings)
    reloaded = db.load_or_create_default_settings()

    assert reloaded == settings


def test_save_updates_without_inserting(tmp_path):
    db_path = tmp_path / "indexedRAG.db"
    db = Database(db_path)

    # No row exists yet; an update touches nothing
    db.save_settings(AppSettings(id=1, root_paths=["/x"], index_interval_minutes=5))
    db.save_conversation(Conversation(id=1, messages=[]))
    assert _count_rows(db_path, "settings") == 0
    assert _count_rows(db_path, "conversation") == 0

    # The subsequent load creates the defaults
    assert db.load_or_create_default_settings() == AppSettings.default()


def test_save_only_touches_matching_id(tmp_path):
    db = Database(tmp_path / "indexedRAG.db")
    stored = db.load_or_create_default_settings()

    db.save_settings(AppSettings(id=99, root_paths=["/other"], index_interval_minutes=1))

    assert db.load_or_create_default_settings() == stored


def test_unreadable_messages_load_as_empty(tmp_path):
    db_path = tmp_path / "indexedRAG.db"
    db = Database(db_path)
    db.load_or_create_default_conversation()

    conn = sqlite3.connect(db_path)
    conn.execute("UPDATE conversation SET messages = 'not json' WHERE id = 1")
    conn.commit()
    conn.close()

    conversation = db.load_or_create_default_conversation()
    assert conversation.id == 1
    assert conversation.messages == []
    assert _count_rows(db_path, "conversation") == 1


def test_malformed_message_objects_load_as_empty(tmp_path):
    db_path = tmp_path / "indexedRAG.db"
    db = Database(db_path)
    db.load_or_create_default_conversation()

    conn = sqlite3.connect(db_path)
    conn.execute("""UPDATE conversation SET messages = '[{"role": "user"}]' WHERE id = 1""")
    conn.commit()
    conn.close()

    assert db.load_or_create_default_conversation().messages == []


@pytest.mark.parametrize("stored", [
    '[{"role": 5, "content": null}]',
    '[{"role": "user", "content": ["a", "b"]}]',
    '[{"role": "user", "content": "ok"}, {"role": null, "content": "x"}]',
])
def test_non_string_message_fields_load_as_empty(tmp_path, stored):
    db_path = tmp_path / "indexedRAG.db"
    db = Database(db_path)
    db.load_or_create_default_conversation()

    conn = sqlite3.connect(db_path)
    conn.execute("UPDATE conversation SET messages = ? WHERE id = 1", (stored,))
    conn.commit()
    conn.close()

    assert db.load_or_create_default_conversation().messages == []


def test_unreadable_root_paths_load_as_empty(tmp_path):
    db_path = tmp_path / "indexedRAG.db"
    db = Database(db_path)
    db.load_or_create_default_settings()

    conn = sqlite3.connect(db_path)
    conn.execute("""UPDATE settings SET root_paths = '{"a": 1}', index_interval_minutes = 7 WHERE id = 1""")
    conn.commit()
    conn.close()

    settings = db.load_or_create_default_settings()
    assert settings.root_paths == []
    assert settings.index_interval_minutes == 7
