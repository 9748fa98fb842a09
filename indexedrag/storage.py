"""
Local Storage

SQLite persistence for the singleton conversation and settings rows.
List-valued fields are stored as JSON text columns.
"""

import sqlite3
import json
from contextlib import contextmanager
from pathlib import Path
from typing import List, Union
from loguru import logger

from .models import Message, Conversation, AppSettings, INT32_MIN, INT32_MAX
from .error_handler import (
    StorageError, SerializationError, ErrorCategory, get_failure_log
)


class Database:
    """
    Conversation and settings store with SQLite backend

    Features:
    - Create-tables-if-absent bootstrap
    - Insert-default-row-if-empty loading
    - Update-in-place saving (rows are never re-inserted)
    """

    def __init__(self, db_path: Union[str, Path]):
        """Open (and bootstrap) the database at db_path"""
        self.db_path = Path(db_path)
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self._fail(e, "create config directory")

        self.initialize()
        logger.info(f"✅ Database ready at {self.db_path}")

    @contextmanager
    def _connect(self, operation: str):
        """Yield a connection; commit on success, wrap sqlite errors"""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path)
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            self._fail(e, operation)
        finally:
            if conn is not None:
                conn.close()

    def _fail(self, error: Exception, operation: str):
        get_failure_log().record(error, ErrorCategory.DATABASE, f"{operation} ({self.db_path})")
        raise StorageError(f"Failed to {operation}: {error}") from error

    def initialize(self):
        """Create database schema"""
        with self._connect("create tables") as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS settings (
                    id INTEGER PRIMARY KEY,
                    root_paths TEXT NOT NULL,
                    index_interval_minutes INTEGER NOT NULL
                )
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS conversation (
                    id INTEGER PRIMARY KEY,
                    messages TEXT NOT NULL
                )
            """)

    def load_or_create_default_conversation(self) -> Conversation:
        """
        Load the stored conversation, inserting the welcome conversation if none exists

        Returns:
            Conversation record
        """
        with self._connect("load conversation") as conn:
            row = conn.execute(
                "SELECT id, messages FROM conversation LIMIT 1"
            ).fetchone()

            if row:
                conversation_id, messages_json = row
                return Conversation(
                    id=conversation_id,
                    messages=_decode_messages(messages_json)
                )

            default = Conversation.default()
            conn.execute(
                "INSERT INTO conversation (id, messages) VALUES (?, ?)",
                (default.id, encode_messages(default.messages))
            )
            logger.info("📝 Created default conversation")
            return default

    def load_or_create_default_settings(self) -> AppSettings:
        """
        Load the stored settings, inserting defaults if none exist

        Returns:
            AppSettings record
        """
        with self._connect("load settings") as conn:
            row = conn.execute(
                "SELECT id, root_paths, index_interval_minutes FROM settings LIMIT 1"
            ).fetchone()

            if row:
                settings_id, root_paths_json, interval = row
                if not isinstance(interval, int) or not INT32_MIN <= interval <= INT32_MAX:
                    self._fail(ValueError(f"index_interval_minutes is not a 32-bit integer: {interval!r}"), "load settings")
                return AppSettings(
                    id=settings_id,
                    root_paths=_decode_root_paths(root_paths_json),
                    index_interval_minutes=interval
                )

            default = AppSettings.default()
            conn.execute("""
                INSERT INTO settings (id, root_paths, index_interval_minutes)
                VALUES (?, ?, ?)
            """, (default.id, encode_root_paths(default.root_paths), default.index_interval_minutes))
            logger.info("📝 Created default settings")
            return default

    def save_conversation(self, conversation: Conversation):
        """Persist conversation messages"""
        messages_json = encode_messages(conversation.messages)
        with self._connect("update conversation") as conn:
            conn.execute(
                "UPDATE conversation SET messages = ? WHERE id = ?",
                (messages_json, conversation.id)
            )

        logger.debug(f"💾 Saved conversation ({len(conversation.messages)} messages)")

    def save_settings(self, settings: AppSettings):
        """Persist root paths and index interval"""
        root_paths_json = encode_root_paths(settings.root_paths)
        with self._connect("update settings") as conn:
            conn.execute("""
                UPDATE settings
                SET root_paths = ?,
                    index_interval_minutes = ?
                WHERE id = ?
            """, (root_paths_json, settings.index_interval_minutes, settings.id))

        logger.info(f"💾 Saved settings ({len(settings.root_paths)} root paths, "
                    f"every {settings.index_interval_minutes} min)")


def encode_messages(messages: List[Message]) -> str:
    try:
        return json.dumps([m.to_dict() for m in messages], ensure_ascii=False)
    except (TypeError, ValueError) as e:
        get_failure_log().record(e, ErrorCategory.SERIALIZATION, "encode messages")
        raise SerializationError(f"Failed to serialize messages: {e}") from e


def encode_root_paths(root_paths: List[str]) -> str:
    try:
        return json.dumps(list(root_paths), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        get_failure_log().record(e, ErrorCategory.SERIALIZATION, "encode root paths")
        raise SerializationError(f"Failed to serialize root paths: {e}") from e


def _decode_messages(raw: str) -> List[Message]:
    """Decode stored messages; unreadable content yields an empty list"""
    try:
        return [Message.from_dict(item) for item in json.loads(raw)]
    except (TypeError, ValueError, KeyError) as e:
        logger.warning(f"⚠️ Stored messages are unreadable, starting empty: {e}")
        return []


def _decode_root_paths(raw: str) -> List[str]:
    """Decode stored root paths; unreadable content yields an empty list"""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning(f"⚠️ Stored root paths are unreadable, starting empty: {e}")
        return []

    if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
        logger.warning("⚠️ Stored root paths are not a list of strings, starting empty")
        return []
    return data
