"""
Session State

UI-independent state behind the main window: the live conversation with its
input buffer, and the working copy of the settings being edited.
"""

import re
from typing import Iterable, Optional
from loguru import logger

from .models import Message, Conversation, AppSettings, INT32_MIN, INT32_MAX
from .storage import Database
from .assistant import StubAssistant


class ChatSession:
    """Conversation state and the send action"""

    def __init__(self, database: Database, assistant: Optional[StubAssistant] = None):
        self.database = database
        self.assistant = assistant or StubAssistant()
        self.conversation: Conversation = database.load_or_create_default_conversation()
        self.current_input = ""

        logger.info(f"💬 Loaded conversation {self.conversation.id} "
                    f"({len(self.conversation.messages)} messages)")

    @property
    def messages(self):
        return self.conversation.messages

    def send(self, text: Optional[str] = None) -> Message:
        """
        Send a user message and record the stub reply

        Args:
            text: Message text (defaults to the current input buffer)

        Returns:
            The assistant message that was appended
        """
        if text is None:
            text = self.current_input

        self.conversation.messages.append(Message(role="user", content=text))
        reply = self.assistant.respond(self.conversation, text)
        self.current_input = ""
        self.database.save_conversation(self.conversation)
        return reply

    def reset(self):
        """Replace all messages with the welcome message and persist"""
        self.conversation.messages = Conversation.default().messages
        self.current_input = ""
        self.database.save_conversation(self.conversation)
        logger.info("🗑️ Conversation reset")


class SettingsEditor:
    """
    Working copy of AppSettings edited by the settings window

    Edits stay in memory until save(); cancel() reloads the stored record.
    """

    def __init__(self, database: Database):
        self.database = database
        self.settings: AppSettings = database.load_or_create_default_settings()
        self.is_open = False

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def add_path(self):
        self.settings.root_paths.append("")

    def update_path(self, index: int, value: str):
        self.settings.root_paths[index] = value

    def remove_paths(self, indices: Iterable[int]):
        """Remove paths by their pre-removal indices"""
        for index in sorted(set(indices), reverse=True):
            del self.settings.root_paths[index]

    def commit_interval(self, text: str) -> bool:
        """
        Apply the interval field text if it parses as an integer

        Returns:
            True if the interval was updated
        """
        stripped = text.strip() if isinstance(text, str) else ""
        if not re.fullmatch(r"[+-]?[0-9]+", stripped):
            logger.debug(f"Ignoring invalid interval input: {text!r}")
            return False

        value = int(stripped)

        if not INT32_MIN <= value <= INT32_MAX:
            logger.debug(f"Ignoring out-of-range interval input: {text!r}")
            return False

        self.settings.index_interval_minutes = value
        return True

    def save(self):
        self.database.save_settings(self.settings)
        self.is_open = False

    def cancel(self):
        self.settings = self.database.load_or_create_default_settings()
        self.is_open = False
        logger.info("↩️ Settings edits discarded")
