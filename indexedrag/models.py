"""
Persisted Records

Conversation and settings records stored in the local database.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Dict


DEFAULT_RECORD_ID = 1
WELCOME_MESSAGE = "Welcome to Indexedrag!"
DEFAULT_ROOT_PATH = "/path/to/somewhere"
DEFAULT_INDEX_INTERVAL_MINUTES = 60

# index_interval_minutes is a 32-bit signed integer
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


@dataclass
class Message:
    """Single chat message"""
    role: str  # "user", "assistant" or "system"
    content: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "Message":
        role, content = data["role"], data["content"]
        if not isinstance(role, str) or not isinstance(content, str):
            raise TypeError(f"message role and content must be strings, got {data!r}")
        return cls(role=role, content=content)


@dataclass
class Conversation:
    """The single stored conversation"""
    id: int
    messages: List[Message] = field(default_factory=list)

    @classmethod
    def default(cls) -> "Conversation":
        return cls(
            id=DEFAULT_RECORD_ID,
            messages=[Message(role="system", content=WELCOME_MESSAGE)]
        )


@dataclass
class AppSettings:
    """Root paths to index and the indexing interval"""
    id: int
    root_paths: List[str] = field(default_factory=list)
    index_interval_minutes: int = DEFAULT_INDEX_INTERVAL_MINUTES

    @classmethod
    def default(cls) -> "AppSettings":
        return cls(
            id=DEFAULT_RECORD_ID,
            root_paths=[DEFAULT_ROOT_PATH],
            index_interval_minutes=DEFAULT_INDEX_INTERVAL_MINUTES
        )

    def copy(self) -> "AppSettings":
        return AppSettings(
            id=self.id,
            root_paths=list(self.root_paths),
            index_interval_minutes=self.index_interval_minutes
        )
