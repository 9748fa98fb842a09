"""
Error Handler

Exception types for indexedRAG and the failure log consulted when the
application stops.

Storage and serialization failures are fatal: the layer that hits one records
it here and raises; the entry point then calls report_fatal() and exits.
"""

from collections import Counter, deque
from enum import Enum
from typing import Dict, Optional
from loguru import logger


class IndexedragError(Exception):
    """Base class for application errors"""


class StorageError(IndexedragError):
    """Database could not be opened, read or written"""


class SerializationError(IndexedragError):
    """A record could not be encoded for storage"""


class ErrorCategory(Enum):
    DATABASE = "database"
    SERIALIZATION = "serialization"
    UI = "ui"
    UNKNOWN = "unknown"


def categorize(error: Exception) -> ErrorCategory:
    """Map an exception to its error category"""
    if isinstance(error, SerializationError):
        return ErrorCategory.SERIALIZATION
    if isinstance(error, StorageError):
        return ErrorCategory.DATABASE
    return ErrorCategory.UNKNOWN


class FailureLog:
    """
    Failures seen during this run

    Keeps a count per category and the last few failures so the shutdown
    report can say what went wrong before the fatal one.
    """

    def __init__(self, max_recent: int = 20):
        self.counts = Counter()
        self.recent = deque(maxlen=max_recent)

    def record(self, error: Exception, category: ErrorCategory, operation: Optional[str] = None):
        """Log a failure and remember it for the shutdown report"""
        self.counts[category.value] += 1
        self.recent.append({
            'category': category.value,
            'operation': operation,
            'error': f"{type(error).__name__}: {error}",
        })

        where = f" during '{operation}'" if operation else ""
        logger.error(f"❌ {category.value} failure{where}: {error}")

    def summary(self) -> Dict:
        return {
            'by_category': dict(self.counts),
            'recent': list(self.recent),
        }

    def report_fatal(self, error: Exception) -> str:
        """
        Log the shutdown report for a fatal error already recorded

        Returns:
            Text for the user-facing error dialog
        """
        category = categorize(error)
        report = self.summary()
        counts = ", ".join(f"{name}={n}" for name, n in sorted(report["by_category"].items())) or "none"
        logger.critical(f"💥 indexedRAG has to stop [{category.value}]: {error}")
        logger.critical(f"Failures this run: {counts}")
        for entry in report["recent"]:
            logger.debug(f"  {entry['category']} / {entry['operation']}: {entry['error']}")

        return f"indexedRAG has to stop:\n{error}\n\nFailures this run: {counts}"


_failure_log = None

def get_failure_log() -> FailureLog:
    """Get or create the process-wide failure log"""
    global _failure_log

    if _failure_log is None:
        _failure_log = FailureLog()

    return _failure_log
