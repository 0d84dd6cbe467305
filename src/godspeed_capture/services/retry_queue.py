"""Durable queue of task inputs that failed to submit."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from .storage import atomic_write_text, read_text_or_empty

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = "---\n"


class RetryQueue(ABC):
    """Queue of raw task strings waiting to be resubmitted."""

    @abstractmethod
    def enqueue(self, task_text: str) -> None:
        """Append an entry. Duplicates are kept."""

    @abstractmethod
    def drain(self) -> list[str]:
        """Return all entries in queue order without removing them."""

    @abstractmethod
    def remove(self, task_text: str) -> None:
        """Remove every entry equal to ``task_text``."""

    def __len__(self) -> int:
        return len(self.drain())


class FileRetryQueue(RetryQueue):
    """Retry queue stored as a text file of ``---`` separated entries.

    Each entry is written as the raw input followed by a newline and a
    ``---`` line. The file is rewritten wholesale on every change and is not
    locked, so two concurrent invocations can drop each other's updates.
    """

    def __init__(self, path: Path):
        self.path = path

    def _read_entries(self) -> list[str]:
        content = read_text_or_empty(self.path)
        return [entry.strip() for entry in content.split(ENTRY_SEPARATOR) if entry.strip()]

    def enqueue(self, task_text: str) -> None:
        content = read_text_or_empty(self.path)
        atomic_write_text(self.path, f"{content}{task_text}\n{ENTRY_SEPARATOR}")
        logger.info(f"Queued task for retry: {task_text}")

    def drain(self) -> list[str]:
        return self._read_entries()

    def remove(self, task_text: str) -> None:
        remaining = [entry for entry in self._read_entries() if entry != task_text]
        atomic_write_text(self.path, "".join(f"{entry}\n{ENTRY_SEPARATOR}" for entry in remaining))
