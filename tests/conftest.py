"""Test fixtures for godspeed-capture."""

from pathlib import Path

import pytest

from godspeed_capture.config import Settings
from godspeed_capture.exceptions import RemoteError
from godspeed_capture.models.reference import ReferenceKind
from godspeed_capture.models.task import TaskRequest
from godspeed_capture.services.orchestrator import TaskSubmitter
from godspeed_capture.services.reference_cache import ReferenceCache
from godspeed_capture.services.retry_queue import RetryQueue


class FakeClient:
    """In-memory stand-in for the Godspeed API."""

    def __init__(self) -> None:
        self.lists: dict[str, str] = {}
        self.labels: dict[str, str] = {}
        self.submitted: list[TaskRequest] = []
        self.fail_submit = False
        self.fail_fetch = False
        self.list_fetches = 0
        self.label_fetches = 0

    def fetch_lists(self) -> dict[str, str]:
        self.list_fetches += 1
        if self.fail_fetch:
            raise RemoteError("network unreachable")
        return dict(self.lists)

    def fetch_labels(self) -> dict[str, str]:
        self.label_fetches += 1
        if self.fail_fetch:
            raise RemoteError("network unreachable")
        return dict(self.labels)

    def submit_task(self, task: TaskRequest) -> None:
        if self.fail_submit:
            raise RemoteError("API error: 500 Internal Server Error", status_code=500)
        self.submitted.append(task)


class RecordingNotifier:
    """Notifier that remembers messages."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class MemoryRetryQueue(RetryQueue):
    """Retry queue kept in a list."""

    def __init__(self, entries: list[str] | None = None) -> None:
        self.entries = list(entries or [])

    def enqueue(self, task_text: str) -> None:
        self.entries.append(task_text)

    def drain(self) -> list[str]:
        return list(self.entries)

    def remove(self, task_text: str) -> None:
        self.entries = [entry for entry in self.entries if entry != task_text]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a temporary data directory."""
    return Settings(
        api_key="test-token",
        data_dir=tmp_path / "godspeed-cli",
        notifications=False,
    )


@pytest.fixture
def fake_client() -> FakeClient:
    client = FakeClient()
    client.lists = {"errands": "list-errands", "work": "list-work"}
    client.labels = {"shopping": "label-shopping", "urgent": "label-urgent"}
    return client


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def memory_queue() -> MemoryRetryQueue:
    return MemoryRetryQueue()


@pytest.fixture
def submitter(
    tmp_path: Path,
    fake_client: FakeClient,
    notifier: RecordingNotifier,
    memory_queue: MemoryRetryQueue,
) -> TaskSubmitter:
    """Submitter with file-backed caches and an in-memory queue."""
    return TaskSubmitter(
        client=fake_client,
        lists=ReferenceCache(ReferenceKind.LIST, tmp_path / "lists.toml", fake_client.fetch_lists),
        labels=ReferenceCache(ReferenceKind.LABEL, tmp_path / "labels.toml", fake_client.fetch_labels),
        queue=memory_queue,
        notifier=notifier,
    )
