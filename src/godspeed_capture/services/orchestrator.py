"""Parse, resolve and submit tasks, queueing the ones that fail."""

import logging
from enum import Enum
from typing import Protocol

from pydantic import BaseModel, Field

from ..config import Settings
from ..exceptions import GodspeedError, RemoteError, TaskValidationError
from ..models.reference import ReferenceKind
from ..models.task import TaskRequest
from .notifier import Notifier
from .parser import count_list_markers, parse_task
from .reference_cache import ReferenceCache
from .retry_queue import FileRetryQueue, RetryQueue

logger = logging.getLogger(__name__)


class RemoteClient(Protocol):
    """The API calls the submitter depends on."""

    def fetch_lists(self) -> dict[str, str]: ...

    def fetch_labels(self) -> dict[str, str]: ...

    def submit_task(self, task: TaskRequest) -> None: ...


class CaptureOutcome(str, Enum):
    """What happened to the live input of an invocation."""

    SUBMITTED = "submitted"
    QUEUED = "queued"  # Submission failed, saved for retry
    REJECTED = "rejected"  # Invalid input, not queued
    NOTHING_TO_DO = "nothing-to-do"


class ReplayResult(BaseModel):
    """Summary of one pass over the retry queue."""

    submitted: list[str] = Field(default_factory=list)
    remaining: list[str] = Field(default_factory=list)


class TaskSubmitter:
    """Runs the parse -> resolve -> submit pipeline."""

    def __init__(
        self,
        client: RemoteClient,
        lists: ReferenceCache,
        labels: ReferenceCache,
        queue: RetryQueue,
        notifier: Notifier,
        resolve_labels: bool = True,
        titlecase_labels: bool = False,
    ):
        self.client = client
        self.lists = lists
        self.labels = labels
        self.queue = queue
        self.notifier = notifier
        self.resolve_labels = resolve_labels
        self.titlecase_labels = titlecase_labels

    @classmethod
    def from_settings(
        cls, settings: Settings, client: RemoteClient, notifier: Notifier
    ) -> "TaskSubmitter":
        """Wire file-backed caches and queue from settings."""
        return cls(
            client=client,
            lists=ReferenceCache(ReferenceKind.LIST, settings.lists_path, client.fetch_lists),
            labels=ReferenceCache(ReferenceKind.LABEL, settings.labels_path, client.fetch_labels),
            queue=FileRetryQueue(settings.queue_path),
            notifier=notifier,
            resolve_labels=settings.resolve_labels,
            titlecase_labels=settings.titlecase_labels,
        )

    def build_request(self, task_text: str) -> TaskRequest:
        """Parse input and resolve its list and labels.

        Unresolvable names are dropped from the request.

        Raises:
            RemoteError: If a cache refresh fails
        """
        draft = parse_task(task_text, titlecase_labels=self.titlecase_labels)
        request = TaskRequest(
            title=draft.title,
            duration_minutes=draft.duration_minutes,
            notes=draft.notes,
        )

        if draft.list_reference:
            request.list_id = self.lists.resolve(draft.list_reference)

        if draft.label_references:
            if self.resolve_labels:
                request.label_ids = self.labels.resolve_all(draft.label_references)
            else:
                request.label_names = list(draft.label_references)

        return request

    def process(self, task_text: str) -> TaskRequest:
        """
        Submit one task string.

        Args:
            task_text: Raw shorthand input

        Returns:
            The request that was sent

        Raises:
            TaskValidationError: If the input names more than one list
            RemoteError: If resolution or submission fails
        """
        request = self.build_request(task_text)

        if count_list_markers(task_text) > 1:
            self.notifier.notify("Error: Multiple lists specified")
            raise TaskValidationError("Multiple lists specified")

        self.client.submit_task(request)
        return request

    def replay_queue(self) -> ReplayResult:
        """Retry every queued task once, removing the ones that succeed.

        Failures are logged quietly and the entry stays queued.
        """
        result = ReplayResult()

        for task_text in self.queue.drain():
            try:
                self.process(task_text)
            except GodspeedError as e:
                logger.debug(f"Queued task still failing ({e}): {task_text}")
                result.remaining.append(task_text)
                continue

            result.submitted.append(task_text)
            try:
                self.queue.remove(task_text)
            except OSError as e:
                logger.warning(f"Failed to remove task from retry queue: {e}")

        if result.submitted:
            logger.info(f"Resubmitted {len(result.submitted)} queued task(s)")
        return result

    def capture(self, task_text: str) -> CaptureOutcome:
        """Replay the retry queue, then submit the new input."""
        self.replay_queue()

        if not task_text:
            return CaptureOutcome.NOTHING_TO_DO

        try:
            self.process(task_text)
        except TaskValidationError as e:
            logger.error(f"Task rejected: {e}")
            return CaptureOutcome.REJECTED
        except RemoteError as e:
            logger.error(f"Failed to send task: {e}")
            try:
                self.queue.enqueue(task_text)
            except OSError as queue_error:
                logger.error(f"Failed to queue task for retry: {queue_error}")
            self.notifier.notify("Failed to send task")
            return CaptureOutcome.QUEUED

        return CaptureOutcome.SUBMITTED
