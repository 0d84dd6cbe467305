"""Task capture services."""

from .godspeed_client import GodspeedClient
from .notifier import Notifier, build_notifier
from .orchestrator import CaptureOutcome, ReplayResult, TaskSubmitter
from .parser import count_list_markers, parse_task
from .reference_cache import ReferenceCache, find_matching_id
from .retry_queue import FileRetryQueue, RetryQueue

__all__ = [
    "parse_task",
    "count_list_markers",
    "ReferenceCache",
    "find_matching_id",
    "RetryQueue",
    "FileRetryQueue",
    "GodspeedClient",
    "Notifier",
    "build_notifier",
    "TaskSubmitter",
    "CaptureOutcome",
    "ReplayResult",
]
