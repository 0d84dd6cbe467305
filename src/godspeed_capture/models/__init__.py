"""Pydantic models for tasks and remote references."""

from .reference import LabelsResponse, ListsResponse, ReferenceKind, RemoteReference
from .task import TaskDraft, TaskRequest

__all__ = [
    "TaskDraft",
    "TaskRequest",
    "ReferenceKind",
    "RemoteReference",
    "ListsResponse",
    "LabelsResponse",
]
