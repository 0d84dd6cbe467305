"""Models for lists and labels returned by the Godspeed API."""

from enum import Enum

from pydantic import BaseModel, Field


class ReferenceKind(str, Enum):
    """Kinds of named references a task can carry."""

    LIST = "lists"
    LABEL = "labels"


class RemoteReference(BaseModel):
    """A list or label as returned by the API."""

    id: str
    name: str


class ListsResponse(BaseModel):
    """Response body of ``GET /lists``."""

    lists: list[RemoteReference] = Field(default_factory=list)

    def to_mapping(self) -> dict[str, str]:
        return {item.name.lower(): item.id for item in self.lists}


class LabelsResponse(BaseModel):
    """Response body of ``GET /labels``."""

    labels: list[RemoteReference] = Field(default_factory=list)

    def to_mapping(self) -> dict[str, str]:
        return {item.name.lower(): item.id for item in self.labels}
