"""Task-related Pydantic models."""

from typing import Any

from pydantic import BaseModel, Field


class TaskDraft(BaseModel):
    """Parsed shorthand input with references still unresolved."""

    title: str = Field("", description="Words that are not marker tokens")
    list_reference: str | None = Field(None, description="List name from the last @ marker")
    label_references: list[str] = Field(default_factory=list, description="Label names from . markers")
    duration_minutes: int | None = Field(None, description="Duration from a valid : marker")
    notes: str = Field("", description="Text after the notes separator")


class TaskRequest(BaseModel):
    """Fully resolved task sent to the Godspeed API."""

    title: str
    list_id: str | None = None
    duration_minutes: int | None = None
    label_ids: list[str] = Field(default_factory=list)
    label_names: list[str] = Field(default_factory=list)  # When label ids aren't resolved
    notes: str = ""

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body, leaving out empty optional fields."""
        payload = self.model_dump(exclude_none=True)
        for key in ("label_ids", "label_names", "notes"):
            if not payload.get(key):
                payload.pop(key, None)
        return payload
