"""Shorthand parser turning a single line into a task draft.

Syntax::

    Buy milk @errands :15 .shopping n: get 2%

- ``@name``  list the task goes into
- ``.name``  label (repeatable)
- ``:N``     duration in minutes
- `` n:``    everything after it becomes the task notes
"""

import re

from ..models.task import TaskDraft

LABEL_MARKER = "."
LIST_MARKER = "@"
DURATION_MARKER = ":"
NOTES_SEPARATOR = " n:"

# Signed 32-bit integer, ASCII digits only
_DURATION_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _parse_duration(value: str) -> int | None:
    if not _DURATION_RE.fullmatch(value):
        return None
    minutes = int(value)
    if not _INT32_MIN <= minutes <= _INT32_MAX:
        return None
    return minutes


def _split_notes(text: str) -> tuple[str, str]:
    """Split input into the main part and the notes."""
    pos = text.find(NOTES_SEPARATOR)
    if pos == -1:
        return text, ""

    notes = text[pos:]
    while notes.startswith(NOTES_SEPARATOR):
        notes = notes[len(NOTES_SEPARATOR):]
    return text[:pos], notes.strip()


def _titlecase(name: str) -> str:
    return name[:1].upper() + name[1:].lower()


def parse_task(text: str, titlecase_labels: bool = False) -> TaskDraft:
    """
    Parse task shorthand into a draft.

    Args:
        text: Raw input like "Buy milk @errands :15 .shopping n: get 2%"
        titlecase_labels: Normalize label names to "Shopping" style

    Returns:
        TaskDraft with title, list/label names, duration and notes
    """
    main_part, notes = _split_notes(text)

    words: list[str] = []
    list_reference: str | None = None
    label_references: list[str] = []
    duration_minutes: int | None = None

    for word in main_part.split():
        if word.startswith(LABEL_MARKER):
            label = word.lstrip(LABEL_MARKER)
            if label:
                label_references.append(_titlecase(label) if titlecase_labels else label)
        elif word.startswith(LIST_MARKER):
            name = word.lstrip(LIST_MARKER)
            if name:
                list_reference = name
        elif word.startswith(DURATION_MARKER):
            minutes = _parse_duration(word.lstrip(DURATION_MARKER))
            if minutes is None:
                # Not a number, keep the token as title text
                words.append(word)
            else:
                duration_minutes = minutes
        else:
            words.append(word)

    return TaskDraft(
        title=" ".join(words).rstrip(),
        list_reference=list_reference,
        label_references=label_references,
        duration_minutes=duration_minutes,
        notes=notes,
    )


def count_list_markers(text: str) -> int:
    """Count raw ``@`` tokens anywhere in the input, notes included."""
    return sum(1 for word in text.split() if word.startswith(LIST_MARKER))
