"""Data models for the terminal task tracker.

Currently only exposes the Task dataclass. Records are frozen: the store
swaps in a toggled copy (same id) instead of mutating a task the views may
still be holding.
"""
from __future__ import annotations
import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Task:
    """A single to-do item.

    Fields:
        title: Display title. Any string is accepted here; the add form is
            what refuses an empty one.
        description: Free text, may be empty.
        is_completed: Completion flag, False for a new task.
        id: Opaque unique id assigned at construction, never reassigned.
    """
    title: str
    description: str = ""
    is_completed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(id={self.id}, title={self.title!r}, is_completed={self.is_completed})"
