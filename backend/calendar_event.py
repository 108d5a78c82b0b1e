"""
A single free-text event attached to a date.

Events carry an opaque id assigned at creation, so two events with the
same text on the same date can still be told apart by the GUI.
"""

import uuid
from dataclasses import dataclass, field


def _new_event_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class CalendarEvent:
    """Free-text event. Identity is the id, not the text."""
    text: str
    id: str = field(default_factory=_new_event_id)

    def __str__(self) -> str:
        return self.text
