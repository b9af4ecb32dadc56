"""Status markers of task bullets such as ``- [x]``."""

from __future__ import annotations

from enum import Enum


class TaskStatus(Enum):
    """The character written between the brackets of a task bullet."""

    OPEN = " "
    CLOSED = "x"
    MIGRATED = ">"
    SCHEDULED = "<"
    IN_PROGRESS = "/"
    CANCELED = "-"

    def __str__(self) -> str:
        return self.value