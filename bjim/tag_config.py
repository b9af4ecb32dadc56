"""Per-tag settings used by migration and filtering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class AssignedTag(Enum):
    """Role a tag plays in migration, filtering and the like."""

    START_DATE = "StartDate"
    CLOSE_DATE = "CloseDate"
    DUE_DATE = "DueDate"
    DATE = "Date"


class TagValueType(Enum):
    """Type of the value trailing a tag."""

    NONE = "None"
    DATE = "Date"
    TIME = "Time"
    DATE_TIME = "DateTime"
    NUMBER = "Number"


_BOOL_FIELDS = ("repeat", "inherit", "migrate")


@dataclass
class TagConfig:
    """Settings for one tag.

    ``repeat``: entries carrying the tag are reopened instead of dropped on migration.
    ``inherit``: the tag is inherited by child entries.
    ``migrate``: the tag is copied on migration.
    """

    repeat: bool = False
    inherit: bool = True
    migrate: bool = True
    value_type: TagValueType | None = None
    assigned: AssignedTag | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TagConfig:
        """Build a config from a mapping; missing keys take their defaults."""
        fields: dict[str, Any] = {}
        for name in _BOOL_FIELDS:
            if name in data:
                value = data[name]
                if not isinstance(value, bool):
                    raise ValueError(f"tag option {name!r} must be a boolean, got {value!r}")
                fields[name] = value
        if data.get("value_type") is not None:
            fields["value_type"] = TagValueType(data["value_type"])
        if data.get("assigned") is not None:
            fields["assigned"] = AssignedTag(data["assigned"])
        return cls(**fields)

    def to_dict(self) -> dict[str, Any]:
        """Return a mapping suitable for serialisation; unset options are omitted."""
        result: dict[str, Any] = {
            "repeat": self.repeat,
            "inherit": self.inherit,
            "migrate": self.migrate,
        }
        if self.value_type is not None:
            result["value_type"] = self.value_type.value
        if self.assigned is not None:
            result["assigned"] = self.assigned.value
        return result