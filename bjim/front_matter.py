"""YAML front matter at the top of a journal page."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

import yaml

DATE_FORMAT = "%Y-%m-%dT%H:%M"
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_KNOWN_KEYS = frozenset({"title", "date", "categories", "tags"})


class _Loader(yaml.SafeLoader):
    """Safe loader that keeps timestamps as plain strings."""


_Loader.yaml_implicit_resolvers = {
    key: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for key, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _string_list(name: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{name!r} must be a list of strings")
    return list(value)


def _fields_from_yaml(raw: str) -> dict[str, Any]:
    data = yaml.load(raw, Loader=_Loader)
    if not isinstance(data, dict):
        raise ValueError("front matter is not a mapping")
    if "date" not in data:
        raise ValueError("missing field 'date'")

    title = data.get("title")
    if title is not None and not isinstance(title, str):
        raise ValueError("'title' must be a string")

    raw_date = data["date"]
    if raw_date is None:
        parsed_date = None
    elif isinstance(raw_date, str):
        parsed_date = datetime.strptime(raw_date, DATE_FORMAT)
    else:
        raise ValueError("'date' must be a string")

    fields: dict[str, Any] = {"title": title, "date": parsed_date}
    if "categories" in data:
        fields["categories"] = _string_list("categories", data["categories"])
    if "tags" in data:
        fields["tags"] = _string_list("tags", data["tags"])

    extra: dict[str, str] = {}
    for key, value in data.items():
        if key in _KNOWN_KEYS:
            continue
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError(f"unsupported front matter entry {key!r}")
        extra[key] = value
    fields["extra"] = extra
    return fields


@dataclass
class FrontMatter:
    """Parsed front matter together with the raw text it came from."""

    title: str | None = None
    date: datetime | None = None
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    extra: dict[str, str] = field(default_factory=dict)
    raw: str = ""

    @classmethod
    def parse(cls, raw: str) -> FrontMatter:
        """Parse ``raw``; text that does not parse gives empty fields but keeps ``raw``."""
        try:
            fields = _fields_from_yaml(raw)
        except (yaml.YAMLError, ValueError, TypeError):
            fields = {}
        return cls(raw=raw, **fields)

    def update_date(self, date: date) -> None:
        """Replace every ``YYYY-MM-DD`` in the raw text with ``date``."""
        replacement = date.strftime("%Y-%m-%d")
        self.raw = _DATE_PATTERN.sub(lambda _m: replacement, self.raw)