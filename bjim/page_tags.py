"""Hash tags such as ``#tag`` or ``#tag:value`` inside page text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .state import get_global
from .tag_config import TagConfig

_TAG_REGEX = re.compile(r"[^#]#(?P<tag>[^:\s]*)(?::(?P<value>\S*))?")


@dataclass
class TagValue:
    """One tag with its optional value."""

    name: str
    value: str | None = None

    def config(self) -> TagConfig:
        """Return the configured settings for this tag, or the defaults."""
        return get_global().tags.get(self.name) or TagConfig()


@dataclass
class TagValues:
    """Tags found in a piece of text, mapped to their values."""

    map: dict[str, str | None] = field(default_factory=dict)

    @classmethod
    def parse(cls, s: str) -> TagValues:
        """Collect every tag in ``s``; later occurrences override earlier ones."""
        return cls({m["tag"]: m["value"] for m in _TAG_REGEX.finditer(s)})