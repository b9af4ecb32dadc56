"""The markdown body of a page."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .state import get_global
from .task_status import TaskStatus


@dataclass
class PageContent:
    """Raw markdown text of a page body."""

    raw: str = ""

    def __str__(self) -> str:
        return self.raw

    def replace_task_status(self, before: TaskStatus, after: TaskStatus) -> None:
        """Change the marker of every task bullet with status ``before`` to ``after``."""
        pattern = re.compile(
            r"^(\s*- \[)" + re.escape(str(before)) + r"(\] .*)$", re.MULTILINE
        )
        marker = str(after)
        self.raw = pattern.sub(lambda m: m[1] + marker + m[2], self.raw)

    def filter_open_tasks(self) -> None:
        """Keep only open tasks, repeating closed tasks, headings and blank lines."""
        patterns = [
            r"(?:^[ \t]*?- \[[ /]\] .*?$)",
            r"(?:^[ ]*$)",
            r"(?:^#+ .*$)",
        ]
        for tag, config in get_global().tags.items():
            if config.repeat:
                patterns.append(r"(?:^[ \t]*?- \[x\] .*#" + re.escape(tag) + r".*$)")
        regex = re.compile("|".join(patterns), re.MULTILINE)
        self.raw = "\n".join(m[0] for m in regex.finditer(self.raw))