"""A markdown page in the journal."""

from __future__ import annotations

import copy
import re
from datetime import date
from os import PathLike
from pathlib import Path

from .content import PageContent
from .front_matter import FrontMatter
from .task_status import TaskStatus

_SPLIT_REGEX = re.compile(
    r"(?:---\r?\n(?P<f>.*?)---\r?\n)?(?P<c>.*)", re.DOTALL
)


class Page:
    """A page file with its front matter and content."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = Path(path)
        self.raw_content = ""
        self.has_open_task = False
        self.front_matter: FrontMatter | None = None
        self.content: PageContent | None = None

    def __repr__(self) -> str:
        return f"Page({str(self.path)!r})"

    def read(self) -> None:
        """Load the file and split it into front matter and content."""
        with self.path.open(encoding="utf-8", newline="") as f:
            self.raw_content = f.read()
        self.split_content()
        self.has_open_task = "- [ ] " in self.raw_content

    def write(self) -> None:
        """Join front matter and content and write them to the file.

        Missing parent directories are created. Raises IsADirectoryError if
        the path exists and is not a file.
        """
        if self.path.exists() and not self.path.is_file():
            raise IsADirectoryError(f"{self.path} exists and is not a file")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.join_content()
        with self.path.open("w", encoding="utf-8", newline="") as f:
            f.write(self.raw_content)

    def migrate_to(self, page: Page) -> None:
        """Carry open tasks over to ``page`` and mark them migrated here."""
        print(f"Migrating {str(self.path)!r} to {str(page.path)!r}")
        if self.content is None:
            raise RuntimeError(f"page {self.path} has not been read")
        if self.front_matter is not None and page.front_matter is None:
            page.front_matter = copy.deepcopy(self.front_matter)
            page.front_matter.update_date(date.today())
        dst_content = PageContent(self.content.raw)
        self.content.replace_task_status(TaskStatus.OPEN, TaskStatus.MIGRATED)
        dst_content.replace_task_status(TaskStatus.MIGRATED, TaskStatus.OPEN)
        dst_content.filter_open_tasks()
        dst_content.replace_task_status(TaskStatus.CLOSED, TaskStatus.OPEN)
        page.content = dst_content

    def split_content(self) -> None:
        """Split ``raw_content`` into front matter and content."""
        match = _SPLIT_REGEX.fullmatch(self.raw_content)
        front = match["f"]
        self.front_matter = FrontMatter.parse(front) if front is not None else None
        self.content = PageContent(match["c"])

    def join_content(self) -> None:
        """Rebuild ``raw_content`` from front matter and content."""
        if self.content is None:
            raise RuntimeError(f"page {self.path} has no content")
        if self.front_matter is not None:
            self.raw_content = "---\n" + self.front_matter.raw + "---\n" + self.content.raw
        else:
            self.raw_content = self.content.raw