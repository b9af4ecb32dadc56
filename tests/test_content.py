from types import SimpleNamespace

import pytest

from bjim.content import PageContent
from bjim.state import reset_global, set_global
from bjim.tag_config import TagConfig
from bjim.task_status import TaskStatus

ORIGIN = """
- [ ] Open task
- [>] Migrated task
- [<] Scheduled task
- [/] Task in progress
- [x] Closed task"""


@pytest.fixture
def daily_config():
    reset_global()
    set_global(SimpleNamespace(tags={"Daily": TagConfig(repeat=True)}))
    yield
    reset_global()


@pytest.mark.parametrize(
    "before, after, expected",
    [
        (
            TaskStatus.CLOSED,
            TaskStatus.IN_PROGRESS,
            "\n- [ ] Open task\n- [>] Migrated task\n- [<] Scheduled task\n"
            "- [/] Task in progress\n- [/] Closed task",
        ),
        (
            TaskStatus.IN_PROGRESS,
            TaskStatus.MIGRATED,
            "\n- [ ] Open task\n- [>] Migrated task\n- [<] Scheduled task\n"
            "- [>] Task in progress\n- [x] Closed task",
        ),
        (
            TaskStatus.MIGRATED,
            TaskStatus.OPEN,
            "\n- [ ] Open task\n- [ ] Migrated task\n- [<] Scheduled task\n"
            "- [/] Task in progress\n- [x] Closed task",
        ),
        (
            TaskStatus.OPEN,
            TaskStatus.SCHEDULED,
            "\n- [<] Open task\n- [>] Migrated task\n- [<] Scheduled task\n"
            "- [/] Task in progress\n- [x] Closed task",
        ),
        (
            TaskStatus.SCHEDULED,
            TaskStatus.CLOSED,
            "\n- [ ] Open task\n- [>] Migrated task\n- [x] Scheduled task\n"
            "- [/] Task in progress\n- [x] Closed task",
        ),
    ],
)
def test_replace_task_status(daily_config, before, after, expected):
    content = PageContent(ORIGIN)
    content.replace_task_status(before, after)
    assert content.raw == expected


def test_filter_open_tasks(daily_config):
    content = PageContent(
        "## Section1\n\n- [ ] Open task\n- [>] Migrated task\n- [<] Scheduled task\n"
        "- [/] Task in progress\n- [x] Closed task\n- [x] Closed task with #Daily"
    )
    content.filter_open_tasks()
    assert content.raw == (
        "## Section1\n\n- [ ] Open task\n- [/] Task in progress\n"
        "- [x] Closed task with #Daily"
    )


def test_replace_keeps_indentation(daily_config):
    content = PageContent("- [ ] Parent\n    - [ ] Child")
    content.replace_task_status(TaskStatus.OPEN, TaskStatus.CLOSED)
    assert content.raw == "- [x] Parent\n    - [x] Child"


def test_filter_without_config_raises():
    reset_global()
    with pytest.raises(RuntimeError):
        PageContent("- [ ] task").filter_open_tasks()