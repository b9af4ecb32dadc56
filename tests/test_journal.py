from datetime import date

import pytest

from bjim.collection import CollectionConfig
from bjim.config import Config
from bjim.journal import Journal
from bjim.period_format import PeriodFormat
from bjim.state import reset_global


@pytest.fixture(autouse=True)
def _clean_global():
    reset_global()
    yield
    reset_global()


def _journal_dir(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "a.md").write_text("- [ ] Open\n", encoding="utf-8")
    (tmp_path / "sub" / "b.md").write_text("- [x] Closed\n", encoding="utf-8")
    (tmp_path / "c.txt").write_text("- [ ] Not a page\n", encoding="utf-8")
    return tmp_path


def test_reload_finds_markdown_files(tmp_path):
    root = _journal_dir(tmp_path)
    Config(data_dir=root).globalize()
    journal = Journal()
    assert {p.path for p in journal.pages} == {root / "a.md", root / "sub" / "b.md"}


def test_read_marks_open_tasks(tmp_path):
    root = _journal_dir(tmp_path)
    Config(data_dir=root).globalize()
    journal = Journal()
    journal.read()
    open_pages = {p.path for p in journal.pages if p.has_open_task}
    assert open_pages == {root / "a.md"}


def test_migrate_unknown_collection(tmp_path):
    Config(data_dir=tmp_path).globalize()
    journal = Journal()
    with pytest.raises(ValueError, match="is nothing in configure"):
        journal.migrate_collection("Missing")


def _daily_config(tmp_path):
    collection = CollectionConfig(
        auto_migration=True, path=PeriodFormat("dailylog/%Y/%m/%d.md")
    )
    Config(data_dir=tmp_path, collections={"Dailylog": collection}).globalize()
    return collection


def test_migrate_collection_without_pages_is_skipped(tmp_path):
    collection = _daily_config(tmp_path)
    journal = Journal()
    journal.migrate_collection("Dailylog")
    assert not (tmp_path / collection.get_path(date.today())).exists()
    assert journal.pages == []


def test_update_migrates_auto_collections(tmp_path, capsys):
    collection = _daily_config(tmp_path)
    old = tmp_path / "dailylog" / "2000" / "01" / "01.md"
    old.parent.mkdir(parents=True)
    old.write_text("- [ ] Task\n- [x] Done\n", encoding="utf-8")
    journal = Journal()
    journal.update()
    assert "Migrating regular log" in capsys.readouterr().out
    today = tmp_path / collection.get_path(date.today())
    assert "- [ ] Task" in today.read_text(encoding="utf-8")
    assert "- [>] Task" in old.read_text(encoding="utf-8")


def test_migrate_collections_ignores_manual_collections(tmp_path):
    collection = CollectionConfig(path=PeriodFormat("dailylog/%Y/%m/%d.md"))
    Config(data_dir=tmp_path, collections={"Manual": collection}).globalize()
    old = tmp_path / "dailylog" / "2000" / "01" / "01.md"
    old.parent.mkdir(parents=True)
    old.write_text("- [ ] Task\n", encoding="utf-8")
    Journal().migrate_collections()
    assert old.read_text(encoding="utf-8") == "- [ ] Task\n"
    assert not (tmp_path / collection.get_path(date.today())).exists()