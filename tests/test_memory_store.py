from datetime import datetime

import pytest

from core.config import (
    BUSINESS_MEMORY_ENV,
    LEGACY_MEMORY_ENV,
    load_memory_config,
    server_environment,
)
from core.errors import StoreAccessError, UnknownScopeError, ValidationError
from core.memory_store import list_records, save_record, slugify
from core.models import Collection

NOON = datetime(2026, 3, 14, 12, 0, 0)


def test_list_records_missing_root(tmp_path) -> None:
    assert list_records(tmp_path / "nope", Collection.BUSINESS) == ([], 0)


def test_list_records_reads_markdown_only(tmp_path, write_note) -> None:
    write_note(tmp_path, "b.md", "second")
    write_note(tmp_path, "a.md", "first")
    write_note(tmp_path, "c.json", "{}")
    (tmp_path / "folder.md").mkdir()

    records, total = list_records(tmp_path, Collection.LEGACY)

    assert total == 2
    assert [r.filename for r in records] == ["a.md", "b.md"]
    assert records[0].content == "first"
    assert records[0].collection is Collection.LEGACY
    assert records[0].location == str(tmp_path / "a.md")


def test_slugify() -> None:
    assert slugify("Seller Finance: 12 Oak St") == "seller-finance-12-oak-st"
    assert slugify("!!!") == "note"


def test_save_record_creates_root_and_note(memory_config) -> None:
    saved = save_record(memory_config, "Offered $90k cash.", "12 Oak St", now=NOON)

    assert saved.created is True
    assert saved.collection == "business"
    assert saved.filename == "2026-03-14-12-oak-st.md"
    text = (memory_config.business_root / saved.filename).read_text(encoding="utf-8")
    assert text == "# 12 Oak St\n\n## 12:00:00\n\nOffered $90k cash.\n"


def test_save_record_appends_same_day(memory_config) -> None:
    save_record(memory_config, "First call.", "12 Oak St", now=NOON)
    later = NOON.replace(hour=15, minute=30)

    saved = save_record(memory_config, "Seller countered.", "12 Oak St", now=later)

    assert saved.created is False
    text = (memory_config.business_root / saved.filename).read_text(encoding="utf-8")
    assert text.startswith("# 12 Oak St\n\n## 12:00:00\n\nFirst call.\n")
    assert text.endswith("\n## 15:30:00\n\nSeller countered.\n")


def test_saved_note_is_searchable_as_a_record(memory_config) -> None:
    save_record(memory_config, "Lease option on Elm", "Elm", category="legacy", now=NOON)

    records, total = list_records(memory_config.legacy_root, Collection.LEGACY)

    assert total == 1
    assert "Lease option on Elm" in records[0].content


@pytest.mark.parametrize("content, title", [("", "t"), ("body", "  ")])
def test_save_record_requires_content_and_title(memory_config, content, title) -> None:
    with pytest.raises(ValidationError):
        save_record(memory_config, content, title)


def test_save_record_rejects_unknown_category(memory_config) -> None:
    with pytest.raises(UnknownScopeError):
        save_record(memory_config, "body", "title", category="all")


def test_load_memory_config_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv(BUSINESS_MEMORY_ENV, str(tmp_path / "biz"))
    monkeypatch.setenv(LEGACY_MEMORY_ENV, str(tmp_path / "old"))

    config = load_memory_config()

    assert config.business_root == (tmp_path / "biz").resolve()
    assert config.legacy_root == (tmp_path / "old").resolve()


def test_load_memory_config_defaults(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv(BUSINESS_MEMORY_ENV, raising=False)
    monkeypatch.delenv(LEGACY_MEMORY_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    config = load_memory_config()

    assert config.business_root == (tmp_path / "memory").resolve()
    assert config.legacy_root == (tmp_path / "home" / ".deal-desk" / "memory").resolve()


def test_save_record_write_failure_reports_write(memory_config) -> None:
    memory_config.business_root.parent.mkdir(parents=True, exist_ok=True)
    memory_config.business_root.write_text("not a directory", encoding="utf-8")

    with pytest.raises(StoreAccessError) as exc:
        save_record(memory_config, "Offer sent.", "12 Oak St", now=NOON)

    assert exc.value.action == "write"
    assert exc.value.collection == "business"
    assert exc.value.user_message == "Couldn't write the business memory collection."


def test_unreadable_note_reports_read(tmp_path) -> None:
    (tmp_path / "bad.md").write_bytes(b"\xff broken")

    with pytest.raises(StoreAccessError) as exc:
        list_records(tmp_path, Collection.LEGACY)

    assert exc.value.user_message == "Couldn't read the legacy memory collection."


def test_server_environment_forwards_env_and_pins_roots(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-test")
    monkeypatch.setenv(BUSINESS_MEMORY_ENV, "relative/memory")
    monkeypatch.chdir(tmp_path)
    config = load_memory_config()

    env = server_environment(config)

    assert env["OPENROUTER_API_KEY"] == "sk-test"
    assert env[BUSINESS_MEMORY_ENV] == str((tmp_path / "relative" / "memory").resolve())
    assert env[LEGACY_MEMORY_ENV] == str(config.legacy_root)
