from core.memory_search import MemorySearchEngine
from main import describe_memory, run_local_search


def test_local_search_with_category(memory_config, write_note) -> None:
    write_note(memory_config.business_root, "b.md", "lease option")
    write_note(memory_config.legacy_root, "l.md", "lease option")
    engine = MemorySearchEngine(memory_config)

    report = run_local_search(engine, " lease option legacy")

    assert "l.md" in report
    assert "b.md" not in report


def test_local_search_without_term(memory_config) -> None:
    report = run_local_search(MemorySearchEngine(memory_config), "")

    assert report.startswith("⚠️")


def test_describe_memory(memory_config, write_note) -> None:
    write_note(memory_config.business_root, "a.md", "x")

    lines = describe_memory(memory_config)

    assert "business" in lines[0] and "1 notes" in lines[0]
    assert "legacy" in lines[1] and "not created yet" in lines[1]
