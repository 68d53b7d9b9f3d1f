"""Shared fixtures: temporary memory collections."""

from pathlib import Path

import pytest

from core.models import MemoryConfig


@pytest.fixture
def memory_config(tmp_path: Path) -> MemoryConfig:
    """Business and legacy roots under tmp_path.  Neither directory exists yet."""
    return MemoryConfig(
        business_root=tmp_path / "business",
        legacy_root=tmp_path / "home" / ".deal-desk" / "memory",
    )


@pytest.fixture
def write_note():
    """Write a note into a collection root, creating the root if needed."""

    def _write(root: Path, filename: str, content: str) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        path = root / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write
