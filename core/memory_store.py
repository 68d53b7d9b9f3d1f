# =============================================================================
# core/memory_store.py  —  Reading and appending Markdown memory notes
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   - list_records(): read every note in ONE collection (used by search)
#   - save_record():  append a note to a collection (the save_memory tool)
#
# A "record" is any *.md file sitting directly under the collection root.
# Sub-directories and other file types are invisible.
#
# READ FAILURE POLICY:
#   If a root exists but a note inside it can't be read (permissions, bad
#   encoding), list_records() raises StoreAccessError and the whole search
#   fails.  We never skip a note quietly — the collection totals would
#   silently under-count.
# =============================================================================

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

from core.errors import StoreAccessError, UnknownScopeError, ValidationError
from core.models import (
    RECORD_EXTENSION,
    Collection,
    MemoryConfig,
    Record,
    SavedMemory,
)

logger = logging.getLogger(__name__)


def list_records(root: Path, collection: Collection) -> tuple[list[Record], int]:
    """Read every note in a collection.

    Args:
        root: The collection's root directory.
        collection: Which collection this root belongs to (used as the label).

    Returns:
        (records, total) where total == len(records).  A missing root gives
        ([], 0).

    Raises:
        StoreAccessError: the root exists but a note can't be read as UTF-8.
    """
    if not root.is_dir():
        logger.debug("%s collection root %s does not exist", collection.value, root)
        return [], 0

    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise StoreAccessError(
            f"Cannot list {collection.value} collection at {root}",
            collection=collection.value,
            original_error=e,
        ) from e

    records = []
    for path in entries:
        if not path.name.endswith(RECORD_EXTENSION) or not path.is_file():
            continue
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StoreAccessError(
                f"Cannot read {path.name} in {collection.value} collection",
                collection=collection.value,
                original_error=e,
            ) from e
        records.append(Record(
            collection=collection,
            filename=path.name,
            content=content,
            location=str(path),
        ))

    return records, len(records)


# -----------------------------------------------------------------------------
# Writing
# -----------------------------------------------------------------------------
_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """'Seller Finance: 12 Oak St' -> 'seller-finance-12-oak-st'."""
    slug = _SLUG_RE.sub("-", title.lower()).strip("-")
    return slug or "note"


def _parse_collection(category: str) -> Collection:
    try:
        return Collection((category or "").strip().lower())
    except ValueError:
        raise UnknownScopeError(category, [c.value for c in Collection]) from None


def save_record(
    config: MemoryConfig,
    content: str,
    title: str,
    category: str = "business",
    now: Optional[datetime] = None,
) -> SavedMemory:
    """Append a note to a memory collection.

    Notes are append-only.  The filename is "<date>-<slug>.md"; saving twice
    on the same day under the same title adds a new timestamped section to
    the same file instead of overwriting it.

    Raises:
        ValidationError: blank title or content.
        UnknownScopeError: category isn't business or legacy.
        StoreAccessError: the file couldn't be written.
    """
    if not title or not title.strip():
        raise ValidationError("A title is required to save a memory.")
    if not content or not content.strip():
        raise ValidationError("Memory content cannot be empty.")

    collection = _parse_collection(category)
    now = now or datetime.now()
    root = config.root_for(collection)
    path = root / f"{now:%Y-%m-%d}-{slugify(title)}{RECORD_EXTENSION}"
    created = not path.exists()

    section = f"## {now:%H:%M:%S}\n\n{content.strip()}\n"
    try:
        root.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            if created:
                fh.write(f"# {title.strip()}\n\n")
            else:
                fh.write("\n")
            fh.write(section)
    except OSError as e:
        raise StoreAccessError(
            f"Cannot write {path.name} to {collection.value} collection",
            collection=collection.value,
            original_error=e,
            action="write",
        ) from e

    return SavedMemory(
        collection=collection.value,
        filename=path.name,
        location=str(path),
        created=created,
    )
