# =============================================================================
# core/memory_search.py  —  Dual-source memory search
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Searches the business and legacy note collections for a term and returns
#   a capped, source-labelled list of matches plus per-collection counts.
#
# THE PIPELINE:
#   build_query()          raw tool args  -> SearchQuery (or a clear error)
#   list_records()         collection     -> every note in it  (memory_store)
#   scan_records()         notes + term   -> matching SearchResults
#   MemorySearchEngine     ties it together, caps at RESULT_CAP, summarizes
#
# MATCHING:
#   Plain case-insensitive substring.  No ranking, no tokenizing — results
#   come back in scan order: business notes first, then legacy.
#
# TIMEFRAME:
#   Accepted and carried on the query, but it does not filter anything.
#   It's reserved until someone decides what a "timeframe" should mean for
#   a folder of Markdown notes.
# =============================================================================

import logging
from typing import Optional

from core.errors import UnknownScopeError, ValidationError
from core.memory_store import list_records
from core.models import (
    PREVIEW_LENGTH,
    PREVIEW_SUFFIX,
    RESULT_CAP,
    MemoryConfig,
    Record,
    Scope,
    SearchOutcome,
    SearchQuery,
    SearchResult,
    SearchSummary,
)

logger = logging.getLogger(__name__)


def build_query(
    search_term: Optional[str],
    category: Optional[str] = "all",
    timeframe: Optional[str] = "all",
) -> SearchQuery:
    """Validate raw tool arguments into a SearchQuery.

    Raises:
        ValidationError: search_term missing or empty.
        UnknownScopeError: category isn't all / business / legacy.
    """
    if not search_term:
        raise ValidationError("searchTerm is required and cannot be empty.")

    raw_scope = (category or "all").strip().lower()
    try:
        scope = Scope(raw_scope)
    except ValueError:
        raise UnknownScopeError(category, [s.value for s in Scope]) from None

    return SearchQuery(term=search_term, scope=scope, timeframe=timeframe or "all")


def make_preview(content: str) -> str:
    # The suffix is added even when nothing was cut off.
    return content[:PREVIEW_LENGTH] + PREVIEW_SUFFIX


def scan_records(records: list[Record], term: str) -> list[SearchResult]:
    """Return a SearchResult for every record whose content contains term.

    An empty term matches everything.
    """
    needle = term.lower()
    return [
        SearchResult(
            source=record.collection.value,
            filename=record.filename,
            preview=make_preview(record.content),
            location=record.location,
        )
        for record in records
        if needle in record.content.lower()
    ]


class MemorySearchEngine:
    """Searches the configured memory collections.

    The engine holds nothing but its configuration, so one instance can serve
    every request for the life of the process.
    """

    def __init__(self, config: MemoryConfig):
        self.config = config

    def search(self, query: SearchQuery) -> SearchOutcome:
        if query.timeframe != "all":
            logger.debug("timeframe %r accepted but not applied", query.timeframe)

        matches: list[SearchResult] = []
        totals: dict[str, int] = {}
        for collection in query.scope.collections():
            records, total = list_records(self.config.root_for(collection), collection)
            totals[collection.value] = total
            matches.extend(scan_records(records, query.term))

        returned = matches[:RESULT_CAP]
        summary = SearchSummary(
            results_found=len(matches),
            results_returned=len(returned),
            per_collection_totals=totals,
        )
        return SearchOutcome(results=returned, summary=summary)
