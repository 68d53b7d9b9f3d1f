# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through the deal desk.  They carry no behavior — they're structured bags of
# data that the core functions produce and the tools/ layer serializes with
# asdict() before handing them to the agent.
#
# TWO FAMILIES OF MODELS:
#   1. Memory models  — collections, records, queries, search results.
#   2. Deal models    — outputs of the deal calculators and message templates.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


# --- Memory constants ---
RECORD_EXTENSION = ".md"       # Only Markdown notes count as records
PREVIEW_LENGTH = 200           # Characters of content shown per result
PREVIEW_SUFFIX = "..."         # Always appended, truncated or not
RESULT_CAP = 10                # Max results returned per search


# -----------------------------------------------------------------------------
# Collection — the two logical record stores
# -----------------------------------------------------------------------------
class Collection(Enum):
    """A named memory collection.  Business notes live next to the process,
    legacy notes live under the user's home directory."""

    BUSINESS = "business"
    LEGACY = "legacy"


# -----------------------------------------------------------------------------
# Scope — which collection(s) a search covers
# -----------------------------------------------------------------------------
class Scope(Enum):
    """Closed set of search scopes."""

    ALL = "all"
    BUSINESS = "business"
    LEGACY = "legacy"

    def collections(self) -> list[Collection]:
        """Collections to scan, in scan order (business always first)."""
        if self is Scope.ALL:
            return [Collection.BUSINESS, Collection.LEGACY]
        if self is Scope.BUSINESS:
            return [Collection.BUSINESS]
        if self is Scope.LEGACY:
            return [Collection.LEGACY]
        raise AssertionError(f"unhandled scope {self!r}")


# -----------------------------------------------------------------------------
# MemoryConfig — where the two collections live
# -----------------------------------------------------------------------------
# Resolved once at startup (core/config.py) and handed to the engine.
# Tests build one pointing at temporary directories.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class MemoryConfig:
    business_root: Path
    legacy_root: Path

    def root_for(self, collection: Collection) -> Path:
        if collection is Collection.BUSINESS:
            return self.business_root
        return self.legacy_root


@dataclass
class Record:
    """One Markdown note inside a collection."""

    collection: Collection
    filename: str                      # Unique within its collection
    content: str                       # Full UTF-8 text
    location: str                      # Absolute path on disk


@dataclass
class SearchQuery:
    """A validated search request (see memory_search.build_query)."""

    term: str
    scope: Scope = Scope.ALL
    timeframe: str = "all"             # Reserved: accepted, never filters


@dataclass
class SearchResult:
    """One matching record, trimmed down for the agent."""

    source: str                        # "business" or "legacy"
    filename: str
    preview: str                       # First 200 chars + "..."
    location: str


@dataclass
class SearchSummary:
    """Counts that accompany every search."""

    results_found: int                 # True match count, before the cap
    results_returned: int              # min(results_found, RESULT_CAP)
    per_collection_totals: dict[str, int] = field(default_factory=dict)
    # per_collection_totals counts EVERY record in each scanned collection,
    # not just the matches.  Out-of-scope collections are absent.


@dataclass
class SearchOutcome:
    """What the engine hands back: capped results plus the summary."""

    results: list[SearchResult]
    summary: SearchSummary


@dataclass
class SavedMemory:
    """Confirmation of a save_memory write."""

    collection: str
    filename: str
    location: str
    created: bool                      # False when appended to an existing note


# -----------------------------------------------------------------------------
# Deal analysis models
# -----------------------------------------------------------------------------
@dataclass
class SellerFinanceAnalysis:
    """Owner-carried financing broken down to monthly numbers."""

    purchase_price: float
    down_payment: float
    loan_amount: float
    interest_rate_pct: float
    term_years: int
    monthly_payment: float
    monthly_cash_flow: float           # rent - expenses - payment
    annual_cash_flow: float
    cash_on_cash_pct: Optional[float]  # None when nothing was put down
    balloon_years: Optional[int] = None
    balloon_balance: Optional[float] = None
    summary: str = ""


@dataclass
class MaxOfferAnalysis:
    """Wholesale maximum allowable offer (the "70% rule")."""

    arv: float                         # After-repair value
    repair_costs: float
    assignment_fee: float
    rule_pct: float
    max_allowable_offer: float
    is_viable: bool
    summary: str = ""


@dataclass
class RentalAnalysis:
    """Buy-and-hold rental snapshot."""

    purchase_price: float
    monthly_rent: float
    gross_annual_rent: float
    effective_annual_rent: float       # After vacancy allowance
    annual_expenses: float
    net_operating_income: float
    cap_rate_pct: float
    gross_rent_multiplier: float
    meets_one_percent_rule: bool
    summary: str = ""


@dataclass
class SellerMessage:
    """A ready-to-send reply to a motivated seller."""

    scenario: str
    seller_name: str
    message: str
