# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines every MCP tool the deal-desk agent can call.  Each tool is a thin
#   wrapper around a core/ function: it passes arguments through, converts
#   the dataclass result to a dict, and turns core errors into error dicts.
#
# THE TOOLS:
#   search_memory                 dual-source note search (business + legacy)
#   save_memory                   append a note to a memory collection
#   analyze_seller_finance_deal   owner-carry payment / cash flow / balloon
#   calculate_max_offer           wholesale MAO (70% rule)
#   analyze_rental_property       NOI / cap rate / 1% rule
#   generate_seller_response      templated reply to a seller
#
# ERRORS:
#   Core functions raise DealDeskError subclasses.  Every tool catches those
#   (and only those), logs them, and returns {"error", "error_type", "detail"}.
#   A tool never returns partial results next to an error.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server
#   b) Spawned by the agent over stdio (agent/deal_agent.py)
# =============================================================================

import json
import logging
import sys
from dataclasses import asdict
from typing import Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from core.config import load_memory_config
from core.deals import analyze_rental, analyze_seller_finance
from core.deals import calculate_max_offer as compute_max_offer
from core.errors import DealDeskError
from core.memory_search import MemorySearchEngine, build_query
from core.memory_store import save_record
from core.responses import generate_seller_response as render_seller_response
from tools.reporting import error_payload, search_payload

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT is the MCP transport.  A single stray print or log line there
# corrupts the JSON-RPC stream, so everything goes to STDERR.
#
# ANSI colors: CYAN requests, YELLOW status, GREEN responses, RED errors.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return result


def _log_error(tool_name: str, error: DealDeskError) -> dict:
    """Log a core error in RED and return the error dict for the agent."""
    logging.warning(f"{_RED}  ✗ {tool_name} failed: {type(error).__name__}: {error}{_RESET}")
    return error_payload(error)


# =============================================================================
# Configuration and the FastMCP server instance
# =============================================================================
# .env is loaded here as well as in main.py: when the agent spawns this
# server as a subprocess, main.py's environment setup doesn't run.
# Memory roots are resolved ONCE, here, and injected into the engine.
# =============================================================================
load_dotenv()

memory_config = load_memory_config()
engine = MemorySearchEngine(memory_config)

mcp = FastMCP("deal-desk")


# =============================================================================
# TOOL 1: search_memory
# =============================================================================
@mcp.tool()
def search_memory(
    search_term: str,
    category: str = "all",
    timeframe: str = "all",
) -> dict:
    """Search saved deal notes for a word or phrase.

    WHEN TO CALL THIS: Before analyzing a property or replying to a seller,
    check whether we've already written notes about them.  Also call it
    whenever the user asks "what do we know about ...".

    Matching is case-insensitive and looks for the exact phrase anywhere in
    a note.  Business notes are listed before legacy notes; at most 10
    results come back even when more match.

    Args:
        search_term: Word or phrase to look for (required, non-empty).
        category: "all" (default), "business", or "legacy".
        timeframe: Reserved. Accepted for compatibility but does not filter.

    Returns:
        A dict with:
          - results_found: Total matches (before the 10-result cap)
          - results_returned: Matches included below
          - per_collection_totals: Notes scanned per collection
          - results: [{source, filename, preview, location}, ...]
          - report: Ready-to-show text summary
    """
    _log_request("search_memory", search_term=search_term,
                 category=category, timeframe=timeframe)
    try:
        query = build_query(search_term, category, timeframe)
        outcome = engine.search(query)
    except DealDeskError as e:
        return _log_error("search_memory", e)

    _log_status(f"{outcome.summary.results_found} matches across "
                f"{outcome.summary.per_collection_totals}")
    return _log_response("search_memory", search_payload(query.term, outcome))


# =============================================================================
# TOOL 2: save_memory
# =============================================================================
@mcp.tool()
def save_memory(content: str, title: str, category: str = "business") -> dict:
    """Save a note to long-term memory so later searches can find it.

    WHEN TO CALL THIS: After a meaningful deal event, such as a seller
    conversation, an offer, a calculator result worth keeping, or a closing.

    Notes are append-only.  Saving again with the same title on the same
    day adds a new timestamped section to that note.

    Args:
        content: The note body (Markdown is fine).
        title: Short title; becomes part of the filename.
        category: "business" (default) or "legacy".

    Returns:
        A dict with collection, filename, location, and created (False when
        the note already existed and was appended to).
    """
    _log_request("save_memory", title=title, category=category,
                 content_length=len(content or ""))
    try:
        saved = save_record(memory_config, content, title, category)
    except DealDeskError as e:
        return _log_error("save_memory", e)

    _log_status(f"{'Created' if saved.created else 'Appended to'} {saved.filename}")
    return _log_response("save_memory", asdict(saved))


# =============================================================================
# TOOL 3: analyze_seller_finance_deal
# =============================================================================
@mcp.tool()
def analyze_seller_finance_deal(
    purchase_price: float,
    down_payment: float,
    interest_rate_pct: float,
    term_years: int,
    monthly_rent: float = 0,
    monthly_expenses: float = 0,
    balloon_years: Optional[int] = None,
) -> dict:
    """Run the numbers on a seller-financed (owner-carry) purchase.

    WHEN TO CALL THIS: Whenever the seller would carry some or all of the
    price.  Never compute amortization yourself; use this tool.

    Args:
        purchase_price: Agreed purchase price (USD).
        down_payment: Cash paid to the seller at closing (USD).
        interest_rate_pct: Annual note rate as a percentage (5 means 5%).
        term_years: Amortization period in years.
        monthly_rent: Expected monthly rent (0 if none).
        monthly_expenses: Taxes, insurance, repairs, management per month.
        balloon_years: Year the remaining balance is due, if there's a balloon.

    Returns:
        loan_amount, monthly_payment, monthly_cash_flow, annual_cash_flow,
        cash_on_cash_pct, balloon_balance, and a summary sentence.
    """
    _log_request("analyze_seller_finance_deal",
                 purchase_price=purchase_price, down_payment=down_payment,
                 interest_rate_pct=interest_rate_pct, term_years=term_years,
                 monthly_rent=monthly_rent, monthly_expenses=monthly_expenses,
                 balloon_years=balloon_years)
    try:
        result = analyze_seller_finance(
            purchase_price, down_payment, interest_rate_pct, term_years,
            monthly_rent=monthly_rent,
            monthly_expenses=monthly_expenses,
            balloon_years=balloon_years,
        )
    except DealDeskError as e:
        return _log_error("analyze_seller_finance_deal", e)

    _log_status(f"payment=${result.monthly_payment}, cash_flow=${result.monthly_cash_flow}")
    return _log_response("analyze_seller_finance_deal", asdict(result))


# =============================================================================
# TOOL 4: calculate_max_offer
# =============================================================================
@mcp.tool()
def calculate_max_offer(
    arv: float,
    repair_costs: float,
    assignment_fee: float = 10_000,
    rule_pct: float = 70,
) -> dict:
    """Compute the maximum allowable offer for a wholesale or flip.

    MAO = ARV x rule_pct% - repair_costs - assignment_fee.

    Args:
        arv: After-repair value (USD).
        repair_costs: Estimated rehab budget (USD).
        assignment_fee: Wholesale fee to protect (default 10,000).
        rule_pct: Percent of ARV to pay at most (default 70).

    Returns:
        max_allowable_offer, is_viable, and a summary sentence.
    """
    _log_request("calculate_max_offer", arv=arv, repair_costs=repair_costs,
                 assignment_fee=assignment_fee, rule_pct=rule_pct)
    try:
        result = compute_max_offer(arv, repair_costs, assignment_fee, rule_pct)
    except DealDeskError as e:
        return _log_error("calculate_max_offer", e)

    _log_status(f"MAO=${result.max_allowable_offer}, viable={result.is_viable}")
    return _log_response("calculate_max_offer", asdict(result))


# =============================================================================
# TOOL 5: analyze_rental_property
# =============================================================================
@mcp.tool()
def analyze_rental_property(
    purchase_price: float,
    monthly_rent: float,
    monthly_expenses: float = 0,
    vacancy_rate_pct: float = 5,
) -> dict:
    """Evaluate a buy-and-hold rental.

    Args:
        purchase_price: All-in purchase price (USD).
        monthly_rent: Market rent per month (USD).
        monthly_expenses: Operating expenses per month, excluding debt service.
        vacancy_rate_pct: Vacancy allowance as a percentage (default 5).

    Returns:
        net_operating_income, cap_rate_pct, gross_rent_multiplier,
        meets_one_percent_rule, and a summary sentence.
    """
    _log_request("analyze_rental_property", purchase_price=purchase_price,
                 monthly_rent=monthly_rent, monthly_expenses=monthly_expenses,
                 vacancy_rate_pct=vacancy_rate_pct)
    try:
        result = analyze_rental(purchase_price, monthly_rent, monthly_expenses, vacancy_rate_pct)
    except DealDeskError as e:
        return _log_error("analyze_rental_property", e)

    _log_status(f"cap_rate={result.cap_rate_pct}%")
    return _log_response("analyze_rental_property", asdict(result))


# =============================================================================
# TOOL 6: generate_seller_response
# =============================================================================
@mcp.tool()
def generate_seller_response(
    scenario: str,
    seller_name: str,
    property_address: str = "",
    agent_name: str = "",
) -> dict:
    """Draft a reply to a seller for a common situation.

    Args:
        scenario: One of "initial_contact", "follow_up", "price_too_high",
            "not_interested", "seller_finance_pitch".
        seller_name: How to greet the seller.
        property_address: Optional street address.
        agent_name: Optional name to sign with.

    Returns:
        scenario, seller_name, and the message text.
    """
    _log_request("generate_seller_response", scenario=scenario,
                 seller_name=seller_name, property_address=property_address)
    try:
        result = render_seller_response(scenario, seller_name, property_address, agent_name)
    except DealDeskError as e:
        return _log_error("generate_seller_response", e)

    return _log_response("generate_seller_response", asdict(result))


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
