"""Tool-level tests: arguments in, dict out, errors as error dicts."""

import pytest

from core.memory_search import MemorySearchEngine
from tools import mcp_server


def _call(tool, **kwargs) -> dict:
    # FastMCP wraps decorated functions in a tool object; .fn is the original.
    return getattr(tool, "fn", tool)(**kwargs)


@pytest.fixture
def server(monkeypatch, memory_config):
    monkeypatch.setattr(mcp_server, "memory_config", memory_config)
    monkeypatch.setattr(mcp_server, "engine", MemorySearchEngine(memory_config))
    return mcp_server


def test_search_memory_empty_term_is_an_error(server) -> None:
    result = _call(server.search_memory, search_term="")

    assert result["error_type"] == "ValidationError"
    assert "results" not in result


def test_search_memory_unknown_category_is_an_error(server) -> None:
    result = _call(server.search_memory, search_term="oak", category="archive")

    assert result["error_type"] == "UnknownScopeError"
    assert "archive" in result["error"]
    assert "results_found" not in result


def test_search_memory_returns_payload(server, memory_config, write_note) -> None:
    write_note(memory_config.business_root, "deal1.md", "seller finance deal closed")

    result = _call(server.search_memory, search_term="Seller Finance")

    assert set(result) == {
        "results_found", "results_returned", "per_collection_totals", "results", "report",
    }
    assert result["results_found"] == 1
    assert result["per_collection_totals"] == {"business": 1, "legacy": 0}
    assert result["results"][0]["filename"] == "deal1.md"
    assert result["results"][0]["source"] == "business"


def test_search_memory_unreadable_note_returns_only_error(server, memory_config, write_note) -> None:
    write_note(memory_config.business_root, "ok.md", "seller finance")
    (memory_config.business_root / "bad.md").write_bytes(b"\xff broken")

    result = _call(server.search_memory, search_term="seller")

    assert result["error_type"] == "StoreAccessError"
    assert "results" not in result


def test_save_then_search_round_trip(server) -> None:
    saved = _call(server.save_memory, content="Roof quote $8k", title="12 Oak St")
    found = _call(server.search_memory, search_term="roof quote", category="business")

    assert saved["created"] is True
    assert found["results"][0]["filename"] == saved["filename"]


def test_save_memory_write_failure(server, memory_config) -> None:
    memory_config.business_root.parent.mkdir(parents=True, exist_ok=True)
    memory_config.business_root.write_text("not a directory", encoding="utf-8")

    result = _call(server.save_memory, content="Offer sent.", title="12 Oak St")

    assert result["error_type"] == "StoreAccessError"
    assert result["error"] == "Couldn't write the business memory collection."


def test_calculator_tools(server) -> None:
    offer = _call(server.calculate_max_offer, arv=200_000, repair_costs=30_000)
    rental = _call(server.analyze_rental_property, purchase_price=100_000, monthly_rent=1_000)
    finance = _call(
        server.analyze_seller_finance_deal,
        purchase_price=140_000, down_payment=20_000, interest_rate_pct=0, term_years=10,
    )

    assert offer["max_allowable_offer"] == 100_000
    assert rental["meets_one_percent_rule"] is True
    assert finance["monthly_payment"] == 1_000


def test_calculator_validation_error(server) -> None:
    result = _call(
        server.analyze_seller_finance_deal,
        purchase_price=100_000, down_payment=200_000, interest_rate_pct=5, term_years=30,
    )

    assert result["error_type"] == "ValidationError"
    assert "monthly_payment" not in result


def test_generate_seller_response_tool(server) -> None:
    ok = _call(server.generate_seller_response, scenario="follow_up", seller_name="Dana")
    bad = _call(server.generate_seller_response, scenario="lowball", seller_name="Dana")

    assert "Dana" in ok["message"]
    assert bad["error_type"] == "ValidationError"
