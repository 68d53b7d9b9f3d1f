# =============================================================================
# tools/reporting.py  —  Turning core results into agent-facing payloads
# =============================================================================
#
# The memory search tool returns BOTH the structured outcome (counts plus the
# capped, ordered result list, passed through untouched) and a short text
# report the agent can show as-is.  The report is presentation only; the
# numbers in it always come from the SearchSummary.
# =============================================================================

from dataclasses import asdict

from core.models import Collection, SearchOutcome

_SOURCE_LABELS = {
    Collection.BUSINESS.value: "💼 Business",
    Collection.LEGACY.value: "📜 Legacy",
}


def format_search_report(term: str, outcome: SearchOutcome) -> str:
    """Render a SearchOutcome as a Markdown-ish report."""
    summary = outcome.summary
    lines = [f'🔍 Memory search for "{term}"', ""]

    totals = ", ".join(
        f"{_SOURCE_LABELS.get(name, name)}: {count} notes"
        for name, count in summary.per_collection_totals.items()
    )
    lines.append(f"Searched {totals}")

    if not summary.results_found:
        lines.append("No matching notes found.")
        lines.append("")
        lines.append("💡 Tip: try a shorter term or search category 'all'.")
        return "\n".join(lines)

    lines.append(
        f"Found {summary.results_found} matching notes "
        f"(showing {summary.results_returned})."
    )
    for i, result in enumerate(outcome.results, start=1):
        label = _SOURCE_LABELS.get(result.source, result.source)
        lines.append("")
        lines.append(f"{i}. [{label}] {result.filename}")
        lines.append(f"   {result.preview}")
        lines.append(f"   📁 {result.location}")

    if summary.results_found > summary.results_returned:
        lines.append("")
        lines.append("💡 Tip: more notes matched; refine the term to narrow results.")
    return "\n".join(lines)


def search_payload(term: str, outcome: SearchOutcome) -> dict:
    """The dict returned by the search_memory tool."""
    summary = outcome.summary
    return {
        "results_found": summary.results_found,
        "results_returned": summary.results_returned,
        "per_collection_totals": dict(summary.per_collection_totals),
        "results": [asdict(r) for r in outcome.results],
        "report": format_search_report(term, outcome),
    }


def error_payload(error: Exception) -> dict:
    """{"error": ...} dict for a failed tool call."""
    return {
        "error": getattr(error, "user_message", None) or str(error),
        "error_type": type(error).__name__,
        "detail": str(error),
    }
