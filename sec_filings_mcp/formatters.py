"""
BBG Lite formatters for MCP tool results

Format handler results as Bloomberg Terminal-inspired text output.
Used by both CLI and MCP adapters for consistent presentation.
"""
import json
from typing import Any

RULE = "─" * 70


def _error(result: dict[str, Any]) -> str:
    text = f"ERROR: {result.get('error', 'Unknown error')}"
    if result.get("available_tickers"):
        text += "\nKNOWN TICKERS: " + ", ".join(result["available_tickers"])
    return text


def _value(value: Any) -> str:
    return str(value) if value not in (None, "") else "N/A"


def format_overview(result: dict[str, Any]) -> str:
    """Format overview result as BBG Lite text.

    Example output:
        AAPL | Apple Inc. | OVERVIEW

        CIK:         0000320193
        SIC:         3571 (Electronic Computers)
        FILINGS:     1,000 recent
    """
    if not result.get("success"):
        return _error(result)

    lines = [f"{result['ticker']} | {_value(result.get('name'))} | OVERVIEW", ""]
    lines.append(f"CIK:         {_value(result.get('cik'))}")
    lines.append(f"SIC:         {_value(result.get('sic'))} ({_value(result.get('sic_description'))})")
    lines.append(f"FILINGS:     {result.get('recent_filings_count', 0):,} recent")
    lines.append("")
    lines.append(f'Try: company("{result["ticker"]}") | filings("{result["ticker"]}") | report("{result["ticker"]}")')
    return "\n".join(lines)


def format_company(result: dict[str, Any]) -> str:
    """Format company profile result as BBG Lite text."""
    if not result.get("success"):
        return _error(result)

    lines = [f"{result['ticker']} | {_value(result.get('name'))} | PROFILE", ""]
    fields = [
        ("CIK", "cik"),
        ("EIN", "ein"),
        ("SIC", "sic"),
        ("INDUSTRY", "sic_description"),
        ("CATEGORY", "category"),
        ("ENTITY", "entity_type"),
        ("FY END", "fiscal_year_end"),
        ("STATE INC", "state_of_incorporation"),
        ("PHONE", "phone"),
        ("WEBSITE", "website"),
    ]
    for label, key in fields:
        lines.append(f"{label + ':':<13}{_value(result.get(key))}")

    business = (result.get("addresses") or {}).get("business") or {}
    if business:
        parts = [business.get("street1"), business.get("city"), business.get("stateOrCountry"), business.get("zipCode")]
        lines.append(f"{'ADDRESS:':<13}{', '.join(p for p in parts if p)}")

    former = result.get("former_names") or []
    if former:
        lines.append("")
        lines.append("FORMER NAMES")
        for entry in former:
            name = entry.get("name") if isinstance(entry, dict) else entry
            lines.append(f"  {name}")

    return "\n".join(lines)


def format_filings(result: dict[str, Any]) -> str:
    """Format filings result as BBG Lite text.

    Example output:
        TSLA (Tesla, Inc.) 10-K FILINGS
        ──────────────────────────────────────────────────────────────────────
        FORM      FILED       URL
        ──────────────────────────────────────────────────────────────────────
        10-K      2025-01-30  https://www.sec.gov/Archives/edgar/data/1318605/...

        Showing 1 of 1,000 filings
    """
    if not result.get("success"):
        return _error(result)

    if not result.get("filings"):
        return f"{result['ticker']} | NO FILINGS FOUND\n\nTry: filings(\"{result['ticker']}\") without a form filter"

    form_type = result.get("form_type") or "ALL"
    company = result.get("company_name")
    header = f"{result['ticker']} ({company})" if company else result["ticker"]
    lines = [f"{header} {form_type.upper()} FILINGS", RULE]
    lines.append(f"{'FORM':<8}  {'FILED':<10}  URL")
    lines.append(RULE)
    for filing in result["filings"]:
        lines.append(f"{filing['form'][:8]:<8}  {filing['filing_date']:<10}  {filing['document_url']}")

    lines.append("")
    lines.append(f"Showing {result['filtered_count']} of {result['total_filings']:,} filings")
    return "\n".join(lines)


def format_search(result: dict[str, Any]) -> str:
    """Format ticker search result as BBG Lite text."""
    if not result.get("success"):
        return _error(result)

    lines = [f'TICKER SEARCH "{result["query"]}"', RULE]
    if not result["results"]:
        lines.append("NO MATCHES FOUND")
        return "\n".join(lines)

    lines.append(f"{'TICKER':<10}  {'CIK':<10}  COMPANY")
    lines.append(RULE)
    for row in result["results"]:
        lines.append(f"{row['ticker']:<10}  {row['cik']:<10}  {row['name']}")
    lines.append("")
    lines.append(f"{result['result_count']} matches ({result['total_companies']:,} companies in directory)")
    return "\n".join(lines)


def format_insider_trades(result: dict[str, Any]) -> str:
    """Format insider trades result as BBG Lite text."""
    if not result.get("success"):
        return _error(result)

    if not result.get("trades"):
        return f"{result['ticker']} | NO INSIDER FILINGS FOUND"

    lines = [f"{result['ticker']} ({_value(result.get('company_name'))}) INSIDER FILINGS", RULE]
    lines.append(f"{'FORM':<4}  {'FILED':<10}  {'REPORTED':<10}  URL")
    lines.append(RULE)
    for trade in result["trades"]:
        reported = trade.get("report_owner") or ""
        lines.append(f"{trade['form']:<4}  {trade['filing_date']:<10}  {reported:<10}  {trade['document_url']}")
    lines.append("")
    lines.append(f"{result['insider_filings_count']} Form 3/4/5 filings")
    return "\n".join(lines)


def format_report(result: dict[str, Any]) -> str:
    """Format company report as BBG Lite text.

    Example output:
        MSFT | MICROSOFT CORP | REPORT

        CIK:         0000789019
        ...

        FILINGS BY TYPE (1,000 total)
        ──────────────────────────────────────────────────────────────────────
        4           412   2025-01-02  2024-12-20  2024-12-18
        8-K          88   2025-01-30  2024-10-30  2024-07-30
    """
    if not result.get("success"):
        return _error(result)

    profile = result["profile"]
    lines = [f"{profile['ticker']} | {_value(profile.get('name'))} | REPORT", ""]
    lines.append(f"CIK:         {_value(profile.get('cik'))}")
    lines.append(f"INDUSTRY:    {_value(profile.get('sic_description'))}")
    lines.append(f"ENTITY:      {_value(profile.get('entity_type'))} / {_value(profile.get('category'))}")
    lines.append(f"FY END:      {_value(profile.get('fiscal_year_end'))}")
    lines.append("")

    summary = result["filings_summary"]
    lines.append(f"FILINGS BY TYPE ({summary['total_filings']:,} total)")
    lines.append(RULE)
    by_type = sorted(summary["by_type"].items(), key=lambda item: -item[1])
    for form, count in by_type:
        dates = "  ".join(ref["date"] for ref in result["recent_by_type"].get(form, []))
        lines.append(f"{form[:10]:<10}  {count:>5}   {dates}")

    return "\n".join(lines)


FORMATTERS = {
    "overview": format_overview,
    "company": format_company,
    "filings": format_filings,
    "search": format_search,
    "insider_trades": format_insider_trades,
    "report": format_report,
}


def format_result(name: str, result: dict[str, Any]) -> str:
    """Format a tool result, falling back to JSON for unknown tools"""
    formatter = FORMATTERS.get(name)
    if formatter:
        return formatter(result)
    return json.dumps(result, indent=2)
