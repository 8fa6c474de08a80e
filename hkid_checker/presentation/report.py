"""Tabular renderings of HKID results and the prefix catalog."""
from __future__ import annotations

import csv
import io
from html import escape
from typing import Iterable, Sequence

from hkid_checker.domain.prefixes import PrefixCatalog
from hkid_checker.domain.results import ValidationOutcome


def outcome_to_row(outcome: ValidationOutcome) -> dict[str, str]:
    parsed = outcome.parsed
    return {
        "input": outcome.text,
        "canonical": outcome.canonical,
        "prefix": parsed.prefix,
        "prefix_kind": outcome.prefix.kind.value,
        "body": parsed.body,
        "check_char": parsed.check_char,
        "expected_check_char": outcome.expected_check_char,
        "result": "valid" if outcome.is_valid else "invalid",
    }


def catalog_to_rows(catalog: PrefixCatalog) -> list[dict[str, str]]:
    return [
        {
            "prefix": prefix.code,
            "letters": str(len(prefix.code)),
            "description": prefix.description or "",
        }
        for prefix in catalog
    ]


def render_csv(rows: Sequence[dict[str, str]]) -> bytes:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()) if rows else [])
    if rows:
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(rows: Sequence[dict[str, str]]) -> str:
    if not rows:
        return "<p>No rows.</p>"
    header = "".join(f"<th>{escape(col)}</th>" for col in rows[0].keys())
    body_parts = []
    for row in rows:
        body_parts.append("<tr>" + "".join(f"<td>{escape(value)}</td>" for value in row.values()) + "</tr>")
    body_html = "".join(body_parts)
    return f"<table><thead><tr>{header}</tr></thead><tbody>{body_html}</tbody></table>"


def render_table(rows: Sequence[dict[str, str]]) -> str:
    """Plain-text table for terminal output."""
    if not rows:
        return ""
    columns = list(rows[0].keys())
    widths = {col: max(len(col), *(len(row[col]) for row in rows)) for col in columns}

    def line(values: Iterable[str]) -> str:
        return "  ".join(value.ljust(widths[col]) for col, value in zip(columns, values)).rstrip()

    output = [line(columns), line("-" * widths[col] for col in columns)]
    output.extend(line(row[col] for col in columns) for row in rows)
    return "\n".join(output)
