"""
Report Export

CSV and JSON renderings of a CategorizedReport. Rows are written in the
order the engine produced them and are never re-sorted.
"""

import csv
import io
import json
import logging
from pathlib import Path
from typing import TextIO, Union

from .models import CategorizedReport, ContrastResult

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "Foreground Name",
    "Foreground Hex",
    "Background Name",
    "Background Hex",
    "Contrast Ratio",
    "WCAG Level (Small Text)",
    "WCAG Level (Large Text)",
    "Requires Fix",
]


def csv_row(result: ContrastResult) -> list[str]:
    """One CSV row: ratio with 2 decimals, boolean as true/false"""
    return [
        result.foreground_name,
        result.foreground_hex,
        result.background_name,
        result.background_hex,
        f"{result.contrast_ratio:.2f}",
        result.level_small_text,
        result.level_large_text,
        "true" if result.requires_fix else "false",
    ]


def write_csv(report: CategorizedReport, stream: TextIO) -> int:
    """
    Write the header and every result row to an open text stream.

    Buckets are written AAA, AA, Fail, Other. An unfiltered report has an
    empty Fail bucket, so its rows come out as AAA, AA, Other.

    Returns:
        Number of result rows written
    """
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    rows = report.rows()
    writer.writerows(csv_row(result) for result in rows)
    return len(rows)


def to_csv(report: CategorizedReport) -> str:
    """Render the report as a CSV string"""
    buffer = io.StringIO()
    write_csv(report, buffer)
    return buffer.getvalue()


def export_csv(report: CategorizedReport, path: Union[str, Path]) -> Path:
    """
    Write the report to a CSV file.

    Example:
        report = audit_file("colors.json")
        export_csv(report, "contrast_results.csv")
    """
    path = Path(path)
    with open(path, "w", encoding="utf-8", newline="") as f:
        count = write_csv(report, f)
    logger.info("Exported %d rows to %s", count, path)
    return path


def to_dict(report: CategorizedReport) -> dict:
    """Report as plain data with camelCase result fields"""
    data = report.model_dump(by_alias=True)
    data["summary"] = {
        "total": report.total,
        "requiresFix": report.fix_count,
    }
    return data


def to_json(report: CategorizedReport) -> str:
    """Render the report as indented JSON"""
    return json.dumps(to_dict(report), indent=2)
