"""Output formatters for sync reports."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path

from localesync.reporting.report import SyncReport


def to_json(report: SyncReport, indent: int = 2) -> str:
    """Format report as JSON string."""
    return json.dumps(report.to_dict(), indent=indent, default=str)


def to_markdown(report: SyncReport) -> str:
    """Format report as Markdown."""
    lines = [
        "# Sync Report",
        "",
        "| Field | Value |",
        "|-------|-------|",
        f"| Roots | {', '.join(f'`{r}`' for r in report.roots)} |",
        f"| Base locale | {report.base_locale} |",
        f"| Target locales | {', '.join(report.target_locales)} |",
        f"| Backend | {report.backend} |",
        f"| Prune | {report.prune} |",
        "",
        "## Statistics",
        "",
        "| Metric | Count |",
        "|--------|-------|",
        f"| Files removed | {report.files_removed} |",
        f"| Base files | {report.base_files} |",
        f"| Outputs written | {report.outputs_written} |",
        f"| Jobs failed | {report.jobs_failed} |",
        f"| Duration | {report.duration_seconds:.1f}s |",
    ]

    if report.errors:
        lines.extend([
            "",
            "## Errors",
            "",
        ])
        for err in report.errors:
            lines.append(f"- {err}")

    return "\n".join(lines) + "\n"


def to_csv(report: SyncReport) -> str:
    """Format report as a single-row CSV."""
    output = io.StringIO()
    data = report.to_dict()
    # Flatten list fields
    data["roots"] = ";".join(data["roots"])
    data["target_locales"] = ",".join(data["target_locales"])
    data["errors"] = "; ".join(data["errors"])
    writer = csv.DictWriter(output, fieldnames=data.keys())
    writer.writeheader()
    writer.writerow(data)
    return output.getvalue()


def save_report(report: SyncReport, path: str | Path) -> None:
    """Save report to file, auto-detecting format from extension."""
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        content = to_json(report)
    elif suffix in (".md", ".markdown"):
        content = to_markdown(report)
    elif suffix == ".csv":
        content = to_csv(report)
    else:
        content = to_json(report)

    path.write_text(content, encoding="utf-8")
