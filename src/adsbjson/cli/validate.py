"""File validation CLI command."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from ..stream import DecodeReport, decode_lines


def validate_file(file_path: Path, show: int = 10) -> bool:
    """Decode every line of an NDJSON file and print a summary.

    Args:
        file_path: Path to a file with one aircraft JSON object per line
        show: Maximum number of individual failures to list

    Returns:
        True if every non-blank line decoded
    """
    # Binary lines, so undecodable bytes fail on their own line
    with file_path.open("rb") as fp:
        report = decode_lines(fp)

    print_report(file_path, report, show=show)
    return report.ok


def print_report(file_path: Path, report: DecodeReport, show: int = 10) -> None:
    """Print counts by error class and the first few failures."""
    print(f"{'=' * 19} {file_path.name} {'=' * 19}")
    print(f"Lines read{'.' * 30}{report.total}")
    print(f"Decoded{'.' * 33}{len(report.messages)}")
    print(f"Failed{'.' * 34}{len(report.failures)}")

    if not report.failures:
        return

    print()
    print(f"{'-' * 24} By error {'-' * 24}")
    by_kind = Counter(type(failure.error).__name__ for failure in report.failures)
    for kind, count in by_kind.most_common():
        print(f"        {kind}{'.' * max(1, 32 - len(kind))}{count}")

    print()
    print(f"{'-' * 24} Failures {'-' * 24}")
    for failure in report.failures[:show]:
        print(f"line {failure.line_number}: {failure.error}")
    remaining = len(report.failures) - show
    if remaining > 0:
        print(f"... and {remaining} more")
