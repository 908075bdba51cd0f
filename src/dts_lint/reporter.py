"""Report formatting and output."""
import json
from typing import Callable

from dts_lint.types import Position, RuleFailure


def format_policy_violation(file_name: str, position: Position, message: str) -> str:
    """Format a content-policy violation as a single report line.

    Example:
        At /types/foo/index.d.ts:{"line":2,"character":4}: 'ts-ignore' is forbidden.
    """
    place = json.dumps(
        {"line": position["line"], "character": position["character"]}, separators=(",", ":")
    )
    return f"At {file_name}:{place}: {message}"


def format_stylish(failures: list[RuleFailure]) -> str:
    """Format failures grouped by file, with one-based positions.

    Args:
        failures: Rule failures in the order they were reported

    Returns:
        Formatted report string
    """
    by_file: dict[str, list[RuleFailure]] = {}
    for failure in failures:
        by_file.setdefault(failure["file"], []).append(failure)

    blocks = []
    for file_name, file_failures in by_file.items():
        lines = [file_name]
        for failure in file_failures:
            place = f"{failure['line'] + 1}:{failure['character'] + 1}"
            lines.append(
                f"{failure['severity'].upper()}: {place}  {failure['rule']}  {failure['message']}"
            )
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)


def get_summary(failures: list[RuleFailure]) -> dict[str, int]:
    """Get summary statistics.

    Args:
        failures: Rule failures

    Returns:
        Dict with summary counts
    """
    return {
        "total_failures": len(failures),
        "errors": sum(1 for f in failures if f["severity"] == "error"),
        "warnings": sum(1 for f in failures if f["severity"] == "warning"),
        "files_with_failures": len({f["file"] for f in failures}),
    }


def format_json(failures: list[RuleFailure]) -> str:
    """Format failures as JSON.

    Args:
        failures: Rule failures

    Returns:
        JSON string
    """
    report = {"failures": failures, "summary": get_summary(failures)}
    return json.dumps(report, indent=2)


FORMATTERS: dict[str, Callable[[list[RuleFailure]], str]] = {
    "stylish": format_stylish,
    "json": format_json,
}


def get_exit_code(report: str | None) -> int:
    """Get exit code based on a lint report.

    Args:
        report: Report returned by a lint run

    Returns:
        0 if there is nothing to report, 1 otherwise
    """
    return 1 if report else 0
