"""Helpers shared by the built-in rules."""
from dts_lint.program import line_and_character
from dts_lint.types import RuleFailure


def make_failure(file_name: str, rule: str, text: str, pos: int, message: str) -> RuleFailure:
    """Build a failure at a character offset of text."""
    position = line_and_character(text, pos)
    return {
        "file": file_name,
        "rule": rule,
        "severity": "error",
        "line": position["line"],
        "character": position["character"],
        "message": message,
    }
