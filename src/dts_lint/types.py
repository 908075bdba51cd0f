"""Type definitions for dts-lint."""
from typing import TypedDict


class Position(TypedDict):
    """Zero-based line and character in a source file."""

    line: int
    character: int


class PolicyViolation(TypedDict):
    """First banned directive found in a file's text."""

    pos: int
    message: str


class RuleFailure(TypedDict):
    """Single failure reported by a lint rule."""

    file: str
    rule: str
    severity: str
    line: int
    character: int
    message: str
