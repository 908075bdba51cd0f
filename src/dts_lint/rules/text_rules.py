"""Rules that only need a file's text."""
import re
from typing import Any

from dts_lint.rules.base import make_failure
from dts_lint.types import RuleFailure

_REFERENCE = re.compile(r"^[ \t]*/// *<reference\b", re.MULTILINE)
_LEADING_TRIVIA = re.compile(r"\A(?:\s|//[^\n]*|/\*.*?\*/)*", re.DOTALL)


class TrimFileRule:
    """Files must not start with a blank line or end with more than one newline."""

    name = "trim-file"

    def apply(self, file_name: str, text: str, arguments: list[Any]) -> list[RuleFailure]:
        failures = []
        if text.startswith("\n"):
            failures.append(
                make_failure(file_name, self.name, text, 0, "File should not begin with a blank line.")
            )
        if text.endswith("\n\n"):
            failures.append(
                make_failure(
                    file_name,
                    self.name,
                    text,
                    len(text) - 1,
                    "File should not end with a blank line. "
                    "(Ending in one newline OK, ending in two newlines not OK.)",
                )
            )
        return failures


class NoDeadReferenceRule:
    """'/// <reference>' directives only take effect before the first statement."""

    name = "no-dead-reference"

    def apply(self, file_name: str, text: str, arguments: list[Any]) -> list[RuleFailure]:
        header_end = _header_end(text)
        return [
            make_failure(
                file_name,
                self.name,
                text,
                match.start(),
                "'/// <reference>' directive must be at top of file to take effect.",
            )
            for match in _REFERENCE.finditer(text, header_end)
        ]


def _header_end(text: str) -> int:
    """Offset of the first character that is not a comment or whitespace."""
    return _LEADING_TRIVIA.match(text).end()
