"""Rule engine: runs configured rules over files and collects their failures."""
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from dts_lint.config import LintConfig
from dts_lint.logging_config import get_logger
from dts_lint.reporter import FORMATTERS
from dts_lint.types import RuleFailure

logger = get_logger(__name__)


class Rule(Protocol):
    """A structural check applied to one file at a time."""

    name: str

    def apply(self, file_name: str, text: str, arguments: list[Any]) -> list[RuleFailure]:
        """Return failures found in a file; severity is filled in by the engine."""
        ...


@dataclass
class LintResult:
    """Failures accumulated over a lint pass and their rendering."""

    failures: list[RuleFailure] = field(default_factory=list)
    output: str = ""

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.failures if f["severity"] == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for f in self.failures if f["severity"] == "warning")


class RuleRunner(Protocol):
    """Anything that can lint files one by one and report the aggregate."""

    def lint(self, file_name: str, text: str, config: LintConfig) -> None: ...

    def get_result(self) -> LintResult: ...


class RuleEngine:
    """Default RuleRunner backed by a registry of Rule objects."""

    def __init__(self, rules: Mapping[str, Rule] | None = None, formatter: str = "stylish"):
        if formatter not in FORMATTERS:
            raise ValueError(
                f"Unknown formatter: {formatter}. Must be one of: {', '.join(sorted(FORMATTERS))}"
            )
        if rules is None:
            from dts_lint.rules import get_builtin_rules

            rules = get_builtin_rules()
        self.rules = dict(rules)
        self.formatter = formatter
        self.failures: list[RuleFailure] = []
        self._unknown_rules: set[str] = set()

    def lint(self, file_name: str, text: str, config: LintConfig) -> None:
        """Run every enabled rule of config on a file."""
        for name, rule_config in config.rules.items():
            if not rule_config.enabled:
                continue

            rule = self.rules.get(name)
            if rule is None:
                if name not in self._unknown_rules:
                    self._unknown_rules.add(name)
                    logger.warning(f"No implementation found for rule '{name}', skipping it")
                continue

            for failure in rule.apply(file_name, text, rule_config.arguments):
                self.failures.append({**failure, "severity": rule_config.severity})

    def get_result(self) -> LintResult:
        failures = list(self.failures)
        return LintResult(failures=failures, output=FORMATTERS[self.formatter](failures))
