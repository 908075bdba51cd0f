"""Built-in lint rules."""
from dts_lint.rules.base import make_failure
from dts_lint.rules.expect import ExpectRule
from dts_lint.rules.text_rules import NoDeadReferenceRule, TrimFileRule


def get_builtin_rules() -> dict:
    """Return fresh instances of the built-in rules, keyed by rule name."""
    rules = [ExpectRule(), NoDeadReferenceRule(), TrimFileRule()]
    return {rule.name: rule for rule in rules}


__all__ = [
    "ExpectRule",
    "NoDeadReferenceRule",
    "TrimFileRule",
    "get_builtin_rules",
    "make_failure",
]
