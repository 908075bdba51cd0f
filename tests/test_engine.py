import json
from unittest.mock import patch

import pytest

from dts_lint.config import LintConfig
from dts_lint.engine import RuleEngine
from dts_lint.rules import make_failure


class ForbidFooRule:
    name = "no-foo"

    def __init__(self):
        self.calls = []

    def apply(self, file_name, text, arguments):
        self.calls.append((file_name, arguments))
        pos = text.find("foo")
        if pos == -1:
            return []
        return [make_failure(file_name, self.name, text, pos, "No foo.")]


def test_engine_accumulates_failures():
    """Test failures from several files are collected."""
    rule = ForbidFooRule()
    engine = RuleEngine(rules={"no-foo": rule})
    config = LintConfig(rules={"no-foo": [True, "opt"]})

    engine.lint("/p/a.d.ts", "const foo: 1;", config)
    engine.lint("/p/b.d.ts", "const bar: 1;", config)
    engine.lint("/p/c.d.ts", "\nfoo", config)

    result = engine.get_result()
    assert [(f["file"], f["line"], f["character"]) for f in result.failures] == [
        ("/p/a.d.ts", 0, 6),
        ("/p/c.d.ts", 1, 0),
    ]
    assert result.error_count == 2
    assert rule.calls[0] == ("/p/a.d.ts", ["opt"])
    assert "/p/a.d.ts" in result.output
    assert "ERROR: 1:7  no-foo  No foo." in result.output


def test_engine_applies_configured_severity():
    """Test the configured severity replaces the rule's default."""
    engine = RuleEngine(rules={"no-foo": ForbidFooRule()})

    engine.lint("/p/a.d.ts", "foo", LintConfig(rules={"no-foo": {"severity": "warning"}}))

    result = engine.get_result()
    assert result.failures[0]["severity"] == "warning"
    assert result.warning_count == 1
    assert result.error_count == 0


def test_engine_skips_disabled_rules():
    """Test rules turned off are not run."""
    rule = ForbidFooRule()
    engine = RuleEngine(rules={"no-foo": rule})

    engine.lint("/p/a.d.ts", "foo", LintConfig(rules={"no-foo": False}))

    assert rule.calls == []
    assert engine.get_result().failures == []


@patch("dts_lint.engine.logger")
def test_engine_warns_once_about_unknown_rules(mock_logger):
    """Test rules without implementation are skipped with one warning."""
    engine = RuleEngine(rules={})
    config = LintConfig(rules={"no-such-rule": True})

    engine.lint("/p/a.d.ts", "", config)
    engine.lint("/p/b.d.ts", "", config)

    assert engine.get_result().failures == []
    assert mock_logger.warning.call_count == 1
    assert "no-such-rule" in mock_logger.warning.call_args[0][0]


def test_engine_json_output():
    """Test the json formatter."""
    engine = RuleEngine(rules={"no-foo": ForbidFooRule()}, formatter="json")

    engine.lint("/p/a.d.ts", "foo", LintConfig(rules={"no-foo": True}))

    data = json.loads(engine.get_result().output)
    assert data["summary"]["total_failures"] == 1
    assert data["failures"][0]["rule"] == "no-foo"


def test_engine_unknown_formatter():
    """Test an unknown formatter is rejected."""
    with pytest.raises(ValueError, match="Unknown formatter"):
        RuleEngine(rules={}, formatter="xml")


def test_engine_default_rules():
    """Test the built-in rules are registered by default."""
    engine = RuleEngine()

    assert {"expect", "trim-file", "no-dead-reference"} <= set(engine.rules)
