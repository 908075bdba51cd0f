"""dts-lint: lint TypeScript declarations against a range of compiler versions."""

from dts_lint.__version__ import __version__
from dts_lint.config import LintConfig, RuleConfig, load_config
from dts_lint.config_resolver import get_lint_config
from dts_lint.content_policy import scan_text
from dts_lint.engine import LintResult, RuleEngine
from dts_lint.errors import (
    ConfigLoadError,
    DtsLintError,
    InvalidRange,
    MisconfiguredRule,
    UnknownVersion,
)
from dts_lint.orchestrator import lint, lint_package
from dts_lint.path_policy import is_version_pinned_path
from dts_lint.types import PolicyViolation, RuleFailure
from dts_lint.versions import resolve_version_range

__all__ = [
    "__version__",
    "ConfigLoadError",
    "DtsLintError",
    "InvalidRange",
    "LintConfig",
    "LintResult",
    "MisconfiguredRule",
    "PolicyViolation",
    "RuleConfig",
    "RuleEngine",
    "RuleFailure",
    "UnknownVersion",
    "get_lint_config",
    "is_version_pinned_path",
    "lint",
    "lint_package",
    "load_config",
    "resolve_version_range",
    "scan_text",
]
