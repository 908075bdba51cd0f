"""Lint configuration loading for dts-lint.

Configuration files use the tslint.json layout::

    {
      "extends": "dts-lint:default",
      "rules": {
        "expect": true,
        "trim-file": false,
        "no-dead-reference": {"severity": "warning"}
      }
    }
"""
import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from dts_lint.errors import ConfigLoadError
from dts_lint.logging_config import get_logger

logger = get_logger(__name__)

Severity = Literal["error", "warning", "off"]

BUILTIN_CONFIG_DIR = Path(__file__).parent / "configs"
DEFAULT_CONFIG_PATH = BUILTIN_CONFIG_DIR / "dts-lint.json"
EXPECT_ONLY_CONFIG_PATH = BUILTIN_CONFIG_DIR / "dts-lint-expect-only.json"

BUILTIN_CONFIGS = {
    "dts-lint:default": DEFAULT_CONFIG_PATH,
    "dts-lint:expect-only": EXPECT_ONLY_CONFIG_PATH,
    # Names DefinitelyTyped packages use for the same configurations
    "dtslint/dtslint.json": DEFAULT_CONFIG_PATH,
    "dtslint/dtslint-expect-only.json": EXPECT_ONLY_CONFIG_PATH,
    "@definitelytyped/dtslint/dtslint.json": DEFAULT_CONFIG_PATH,
    "@definitelytyped/dtslint/dtslint-expect-only.json": EXPECT_ONLY_CONFIG_PATH,
}

_SEVERITY_ALIASES = {"warn": "warning", "none": "off", "default": "error"}


class RuleConfig(BaseModel):
    """Configuration of a single rule."""

    severity: Severity = Field(default="error", description="Severity of reported failures")
    arguments: list[Any] = Field(default_factory=list, description="Rule options")

    @field_validator("severity", mode="before")
    @classmethod
    def normalize_severity(cls, v: Any) -> Any:
        """Accept tslint severity aliases."""
        if isinstance(v, str):
            return _SEVERITY_ALIASES.get(v, v)
        return v

    @property
    def enabled(self) -> bool:
        return self.severity != "off"


def parse_rule_value(name: str, value: Any) -> RuleConfig:
    """Convert a rule value from a config file into a RuleConfig.

    Accepted shapes:
        true / false
        [true, option1, option2]
        {"severity": "warning", "options": [option1]}

    Raises:
        ValueError: If the value has none of the accepted shapes
    """
    if isinstance(value, RuleConfig):
        return value
    if isinstance(value, bool):
        return RuleConfig(severity="error" if value else "off")
    if isinstance(value, list):
        if not value or not isinstance(value[0], bool):
            raise ValueError(f"rule '{name}' list must start with true or false")
        return RuleConfig(severity="error" if value[0] else "off", arguments=value[1:])
    if isinstance(value, dict):
        options = value.get("options", [])
        if not isinstance(options, list):
            options = [options]
        return RuleConfig(severity=value.get("severity", "error"), arguments=options)
    raise ValueError(f"rule '{name}' has invalid value {value!r}")


class LintConfig(BaseModel):
    """Active rule set for a lint pass."""

    rules: dict[str, RuleConfig] = Field(default_factory=dict, description="Rules by name")
    source: Path | None = Field(default=None, description="File the rules were loaded from")

    @field_validator("rules", mode="before")
    @classmethod
    def normalize_rules(cls, v: Any) -> dict[str, RuleConfig]:
        """Normalize every rule value to a RuleConfig."""
        if not isinstance(v, dict):
            raise ValueError("rules must be an object mapping rule names to settings")
        return {name: parse_rule_value(name, value) for name, value in v.items()}

    model_config = {"frozen": False}  # rule arguments are filled in after loading


class VersionToTest(BaseModel):
    """A TypeScript version and where its compiler is installed."""

    version_name: str = Field(alias="versionName", min_length=1)
    path: str = Field(min_length=1)

    model_config = {"populate_by_name": True, "frozen": True}


class ExpectOptions(BaseModel):
    """Arguments of the 'expect' rule."""

    tsconfig_path: str = Field(alias="tsconfigPath", min_length=1)
    versions_to_test: list[VersionToTest] = Field(alias="versionsToTest", min_length=1)

    model_config = {"populate_by_name": True}


def _resolve_extends(name: str, base_dir: Path) -> Path:
    """Resolve an 'extends' entry.

    Built-in names (see BUILTIN_CONFIGS) map to the bundled files; anything
    else is a path relative to the extending file. Other npm package names
    are not resolved.
    """
    if name in BUILTIN_CONFIGS:
        return BUILTIN_CONFIGS[name]
    return (base_dir / name).resolve()


def _read_rules(config_path: Path, chain: tuple[Path, ...]) -> dict[str, RuleConfig]:
    """Read rules from a config file and the files it extends, parents first."""
    config_path = config_path.resolve()
    if config_path in chain:
        cycle = " -> ".join(str(p) for p in (*chain, config_path))
        raise ConfigLoadError(f"Circular 'extends' in lint config: {cycle}")

    if not config_path.is_file():
        raise ConfigLoadError(f"Could not load config at {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigLoadError(f"Could not load config at {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config at {config_path} must be a JSON object")

    extends = data.get("extends", [])
    if isinstance(extends, str):
        extends = [extends]

    rules: dict[str, RuleConfig] = {}
    for parent in extends:
        parent_path = _resolve_extends(parent, config_path.parent)
        logger.debug(f"{config_path} extends {parent_path}")
        rules.update(_read_rules(parent_path, (*chain, config_path)))

    try:
        own = LintConfig(rules=data.get("rules", {}))
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid config at {config_path}: {e}") from e

    rules.update(own.rules)
    return rules


def load_config(config_path: Path) -> LintConfig:
    """Load a lint configuration file, following 'extends'.

    Args:
        config_path: Path to a tslint.json-style file

    Returns:
        LintConfig with merged rules; rules in the file override inherited ones

    Raises:
        ConfigLoadError: If any file in the chain is missing or invalid
    """
    config_path = Path(config_path)
    rules = _read_rules(config_path, ())
    return LintConfig(rules=rules, source=config_path)
