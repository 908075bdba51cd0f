"""Selects, validates and completes the lint configuration for a pass."""
from pathlib import Path
from typing import Callable

from dts_lint.config import DEFAULT_CONFIG_PATH, ExpectOptions, LintConfig, VersionToTest, load_config
from dts_lint.errors import MisconfiguredRule
from dts_lint.logging_config import get_logger
from dts_lint.typescript_paths import typescript_path
from dts_lint.versions import VersionTag, resolve_version_range

logger = get_logger(__name__)

EXPECT_RULE = "expect"
PROJECT_CONFIG_NAME = "tslint.json"

PathResolver = Callable[[str, "str | None"], str]


def get_config_path(dir_path: Path) -> Path:
    """Return where a project keeps its own lint configuration."""
    return Path(dir_path) / PROJECT_CONFIG_NAME


def get_lint_config(
    expected_config_path: Path,
    tsconfig_path: Path,
    min_version: str | VersionTag,
    max_version: str | VersionTag,
    ts_local: str | None,
    path_resolver: PathResolver = typescript_path,
) -> LintConfig:
    """Load the lint configuration and point the 'expect' rule at the versions to test.

    Falls back to the built-in configuration when expected_config_path does
    not exist.

    Args:
        expected_config_path: Project configuration file to prefer
        tsconfig_path: tsconfig.json of the project being linted
        min_version: Lowest TypeScript version to test
        max_version: Highest TypeScript version to test
        ts_local: Local TypeScript directory, used for version 'local'
        path_resolver: Maps (version, ts_local) to a TypeScript install path

    Returns:
        LintConfig whose 'expect' rule arguments hold an ExpectOptions

    Raises:
        ConfigLoadError: If the configuration cannot be loaded
        MisconfiguredRule: If the 'expect' rule is missing or not an error
        InvalidRange: If the version bounds do not form a range
        UnknownVersion: If a version bound is unknown
    """
    expected_config_path = Path(expected_config_path)
    config_path = expected_config_path if expected_config_path.exists() else DEFAULT_CONFIG_PATH
    logger.info(f"Using lint config {config_path}")
    config = load_config(config_path)

    expect_rule = config.rules.get(EXPECT_RULE)
    if expect_rule is None or expect_rule.severity != "error":
        raise MisconfiguredRule(
            f"'{EXPECT_RULE}' rule should be enabled, else compile errors are ignored"
        )

    versions = resolve_version_range(min_version, max_version)
    logger.info(f"Testing TypeScript versions: {', '.join(versions)}")

    versions_to_test = [
        VersionToTest(version_name=version, path=path_resolver(version, ts_local))
        for version in versions
    ]
    expect_rule.arguments = [
        ExpectOptions(tsconfig_path=str(tsconfig_path), versions_to_test=versions_to_test)
    ]
    return config
