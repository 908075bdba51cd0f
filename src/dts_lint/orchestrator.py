"""Main orchestrator coordinating all components."""
import os
import re
from collections.abc import Iterator
from pathlib import Path

from dts_lint.config import EXPECT_ONLY_CONFIG_PATH
from dts_lint.config_resolver import PathResolver, get_config_path, get_lint_config
from dts_lint.content_policy import scan_text
from dts_lint.engine import RuleEngine, RuleRunner
from dts_lint.errors import InvalidRange
from dts_lint.logging_config import get_logger
from dts_lint.metrics import LintMetrics
from dts_lint.path_policy import is_dependency_path, is_version_pinned_path
from dts_lint.program import ProgramBuilder, SourceFile, create_program
from dts_lint.reporter import format_policy_violation
from dts_lint.typescript_paths import typescript_path
from dts_lint.versions import (
    LATEST,
    LOCAL,
    LOWEST_SUPPORTED_VERSION,
    VersionTag,
    later_version,
    next_version,
    parse_version_tag,
    resolve_version_range,
)

logger = get_logger(__name__)

_TYPES_VERSION_DIR = re.compile(r"ts(\d+\.\d+)")


def _track(source_files: list[SourceFile], show_progress: bool) -> Iterator[SourceFile]:
    """Yield source files, with a progress bar on stderr when requested."""
    if not show_progress or os.environ.get("DTS_LINT_NO_PROGRESS"):
        yield from source_files
        return

    from rich.console import Console
    from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TextColumn("[bold cyan]{task.fields[status]}"),
        console=Console(stderr=True),
        transient=True,
    ) as progress:
        task = progress.add_task("Linting files", total=len(source_files), status="Starting...")
        for source_file in source_files:
            progress.update(task, status=Path(source_file.file_name).name)
            yield source_file
            progress.advance(task)


def lint(
    dir_path: Path | str,
    min_version: str | VersionTag,
    max_version: str | VersionTag,
    is_latest: bool,
    expect_only: bool,
    ts_local: str | None,
    *,
    program_builder: ProgramBuilder = create_program,
    rule_engine: RuleRunner | None = None,
    path_resolver: PathResolver = typescript_path,
    formatter: str = "stylish",
    show_progress: bool = False,
) -> str | None:
    """Lint one directory against a range of TypeScript versions.

    Args:
        dir_path: Directory containing tsconfig.json
        min_version: Lowest TypeScript version to test
        max_version: Highest TypeScript version to test
        is_latest: Whether this is the pass for the newest versions; tsX.Y
            subdirectories are then left to their own passes
        expect_only: Use the built-in configuration with only the 'expect' rule
        ts_local: Local TypeScript directory, used for version 'local'
        program_builder: Builds the program from tsconfig.json
        rule_engine: Runs the structural rules; a RuleEngine by default
        path_resolver: Maps (version, ts_local) to a TypeScript install path
        formatter: Output format of the default rule engine
        show_progress: Show a progress bar on stderr

    Returns:
        None if nothing was found, otherwise the report. A banned directive
        is reported on its own and stops the pass.

    Raises:
        ConfigLoadError: If the lint configuration cannot be loaded
        MisconfiguredRule: If the 'expect' rule is not enabled as an error
        InvalidRange: If the version bounds do not form a range
        UnknownVersion: If a version bound is unknown
    """
    dir_path = Path(dir_path).absolute()
    metrics = LintMetrics()

    tsconfig_path = dir_path / "tsconfig.json"
    program = program_builder(tsconfig_path)

    if rule_engine is None:
        rule_engine = RuleEngine(formatter=formatter)

    config_path = EXPECT_ONLY_CONFIG_PATH if expect_only else get_config_path(dir_path)
    config = get_lint_config(
        config_path, tsconfig_path, min_version, max_version, ts_local, path_resolver=path_resolver
    )

    source_files = []
    for source_file in program.get_source_files():
        metrics.files_seen += 1
        if program.is_default_library(source_file):
            metrics.default_library_files += 1
            continue
        source_files.append(source_file)

    for source_file in _track(source_files, show_progress):
        file_name, text = source_file.file_name, source_file.text

        if is_dependency_path(file_name):
            metrics.dependency_files += 1
        else:
            metrics.files_scanned += 1
            violation = scan_text(text)
            if violation:
                position = source_file.line_and_character(violation["pos"])
                logger.info(f"Banned directive in {file_name}, stopping")
                return format_policy_violation(file_name, position, violation["message"])

        # tsX.Y subdirectories are linted by their own pass
        if is_latest and is_version_pinned_path(file_name, str(dir_path)):
            metrics.pinned_files_skipped += 1
            logger.debug(f"Skipping {file_name}: belongs to a version-specific pass")
            continue

        rule_engine.lint(file_name, text, config)
        metrics.files_linted += 1

    result = rule_engine.get_result()
    metrics.finish()
    logger.info(f"Lint pass for {dir_path} finished: {metrics.to_dict()}")

    return result.output if result.failures else None


def find_types_versions(dir_path: Path) -> list[str]:
    """Find the TypeScript versions that have their own tsX.Y subdirectory.

    Args:
        dir_path: Package directory

    Returns:
        Version names, oldest first

    Raises:
        UnknownVersion: If a subdirectory names an unknown version
    """
    tags = []
    for child in dir_path.iterdir():
        match = _TYPES_VERSION_DIR.fullmatch(child.name)
        if match and child.is_dir():
            tags.append(parse_version_tag(match.group(1)))
    return [tag.name for tag in sorted(tags, key=lambda tag: tag.position)]


def lint_package(
    dir_path: Path | str,
    min_version: str = LOWEST_SUPPORTED_VERSION,
    *,
    only_test_ts_next: bool = False,
    expect_only: bool = False,
    ts_local: str | None = None,
    program_builder: ProgramBuilder = create_program,
    path_resolver: PathResolver = typescript_path,
    formatter: str = "stylish",
    show_progress: bool = False,
) -> str | None:
    """Lint a package directory and each of its tsX.Y subdirectories.

    With subdirectories ts3.6 and ts4.0, the passes are:
    lowest..3.6 in ts3.6, 3.7..4.0 in ts4.0 and 4.1..latest in the root.

    Args:
        dir_path: Package directory
        min_version: Oldest TypeScript version the package supports
        only_test_ts_next: Test only the latest TypeScript
        expect_only: Use the built-in configuration with only the 'expect' rule
        ts_local: Test only a local TypeScript build in this directory
        program_builder: Builds the program from tsconfig.json
        path_resolver: Maps (version, ts_local) to a TypeScript install path
        formatter: Output format of the rule engine
        show_progress: Show a progress bar on stderr

    Returns:
        First report of a failing pass, or None if every pass is clean

    Raises:
        InvalidRange: If min_version skips a tsX.Y subdirectory
    """
    dir_path = Path(dir_path)
    pass_options = {
        "program_builder": program_builder,
        "path_resolver": path_resolver,
        "formatter": formatter,
        "show_progress": show_progress,
    }

    if only_test_ts_next or ts_local:
        version = LOCAL if ts_local else LATEST
        return lint(dir_path, version, version, True, expect_only, ts_local, **pass_options)

    types_versions = find_types_versions(dir_path)
    lows = [LOWEST_SUPPORTED_VERSION, *(next_version(v) for v in types_versions)]
    highs = [*types_versions, LATEST]

    for low_bound, high in zip(lows, highs):
        low = later_version(min_version, low_bound)
        try:
            resolve_version_range(low, high)
        except InvalidRange:
            raise InvalidRange(
                f"'Minimum TypeScript Version: {min_version}' skips ts{high} folder."
            ) from None

        is_latest = high == LATEST
        version_path = dir_path if is_latest else dir_path / f"ts{high}"
        if len(lows) > 1:
            logger.info(f"Testing from {low} to {high} in {version_path}")

        report = lint(version_path, low, high, is_latest, expect_only, None, **pass_options)
        if report:
            return report

    return None
