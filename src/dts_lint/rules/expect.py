"""The 'expect' rule: the project must compile under every version tested."""
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dts_lint.config import ExpectOptions, VersionToTest
from dts_lint.errors import MisconfiguredRule
from dts_lint.logging_config import get_logger
from dts_lint.path_policy import normalize_path
from dts_lint.types import RuleFailure

logger = get_logger(__name__)

# Timeout for a single compiler run in seconds
TSC_TIMEOUT = 600

_FILE_DIAGNOSTIC = re.compile(
    r"^(?P<file>.+?)\((?P<line>\d+),(?P<character>\d+)\): error (?P<code>TS\d+): (?P<message>.*)$"
)
_GLOBAL_DIAGNOSTIC = re.compile(r"^error (?P<code>TS\d+): (?P<message>.*)$")
_EXPECT_ERROR_COMMENT = re.compile(r"//\s*\$ExpectError")


@dataclass
class Diagnostic:
    """A compiler error; file is None for errors not tied to a file."""

    file: str | None
    line: int
    character: int
    code: str
    message: str


def tsc_script_path(typescript_path: str) -> Path:
    """Locate tsc.js for a TypeScript package directory or a typescript.js file."""
    path = Path(typescript_path)
    if path.suffix == ".js":
        return path.with_name("tsc.js")
    return path / "lib" / "tsc.js"


def parse_tsc_output(output: str, base_dir: Path) -> list[Diagnostic]:
    """Parse 'tsc --pretty false' output.

    Args:
        output: Compiler stdout
        base_dir: Directory the compiler ran in; relative file names are resolved against it

    Returns:
        Diagnostics in output order, with zero-based positions and normalized file paths
    """
    diagnostics: list[Diagnostic] = []
    for line in output.splitlines():
        match = _FILE_DIAGNOSTIC.match(line)
        if match:
            diagnostics.append(
                Diagnostic(
                    file=normalize_path(str(base_dir / match["file"])),
                    line=int(match["line"]) - 1,
                    character=int(match["character"]) - 1,
                    code=match["code"],
                    message=match["message"],
                )
            )
            continue

        match = _GLOBAL_DIAGNOSTIC.match(line)
        if match:
            diagnostics.append(Diagnostic(None, 0, 0, match["code"], match["message"]))
        elif line.startswith("  ") and diagnostics:
            # Continuation of a chained message
            diagnostics[-1].message += "\n" + line.strip()
    return diagnostics


def run_tsc(typescript_path: str, tsconfig_path: Path) -> str:
    """Type-check a project with one TypeScript install.

    Args:
        typescript_path: TypeScript package directory or typescript.js
        tsconfig_path: Project to check

    Returns:
        Compiler output

    Raises:
        FileNotFoundError: If node or the compiler is not installed
        RuntimeError: If the compiler times out or exits with an error
            and no diagnostics
    """
    script = tsc_script_path(typescript_path)
    if not script.is_file():
        raise FileNotFoundError(f"TypeScript compiler not found at {script}")

    command = ["node", str(script), "--noEmit", "--pretty", "false", "--project", str(tsconfig_path)]
    logger.debug(f"Running {' '.join(command)}")
    try:
        result = subprocess.run(
            command,
            cwd=tsconfig_path.parent,
            capture_output=True,
            text=True,
            timeout=TSC_TIMEOUT,
        )
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(f"TypeScript compiler timed out after {TSC_TIMEOUT}s") from e
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Could not run node to execute {script}: {e}") from e

    # A failing exit code without diagnostics means the compiler itself crashed
    if result.returncode != 0 and not _has_diagnostics(result.stdout):
        detail = (result.stderr or result.stdout).strip() or "no output"
        raise RuntimeError(
            f"TypeScript compiler {script} failed with exit code {result.returncode}: {detail}"
        )

    return result.stdout


def _has_diagnostics(output: str) -> bool:
    return any(
        _FILE_DIAGNOSTIC.match(line) or _GLOBAL_DIAGNOSTIC.match(line)
        for line in output.splitlines()
    )


def expected_error_lines(text: str) -> set[int]:
    """Zero-based lines that a '// $ExpectError' comment expects an error on.

    A comment on a line of its own applies to the next line, a trailing
    comment to its own line.
    """
    lines = set()
    for index, line in enumerate(text.split("\n")):
        match = _EXPECT_ERROR_COMMENT.search(line)
        if match is None:
            continue
        own_line = not line[: match.start()].strip()
        lines.add(index + 1 if own_line else index)
    return lines


class ExpectRule:
    """Reports compile errors under each TypeScript version being tested."""

    name = "expect"

    def __init__(self) -> None:
        self._diagnostics: dict[tuple[Path, str], list[Diagnostic]] = {}
        self._reported_global: set[tuple[Path, str]] = set()

    def apply(self, file_name: str, text: str, arguments: list[Any]) -> list[RuleFailure]:
        options = parse_expect_options(arguments)
        tsconfig_path = Path(options.tsconfig_path)
        normal_file = normalize_path(file_name)
        expected_lines = expected_error_lines(text)
        line_count = text.count("\n") + 1

        failures: list[RuleFailure] = []
        for version in options.versions_to_test:
            prefix = f"TypeScript@{version.version_name}"
            diagnostics = self._get_diagnostics(version, tsconfig_path)

            # Errors not tied to a file are reported once, on the first file linted
            key = (tsconfig_path, version.path)
            if key not in self._reported_global:
                self._reported_global.add(key)
                for diagnostic in diagnostics:
                    if diagnostic.file is None:
                        message = f"{prefix} compile error: \n{diagnostic.message}"
                        failures.append(self._failure(file_name, 0, 0, message))

            error_lines = set()
            for diagnostic in diagnostics:
                if diagnostic.file != normal_file:
                    continue
                error_lines.add(diagnostic.line)
                if diagnostic.line in expected_lines:
                    continue
                failures.append(
                    self._failure(
                        file_name,
                        diagnostic.line,
                        diagnostic.character,
                        f"{prefix} compile error: \n{diagnostic.message}",
                    )
                )

            for line in sorted(expected_lines - error_lines):
                if line < line_count:
                    message = f"{prefix}: Expected an error on this line, but found none."
                    failures.append(self._failure(file_name, line, 0, message))
        return failures

    def _get_diagnostics(self, version: VersionToTest, tsconfig_path: Path) -> list[Diagnostic]:
        key = (tsconfig_path, version.path)
        if key not in self._diagnostics:
            logger.info(f"Type-checking {tsconfig_path} with TypeScript {version.version_name}")
            output = run_tsc(version.path, tsconfig_path)
            self._diagnostics[key] = parse_tsc_output(output, tsconfig_path.parent)
        return self._diagnostics[key]

    def _failure(self, file_name: str, line: int, character: int, message: str) -> RuleFailure:
        return {
            "file": file_name,
            "rule": self.name,
            "severity": "error",
            "line": line,
            "character": character,
            "message": message,
        }


def parse_expect_options(arguments: list[Any]) -> ExpectOptions:
    """Read the rule's ExpectOptions from its arguments.

    Raises:
        MisconfiguredRule: If the arguments hold no usable options
    """
    if not arguments:
        raise MisconfiguredRule("'expect' rule requires tsconfigPath and versionsToTest options")
    options = arguments[0]
    if isinstance(options, ExpectOptions):
        return options
    try:
        return ExpectOptions.model_validate(options)
    except ValueError as e:
        raise MisconfiguredRule(f"Invalid 'expect' rule options: {e}") from e
