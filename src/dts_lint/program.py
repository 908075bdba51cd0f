"""Project programs: the source files a tsconfig.json describes."""
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from dts_lint.collector import collect_project_files
from dts_lint.errors import ProjectLoadError
from dts_lint.file_reader import read_source_file
from dts_lint.logging_config import get_logger
from dts_lint.types import Position

logger = get_logger(__name__)


def line_and_character(text: str, pos: int) -> Position:
    """Convert a character offset into a zero-based line and character."""
    line = text.count("\n", 0, pos)
    line_start = text.rfind("\n", 0, pos) + 1
    return {"line": line, "character": pos - line_start}


@dataclass(frozen=True)
class SourceFile:
    """A file of a program and its full text."""

    file_name: str
    text: str

    def line_and_character(self, pos: int) -> Position:
        return line_and_character(self.text, pos)


@dataclass
class Program:
    """Source files of a project, in the order the project lists them."""

    source_files: list[SourceFile]
    default_library_files: frozenset[str] = field(default_factory=frozenset)

    def get_source_files(self) -> list[SourceFile]:
        return list(self.source_files)

    def is_default_library(self, source_file: SourceFile) -> bool:
        """Check if a file is one of the compiler's bundled lib.*.d.ts files."""
        return source_file.file_name in self.default_library_files


class ProgramBuilder(Protocol):
    """Builds a Program from a tsconfig.json path."""

    def __call__(self, tsconfig_path: Path) -> Program: ...


def read_tsconfig(tsconfig_path: Path) -> dict:
    """Read tsconfig.json.

    Raises:
        ProjectLoadError: If the file is missing or not a JSON object
    """
    try:
        with tsconfig_path.open(encoding="utf-8-sig") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ProjectLoadError(f"Could not find {tsconfig_path}") from None
    except (OSError, json.JSONDecodeError) as e:
        raise ProjectLoadError(f"Could not read {tsconfig_path}: {e}") from e

    if not isinstance(data, dict):
        raise ProjectLoadError(f"{tsconfig_path} must contain a JSON object")
    return data


def create_program(tsconfig_path: Path) -> Program:
    """Build a Program from the files a tsconfig.json selects.

    Args:
        tsconfig_path: Path to tsconfig.json

    Returns:
        Program with one SourceFile per readable source file

    Raises:
        ProjectLoadError: If tsconfig.json is invalid or lists missing files
    """
    tsconfig_path = Path(tsconfig_path)
    tsconfig = read_tsconfig(tsconfig_path)

    for key in ("files", "include", "exclude"):
        value = tsconfig.get(key)
        if value is not None and not (
            isinstance(value, list) and all(isinstance(v, str) for v in value)
        ):
            raise ProjectLoadError(f"'{key}' in {tsconfig_path} must be a list of strings")

    paths = collect_project_files(
        tsconfig_path.parent,
        files=tsconfig.get("files"),
        include=tsconfig.get("include"),
        exclude=tsconfig.get("exclude"),
    )

    source_files = []
    for path in paths:
        text = read_source_file(path)
        if text is not None:
            source_files.append(SourceFile(file_name=str(path), text=text))

    logger.debug(f"Program for {tsconfig_path} has {len(source_files)} source files")
    return Program(source_files=source_files)
