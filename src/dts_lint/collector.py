"""File collection following tsconfig.json files/include/exclude."""
import fnmatch
from pathlib import Path, PurePosixPath

from dts_lint.errors import ProjectLoadError

SOURCE_EXTENSIONS = (".d.ts", ".ts", ".tsx")
DEFAULT_INCLUDE = ["**/*"]
DEFAULT_EXCLUDE = ["node_modules", "bower_components", "jspm_packages"]

_WILDCARDS = set("*?[")


def is_source_file(path: Path) -> bool:
    """Check if a file is TypeScript source."""
    return path.name.endswith(SOURCE_EXTENSIONS)


def _match_parts(parts: tuple[str, ...], pattern_parts: tuple[str, ...]) -> bool:
    """Match path segments against pattern segments; '**' spans any number of segments."""
    if not pattern_parts:
        return not parts
    head, rest = pattern_parts[0], pattern_parts[1:]
    if head == "**":
        return any(_match_parts(parts[i:], rest) for i in range(len(parts) + 1))
    return bool(parts) and fnmatch.fnmatchcase(parts[0], head) and _match_parts(parts[1:], rest)


def _pattern_parts(pattern: str) -> tuple[str, ...]:
    return tuple(p for p in PurePosixPath(pattern.replace("\\", "/")).parts if p != ".")


def matches_include(relative_path: PurePosixPath, pattern: str, root: Path) -> bool:
    """Check if a file matches an include pattern.

    A pattern without wildcards that names a directory includes everything
    below it.
    """
    if not _WILDCARDS.intersection(pattern) and (root / pattern).is_dir():
        pattern = pattern.rstrip("/") + "/**/*"
    return _match_parts(relative_path.parts, _pattern_parts(pattern))


def is_excluded(relative_path: PurePosixPath, exclude_patterns: list[str]) -> bool:
    """Check if a file is excluded by patterns.

    A pattern excludes a file when it matches the file itself or any of the
    directories containing it, so 'node_modules' and 'node_modules/**' behave
    the same.

    Args:
        relative_path: File path relative to the project root
        exclude_patterns: tsconfig exclude patterns

    Returns:
        True if file should be excluded
    """
    parts = relative_path.parts
    for pattern in exclude_patterns:
        pattern_parts = _pattern_parts(pattern)
        if pattern_parts and pattern_parts[-1] == "**":
            pattern_parts = pattern_parts[:-1]
        for end in range(1, len(parts) + 1):
            if _match_parts(parts[:end], pattern_parts):
                return True
    return False


def collect_project_files(
    root: Path,
    files: list[str] | None = None,
    include: list[str] | None = None,
    exclude: list[str] | None = None,
) -> list[Path]:
    """Collect the source files of a TypeScript project.

    Listed files come first in their listed order, then included files in
    sorted path order.

    Args:
        root: Directory containing tsconfig.json
        files: Explicit file list
        include: Include patterns; defaults to everything unless files is given
        exclude: Exclude patterns; defaults to dependency directories

    Returns:
        List of file paths without duplicates

    Raises:
        ProjectLoadError: If a listed file does not exist
    """
    collected: list[Path] = []
    seen: set[Path] = set()

    for name in files or []:
        file_path = root / name
        if not file_path.is_file():
            raise ProjectLoadError(f"File '{name}' listed in tsconfig.json not found in {root}")
        if file_path not in seen:
            seen.add(file_path)
            collected.append(file_path)

    if include is None:
        include = [] if files is not None else DEFAULT_INCLUDE
    if exclude is None:
        exclude = DEFAULT_EXCLUDE

    if not include:
        return collected

    for file_path in sorted(root.rglob("*")):
        if file_path in seen or not file_path.is_file() or not is_source_file(file_path):
            continue
        relative = PurePosixPath(file_path.relative_to(root).as_posix())
        if is_excluded(relative, exclude):
            continue
        if any(matches_include(relative, pattern, root) for pattern in include):
            seen.add(file_path)
            collected.append(file_path)

    return collected
