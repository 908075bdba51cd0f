"""Input validation functions."""
from pathlib import Path

from dts_lint.errors import MissingLocalCompiler
from dts_lint.versions import LOCAL


def validate_project_root(project_root: Path) -> None:
    """Validate the directory to lint exists and has a tsconfig.json.

    Args:
        project_root: Path to validate

    Raises:
        ValueError: If path does not exist, is not a directory or has no tsconfig.json
    """
    if not project_root.exists():
        raise ValueError(f"Project root does not exist: {project_root}")

    if not project_root.is_dir():
        raise ValueError(f"Project root is not a directory: {project_root}")

    if not (project_root / "tsconfig.json").is_file():
        raise ValueError(f"No tsconfig.json found in {project_root}")


def validate_local_override(ts_local: str | None, min_version: str, max_version: str) -> None:
    """Validate the local TypeScript override against the requested versions.

    Args:
        ts_local: Directory containing a locally built typescript.js
        min_version: Lowest version requested
        max_version: Highest version requested

    Raises:
        MissingLocalCompiler: If 'local' is requested without ts_local
        ValueError: If ts_local does not contain typescript.js
    """
    if LOCAL in (min_version, max_version) and not ts_local:
        raise MissingLocalCompiler("TypeScript version 'local' requires a local TypeScript path")

    if ts_local and not (Path(ts_local) / "typescript.js").is_file():
        raise ValueError(f"No typescript.js found in local TypeScript path: {ts_local}")
