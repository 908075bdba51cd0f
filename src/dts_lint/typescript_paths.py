"""Locations of installed TypeScript compilers."""
import os
from pathlib import Path

from dts_lint.errors import MissingLocalCompiler
from dts_lint.versions import LATEST, LOCAL

INSTALLS_DIR_ENV = "DTS_TYPESCRIPT_INSTALLS"


def typescript_installs_dir() -> Path:
    """Directory holding one TypeScript install per version."""
    override = os.environ.get(INSTALLS_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".dts" / "typescript-installs"


def typescript_path(version: str, ts_local: str | None = None) -> str:
    """Return the path of the TypeScript package for a version.

    Args:
        version: Shipped version name, "latest" or "local"
        ts_local: Directory containing a locally built typescript.js

    Returns:
        Path to the typescript package directory, or to typescript.js for "local"

    Raises:
        MissingLocalCompiler: If "local" is requested without ts_local
    """
    if version == LOCAL:
        if not ts_local:
            raise MissingLocalCompiler("TypeScript version 'local' requires a local TypeScript path")
        return str(Path(ts_local) / "typescript.js")
    # 'latest' tracks typescript@next
    install_name = "next" if version == LATEST else version
    return str(typescript_installs_dir() / install_name / "node_modules" / "typescript")
