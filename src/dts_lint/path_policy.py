"""Path predicates used to decide which files a lint pass covers."""
import posixpath
import re

DEPENDENCY_DIR = "node_modules"

_DRIVE_LETTER = re.compile(r"^[a-z](?=:)")
_VERSION_DIR = re.compile(r"^/ts\d+\.\d+/")


def normalize_path(path: str) -> str:
    """Normalize a path to forward slashes with an upper-case drive letter.

    Examples:
        c:\\types\\foo\\index.d.ts -> C:/types/foo/index.d.ts
        /types/foo/./ts3.8/../index.d.ts -> /types/foo/index.d.ts
    """
    normal = posixpath.normpath(str(path).replace("\\", "/"))
    return _DRIVE_LETTER.sub(lambda m: m.group(0).upper(), normal)


def is_version_pinned_path(file_path: str, project_root: str) -> bool:
    """Check if a file lives in a tsX.Y subdirectory of the project root.

    Those subtrees target older compilers and get a lint pass of their own.

    Args:
        file_path: Source file path
        project_root: Directory being linted

    Returns:
        True if the first directory below the root is named like 'ts3.8'
    """
    normal_file = normalize_path(file_path)
    normal_root = normalize_path(project_root)
    if not normal_file.startswith(normal_root):
        return False
    subdir_path = normal_file[len(normal_root) :]
    return bool(_VERSION_DIR.match(subdir_path))


def is_dependency_path(file_path: str) -> bool:
    """Check if a file belongs to an installed dependency."""
    return DEPENDENCY_DIR in normalize_path(file_path).split("/")
