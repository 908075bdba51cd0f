"""Tests for path predicates."""
from dts_lint.path_policy import is_dependency_path, is_version_pinned_path, normalize_path


def test_normalize_path():
    """Test separators, dot segments and drive letters are normalized."""
    assert normalize_path("c:\\types\\foo\\index.d.ts") == "C:/types/foo/index.d.ts"
    assert normalize_path("/types/foo/./ts3.8/../index.d.ts") == "/types/foo/index.d.ts"
    assert normalize_path("/types//foo/") == "/types/foo"


def test_version_pinned_path():
    """Test files in a tsX.Y directory are version pinned."""
    assert is_version_pinned_path("/project/ts3.8/index.d.ts", "/project")
    assert is_version_pinned_path("/project/ts4.10/sub/index.d.ts", "/project/")


def test_not_version_pinned_path():
    """Test other files are not version pinned."""
    assert not is_version_pinned_path("/project/index.d.ts", "/project")
    assert not is_version_pinned_path("/project/src/ts3.8/index.d.ts", "/project")
    assert not is_version_pinned_path("/project/ts-tests.ts", "/project")
    assert not is_version_pinned_path("/other/ts3.8/index.d.ts", "/project")
    assert not is_version_pinned_path("/project2/ts3.8/index.d.ts", "/project")


def test_version_pinned_path_windows():
    """Test drive letter case does not matter."""
    assert is_version_pinned_path("c:\\types\\foo\\ts3.8\\index.d.ts", "C:\\types\\foo")
    assert is_version_pinned_path("C:/types/foo/ts3.8/index.d.ts", "c:\\types\\foo")
    assert not is_version_pinned_path("c:\\types\\foo\\index.d.ts", "C:\\types\\foo")


def test_dependency_path():
    """Test node_modules segments mark dependency files."""
    assert is_dependency_path("/project/node_modules/@types/node/index.d.ts")
    assert not is_dependency_path("/project/index.d.ts")
    assert not is_dependency_path("/project/my_node_modules_notes.d.ts")
