"""TypeScript version tags and version range resolution."""
from dataclasses import dataclass
from typing import ClassVar

from dts_lint.errors import InvalidRange, UnknownVersion

# Every released TypeScript minor version, oldest first
SHIPPED_VERSIONS: tuple[str, ...] = (
    "2.0", "2.1", "2.2", "2.3", "2.4", "2.5", "2.6", "2.7", "2.8", "2.9",
    "3.0", "3.1", "3.2", "3.3", "3.4", "3.5", "3.6", "3.7", "3.8", "3.9",
    "4.0", "4.1", "4.2", "4.3", "4.4", "4.5", "4.6", "4.7", "4.8", "4.9",
    "5.0", "5.1", "5.2", "5.3", "5.4", "5.5", "5.6",
)  # fmt: skip

# Shipped versions that are still tested by default
SUPPORTED_VERSIONS: tuple[str, ...] = SHIPPED_VERSIONS[SHIPPED_VERSIONS.index("4.9") :]

LOWEST_SUPPORTED_VERSION = SUPPORTED_VERSIONS[0]

LATEST = "latest"
LOCAL = "local"


@dataclass(frozen=True)
class Shipped:
    """A released TypeScript version, identified by its place in SHIPPED_VERSIONS."""

    position: int

    @property
    def name(self) -> str:
        return SHIPPED_VERSIONS[self.position]


@dataclass(frozen=True)
class Latest:
    """The newest, unreleased TypeScript; newer than every shipped version."""

    name: ClassVar[str] = LATEST


@dataclass(frozen=True)
class Local:
    """A locally built TypeScript; not ordered against any other version."""

    name: ClassVar[str] = LOCAL


VersionTag = Shipped | Latest | Local


def parse_version_tag(version: str | VersionTag) -> VersionTag:
    """Parse a version string into a tag.

    Args:
        version: "major.minor", "latest", "local" or an existing tag

    Returns:
        Matching version tag

    Raises:
        UnknownVersion: If the string names no known version
    """
    if isinstance(version, (Shipped, Latest, Local)):
        return version
    if version == LATEST:
        return Latest()
    if version == LOCAL:
        return Local()
    try:
        return Shipped(SHIPPED_VERSIONS.index(version))
    except ValueError:
        raise UnknownVersion(
            f"Unknown TypeScript version: {version!r}. "
            f"Expected one of {SHIPPED_VERSIONS[0]}..{SHIPPED_VERSIONS[-1]}, "
            f"'{LATEST}' or '{LOCAL}'"
        ) from None


def resolve_version_range(
    min_version: str | VersionTag, max_version: str | VersionTag
) -> list[str]:
    """Expand a (min, max) version range into the versions to test, oldest first.

    Args:
        min_version: Lowest version to test
        max_version: Highest version to test

    Returns:
        Non-empty list of version names, "latest" last when included

    Raises:
        UnknownVersion: If either bound is not a known version
        InvalidRange: If the bounds do not form a range
    """
    low = parse_version_tag(min_version)
    high = parse_version_tag(max_version)

    if isinstance(low, Local) or isinstance(high, Local):
        if low != high:
            raise InvalidRange(
                f"'{LOCAL}' must be both the minimum and maximum version, "
                f"got {low.name}..{high.name}"
            )
        return [LOCAL]

    if isinstance(low, Latest):
        if not isinstance(high, Latest):
            raise InvalidRange(
                f"Minimum version '{LATEST}' requires maximum version '{LATEST}', got {high.name}"
            )
        return [LATEST]

    if isinstance(high, Latest):
        return [*SHIPPED_VERSIONS[low.position :], LATEST]

    if high.position < low.position:
        raise InvalidRange(
            f"Maximum version {high.name} is older than minimum version {low.name}"
        )
    return list(SHIPPED_VERSIONS[low.position : high.position + 1])


def next_version(version: str) -> str:
    """Return the version released after a shipped version ("latest" after the newest)."""
    tag = parse_version_tag(version)
    if not isinstance(tag, Shipped):
        raise InvalidRange(f"No version follows {tag.name}")
    if tag.position + 1 == len(SHIPPED_VERSIONS):
        return LATEST
    return SHIPPED_VERSIONS[tag.position + 1]


def later_version(first: str, second: str) -> str:
    """Return the newer of two shipped-or-latest versions."""
    a = parse_version_tag(first)
    b = parse_version_tag(second)
    if isinstance(a, Local) or isinstance(b, Local):
        raise InvalidRange(f"'{LOCAL}' cannot be compared with other versions")
    if isinstance(a, Latest):
        return a.name
    if isinstance(b, Latest):
        return b.name
    return a.name if a.position >= b.position else b.name
