"""Exceptions raised by dts-lint.

All of them derive from ValueError so callers that already treat bad input
as a ValueError keep working.
"""


class DtsLintError(ValueError):
    """Base class for fatal dts-lint errors."""


class InvalidRange(DtsLintError):
    """Minimum and maximum TypeScript versions do not form a valid range."""


class UnknownVersion(DtsLintError):
    """Version tag is not a shipped TypeScript version, 'latest' or 'local'."""


class ConfigLoadError(DtsLintError):
    """Lint configuration could not be found, parsed or validated."""


class MisconfiguredRule(DtsLintError):
    """The 'expect' rule is missing or not enabled at error severity."""


class ProjectLoadError(DtsLintError):
    """tsconfig.json could not be read."""


class MissingLocalCompiler(DtsLintError):
    """The 'local' version was requested without a local TypeScript path."""
