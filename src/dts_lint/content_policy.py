"""Raw-text bans on suppression directives."""
from dts_lint.types import PolicyViolation

TS_IGNORE = "ts-ignore"
TSLINT_DISABLE = "tslint:disable"

TS_IGNORE_MESSAGE = "'ts-ignore' is forbidden."
TSLINT_DISABLE_MESSAGE = (
    "'tslint:disable' is forbidden. "
    "('tslint:disable:rulename', tslint:disable-line' and 'tslint:disable-next-line' are allowed.)"
)

# Characters that turn 'tslint:disable' into a scoped form
_ALLOWED_DISABLE_SUFFIXES = (":", "-")


def find_ts_ignore(text: str) -> PolicyViolation | None:
    """Find the first 'ts-ignore' in text."""
    pos = text.find(TS_IGNORE)
    if pos == -1:
        return None
    return {"pos": pos, "message": TS_IGNORE_MESSAGE}


def find_tslint_disable(text: str) -> PolicyViolation | None:
    """Find the first blanket 'tslint:disable' in text.

    Scoped forms ('tslint:disable:rule', 'tslint:disable-line',
    'tslint:disable-next-line') are skipped and scanning resumes after them.
    """
    last_index = 0
    while True:
        pos = text.find(TSLINT_DISABLE, last_index)
        if pos == -1:
            return None
        end = pos + len(TSLINT_DISABLE)
        next_char = text[end : end + 1]
        if next_char not in _ALLOWED_DISABLE_SUFFIXES:
            return {"pos": pos, "message": TSLINT_DISABLE_MESSAGE}
        last_index = end


def scan_text(text: str) -> PolicyViolation | None:
    """Run the content policies in order and return the first violation.

    Args:
        text: Full source text of a file

    Returns:
        Violation with its character offset, or None if the text is clean
    """
    return find_ts_ignore(text) or find_tslint_disable(text)
