"""Tests for the suppression-directive bans."""
from dts_lint.content_policy import (
    TS_IGNORE_MESSAGE,
    TSLINT_DISABLE_MESSAGE,
    find_ts_ignore,
    find_tslint_disable,
    scan_text,
)


def test_clean_text():
    """Test text without directives passes."""
    assert scan_text("export function f(): void;\n") is None


def test_ts_ignore_position():
    """Test the first ts-ignore is reported at its exact offset."""
    text = "declare const a: number;\n// @ts-ignore\nexport = a; // ts-ignore\n"

    violation = scan_text(text)

    assert violation == {"pos": text.index("ts-ignore"), "message": TS_IGNORE_MESSAGE}


def test_ts_ignore_anywhere():
    """Test ts-ignore is banned regardless of surrounding content."""
    assert find_ts_ignore("ts-ignore")["pos"] == 0
    assert find_ts_ignore("xx/*ts-ignore*/")["pos"] == 4


def test_scoped_tslint_disables_are_allowed():
    """Test scoped tslint:disable forms pass."""
    text = (
        "// tslint:disable-next-line no-any\n"
        "export const a: any;\n"
        "export const b: any; // tslint:disable-line\n"
        "// tslint:disable:no-any\n"
    )

    assert find_tslint_disable(text) is None
    assert scan_text(text) is None


def test_blanket_tslint_disable():
    """Test a bare tslint:disable is reported."""
    text = "/* tslint:disable */\nexport {};\n"

    violation = find_tslint_disable(text)

    assert violation == {"pos": 3, "message": TSLINT_DISABLE_MESSAGE}


def test_blanket_tslint_disable_at_end_of_text():
    """Test tslint:disable as the last characters of the file is reported."""
    text = "export {};\n// tslint:disable"

    assert find_tslint_disable(text)["pos"] == text.index("tslint:disable")


def test_blanket_tslint_disable_after_allowed_ones():
    """Test scanning continues past allowed forms to a later bare one."""
    allowed = "// tslint:disable-next-line\nexport const x: any;\n" * 5
    allowed += "// tslint:disable:no-any\n" * 5
    text = allowed + "// tslint:disable\n"

    violation = scan_text(text)

    assert violation["pos"] == len(allowed) + 3
    assert violation["message"] == TSLINT_DISABLE_MESSAGE


def test_ts_ignore_checked_first():
    """Test ts-ignore wins over an earlier tslint:disable."""
    text = "// tslint:disable\n// @ts-ignore\n"

    violation = scan_text(text)

    assert violation["message"] == TS_IGNORE_MESSAGE
    assert violation["pos"] == text.index("ts-ignore")
