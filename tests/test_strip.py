import logging

import pytest

from linestrip.events import logging_observer, null_observer
from linestrip.strip import strip_substring_from_lines, strip_text_bytes, strip_with_report


def strip(text, substring):
    return strip_substring_from_lines(text, substring, observer=null_observer)


@pytest.mark.parametrize(
    "text, substring, expected",
    [
        ("123 456 123", "123", " 456"),
        ("Hello, world! Hello, again!", "Hello, ", "world! again!"),
        ("aaa aaa aaa", "aa", "a a a"),
        ("Hello   world", "   ", "Helloworld"),
        ("test This is a line.\ntest Another line.", "test ", "This is a line.\nAnother line."),
        ("This is a line test\nAnother line test", " test", "This is a line\nAnother line"),
        ("Hello @world!\nGoodbye @world!", "@world", "Hello !\nGoodbye !"),
    ],
)
def test_scenarios(text, substring, expected):
    assert strip(text, substring) == expected


def test_overlapping_match_collapses_leftmost_first():
    assert strip("aaa", "aa") == "a"
    assert strip("aaaa", "aa") == ""


def test_removal_exposes_new_match():
    # removing "ab" from "aabb" leaves "ab", which is removed as well
    assert strip("aabb", "ab") == ""
    assert "aabb".replace("ab", "") == "ab"


def test_empty_substring_only_trims():
    assert strip("keep  \n  lead\tmid \t", "") == "keep\n  lead\tmid"


def test_empty_text():
    assert strip("", "x") == ""
    assert strip("", "") == ""


def test_line_count_preserved():
    text = "x\nxx\n\nabc x  \nx\n"
    out = strip(text, "x")
    assert out == "\n\n\nabc\n\n"
    assert len(out.split("\n")) == len(text.split("\n"))


def test_no_delimiter_added_at_ends():
    out = strip("a\nb", "z")
    assert not out.startswith("\n")
    assert not out.endswith("\n")


def test_only_ascii_whitespace_is_trimmed():
    assert strip("end\u00a0", "") == "end\u00a0"
    assert strip("end\u3000", "") == "end\u3000"
    assert strip("end \x0b\x0c\r", "") == "end"


def test_leading_whitespace_kept():
    assert strip("   indented x", "x") == "   indented"


def test_case_sensitive():
    assert strip("Test test", "test") == "Test"


@pytest.mark.parametrize(
    "text, substring",
    [
        ("aaa aaa aaa", "aa"),
        ("abab ab  \nbaba", "ab"),
        ("x y z  \n\n  ", " "),
    ],
)
def test_idempotent(text, substring):
    once = strip(text, substring)
    assert strip(once, substring) == once


def test_report_counts():
    text, report = strip_with_report("a-b-c  \nno match\n-", "-", observer=null_observer)
    assert text == "abc\nno match\n"
    assert report["lines"] == 3
    assert report["lines_changed"] == 2
    assert report["removals"] == 3
    assert report["lines_trimmed"] == 1


def test_observer_sees_each_removal():
    events = []
    strip_substring_from_lines("aaa aaa", "aa", observer=lambda e, f: events.append((e, dict(f))))
    assert [e for e, _ in events] == ["substring_removed"] * 2
    assert events[0][1] == {"substring": "aa", "line": 1, "position": 0}
    assert events[1][1]["position"] == 2


def test_failing_observer_does_not_change_result():
    def broken(event, fields):
        raise RuntimeError("sink down")

    assert strip_substring_from_lines("aaa aaa aaa", "aa", observer=broken) == "a a a"


def test_strip_text_bytes_utf8_bom():
    raw = "\ufeffx one\nx two".encode("utf-8")
    data = strip_text_bytes(raw, "x ", observer=null_observer)
    assert data["report"]["encoding"]["decode_used"] == "utf-8-sig"
    assert data["report"]["summary"]["removals"] == 2


def test_disabled_level_skips_formatting():
    seen = []

    class Field:
        def __repr__(self):
            seen.append("repr")
            return "field"

    log = logging.getLogger("linestrip.quiet")
    log.setLevel(logging.INFO)
    observe = logging_observer(log)

    observe("substring_removed", {"substring": Field()})
    assert seen == []
    observe("file_read", {"path": Field()})
    assert seen == ["repr"]
