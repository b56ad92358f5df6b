"""
Line-oriented substring removal.

Responsibilities:
- split text on "\\n" only
- remove a literal substring from each line, leftmost first, until absent
- trim trailing ASCII whitespace per line
- rejoin with a single "\\n"
- report what changed (used by the HTTP surface)
"""

from __future__ import annotations

import base64
import hashlib
from typing import Any, Dict, Optional

from charset_normalizer import from_bytes

from .events import Observer, default_observer, notify
from .rules import ASCII_WHITESPACE, LINE_DELIMITER, OUTPUT_ENCODING


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def _remove_all(line: str, substring: str, lineno: int, observer: Optional[Observer]) -> tuple[str, int]:
    removals = 0
    # an empty substring matches at 0 forever
    if not substring:
        return line, removals

    pos = line.find(substring)
    while pos != -1:
        line = line[:pos] + line[pos + len(substring):]
        removals += 1
        notify(observer, "substring_removed", substring=substring, line=lineno, position=pos)
        pos = line.find(substring)
    return line, removals


def strip_with_report(
    text: str, substring: str, observer: Optional[Observer] = default_observer
) -> tuple[str, Dict[str, Any]]:
    """
    Strip `substring` from every line of `text` and describe what happened.

    Rules:
    - Removal is sequential and leftmost-first, so "aaa" minus "aa" is "a".
    - A removal can expose a new match; that one is removed too.
    - An empty substring removes nothing; lines are still right-trimmed.
    - Output has exactly as many lines as input.
    """
    lines = text.split(LINE_DELIMITER)
    out: list[str] = []
    removals = 0
    lines_changed = 0
    lines_trimmed = 0

    for i, line in enumerate(lines):
        removed, count = _remove_all(line, substring, i + 1, observer)
        trimmed = removed.rstrip(ASCII_WHITESPACE)

        removals += count
        if count:
            lines_changed += 1
        if trimmed != removed:
            lines_trimmed += 1

        out.append(trimmed)

    report = {
        "substring": substring,
        "lines": len(lines),
        "lines_changed": lines_changed,
        "removals": removals,
        "lines_trimmed": lines_trimmed,
        "policy": {
            "match": "literal",
            "order": "leftmost_until_absent",
            "trim": "trailing_ascii_whitespace",
            "delimiter": "lf",
        },
    }
    return LINE_DELIMITER.join(out), report


def strip_substring_from_lines(
    text: str, substring: str, observer: Optional[Observer] = default_observer
) -> str:
    """Remove every occurrence of `substring` from each line of `text`."""
    stripped, _ = strip_with_report(text, substring, observer)
    return stripped


def _decode(raw: bytes) -> tuple[str, Dict[str, Any]]:
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False
    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8")
            decode_used = "utf-8"
        except UnicodeDecodeError:
            # keep going deterministically with replacement characters
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
        decode_fallback = True

    return text, {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
        "output": OUTPUT_ENCODING,
    }


def strip_text_bytes(
    raw: bytes, substring: str, observer: Optional[Observer] = default_observer
) -> Dict[str, Any]:
    """
    Decode an uploaded file, strip it, and return the API's response envelope.
    """
    text, enc_report = _decode(raw)
    stripped, report = strip_with_report(text, substring, observer)
    out = stripped.encode(OUTPUT_ENCODING)

    return {
        "stripped_text": {
            "sha256": _sha256_hex(out),
            "encoding": OUTPUT_ENCODING,
            "content_b64": base64.b64encode(out).decode("ascii"),
        },
        "report": {
            "summary": report,
            "encoding": enc_report,
        },
    }
