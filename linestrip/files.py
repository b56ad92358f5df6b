"""Whole-file read/write helpers."""

from __future__ import annotations

import locale
import os
from typing import Optional, Union

from .events import Observer, default_observer, notify

PathLike = Union[str, "os.PathLike[str]"]

# undecodable bytes map to lone surrogates and back, so any file round-trips
_ERRORS = "surrogateescape"


class FileIOError(OSError):
    """A file could not be opened for reading or writing."""

    def __init__(self, path: PathLike, mode: str, reason: str) -> None:
        self.path = os.fspath(path)
        self.mode = mode
        super().__init__(f"could not open {self.path!r} for {mode}: {reason}")


def read_file(path: PathLike, observer: Optional[Observer] = default_observer) -> str:
    """
    Return the whole content of `path`.

    newline="" keeps every character as stored, including CRLF pairs and a
    trailing newline. Bytes invalid in the platform encoding are kept as
    surrogate escapes and written back unchanged by `write_file`.
    """
    try:
        with open(path, "r", newline="", errors=_ERRORS) as fh:
            content = fh.read()
    except OSError as exc:
        notify(observer, "file_read_failed", path=os.fspath(path), error=str(exc))
        raise FileIOError(path, "reading", exc.strerror or str(exc)) from exc

    notify(observer, "file_read", path=os.fspath(path), chars=len(content))
    return content


def write_file(path: PathLike, content: str, observer: Optional[Observer] = default_observer) -> None:
    """
    Create or truncate `path` and write `content` verbatim.

    Content is encoded before the file is opened; content that cannot be
    encoded leaves the target untouched.
    """
    try:
        data = content.encode(locale.getpreferredencoding(False), _ERRORS)
    except UnicodeEncodeError as exc:
        notify(observer, "file_write_failed", path=os.fspath(path), error=str(exc))
        raise FileIOError(path, "writing", exc.reason) from exc

    try:
        with open(path, "wb") as fh:
            fh.write(data)
    except OSError as exc:
        notify(observer, "file_write_failed", path=os.fspath(path), error=str(exc))
        raise FileIOError(path, "writing", exc.strerror or str(exc)) from exc

    notify(observer, "file_written", path=os.fspath(path), chars=len(content))
