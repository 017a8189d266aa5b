#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Significant-line filtering for UCD-style text

:class:`UCDLines` drops blank lines and comment lines from a stream of
raw lines and wraps every remaining line in a :class:`UCDLine`.  The raw
lines come from one of two sources:

* :func:`iter_text_lines` for an in-memory string (cannot fail), and
* :func:`iter_stream_lines` for a binary stream, which reads and decodes
  one line per pull and may raise :class:`OSError` on any of them.

Both splitters follow the same line rule: a line ends at ``\\n``, one
``\\r`` immediately before it is dropped, and a terminator at the very
end of the input does not start another (empty) line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterator

from ucdparse.exceptions import LineDecodeError
from ucdparse.fields import UCDLineIter
from ucdparse.utils.constants import COMMENT_MARKER, DEFAULT_ENCODING


# ---------------------------------------------------------------------------
# Raw line sources
# ---------------------------------------------------------------------------

def _chomp(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def iter_text_lines(text: str) -> Iterator[str]:
    """Lazily split *text* into lines without their terminators

    Only ``\\n`` (optionally preceded by ``\\r``) ends a line;
    :meth:`str.splitlines` is not used because it also splits on form
    feeds, ``\\x1c``-``\\x1e`` and the Unicode line separators.

    Examples
    --------
    >>> list(iter_text_lines("a\\r\\nb\\n"))
    ['a', 'b']
    >>> list(iter_text_lines(""))
    []
    """
    start = 0
    end = len(text)
    while start < end:
        stop = text.find("\n", start)
        if stop == -1:
            yield text[start:]
            return
        yield _chomp(text[start:stop + 1])
        start = stop + 1


def iter_stream_lines(
    stream: BinaryIO,
    encoding: str = DEFAULT_ENCODING,
) -> Iterator[str]:
    """Read and decode one line at a time from *stream*

    Parameters
    ----------
    stream : BinaryIO
        Any object whose ``readline()`` returns ``bytes``.  A stream
        returning ``str`` is accepted as well and is not decoded.
    encoding : str, optional
        Codec used for each line (default UTF-8).

    Yields
    ------
    str
        The next line, without its terminator.

    Raises
    ------
    OSError
        Propagated unchanged from ``readline()``.
    LineDecodeError
        If a line is not valid in *encoding*.
    """
    while True:
        raw = stream.readline()
        if not raw:
            return
        if isinstance(raw, bytes):
            try:
                raw = raw.decode(encoding)
            except UnicodeDecodeError as exc:
                raise LineDecodeError(
                    f"Stream line is not valid {encoding}: {exc.reason} "
                    f"at byte {exc.start}"
                ) from exc
        yield _chomp(raw)


def is_significant(line: str) -> bool:
    """Return ``True`` unless *line* is blank or a comment line

    Examples
    --------
    >>> is_significant("0041;A")
    True
    >>> is_significant("   # comment")
    False
    >>> is_significant(" \\t ")
    False
    """
    head = line.lstrip()
    return bool(head) and not head.startswith(COMMENT_MARKER)


# ---------------------------------------------------------------------------
# Significant lines
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UCDLine:
    """A line that is neither blank nor a comment line

    Parameters
    ----------
    text : str
        The line exactly as read, without its terminator.  It may carry
        leading whitespace and a trailing comment.

    Notes
    -----
    Iterating over a ``UCDLine`` yields its fields (see
    :mod:`ucdparse.fields`).  Each ``iter()`` call starts a new
    :class:`~ucdparse.fields.UCDLineIter`.
    """

    text: str

    def __iter__(self) -> UCDLineIter:
        return UCDLineIter(self.text)

    def fields(self) -> UCDLineIter:
        """Return a fresh single-pass iterator over this line's fields."""
        return UCDLineIter(self.text)

    def __str__(self) -> str:
        return self.text


class UCDLines:
    """Iterator of :class:`UCDLine` over a source of raw lines

    Blank lines, whitespace-only lines and lines whose first
    non-whitespace character is ``#`` are skipped.  Every other line is
    returned unchanged, wrapped in a :class:`UCDLine`.

    Parameters
    ----------
    lines : Iterator[str]
        Raw lines without terminators, typically from
        :func:`iter_text_lines` or :func:`iter_stream_lines`.

    Notes
    -----
    An exception raised by *lines* is propagated from the ``next()``
    call that triggered it.  The iterator is then exhausted: it does not
    attempt to read past a failed line.
    """

    def __init__(self, lines: Iterator[str]) -> None:
        self._lines: Iterator[str] | None = iter(lines)

    def __iter__(self) -> UCDLines:
        return self

    def __next__(self) -> UCDLine:
        if self._lines is None:
            raise StopIteration
        try:
            for line in self._lines:
                if is_significant(line):
                    return UCDLine(line)
        except Exception:
            self._lines = None
            raise
        self._lines = None
        raise StopIteration
