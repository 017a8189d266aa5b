#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Field extraction for a single significant UCD line

A data line such as::

    0000..007F ; Basic Latin # Basic Latin

is reduced to the fields ``["0000..007F", "Basic Latin"]`` in four steps:

1. Cut the line at the first ``#`` (comments cannot be escaped).
2. Split the remainder on ``;``, keeping empty pieces.
3. Trim surrounding whitespace from each piece.
4. Stop at the first piece that is empty after trimming.

Step 4 *truncates* rather than filters: ``"a ; ; b"`` yields only
``["a"]`` and ``"A;B;"`` yields ``["A", "B"]``.  Consumers rely on this
for ranged lines with an intentionally empty column, so it must not be
turned into a skip.
"""

from __future__ import annotations

from typing import Iterator

from ucdparse.utils.constants import COMMENT_MARKER, FIELD_DELIMITER


def strip_comment(text: str) -> str:
    """Return *text* up to (not including) the first comment marker

    Examples
    --------
    >>> strip_comment("0041 ; L # LATIN CAPITAL LETTER A")
    '0041 ; L '
    >>> strip_comment("no comment")
    'no comment'
    """
    return text.partition(COMMENT_MARKER)[0]


class UCDLineIter:
    """Single-pass iterator over the fields of one line

    The iterator moves through three states.  It starts *ready* with the
    raw pieces of the split line, becomes *iterating* once a field has
    been returned, and becomes *stopped* the first time a piece trims to
    the empty string.  *Stopped* is terminal: every later ``next()``
    raises :class:`StopIteration`, even if non-empty pieces remain.

    Parameters
    ----------
    text : str
        The significant line to decompose.  May still contain its
        trailing comment.
    """

    READY = "ready"
    ITERATING = "iterating"
    STOPPED = "stopped"

    def __init__(self, text: str) -> None:
        self._pieces: Iterator[str] = iter(
            strip_comment(text).split(FIELD_DELIMITER)
        )
        self.state = self.READY

    def __iter__(self) -> UCDLineIter:
        return self

    def __next__(self) -> str:
        if self.state == self.STOPPED:
            raise StopIteration
        field = next(self._pieces, "").strip()
        if not field:
            self.state = self.STOPPED
            self._pieces = iter(())
            raise StopIteration
        self.state = self.ITERATING
        return field

    def __repr__(self) -> str:
        return f"<UCDLineIter state={self.state}>"
