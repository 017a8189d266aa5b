#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ucdparse - Python library for reading Unicode Character Database text files

Parse the semicolon-delimited, hash-commented data files published under
``Public/UCD/`` by the Unicode Consortium (``Blocks.txt``,
``Scripts.txt``, ``UnicodeData.txt``, ...).  Parsing is lazy and
single-pass: blank and comment lines are skipped, and each remaining
line is split into trimmed fields on demand.

Modules
-------
ucd
    Sources (string or binary stream) and file opening.
lines
    Significant-line filtering.
fields
    Field extraction for a single line.
io
    UCD file downloader.
utils
    Fixed format markers and download locations.

Examples
--------
>>> from ucdparse import UCD
>>> ucd = UCD('''
... ## Comment
...
... 0000..007F ; Basic Latin # Basic Latin
... 3040..309F ; Hiragana
... ''')
>>> [list(line) for line in ucd.ucd_lines()]
[['0000..007F', 'Basic Latin'], ['3040..309F', 'Hiragana']]
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from ucdparse.ucd import UCD, OpenOptions
from ucdparse.lines import UCDLine, UCDLines, iter_stream_lines, iter_text_lines
from ucdparse.fields import UCDLineIter, strip_comment
from ucdparse.exceptions import (
    UCDError,
    LineDecodeError,
    DownloadError,
)

__all__ = [
    # Version
    "__version__",
    # Sources
    "UCD",
    "OpenOptions",
    # Lines and fields
    "UCDLine",
    "UCDLines",
    "UCDLineIter",
    "iter_stream_lines",
    "iter_text_lines",
    "strip_comment",
    # Exceptions
    "UCDError",
    "LineDecodeError",
    "DownloadError",
]
