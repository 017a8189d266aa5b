#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Fixed markers and data locations for UCD-style text files

The UCD text format is not configurable: every file published under
``Public/UCD/`` uses ``#`` for comments and ``;`` between fields, and is
encoded in UTF-8.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Text format
# ---------------------------------------------------------------------------

COMMENT_MARKER: str = "#"
"""Starts a comment; everything from here to the end of the line is ignored."""

FIELD_DELIMITER: str = ";"
"""Separates the fields of a data line."""

DEFAULT_ENCODING: str = "utf-8"
"""Encoding used to decode lines read from byte streams."""

# ---------------------------------------------------------------------------
# unicode.org download locations
# ---------------------------------------------------------------------------

UCD_BASE_URL: str = "https://www.unicode.org/Public/{version}/ucd/"
"""Directory URL template for one UCD release."""

DEFAULT_UCD_VERSION: str = "latest"
"""Release directory used when no explicit version is requested."""

DEFAULT_UCD_FILES: tuple[str, ...] = (
    "Blocks.txt",
    "Scripts.txt",
    "PropList.txt",
    "DerivedAge.txt",
    "UnicodeData.txt",
)
"""Files fetched by ``ucdparse download`` when none are named."""
