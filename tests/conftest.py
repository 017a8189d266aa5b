#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for ucdparse tests

Provides small synthetic UCD-style texts and files so that no real
Unicode Character Database download is needed.
"""

from __future__ import annotations

from pathlib import Path

import pytest

BLOCKS_SAMPLE = """
## Comment

0000..007F ; Basic Latin # Basic Latin
## Comment
3040..309F ; Hiragana

30A0..30FF ; Katakana

## Comment
"""

MIXED_SAMPLE = (
    "# header\r\n"
    "   \r\n"
    "\t# indented comment\r\n"
    "0041;L;LATIN CAPITAL LETTER A\r\n"
    "  0042 ; L ; LATIN CAPITAL LETTER B # trailing\r\n"
    "A;B;\r\n"
    "a ; ; b\r\n"
    "\r\n"
    "0061..007A ; Latin"
)


@pytest.fixture
def blocks_text() -> str:
    """Blocks.txt-like excerpt with comments and blank lines"""
    return BLOCKS_SAMPLE


@pytest.fixture
def mixed_text() -> str:
    """CRLF text exercising every skip and stop rule"""
    return MIXED_SAMPLE


@pytest.fixture
def blocks_file(tmp_path: Path) -> Path:
    """BLOCKS_SAMPLE written to disk as UTF-8"""
    path = tmp_path / "Blocks.txt"
    path.write_bytes(BLOCKS_SAMPLE.encode("utf-8"))
    return path


@pytest.fixture
def expected_blocks() -> list[list[str]]:
    return [
        ["0000..007F", "Basic Latin"],
        ["3040..309F", "Hiragana"],
        ["30A0..30FF", "Katakana"],
    ]
