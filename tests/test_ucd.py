#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for UCD sources and file opening

Covers the text and stream source kinds, UCD.open, and the
OpenOptions request including invalid flag combinations.
"""

from __future__ import annotations

import errno
import io
import os
from pathlib import Path

import pytest

from ucdparse import UCD, OpenOptions


class TestTextSource:

    def test_blocks_sample(self, blocks_text: str, expected_blocks: list[list[str]]) -> None:
        lines = UCD(blocks_text).ucd_lines()
        assert [list(line) for line in lines] == expected_blocks

    def test_lines_exhausted(self, blocks_text: str) -> None:
        lines = UCD(blocks_text).ucd_lines()
        for _ in range(3):
            next(lines)
        assert next(lines, None) is None

    def test_records(self, blocks_text: str, expected_blocks: list[list[str]]) -> None:
        assert list(UCD(blocks_text).records()) == expected_blocks

    def test_is_text(self) -> None:
        assert UCD("").is_text
        assert not UCD(io.BytesIO(b"")).is_text

    def test_close_is_noop(self) -> None:
        with UCD("a;b") as ucd:
            assert list(ucd.records()) == [["a", "b"]]

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            UCD(42)


class TestStreamSource:

    def test_bytes_stream(self, blocks_text: str, expected_blocks: list[list[str]]) -> None:
        ucd = UCD(io.BytesIO(blocks_text.encode("utf-8")))
        assert list(ucd.records()) == expected_blocks

    def test_caller_stream_not_closed(self) -> None:
        stream = io.BytesIO(b"a;b\n")
        with UCD(stream) as ucd:
            list(ucd.records())
        assert not stream.closed

    def test_encoding(self) -> None:
        ucd = UCD(io.BytesIO("00E9 ; é\n".encode("latin-1")), encoding="latin-1")
        assert list(ucd.records()) == [["00E9", "é"]]


class TestOpen:

    def test_open_file(self, blocks_file: Path, expected_blocks: list[list[str]]) -> None:
        with UCD.open(blocks_file) as ucd:
            assert list(ucd.records()) == expected_blocks

    def test_open_str_path(self, blocks_file: Path, expected_blocks: list[list[str]]) -> None:
        with UCD.open(str(blocks_file)) as ucd:
            assert list(ucd.records()) == expected_blocks

    def test_close_closes_owned_stream(self, blocks_file: Path) -> None:
        ucd = UCD.open(blocks_file)
        ucd.close()
        assert ucd.source.closed

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            UCD.open(tmp_path / "nonexistent.txt")

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            UCD.open(tmp_path)

    def test_file_and_text_agree(self, blocks_file: Path, blocks_text: str) -> None:
        with UCD.open(blocks_file) as ucd:
            from_file = list(ucd.records())
        assert from_file == list(UCD(blocks_text).records())


class TestOpenOptions:

    def test_with_options_returns_empty_request(self) -> None:
        assert UCD.with_options() == OpenOptions()

    def test_read(self, blocks_file: Path, expected_blocks: list[list[str]]) -> None:
        with OpenOptions(read=True).open(blocks_file) as ucd:
            assert list(ucd.records()) == expected_blocks

    def test_read_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            OpenOptions(read=True).open(tmp_path / "missing.txt")

    def test_no_access_mode(self, blocks_file: Path) -> None:
        with pytest.raises(OSError) as info:
            OpenOptions().open(blocks_file)
        assert info.value.errno == errno.EINVAL

    def test_create_without_write(self, tmp_path: Path) -> None:
        with pytest.raises(OSError) as info:
            OpenOptions(read=True, create=True).open(tmp_path / "new.txt")
        assert info.value.errno == errno.EINVAL
        assert not (tmp_path / "new.txt").exists()

    def test_truncate_with_append(self, blocks_file: Path) -> None:
        with pytest.raises(OSError) as info:
            OpenOptions(append=True, truncate=True).open(blocks_file)
        assert info.value.errno == errno.EINVAL

    def test_create_new_fails_if_exists(self, blocks_file: Path) -> None:
        with pytest.raises(FileExistsError):
            OpenOptions(read=True, write=True, create_new=True).open(blocks_file)

    def test_create_new(self, tmp_path: Path) -> None:
        path = tmp_path / "new.txt"
        with OpenOptions(read=True, write=True, create_new=True).open(path) as ucd:
            assert list(ucd.records()) == []
        assert path.exists()

    def test_create_existing_keeps_content(self, blocks_file: Path, expected_blocks: list[list[str]]) -> None:
        with OpenOptions(read=True, write=True, create=True).open(blocks_file) as ucd:
            assert list(ucd.records()) == expected_blocks

    def test_truncate(self, blocks_file: Path) -> None:
        with OpenOptions(read=True, write=True, truncate=True).open(blocks_file) as ucd:
            assert list(ucd.records()) == []
        assert blocks_file.stat().st_size == 0

    def test_write_only_fails_on_first_pull(self, blocks_file: Path) -> None:
        with OpenOptions(write=True).open(blocks_file) as ucd:
            lines = ucd.ucd_lines()
            with pytest.raises(OSError):
                next(lines)

    def test_flags(self) -> None:
        assert OpenOptions(read=True).flags() & (os.O_WRONLY | os.O_RDWR) == 0
        assert OpenOptions(read=True, write=True).flags() & os.O_RDWR
        assert OpenOptions(append=True).flags() & os.O_APPEND
        flags = OpenOptions(write=True, create=True, truncate=True, create_new=True).flags()
        assert flags & os.O_EXCL
        assert not flags & os.O_TRUNC
