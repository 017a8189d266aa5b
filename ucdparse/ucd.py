#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Sources of UCD-style text

:class:`UCD` wraps either an in-memory string or a readable binary
stream and hands out a :class:`~ucdparse.lines.UCDLines` iterator that
fits the source:

* a ``str`` is split lazily and can never fail;
* a binary stream is read and decoded one line per pull, so every pull
  may raise :class:`OSError`.

Files are opened with :meth:`UCD.open` (plain read-only) or through an
:class:`OpenOptions` request built by :meth:`UCD.with_options`.

Examples
--------
>>> ucd = UCD("0000..007F ; Basic Latin # Basic Latin\\n## Comment\\n")
>>> [list(line) for line in ucd.ucd_lines()]
[['0000..007F', 'Basic Latin']]
"""

from __future__ import annotations

import errno
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Union

from ucdparse.lines import UCDLines, iter_stream_lines, iter_text_lines
from ucdparse.utils.constants import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

Source = Union[str, BinaryIO]
"""Type alias for the two accepted source kinds."""


class UCD:
    """A UCD-style text source

    Parameters
    ----------
    source : str | BinaryIO
        The text itself, or an object with a ``readline()`` method
        returning ``bytes``.
    encoding : str, optional
        Codec for lines read from a binary stream (default UTF-8).
        Ignored for ``str`` sources.

    Raises
    ------
    TypeError
        If *source* is neither a string nor a readable stream.

    Notes
    -----
    A stream passed in by the caller stays owned by the caller;
    :meth:`close` only closes streams opened by :meth:`open` or
    :meth:`OpenOptions.open`.
    """

    def __init__(
        self,
        source: Source,
        *,
        encoding: str = DEFAULT_ENCODING,
        _owns_stream: bool = False,
    ) -> None:
        if not isinstance(source, str) and not hasattr(source, "readline"):
            raise TypeError(
                f"UCD source must be str or a readable stream, "
                f"not {type(source).__name__}"
            )
        self.source = source
        self.encoding = encoding
        self._owns_stream = _owns_stream

    # -- construction -------------------------------------------------------

    @classmethod
    def open(cls, path: Path | str, *, encoding: str = DEFAULT_ENCODING) -> UCD:
        """Open *path* for reading as a buffered binary stream

        Raises
        ------
        OSError
            If the file cannot be opened (``FileNotFoundError``,
            ``PermissionError``, ``IsADirectoryError``, ...).
        """
        logger.debug("Opening %s", path)
        return cls(open(path, "rb"), encoding=encoding, _owns_stream=True)

    @staticmethod
    def with_options() -> OpenOptions:
        """Return an empty :class:`OpenOptions` request."""
        return OpenOptions()

    # -- parsing ------------------------------------------------------------

    @property
    def is_text(self) -> bool:
        """``True`` for an in-memory string source."""
        return isinstance(self.source, str)

    def ucd_lines(self) -> UCDLines:
        """Return an iterator over the significant lines of the source

        For a stream source, iteration advances the stream's read
        position; two iterators over the same stream share it.
        """
        if isinstance(self.source, str):
            return UCDLines(iter_text_lines(self.source))
        return UCDLines(iter_stream_lines(self.source, self.encoding))

    def records(self) -> Iterator[list[str]]:
        """Yield the fields of every significant line as a list."""
        for line in self.ucd_lines():
            yield list(line)

    # -- resource handling --------------------------------------------------

    def close(self) -> None:
        """Close the underlying stream if this object opened it."""
        if self._owns_stream:
            self.source.close()

    def __enter__(self) -> UCD:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        if isinstance(self.source, str):
            return f"UCD(<text, {len(self.source)} chars>)"
        name = getattr(self.source, "name", None)
        return f"UCD(<stream {name!r}>)"


@dataclass
class OpenOptions:
    """A request for opening a UCD file with explicit open flags

    Each field mirrors the usual file-open switch of the same name.  The
    request is finished by a single call to :meth:`open`.

    Parameters
    ----------
    read : bool
        Open for reading.
    write : bool
        Open for writing.
    append : bool
        Open for appending; implies ``write``.
    truncate : bool
        Truncate an existing file to zero length.  Requires ``write``
        and cannot be combined with ``append``.
    create : bool
        Create the file if it does not exist.  Requires ``write`` or
        ``append``.
    create_new : bool
        Create the file, failing if it already exists.  Overrides
        ``create`` and ``truncate``.

    Examples
    --------
    >>> opts = OpenOptions(read=True, write=True, create=True)
    >>> opts.flags() & os.O_CREAT != 0
    True
    """

    read: bool = False
    write: bool = False
    append: bool = False
    truncate: bool = False
    create: bool = False
    create_new: bool = False

    def _access_mode(self) -> int:
        writable = self.write or self.append
        if self.read and writable:
            mode = os.O_RDWR
        elif self.read:
            mode = os.O_RDONLY
        elif writable:
            mode = os.O_WRONLY
        else:
            raise OSError(
                errno.EINVAL,
                "OpenOptions needs at least one of read, write or append",
            )
        if self.append:
            mode |= os.O_APPEND
        return mode

    def _creation_mode(self) -> int:
        if not (self.write or self.append):
            if self.truncate or self.create or self.create_new:
                raise OSError(
                    errno.EINVAL,
                    "truncate, create and create_new need write or append",
                )
        elif self.append and self.truncate and not self.create_new:
            raise OSError(errno.EINVAL, "truncate cannot be combined with append")

        if self.create_new:
            return os.O_CREAT | os.O_EXCL
        if self.create and self.truncate:
            return os.O_CREAT | os.O_TRUNC
        if self.create:
            return os.O_CREAT
        if self.truncate:
            return os.O_TRUNC
        return 0

    def flags(self) -> int:
        """Translate the request into ``os.open`` flags

        Raises
        ------
        OSError
            With ``errno.EINVAL`` for an invalid combination.
        """
        return (
            self._access_mode()
            | self._creation_mode()
            | getattr(os, "O_BINARY", 0)
        )

    def open(self, path: Path | str, *, encoding: str = DEFAULT_ENCODING) -> UCD:
        """Open *path* with these options and wrap it in a :class:`UCD`

        Raises
        ------
        OSError
            If the options are invalid or the file cannot be opened.
            Reading lines from a handle opened without ``read`` fails
            on the first pull.
        """
        flags = self.flags()
        logger.debug("Opening %s with %r", path, self)
        fd = os.open(path, flags, 0o666)
        try:
            stream = os.fdopen(fd, "rb")
        except Exception:
            os.close(fd)
            raise
        return UCD(stream, encoding=encoding, _owns_stream=True)
