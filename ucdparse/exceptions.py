#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the ucdparse package

Parsing itself never raises: blank lines, comment lines and empty fields
are handled by the skip / stop rules of :mod:`ucdparse.lines` and
:mod:`ucdparse.fields`.  The only failures on the parsing path are I/O
failures, which surface as :class:`OSError` (or a subclass of it).

Exception Hierarchy
-------------------
::

    UCDError
    ├── LineDecodeError     # Undecodable bytes in a streamed line (also an OSError)
    └── DownloadError       # Network errors while fetching UCD files
"""

from __future__ import annotations


class UCDError(Exception):
    """Base exception for all ucdparse errors

    Catching ``UCDError`` catches every library-specific failure.  Plain
    I/O errors raised by the operating system (``FileNotFoundError``,
    ``PermissionError``, ...) are *not* wrapped and propagate unchanged.
    """


class LineDecodeError(UCDError, OSError):
    """Raised when a line read from a byte stream is not valid text

    The error is an :class:`OSError` as well, so code that handles
    read failures with ``except OSError`` also handles undecodable
    input.  The stream is left positioned after the offending line.

    Parameters
    ----------
    message : str
        Description of the failure, including the encoding used.
    """


class DownloadError(UCDError):
    """Raised when fetching UCD files from unicode.org fails

    Covers HTTP errors, connection timeouts, a missing ``requests``
    installation and index pages that list no data files.

    Parameters
    ----------
    message : str
        Description of the network failure, including the URL attempted.
    """
