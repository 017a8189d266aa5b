#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
I/O utilities for downloading UCD files from unicode.org

See :mod:`ucdparse.io.download`.
"""

from __future__ import annotations
