#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
UCD data file downloader

Downloads the plain-text data files of a Unicode Character Database
release from the Unicode Consortium website.

Data Source
-----------
* ``https://www.unicode.org/Public/{version}/ucd/`` where *version* is
  ``latest`` or a release number such as ``15.1.0``.

Examples
--------
>>> from ucdparse.io.download import download_file, download_ucd
>>> download_file("Blocks.txt")                  # downloads to ./ucd/
>>> download_ucd(out_dir="data", version="15.1.0")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable
from urllib.parse import urljoin

from ucdparse.exceptions import DownloadError
from ucdparse.utils.constants import (
    DEFAULT_UCD_FILES,
    DEFAULT_UCD_VERSION,
    UCD_BASE_URL,
)

logger = logging.getLogger(__name__)


def _requests():
    try:
        import requests
    except ImportError as exc:
        raise DownloadError(
            "Download requires 'requests'.  "
            "Install with: pip install ucdparse[download]"
        ) from exc
    return requests


def ucd_url(version: str = DEFAULT_UCD_VERSION) -> str:
    """Return the directory URL of the UCD release *version*

    Examples
    --------
    >>> ucd_url("15.1.0")
    'https://www.unicode.org/Public/15.1.0/ucd/'
    """
    return UCD_BASE_URL.format(version=version)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def list_ucd_files(version: str = DEFAULT_UCD_VERSION) -> list[str]:
    """List the ``.txt`` data files at the top of a UCD release directory

    Raises
    ------
    DownloadError
        If the index page cannot be fetched or parsed, or lists no
        ``.txt`` files.
    """
    requests = _requests()
    try:
        from bs4 import BeautifulSoup
    except ImportError as exc:
        raise DownloadError(
            "Listing files requires 'beautifulsoup4'.  "
            "Install with: pip install ucdparse[download]"
        ) from exc

    base_url = ucd_url(version)
    try:
        resp = requests.get(base_url, timeout=30)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise DownloadError(f"Failed to fetch index page {base_url}: {exc}") from exc

    soup = BeautifulSoup(resp.text, "html.parser")
    names = sorted({
        a["href"]
        for a in soup.find_all("a", href=True)
        if a["href"].endswith(".txt") and "/" not in a["href"]
    })
    if not names:
        raise DownloadError(
            f"No .txt files found on {base_url}.  "
            "The index page format may have changed."
        )
    logger.debug("Found %d files on %s", len(names), base_url)
    return names


def download_file(
    name: str,
    out_dir: Path | str | None = None,
    version: str = DEFAULT_UCD_VERSION,
) -> Path:
    """Download a single UCD file

    Parameters
    ----------
    name : str
        File name inside the release directory, e.g. ``"Blocks.txt"``
        or ``"extracted/DerivedGeneralCategory.txt"``.
    out_dir : Path | str | None, optional
        Output directory.  Defaults to ``"./ucd"``.
    version : str, optional
        Release directory (default ``"latest"``).

    Returns
    -------
    Path
        Path of the written file.

    Raises
    ------
    DownloadError
        If the request fails.  No partial file is left behind.
    """
    requests = _requests()
    out_dir = Path(out_dir) if out_dir is not None else Path("ucd")
    out_dir.mkdir(parents=True, exist_ok=True)

    url = urljoin(ucd_url(version), name)
    dst = out_dir / Path(name).name
    logger.debug("Downloading %s -> %s", url, dst)
    try:
        with requests.get(url, stream=True, timeout=60) as r:
            r.raise_for_status()
            with open(dst, "wb") as f:
                for chunk in r.iter_content(8192):
                    f.write(chunk)
    except requests.RequestException as exc:
        dst.unlink(missing_ok=True)
        raise DownloadError(f"Failed to download {url}: {exc}") from exc
    return dst


def download_ucd(
    names: Iterable[str] | None = None,
    out_dir: Path | str | None = None,
    version: str = DEFAULT_UCD_VERSION,
) -> dict[str, Path]:
    """Download several UCD files from one release

    Parameters
    ----------
    names : Iterable[str] | None, optional
        Files to fetch.  Defaults to
        :data:`~ucdparse.utils.constants.DEFAULT_UCD_FILES`.
    out_dir : Path | str | None, optional
        Output directory.  Defaults to ``"./ucd"``.
    version : str, optional
        Release directory (default ``"latest"``).

    Returns
    -------
    dict[str, Path]
        Mapping from requested name to written file.

    Raises
    ------
    DownloadError
        On the first file that fails.
    """
    names = list(names) if names else list(DEFAULT_UCD_FILES)
    logger.info("Downloading %d UCD files (%s) from %s", len(names), version, ucd_url(version))
    results: dict[str, Path] = {}
    for name in names:
        results[name] = download_file(name, out_dir, version)
        logger.info("  %s -> %s", name, results[name])
    return results
