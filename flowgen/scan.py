"""Scanner: list the jobs directory and read candidate files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from flowgen.errors import ScanError
from flowgen.models import CandidateFile

logger = logging.getLogger(__name__)


def scan_directory(directory: Path) -> List[Path]:
    """Return the files directly inside `directory`, sorted by name.

    Sub-directories are skipped; the scan is not recursive.
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise ScanError(directory, exc.strerror or str(exc)) from exc

    files = []
    for entry in entries:
        if not entry.is_file():
            logger.debug("Skipping non-file entry %s", entry)
            continue
        files.append(entry)
    return files


def read_candidate(path: Path) -> CandidateFile:
    """Read a job file as UTF-8 text."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScanError(path, getattr(exc, "strerror", None) or str(exc)) from exc
    return CandidateFile(path=path, content=content)
