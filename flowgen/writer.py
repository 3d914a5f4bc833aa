"""Atomic output writer.

The generated text is written to a temporary file next to the destination and
moved into place with `os.replace`, so readers only ever see the previous
output or the complete new one.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from flowgen.errors import WriteError

logger = logging.getLogger(__name__)


def write_atomic(path: Path, text: str) -> Path:
    """Replace `path` with `text` and return the resolved destination."""
    dest = Path(path).expanduser().resolve()
    tmp_name = None
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            dir=dest.parent,
            prefix=f".{dest.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        # NamedTemporaryFile creates the file 0600.
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, dest)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(dest, exc.strerror or str(exc)) from exc

    logger.debug("Replaced %s", dest)
    return dest
