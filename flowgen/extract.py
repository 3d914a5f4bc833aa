"""Marker-comment extraction.

A job file declares itself with a single line comment:

    // goflow: IngestJob ingest

or, in a Python job module,

    # goflow: ingest_job ingest

The tokens after the directive are the constructor function and the job name,
in that order. Parsing is deterministic and never indexes into a token list
without checking its length first.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from flowgen.errors import MalformedMarkerError, MarkerNotFoundError
from flowgen.models import CandidateFile, JobDefinition

logger = logging.getLogger(__name__)


# comment token, directive token, constructor name, job name
MARKER_TOKEN_COUNT = 4

COMMENT_TOKENS = ("//", "#")


@lru_cache(maxsize=None)
def marker_pattern(directive: str) -> re.Pattern[str]:
    """Compile the line pattern for a directive keyword."""
    comment = "|".join(re.escape(tok) for tok in COMMENT_TOKENS)
    return re.compile(
        rf"^[ \t]*(?:{comment})[ \t]+{re.escape(directive)}:.*$",
        flags=re.MULTILINE,
    )


def participates(path: Path, file_marker: str = "_job") -> bool:
    """True if the file name carries the job-file naming marker."""
    return file_marker in path.name


def find_marker(content: str, directive: str = "goflow") -> Optional[str]:
    """Return the first marker-comment line in `content`, or None."""
    m = marker_pattern(directive).search(content)
    if m is None:
        return None
    return m.group(0).strip()


def parse_marker(line: str, source: Path) -> JobDefinition:
    """Split a marker line into a JobDefinition.

    Raises:
        MalformedMarkerError: wrong token count or invalid names.
    """
    tokens = line.split()
    if len(tokens) != MARKER_TOKEN_COUNT:
        raise MalformedMarkerError(
            source,
            f"expected '<comment> <directive>: <Constructor> <jobName>', got {line!r}",
        )

    _, _, constructor_name, job_name = tokens
    try:
        return JobDefinition(job_name=job_name, constructor_name=constructor_name, source=source)
    except ValidationError as exc:
        bad = ", ".join(f"{err['loc'][0]}={err['input']!r}" for err in exc.errors())
        raise MalformedMarkerError(source, f"invalid name(s) {bad} in {line!r}") from exc


def extract_definition(candidate: CandidateFile, directive: str = "goflow") -> JobDefinition:
    """Extract the job definition declared by a participating file.

    Raises:
        MarkerNotFoundError: the file has no marker comment.
        MalformedMarkerError: the marker comment is malformed.
    """
    line = find_marker(candidate.content, directive)
    if line is None:
        raise MarkerNotFoundError(candidate.path, directive)

    definition = parse_marker(line, candidate.path)
    logger.info("Found job %s (%s) in %s", definition.job_name, definition.constructor_name, candidate.path)
    return definition
