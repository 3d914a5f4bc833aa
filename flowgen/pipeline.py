"""Single-pass generation: scan, extract, build, render, write."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from pydantic import BaseModel

from flowgen.config import GeneratorConfig
from flowgen.errors import ExtractionFailedError, MalformedMarkerError
from flowgen.extract import extract_definition, participates
from flowgen.models import DispatchTable, JobDefinition
from flowgen.scan import read_candidate, scan_directory
from flowgen.table import build_table
from flowgen.targets import get_renderer
from flowgen.writer import write_atomic

logger = logging.getLogger(__name__)


class GenerationResult(BaseModel):
    """Outcome of a successful run."""

    output: Path
    table: DispatchTable


def collect_definitions(config: GeneratorConfig) -> List[JobDefinition]:
    """Scan the jobs directory and extract one definition per job file.

    Marker problems are collected for every file before failing, so a single
    run reports all of them.
    """
    definitions: List[JobDefinition] = []
    errors: List[MalformedMarkerError] = []

    for path in scan_directory(config.jobs_dir):
        if not participates(path, config.file_marker):
            logger.debug("Skipping %s (no %r in name)", path, config.file_marker)
            continue

        candidate = read_candidate(path)
        try:
            definitions.append(extract_definition(candidate, config.directive))
        except MalformedMarkerError as exc:
            logger.debug("%s", exc)
            errors.append(exc)

    if errors:
        raise ExtractionFailedError(errors)
    return definitions


def generate(config: GeneratorConfig) -> GenerationResult:
    """Regenerate the dispatch file from scratch.

    Nothing is written unless every step before the write succeeded.
    """
    renderer = get_renderer(config)
    table = build_table(collect_definitions(config))
    text = renderer.render(table)
    output = write_atomic(config.output_path, text)
    return GenerationResult(output=output, table=table)
