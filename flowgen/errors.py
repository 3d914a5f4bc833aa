"""Exceptions raised by the generator."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence


class FlowgenError(Exception):
    """Base exception for generator errors."""


class ConfigError(FlowgenError):
    """A configuration value is missing or invalid."""


class ScanError(FlowgenError):
    """The jobs directory or one of its files could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"cannot read {path}: {reason}")


class MalformedMarkerError(FlowgenError):
    """A job file's marker comment does not follow the expected grammar."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"malformed marker comment in {path}: {detail}")


class MarkerNotFoundError(MalformedMarkerError):
    """A participating job file has no marker comment at all."""

    def __init__(self, path: Path, directive: str) -> None:
        super().__init__(path, f"no '{directive}:' marker comment found")


class ExtractionFailedError(FlowgenError):
    """One or more job files could not be turned into definitions."""

    def __init__(self, errors: Sequence[MalformedMarkerError]) -> None:
        self.errors: List[MalformedMarkerError] = list(errors)
        lines = "\n".join(f"  - {err}" for err in self.errors)
        super().__init__(f"{len(self.errors)} job file(s) could not be parsed:\n{lines}")


class DuplicateJobError(FlowgenError):
    """Two job files declare the same job name."""

    def __init__(self, job_name: str, first: Path, second: Path) -> None:
        self.job_name = job_name
        self.paths = (first, second)
        super().__init__(f"duplicate job name '{job_name}' declared in {first} and {second}")


class RenderError(FlowgenError):
    """The output template could not be rendered."""


class WriteError(FlowgenError):
    """The generated source could not be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"cannot write {path}: {reason}")
