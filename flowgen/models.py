"""Data models for the generator.

Everything here lives for a single run: a CandidateFile is read from the jobs
directory, turned into at most one JobDefinition, and the definitions are
collected into a DispatchTable that the renderers consume.

This file uses Pydantic v2.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, model_validator


# Constructor names must be valid identifiers in every target language.
IDENTIFIER_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"

# Job names are embedded in string literals, so quotes and backslashes are excluded.
JOB_NAME_PATTERN = r"^[A-Za-z0-9_][A-Za-z0-9_.\-]*$"


class CandidateFile(BaseModel):
    """A file from the jobs directory together with its raw text."""

    path: Path
    content: str = ""


class JobDefinition(BaseModel):
    """One job name -> constructor pair declared by a marker comment."""

    job_name: str = Field(..., pattern=JOB_NAME_PATTERN, description="External key used to select the job.")
    constructor_name: str = Field(
        ...,
        pattern=IDENTIFIER_PATTERN,
        description="Zero-argument function that builds and returns the job.",
    )
    source: Path = Field(..., description="Job file the marker comment was read from.")

    @property
    def module_name(self) -> str:
        """Module name of the source file (its stem), used by import-based targets."""
        return self.source.stem


class DispatchTable(BaseModel):
    """Ordered job definitions, in the order their files were discovered."""

    entries: List[JobDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_job_names(self) -> "DispatchTable":
        seen = set()
        for entry in self.entries:
            if entry.job_name in seen:
                raise ValueError(f"duplicate job name '{entry.job_name}'")
            seen.add(entry.job_name)
        return self

    def job_names(self) -> List[str]:
        return [entry.job_name for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)
