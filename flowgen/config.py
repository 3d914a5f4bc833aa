"""Generator configuration.

The generator takes no command-line options: every value has a fixed default
that matches the conventional project layout. Environment variables can
override them for projects with a different layout.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Literal, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from flowgen.errors import ConfigError


Target = Literal["python", "go"]

DEFAULT_OUTPUTS: Dict[str, str] = {
    "python": "flow.py",
    "go": "flow.go",
}

ENV_FIELDS: Dict[str, str] = {
    "FLOWGEN_JOBS_DIR": "jobs_dir",
    "FLOWGEN_FILE_MARKER": "file_marker",
    "FLOWGEN_DIRECTIVE": "directive",
    "FLOWGEN_TARGET": "target",
    "FLOWGEN_OUTPUT": "output",
    "FLOWGEN_JOBS_PACKAGE": "jobs_package",
    "FLOWGEN_JOB_TYPE_MODULE": "job_type_module",
    "FLOWGEN_GO_MODULE": "go_module",
}


class GeneratorConfig(BaseModel):
    """Paths and naming conventions for one generator run."""

    jobs_dir: Path = Field(default=Path("jobs"), description="Directory scanned (non-recursively) for job files.")
    file_marker: str = Field(default="_job", min_length=1, description="Substring a job file's name must contain.")
    directive: str = Field(default="goflow", pattern=r"^\w+$", description="Keyword of the marker comment.")
    target: Target = "python"
    output: Optional[Path] = Field(default=None, description="Generated file; defaults by target.")

    # Python target
    jobs_package: str = Field(default="jobs", pattern=r"^[A-Za-z_]\w*(\.[A-Za-z_]\w*)*$")
    job_type_module: str = Field(default="goflow.core", pattern=r"^[A-Za-z_]\w*(\.[A-Za-z_]\w*)*$")

    # Go target
    go_module: str = Field(default="github.com/fieldryand/goflow", min_length=1)

    @property
    def output_path(self) -> Path:
        if self.output is not None:
            return self.output
        return Path(DEFAULT_OUTPUTS[self.target])

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GeneratorConfig":
        """Build a config from defaults overlaid with FLOWGEN_* variables."""
        env = os.environ if environ is None else environ
        values = {}
        for var, field in ENV_FIELDS.items():
            val = (env.get(var) or "").strip()
            if val:
                values[field] = val

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(f"invalid generator configuration: {exc}") from exc
