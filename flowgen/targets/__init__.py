"""Output renderers, one per target language."""

from __future__ import annotations

from flowgen.config import GeneratorConfig
from flowgen.errors import ConfigError
from flowgen.targets.base import Renderer
from flowgen.targets.go import GoRenderer
from flowgen.targets.python import PythonRenderer


def get_renderer(config: GeneratorConfig) -> Renderer:
    """Return the renderer for the configured target."""
    if config.target == "python":
        return PythonRenderer(jobs_package=config.jobs_package, job_type_module=config.job_type_module)
    if config.target == "go":
        return GoRenderer(go_module=config.go_module)
    raise ConfigError(f"unknown target {config.target!r}")


__all__ = ["GoRenderer", "PythonRenderer", "Renderer", "get_renderer"]
