"""Base class for output renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from string import Template
from typing import Mapping

from flowgen.errors import RenderError
from flowgen.models import DispatchTable


class Renderer(ABC):
    """Render a dispatch table into the source text of one target language."""

    name: str
    template: Template

    @abstractmethod
    def render(self, table: DispatchTable) -> str:
        """Return the complete generated source for `table`."""
        raise NotImplementedError

    def _substitute(self, values: Mapping[str, str]) -> str:
        try:
            return self.template.substitute(values)
        except (KeyError, ValueError) as exc:
            raise RenderError(f"{self.name} template could not be rendered: {exc}") from exc
