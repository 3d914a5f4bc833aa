"""Python output target.

Produces an importable module with a literal JOBS mapping and a `select_job`
function. Job constructors are referenced through a private alias of their
job module (`_ingest_job.IngestJob`), so two job files may use the same
constructor name, and a module stem never clashes with a generated name.
The job type is imported for type checkers only, which keeps the generated
module importable without the job runtime installed.
"""

from __future__ import annotations

from string import Template
from typing import List

from flowgen.errors import RenderError
from flowgen.models import DispatchTable, JobDefinition
from flowgen.targets.base import Renderer
from flowgen.utils import uniq_preserve_order


FLOW_TEMPLATE = Template('''\
# Code generated by flowgen; DO NOT EDIT.
"""Job dispatch table for the ${jobs_package} package."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Optional
${imports}
if TYPE_CHECKING:
    from ${job_type_module} import Job


JOBS: Dict[str, Callable[[], Job]] = ${table}


def select_job(name: str) -> Optional[Callable[[], Job]]:
    """Return the constructor for the named job, or None if there is no such job."""
${branches}    return None
''')


def _alias(module: str) -> str:
    # Job modules are imported privately so a stem such as `select_job` cannot
    # shadow, or be shadowed by, a name the template defines.
    return f"_{module}"


class PythonRenderer(Renderer):
    """Render the dispatch table as a Python module."""

    name = "python"
    template = FLOW_TEMPLATE

    def __init__(self, jobs_package: str = "jobs", job_type_module: str = "goflow.core") -> None:
        self._jobs_package = jobs_package
        self._job_type_module = job_type_module

    @staticmethod
    def _reference(entry: JobDefinition) -> str:
        module = entry.module_name
        if not module.isidentifier():
            raise RenderError(f"job file {entry.source} is not importable as a Python module ({module!r})")
        return f"{_alias(module)}.{entry.constructor_name}"

    def _imports(self, table: DispatchTable) -> str:
        modules = uniq_preserve_order(entry.module_name for entry in table.entries)
        lines = [f"from {self._jobs_package} import {module} as {_alias(module)}" for module in modules]
        return "".join(f"\n{line}" for line in lines) + ("\n" if lines else "")

    def _table(self, table: DispatchTable) -> str:
        if not table.entries:
            return "{}"
        rows: List[str] = [f'    "{entry.job_name}": {self._reference(entry)},' for entry in table.entries]
        return "{\n" + "\n".join(rows) + "\n}"

    def _branches(self, table: DispatchTable) -> str:
        out = []
        for entry in table.entries:
            out.append(f'    if name == "{entry.job_name}":\n')
            out.append(f"        return {self._reference(entry)}\n")
        return "".join(out)

    def render(self, table: DispatchTable) -> str:
        return self._substitute(
            {
                "jobs_package": self._jobs_package,
                "job_type_module": self._job_type_module,
                "imports": self._imports(table),
                "table": self._table(table),
                "branches": self._branches(table),
            }
        )
