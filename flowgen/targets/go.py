"""Go output target.

Produces `flow.go` for a Go service: a `selectJob` function that switches on
the job name and returns the constructor from the jobs package, or nil.
"""

from __future__ import annotations

from string import Template

from flowgen.models import DispatchTable
from flowgen.targets.base import Renderer


FLOW_TEMPLATE = Template('''\
// Code generated by flowgen; DO NOT EDIT.
package main

${imports}

func selectJob(name string) func() *core.Job {
\tswitch name {
${cases}\tdefault:
\t\treturn nil
\t}
}
''')


class GoRenderer(Renderer):
    """Render the dispatch table as a Go source file."""

    name = "go"
    template = FLOW_TEMPLATE

    def __init__(self, go_module: str = "github.com/fieldryand/goflow") -> None:
        self._go_module = go_module.rstrip("/")

    def _imports(self, table: DispatchTable) -> str:
        lines = [f'import "{self._go_module}/core"']
        # An unused import does not compile, so the jobs package is only
        # imported when at least one case refers to it.
        if table.entries:
            lines.append(f'import "{self._go_module}/jobs"')
        return "\n".join(lines)

    @staticmethod
    def _cases(table: DispatchTable) -> str:
        out = []
        for entry in table.entries:
            out.append(f'\tcase "{entry.job_name}":\n')
            out.append(f"\t\treturn jobs.{entry.constructor_name}\n")
        return "".join(out)

    def render(self, table: DispatchTable) -> str:
        return self._substitute({"imports": self._imports(table), "cases": self._cases(table)})
