"""Dispatch table assembly."""

from __future__ import annotations

from typing import Dict, Iterable, List

from flowgen.errors import DuplicateJobError
from flowgen.models import DispatchTable, JobDefinition


class DispatchTableBuilder:
    """Accumulate job definitions in discovery order.

    No sorting or deduplication happens here: the table lists definitions in
    exactly the order they were added. A second definition for a job name that
    is already present is rejected.
    """

    def __init__(self) -> None:
        self._entries: List[JobDefinition] = []
        self._by_name: Dict[str, JobDefinition] = {}

    def add(self, definition: JobDefinition) -> "DispatchTableBuilder":
        existing = self._by_name.get(definition.job_name)
        if existing is not None:
            raise DuplicateJobError(definition.job_name, existing.source, definition.source)

        self._by_name[definition.job_name] = definition
        self._entries.append(definition)
        return self

    def build(self) -> DispatchTable:
        return DispatchTable(entries=list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def build_table(definitions: Iterable[JobDefinition]) -> DispatchTable:
    """Build a dispatch table from definitions in the given order."""
    builder = DispatchTableBuilder()
    for definition in definitions:
        builder.add(definition)
    return builder.build()
