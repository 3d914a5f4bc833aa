"""flowgen: build-time generator for the job dispatch table.

The package follows the pipeline it implements:
- `scan.py` lists the job-definitions directory.
- `extract.py` finds and parses the marker comment in each job file.
- `table.py` accumulates definitions into an ordered dispatch table.
- `targets/` renders the table into generated source, one renderer per language.
- `writer.py` replaces the output file atomically.
- `pipeline.py` runs the whole pass once.
"""

from flowgen.config import GeneratorConfig
from flowgen.pipeline import GenerationResult, generate

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "generate",
]
