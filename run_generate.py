"""CLI entry point.

This script regenerates the job dispatch file from the job definitions in
./jobs. Run it as a pre-build step; it takes no options.

Examples:
    python run_generate.py
    FLOWGEN_TARGET=go python run_generate.py
    FLOWGEN_LOG_LEVEL=DEBUG python run_generate.py

Each job file (a file whose name contains "_job") declares itself with a
marker comment such as `# goflow: ingest_job ingest`.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from flowgen.config import GeneratorConfig
from flowgen.errors import FlowgenError
from flowgen.logging_config import configure_logging
from flowgen.pipeline import generate

logger = logging.getLogger("flowgen")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Generate the job dispatch file from marker comments in ./jobs.",
        epilog="Paths and conventions can be overridden with FLOWGEN_* environment variables.",
    )
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    parse_args(argv)
    configure_logging()

    try:
        config = GeneratorConfig.from_env()
        result = generate(config)
    except FlowgenError as exc:
        logger.error("generation failed: %s", exc)
        return 1

    print(f"Wrote {len(result.table)} jobs to: {result.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
