"""Run a source file through Judge0 and print the normalised verdict.

Usage:
    codejudge-run solution.py --language python

Reads RAPIDAPI_KEY (and the other JUDGE0_* settings) from the environment or .env.
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from codejudge.core.config import get_settings
from codejudge.core.log import configure_logging
from codejudge.features.execution.languages import LANGUAGE_MAP
from codejudge.features.execution.service import Judge0Client


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Execute a source file on Judge0")
    parser.add_argument("file", type=Path, help="Source file to execute")
    parser.add_argument(
        "--language",
        default="python",
        choices=sorted(LANGUAGE_MAP),
        help="Language of the source file (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        code = args.file.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    result = asyncio.run(Judge0Client(settings).execute_code(args.language, code))
    if result.output:
        print(result.output)
    if result.error:
        print(result.error, file=sys.stderr)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
