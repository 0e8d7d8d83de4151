"""
gcp-project-id

Print the resolved Google Cloud project ID.

Usage:
    gcp-project-id [--timeout SECONDS] [--scope URI ...] [--strict]
                   [--env-file PATH] [--json] [-v]

Exit codes:
    0    Resolved (or nothing found without --strict; an empty line is printed)
    1    Nothing found and --strict given
    2    Bad command line
    3    A searcher failed
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from .config import DEFAULT_TIMEOUT_SECONDS
from .resolver import ProjectIdResolver
from .types import ErrorKind, Options, ResolutionResult

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_SEARCHER_FAILED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gcp-project-id",
        description="Resolve the current Google Cloud project ID.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_SECONDS,
        metavar="SECONDS",
        help=f"Overall deadline for the search (default: {DEFAULT_TIMEOUT_SECONDS:g})",
    )
    parser.add_argument(
        "--scope",
        dest="scopes",
        action="append",
        default=[],
        metavar="URI",
        help="OAuth scope for credential discovery (repeatable)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero when no project ID is found",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        metavar="PATH",
        help="Load a .env file first; variables already set are kept",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def result_to_dict(result: ResolutionResult) -> dict:
    return {
        "project_id": result.project_id,
        "searcher": result.searcher,
        "error": str(result.error) if result.error is not None else None,
        "error_kind": result.error_kind.value if result.error_kind is not None else None,
        "resolution_time_seconds": round(result.resolution_time_seconds, 6),
    }


def exit_code_for(result: ResolutionResult) -> int:
    if result.error_kind is ErrorKind.NOT_FOUND:
        return EXIT_NOT_FOUND
    if result.error_kind is ErrorKind.SEARCHER_FAILED:
        return EXIT_SEARCHER_FAILED
    return EXIT_OK


def main(
    argv: Optional[Sequence[str]] = None,
    resolver: Optional[ProjectIdResolver] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    if not args.timeout >= 0:
        parser.error("--timeout must not be negative")

    if args.env_file is not None:
        if not args.env_file.is_file():
            parser.error(f"--env-file {args.env_file} does not exist")
        load_dotenv(args.env_file, override=False)

    options = Options(
        timeout_seconds=args.timeout,
        scopes=tuple(args.scopes),
        strict=args.strict,
    )
    result = (resolver or ProjectIdResolver()).resolve(options)

    if args.json:
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        if result.error is not None:
            print(f"gcp-project-id: {result.error}", file=sys.stderr)
        else:
            print(result.project_id)

    return exit_code_for(result)


if __name__ == "__main__":
    sys.exit(main())
