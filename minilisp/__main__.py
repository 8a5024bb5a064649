from __future__ import annotations

import argparse
import logging
import sys

import minilisp
from minilisp import config
from minilisp.interpreter import repl, run_file

logger = logging.getLogger("minilisp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilisp",
        description="Run a minilisp program, or start a REPL when no file is given.",
    )
    parser.add_argument("file", nargs="?", help="program file to interpret")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="logging level (default: $MINILISP_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        metavar="N",
        help="Python recursion limit for deeply nested programs",
    )
    parser.add_argument(
        "--version", action="version", version=f"minilisp {minilisp.__version__}"
    )
    return parser


def main(sys_args: list[str] | None = None) -> int:
    args = build_parser().parse_args(sys_args)

    logging.basicConfig(
        level=args.log_level or config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        limit = args.recursion_limit or config.get_recursion_limit()
    except ValueError as e:
        logger.error("%s", e)
        return 2
    if limit is not None:
        sys.setrecursionlimit(limit)

    try:
        if args.file is None:
            repl()
            return 0
        return run_file(args.file)
    except RecursionError:
        # No tail calls: runaway recursion exhausts the stack and ends the process.
        logger.critical("stack exhausted; the program recursed too deeply")
        return 1


if __name__ == "__main__":
    sys.exit(main())
