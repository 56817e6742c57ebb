from __future__ import annotations

import argparse
import logging
import sys

from scheep import __version__
from scheep.config import get_log_level, get_recursion_limit
from scheep.interpreter import Interpreter
from scheep.repl import run_repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scheep", description="A small metacircular Scheme evaluator")
    parser.add_argument("files", nargs="*", help="Scheme source files to load")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="start the REPL after loading files")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the prelude")
    parser.add_argument("--log-level", default=None, help="logging level (default: $SCHEEP_LOG_LEVEL)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper() if args.log_level else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.setrecursionlimit(get_recursion_limit())

    interp = Interpreter(prelude=None if args.no_prelude else 'auto')
    for path in args.files:
        interp.load(path)
    if not args.files or args.interactive:
        run_repl(interp, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
