"""Command line entry point: `python -m lispy` or the `lispy` console script."""

from __future__ import annotations

import argparse
import logging
import sys

from lispy import config
from lispy.interpreter import Interpreter
from lispy.repl import eval_line, repl


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="lispy", description="A minimal Lisp interpreter")
    parser.add_argument("-c", "--command", help="evaluate one expression, print it and exit")
    parser.add_argument("--prompt", default=None, help="REPL prompt (env: LISPY_PROMPT)")
    parser.add_argument("--log-level", default=None, help="logging level (env: LISPY_LOGLEVEL)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=config.get_log_level(args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # Closures recurse on the Python stack
    sys.setrecursionlimit(max(sys.getrecursionlimit(), config.get_recursion_limit()))

    interp = Interpreter()
    if args.command is not None:
        return 0 if eval_line(interp, args.command, sys.stdout) else 1
    repl(interp, prompt=args.prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
