"""A prompt-read-eval-print loop for Lispy.

Each input line holds one program. A failing line is reported and the loop
moves on to the next one; definitions made before the failure persist.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from lispy.errors import LispyError
from lispy.interpreter import Interpreter
from lispy.printer import to_string
from lispy import config

logger = logging.getLogger(__name__)


def eval_line(interp: Interpreter, line: str, stdout: TextIO) -> bool:
    """Evaluate one line, writing its result or error. Returns False on failure."""
    try:
        val = interp.eval(line)
        text = None if val is None else to_string(val)
    except LispyError as ex:
        logger.debug("error evaluating %r", line, exc_info=True)
        stdout.write(f"error: {type(ex).__name__}: {ex}\n")
        return False
    except Exception as ex:
        # Host failures (recursion depth, memory, oversized int rendering) stay local to the line
        logger.debug("host error evaluating %r", line, exc_info=True)
        stdout.write(f"error: {type(ex).__name__}: {ex}\n")
        return False
    if text is not None:
        stdout.write(text + "\n")
    return True


def repl(
    interp: Interpreter | None = None,
    prompt: str | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Prompt, read a line, evaluate it and print the result until EOF."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    interp = interp if interp is not None else Interpreter()
    prompt = prompt if prompt is not None else config.get_prompt()
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        if not line.strip():
            continue
        eval_line(interp, line, stdout)
    stdout.write("\n")
