"""Read-eval-print loop.

A failing evaluation is reported and the loop carries on; the global
environment keeps every binding made before the failure.
"""

from __future__ import annotations

import logging
from typing import TextIO

from scheep.errors import ScheepSyntaxError
from scheep.interpreter import Interpreter
from scheep.printer import to_string
from scheep.reader.parser import read
from scheep.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)

INPUT_PROMPT = "scheep> "
CONTINUE_PROMPT = "...     "
OUTPUT_PREFIX = ";= "
ERROR_PREFIX = ";! "


def is_incomplete(source: str) -> bool:
    """True when `source` stops inside an open list or string."""
    try:
        read(source)
    except ScheepSyntaxError as e:
        msg = str(e)
        return msg.startswith(("Unmatched '('", "Unterminated string", "Quote at end"))
    except Exception:
        # Complete but unreadable; the evaluation step reports it
        return False
    return False


def run_repl(interp: Interpreter, stdin: TextIO, stdout: TextIO) -> None:
    buffer = ""
    stdout.write(INPUT_PROMPT)
    stdout.flush()
    for line in stdin:
        buffer += line
        if is_incomplete(buffer):
            stdout.write(CONTINUE_PROMPT)
            stdout.flush()
            continue
        source, buffer = buffer, ""
        try:
            for expr in read(source):
                value = evaluate(expr, interp.env)
                stdout.write(f"{OUTPUT_PREFIX}{to_string(value)}\n")
        except Exception as e:  # any failure, Scheep or host, must not end the session
            logger.debug("Evaluation failed", exc_info=True)
            stdout.write(f"{ERROR_PREFIX}Error: {e}\n")
        stdout.write(INPUT_PROMPT)
        stdout.flush()
    stdout.write("\n")
