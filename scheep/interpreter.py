from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, TextIO

from scheep import LispValue
from scheep.builtin.env_builtin import make_global_environment
from scheep.builtin.primitives import make_primitive_table
from scheep.config import get_prelude_files
from scheep.evaluation.evaluator import evaluate
from scheep.reader.parser import read

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Scheep code against one global environment.
    Definitions persist across calls to `eval`.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto', output: TextIO | None = None):
        self.env = make_global_environment(make_primitive_table(output))

        if prelude == 'auto':
            for path in get_prelude_files():
                self.load(path)
        elif prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last value (None if there is none)."""
        result = None
        for expr in read(code):
            result = evaluate(expr, self.env)
        return result

    def load(self, path: str | Path) -> LispValue:
        path = Path(path)
        logger.info("Loading %s", path)
        return self.eval(path.read_text(encoding="utf-8"))
