"""Error kinds raised by the Scheep reader, evaluator and primitives.

The evaluator core never recovers from these; they propagate to the caller
(normally the REPL), which reports them and carries on.
"""

from typing import Any


class ScheepError(Exception):
    """ Base class for all Scheep errors"""
    pass


class UnboundVariable(ScheepError):
    """ Raised when lookup or set! finds no frame binding the name"""

    def __init__(self, name: Any):
        super().__init__(f"Unbound variable: {name}")
        self.name = name


class NotAProcedure(ScheepError):
    """ Raised when apply is handed something that is not a procedure"""

    def __init__(self, value: Any):
        super().__init__(f"Not a procedure: {value!r}")
        self.value = value


class UnknownExpressionType(ScheepError):
    """ Raised when evaluate cannot classify an expression"""

    def __init__(self, expression: Any):
        super().__init__(f"Unknown expression type: {expression!r}")
        self.expression = expression


class MalformedSyntax(ScheepError):
    """ Raised when a special or derived form has an invalid shape"""

    def __init__(self, detail: str):
        super().__init__(f"Malformed syntax: {detail}")
        self.detail = detail


class ArityMismatch(ScheepError):
    """ Raised when argument and parameter counts differ"""

    def __init__(self, expected: int, got: int):
        super().__init__(f"Arity mismatch: expected {expected} argument(s), got {got}")
        self.expected = expected
        self.got = got


class InvalidEnvironment(ScheepError):
    """ Raised when the embedder tries to define into the empty environment"""


class ScheepSyntaxError(ScheepError):
    """ Raised by the reader on unbalanced or unreadable input"""


class ScheepTypeError(ScheepError):
    """ Raised when a primitive receives a value of the wrong kind"""
