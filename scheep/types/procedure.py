"""Procedure values: the closed set {PrimitiveProcedure, CompoundProcedure}."""

from __future__ import annotations

from io import StringIO
from typing import Callable, Union

from scheep import SExpression
from scheep.types.environment import Environment
from scheep.types.symbol import Symbol


class PrimitiveProcedure:
    """A procedure backed by a host function; arguments are spread positionally."""

    __slots__ = ("implementation", "name")

    def __init__(self, implementation: Callable, name: str | None = None):
        self.implementation: Callable = implementation
        self.name: str = name or getattr(implementation, "__name__", "primitive")

    def __repr__(self) -> str:
        return f"#<primitive {self.name}>"


class CompoundProcedure:
    """A user procedure with formal parameters, body sequence, and closure env."""

    __slots__ = ("parameters", "body", "env", "name")

    def __init__(
        self,
        parameters: list[Symbol],
        body: list[SExpression],
        env: Environment,
        name: str | None = None,
    ):
        self.parameters: list[Symbol] = parameters
        self.body: list[SExpression] = body
        # Captured by reference: closures see later mutations of the chain
        self.env: Environment = env
        self.name: str | None = name

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.parameters))
            buffer.write(") ")
            buffer.write(" ".join(str(b) for b in self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"#<procedure {self.name or 'anonymous'}>"


Procedure = Union[PrimitiveProcedure, CompoundProcedure]
