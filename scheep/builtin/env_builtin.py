"""Construction of the global environment from a primitive table."""

from __future__ import annotations

from typing import Callable, Mapping

from scheep.types.environment import THE_EMPTY_ENVIRONMENT, Environment
from scheep.types.procedure import PrimitiveProcedure
from scheep.types.symbol import Symbol


def make_global_environment(primitive_table: Mapping[str | Symbol, Callable]) -> Environment:
    """One frame holding every primitive, plus `true` and `false`."""
    names = [Symbol(str(name)) for name in primitive_table]
    procedures = [PrimitiveProcedure(fn, str(name)) for name, fn in primitive_table.items()]
    env = THE_EMPTY_ENVIRONMENT.extend(names, procedures)
    env.define(Symbol("true"), True)
    env.define(Symbol("false"), False)
    return env
