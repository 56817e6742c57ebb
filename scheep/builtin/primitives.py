"""Primitive procedures implemented as plain Python functions.

Lists are Python lists (there are no pairs), so `cons` onto a non-list
produces a two-element list.
"""

from __future__ import annotations

import operator
import sys
from functools import reduce
from typing import Callable, TextIO

from scheep import LispValue
from scheep.errors import ArityMismatch, ScheepTypeError
from scheep.printer import to_string
from scheep.types.symbol import Symbol


# -------------------------------
# Lists
# -------------------------------
def car(lst: LispValue) -> LispValue:
    if not isinstance(lst, list) or not lst:
        raise ScheepTypeError(f"car expects a non-empty list, got {to_string(lst)}")
    return lst[0]


def cdr(lst: LispValue) -> LispValue:
    if not isinstance(lst, list) or not lst:
        raise ScheepTypeError(f"cdr expects a non-empty list, got {to_string(lst)}")
    return lst[1:]


def cons(head: LispValue, tail: LispValue) -> list:
    return [head, *tail] if isinstance(tail, list) else [head, tail]


def make_list(*items: LispValue) -> list:
    return list(items)


def is_null(value: LispValue) -> bool:
    return value == [] and isinstance(value, list)


def is_pair(value: LispValue) -> bool:
    return isinstance(value, list) and bool(value)


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def _numbers(name: str, args: tuple) -> tuple:
    for a in args:
        if isinstance(a, bool) or not isinstance(a, (int, float)):
            raise ScheepTypeError(f"{name} expects numbers, got {to_string(a)}")
    return args


def add(*args: LispValue) -> LispValue:
    return sum(_numbers("+", args))


def mul(*args: LispValue) -> LispValue:
    return reduce(operator.mul, _numbers("*", args), 1)


def sub(*args: LispValue) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise ArityMismatch(1, 0)
    first, *rest = _numbers("-", args)
    if not rest:
        return -first
    return reduce(operator.sub, rest, first)


def div(*args: LispValue) -> LispValue:
    if not args:
        raise ArityMismatch(1, 0)
    first, *rest = _numbers("/", args)
    if not rest:
        first, rest = 1, [first]
    if any(r == 0 for r in rest):
        raise ScheepTypeError("/ division by zero")
    result = first
    for r in rest:
        # keep exact results exact
        if isinstance(result, int) and isinstance(r, int) and result % r == 0:
            result //= r
        else:
            result /= r
    return result


def _chain(name: str, test: Callable[[LispValue, LispValue], bool]) -> Callable[..., bool]:
    def compare(*args: LispValue) -> bool:
        _numbers(name, args)
        return all(test(a, b) for a, b in zip(args, args[1:]))

    compare.__name__ = name
    return compare


def not_(value: LispValue) -> bool:
    return value is False


def is_eq(a: LispValue, b: LispValue) -> bool:
    if isinstance(a, list) and isinstance(b, list) and not a and not b:
        return True
    if isinstance(a, (Symbol, int, float)):
        return type(a) is type(b) and a == b
    return a is b


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality for lists, strings and numbers."""
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    return a == b


# -------------------------------
# Table
# -------------------------------
def make_primitive_table(output: TextIO | None = None) -> dict[str, Callable]:
    """Name -> host function mapping used to build the global environment.

    `display` and `newline` write to `output` (stdout when not given).
    """

    def display(value: LispValue) -> Symbol:
        out = output if output is not None else sys.stdout
        out.write(to_string(value, write=False))
        return Symbol("ok")

    def newline() -> Symbol:
        out = output if output is not None else sys.stdout
        out.write("\n")
        return Symbol("ok")

    return {
        "car": car,
        "cdr": cdr,
        "cons": cons,
        "list": make_list,
        "null?": is_null,
        "pair?": is_pair,
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        "=": _chain("=", operator.eq),
        "<": _chain("<", operator.lt),
        ">": _chain(">", operator.gt),
        "<=": _chain("<=", operator.le),
        ">=": _chain(">=", operator.ge),
        "not": not_,
        "eq?": is_eq,
        "equal?": is_equal,
        "display": display,
        "newline": newline,
    }
