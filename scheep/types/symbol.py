"""Interned symbols.

Symbol(name) always returns the one instance registered for `name`, so the
evaluator and the pattern matcher can compare identifiers by identity.
"""

from __future__ import annotations

import threading


class Symbol:
    __slots__ = ("id",)

    _table: dict[str, Symbol] = {}
    _table_lock = threading.Lock()

    def __new__(cls, name: str) -> Symbol:
        existing = cls._table.get(name)
        if existing is not None:
            return existing
        with cls._table_lock:
            return cls._table.setdefault(name, cls._create(name))

    @classmethod
    def _create(cls, name: str) -> Symbol:
        sym = object.__new__(cls)
        sym.id = name
        return sym

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return hash(self.id)

    def __reduce__(self):
        # copies and pickles resolve back to the interned instance
        return Symbol, (self.id,)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


QUOTE = Symbol("quote")
BEGIN = Symbol("begin")
LAMBDA = Symbol("lambda")
IF = Symbol("if")
ELSE = Symbol("else")
ELLIPSIS = Symbol("...")
OK = Symbol("ok")
