"""Runtime environment for Scheep.

An Environment is a chain of Frames, innermost first, ending in the shared
empty environment. Extending an environment prepends a new Frame and keeps a
reference to the parent; parents are never copied, so a mutation made through
one chain is visible to every closure and call that shares the frame.
"""

from __future__ import annotations

import threading
from io import StringIO
from typing import Iterable, Iterator, Optional, Sequence

from scheep import LispValue
from scheep.errors import ArityMismatch, InvalidEnvironment, UnboundVariable
from scheep.types.symbol import Symbol


_MISSING = object()


class Frame:
    """One mutable scope level mapping Symbols to values.

    Every read and write happens under the frame's lock, so a reader never
    observes a half-applied insert.
    """

    __slots__ = ("_vars", "_lock")

    def __init__(self, bindings: Optional[dict[Symbol, LispValue]] = None):
        self._vars: dict[Symbol, LispValue] = dict(bindings or {})
        self._lock = threading.Lock()

    def __contains__(self, name: Symbol) -> bool:
        with self._lock:
            return name in self._vars

    def __len__(self) -> int:
        with self._lock:
            return len(self._vars)

    def get(self, name: Symbol, default: LispValue = None) -> LispValue:
        with self._lock:
            return self._vars.get(name, default)

    def put(self, name: Symbol, value: LispValue) -> None:
        """Insert or overwrite `name`."""
        with self._lock:
            self._vars[name] = value

    def replace(self, name: Symbol, value: LispValue) -> bool:
        """Overwrite `name` only if already bound here; report whether it was."""
        with self._lock:
            if name not in self._vars:
                return False
            self._vars[name] = value
            return True

    def items(self) -> list[tuple[Symbol, LispValue]]:
        """Snapshot of the bindings."""
        with self._lock:
            return list(self._vars.items())

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.items()))
            buffer.write("}")
            return buffer.getvalue()


class Environment:
    """Immutable chain node: a Frame plus a link to the enclosing Environment."""

    __slots__ = ("frame", "outer")

    def __init__(self, frame: Optional[Frame] = None, outer: Optional[Environment] = None):
        self.frame: Optional[Frame] = frame
        self.outer: Optional[Environment] = outer

    @property
    def is_empty(self) -> bool:
        return self.frame is None

    def frames(self) -> Iterator[Frame]:
        """Yield frames innermost first."""
        env: Optional[Environment] = self
        while env is not None and env.frame is not None:
            yield env.frame
            env = env.outer

    def extend(self, names: Sequence[Symbol], values: Sequence[LispValue]) -> Environment:
        """Return a child environment with one new frame pairing names to values."""
        if len(names) != len(values):
            raise ArityMismatch(len(names), len(values))
        return Environment(Frame(dict(zip(names, values))), self)

    def find_frame(self, name: Symbol) -> Optional[Frame]:
        """Find the nearest frame in the chain that binds `name`."""
        for frame in self.frames():
            if name in frame:
                return frame
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first."""
        for frame in self.frames():
            value = frame.get(name, _MISSING)
            if value is not _MISSING:
                return value
        raise UnboundVariable(name)

    def assign(self, name: Symbol, value: LispValue) -> None:
        """Overwrite the nearest existing binding of `name` (set!)."""
        for frame in self.frames():
            if frame.replace(name, value):
                return
        raise UnboundVariable(name)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in the innermost frame, shadowing any outer binding."""
        if self.frame is None:
            raise InvalidEnvironment(f"Cannot define {name} in the empty environment")
        self.frame.put(name, value)

    def __str__(self) -> str:
        if self.frame is None:
            return "{}"
        suffix = " -> ..." if self.outer is not None and not self.outer.is_empty else ""
        return f"{self.frame!r}{suffix}"

    def __repr__(self) -> str:
        chain = " -> ".join(repr(frame) for frame in self.frames())
        return f"<Environment chain: {chain or 'empty'}>"


THE_EMPTY_ENVIRONMENT = Environment()


def extend_environment(
    env: Environment, names: Sequence[Symbol], values: Sequence[LispValue]
) -> Environment:
    return env.extend(names, values)


def make_environment(bindings: Iterable[tuple[Symbol, LispValue]] = ()) -> Environment:
    """Build a single-frame environment on top of the empty environment."""
    pairs = list(bindings)
    return THE_EMPTY_ENVIRONMENT.extend([n for n, _ in pairs], [v for _, v in pairs])
