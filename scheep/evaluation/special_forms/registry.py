"""Open table of special forms for the Scheep evaluator.

Maps leading Symbols to handler functions `(expr, env, evaluate_fn) -> value`
that implement non-standard evaluation rules. Handlers receive the raw, whole
expression. Registration publishes a fresh read-only mapping, so the evaluator
reads the table without taking a lock.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from scheep import SExpression, LispValue, EvaluatorFn
from scheep.errors import ScheepError
from scheep.types.environment import Environment
from scheep.types.symbol import Symbol

logger = logging.getLogger(__name__)

SpecialFormHandler = Callable[[list[SExpression], Environment, EvaluatorFn], LispValue]


class SpecialFormRegistry:
    """Copy-on-write mapping from form tag to handler."""

    def __init__(self):
        self._forms: Mapping[Symbol, SpecialFormHandler] = MappingProxyType({})
        self._write_lock = threading.Lock()

    def register(self, tag: Symbol | str, handler: SpecialFormHandler) -> None:
        if isinstance(tag, str):
            tag = Symbol(tag)
        if not isinstance(tag, Symbol):
            raise ScheepError(f"Special form tag must be a symbol, got {tag!r}")
        with self._write_lock:
            forms = dict(self._forms)
            forms[tag] = handler
            self._forms = MappingProxyType(forms)
        logger.debug("Registered special form %s -> %s", tag, getattr(handler, "__name__", handler))

    def unregister(self, tag: Symbol | str) -> None:
        if isinstance(tag, str):
            tag = Symbol(tag)
        with self._write_lock:
            forms = dict(self._forms)
            forms.pop(tag, None)
            self._forms = MappingProxyType(forms)

    def get(self, tag: Symbol) -> Optional[SpecialFormHandler]:
        return self._forms.get(tag)

    def __contains__(self, tag: object) -> bool:
        return tag in self._forms

    def tags(self) -> list[Symbol]:
        return list(self._forms)


SPECIAL_FORMS = SpecialFormRegistry()


def register_special_form(tag: Symbol | str, handler: SpecialFormHandler) -> None:
    """Install `handler` for list forms headed by `tag` (startup-time use)."""
    SPECIAL_FORMS.register(tag, handler)
