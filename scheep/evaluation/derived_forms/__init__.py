"""Table of derived forms: syntax evaluated by rewriting into simpler forms.

Each rewriter maps the raw expression to a new expression, which the
evaluator then evaluates in place of the original.
"""

from typing import Callable

from scheep import SExpression
from scheep.types.symbol import Symbol
from scheep.evaluation.derived_forms.cond_form import cond_to_if
from scheep.evaluation.derived_forms.let_form import let_to_combination

DERIVED_FORMS: dict[Symbol, Callable[[list[SExpression]], SExpression]] = {
    Symbol("cond"): cond_to_if,
    Symbol("let"): let_to_combination,
}
