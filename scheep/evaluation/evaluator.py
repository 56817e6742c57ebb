"""Core evaluator for the Scheep interpreter.

`evaluate` classifies an expression and dispatches; the first rule that
applies wins:

1. self-evaluating literal (number, text, boolean)
2. variable (bare Symbol), resolved through the environment
3. registered special form, handed the raw expression
4. derived form, rewritten and evaluated again
5. application of any other non-empty list form
6. anything else is an UnknownExpressionType
"""

from __future__ import annotations

from numbers import Number

from scheep import SExpression, LispValue
from scheep.errors import UnknownExpressionType
from scheep.evaluation.apply import apply_procedure
from scheep.evaluation.derived_forms import DERIVED_FORMS
from scheep.evaluation.special_forms import SPECIAL_FORMS
from scheep.macros.syntax_rules import SyntaxRules
from scheep.types.environment import Environment
from scheep.types.symbol import Symbol


def is_self_evaluating(expr: SExpression) -> bool:
    return isinstance(expr, (bool, str, Number))


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    if is_self_evaluating(expr):
        return expr

    if isinstance(expr, Symbol):
        return env.lookup(expr)

    if isinstance(expr, list):
        if not expr:
            return []

        head = expr[0]
        if isinstance(head, Symbol):
            handler = SPECIAL_FORMS.get(head)
            if handler is not None:
                return handler(expr, env, evaluate)
            rewrite = DERIVED_FORMS.get(head)
            if rewrite is not None:
                return evaluate(rewrite(expr), env)

        operator = evaluate(head, env)
        if isinstance(operator, SyntaxRules):
            return evaluate(operator.expand(expr, env), env)

        # Left to right, each operand finished before the next starts
        arguments = [evaluate(operand, env) for operand in expr[1:]]
        return apply(operator, arguments)

    raise UnknownExpressionType(expr)


def apply(procedure: object, arguments: list[LispValue]) -> LispValue:
    """Apply a procedure value to already-evaluated arguments."""
    return apply_procedure(procedure, list(arguments), evaluate)
