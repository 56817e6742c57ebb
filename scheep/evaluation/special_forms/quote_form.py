from scheep import SExpression, LispValue, EvaluatorFn
from scheep.errors import MalformedSyntax
from scheep.types.environment import Environment


def quote_form(expr: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(quote datum)"""
    if len(expr) != 2:
        raise MalformedSyntax("quote expects exactly 1 argument")
    return expr[1]
