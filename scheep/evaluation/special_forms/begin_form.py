from scheep import SExpression, LispValue, EvaluatorFn
from scheep.errors import MalformedSyntax
from scheep.types.environment import Environment


def eval_sequence(exprs: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate each expression for effect and return the value of the last."""
    for e in exprs[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(exprs[-1], env)


def begin_form(expr: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(expr) < 2:
        raise MalformedSyntax("begin requires at least one expression")
    return eval_sequence(expr[1:], env, evaluate_fn)
