from scheep import SExpression, LispValue, EvaluatorFn
from scheep.errors import MalformedSyntax
from scheep.types.environment import Environment


def is_true(value: LispValue) -> bool:
    # Only the boolean false is falsey; 0, "" and () are all true
    return value is not False


def if_form(expr: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(expr) not in (3, 4):
        raise MalformedSyntax("if requires a condition, a consequent and an optional alternative")

    if is_true(evaluate_fn(expr[1], env)):
        return evaluate_fn(expr[2], env)
    elif len(expr) == 4:
        return evaluate_fn(expr[3], env)
    else:
        return False
