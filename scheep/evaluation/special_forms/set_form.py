from scheep import SExpression, LispValue, EvaluatorFn
from scheep.errors import MalformedSyntax
from scheep.types.environment import Environment
from scheep.types.symbol import Symbol, OK


def set_form(expr: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(expr) != 3:
        raise MalformedSyntax("set! requires exactly 2 arguments: (set! var value)")
    _, var_sym, val_expr = expr
    if not isinstance(var_sym, Symbol):
        raise MalformedSyntax(f"set! first argument must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.assign(var_sym, value)
    return OK
