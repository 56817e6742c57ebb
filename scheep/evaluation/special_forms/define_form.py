from scheep import SExpression, LispValue, EvaluatorFn
from scheep.errors import MalformedSyntax
from scheep.evaluation.special_forms.lambda_form import make_procedure
from scheep.types.environment import Environment
from scheep.types.procedure import CompoundProcedure
from scheep.types.symbol import Symbol, OK


def define_form(expr: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)  ; same as binding name to a lambda
    """
    if len(expr) < 3:
        raise MalformedSyntax("define requires a name and a value")

    target = expr[1]
    if isinstance(target, list):
        if not target or not isinstance(target[0], Symbol):
            raise MalformedSyntax(f"procedure definition needs a symbol name, got {target!r}")
        name, params = target[0], target[1:]
        env.define(name, make_procedure(params, expr[2:], env, str(name)))
        return OK

    if not isinstance(target, Symbol):
        raise MalformedSyntax(f"define target must be a symbol, got {target!r}")
    if len(expr) != 3:
        raise MalformedSyntax("define of a variable takes exactly one value expression")
    value = evaluate_fn(expr[2], env)
    if isinstance(value, CompoundProcedure) and value.name is None:
        value.name = str(target)
    env.define(target, value)
    return OK
