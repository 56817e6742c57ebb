from scheep import SExpression, LispValue, EvaluatorFn
from scheep.errors import MalformedSyntax
from scheep.types.environment import Environment
from scheep.types.procedure import CompoundProcedure
from scheep.types.symbol import Symbol


def check_parameters(params: SExpression) -> list[Symbol]:
    if not isinstance(params, list):
        raise MalformedSyntax(f"parameter list must be a list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise MalformedSyntax(f"parameter must be a symbol, got {p!r}")
    if len(set(params)) != len(params):
        raise MalformedSyntax(f"duplicate parameter in {params!r}")
    return list(params)


def make_procedure(
    params: SExpression, body: list[SExpression], env: Environment, name: str | None = None
) -> CompoundProcedure:
    # (lambda (params) body...) needs at least one body form
    if not body:
        raise MalformedSyntax("lambda requires a parameter list and at least one body expression")
    return CompoundProcedure(check_parameters(params), list(body), env, name)


def lambda_form(expr: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(expr) < 2:
        raise MalformedSyntax("lambda requires at least a parameter list")
    return make_procedure(expr[1], expr[2:], env)
