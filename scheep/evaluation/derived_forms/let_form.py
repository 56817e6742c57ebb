from scheep import SExpression
from scheep.errors import MalformedSyntax
from scheep.types.symbol import LAMBDA, Symbol


def let_to_combination(expr: list[SExpression]) -> SExpression:
    """(let ((name init) ...) body...) => ((lambda (name ...) body...) init ...)"""
    if len(expr) < 3:
        raise MalformedSyntax("let requires a binding list and at least one body expression")

    bindings, body = expr[1], expr[2:]
    if not isinstance(bindings, list):
        raise MalformedSyntax(f"let bindings must be a list, got {bindings!r}")

    names, inits = [], []
    for binding in bindings:
        if not (isinstance(binding, list) and len(binding) == 2 and isinstance(binding[0], Symbol)):
            raise MalformedSyntax(f"let binding must be (name init), got {binding!r}")
        names.append(binding[0])
        inits.append(binding[1])
    return [[LAMBDA, names, *body], *inits]
