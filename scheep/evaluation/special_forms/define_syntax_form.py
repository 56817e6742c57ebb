import logging

from scheep import SExpression, LispValue, EvaluatorFn
from scheep.errors import MalformedSyntax
from scheep.macros.syntax_rules import parse_syntax_rules
from scheep.types.environment import Environment
from scheep.types.symbol import Symbol, OK

logger = logging.getLogger(__name__)


def define_syntax_form(expr: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(define-syntax name (syntax-rules (literal...) (pattern template)...))"""
    if len(expr) != 3 or not isinstance(expr[1], Symbol):
        raise MalformedSyntax("define-syntax requires a name and a syntax-rules form")
    name = expr[1]
    env.define(name, parse_syntax_rules(expr[2], env, str(name)))
    logger.debug("Defined syntax %s", name)
    return OK
