"""Rewrite of (cond clause...) into nested if expressions.

The whole form is rewritten before any clause is evaluated, so a misplaced
else is reported without side effects.
"""

from scheep import SExpression
from scheep.errors import MalformedSyntax
from scheep.types.symbol import BEGIN, ELSE, IF


def sequence_to_exp(actions: list[SExpression]) -> SExpression:
    """Wrap a sequence of expressions so it reads as one expression."""
    if not actions:
        return []
    if len(actions) == 1:
        return actions[0]
    return [BEGIN, *actions]


def expand_clauses(clauses: list[SExpression]) -> SExpression:
    if not clauses:
        return False  # no else clause and nothing matched

    first, rest = clauses[0], clauses[1:]
    if not isinstance(first, list) or not first:
        raise MalformedSyntax(f"cond clause must be a non-empty list, got {first!r}")

    predicate, actions = first[0], first[1:]
    if predicate == ELSE:
        if rest:
            raise MalformedSyntax("else clause isn't the last clause of cond")
        return sequence_to_exp(actions)
    return [IF, predicate, sequence_to_exp(actions), expand_clauses(rest)]


def cond_to_if(expr: list[SExpression]) -> SExpression:
    return expand_clauses(expr[1:])
