"""Pattern matcher for syntax-rules macros.

`match` compares a pattern tree with a candidate form and returns the
pattern-variable bindings, or None when the form does not fit. A failed match
is an ordinary outcome (the caller moves on to the next rule), so it is never
raised as an error. Only a malformed pattern raises.

Bindings map each pattern variable to the list of forms it matched. A plain
variable binds a one-element list; a variable under an ellipsis accumulates
one entry per repetition, which is why binding sets are merged by
concatenation rather than overwritten.

Patterns are processed as sequences: at each step the head of the remaining
pattern is classified into one of the PatternKind cases below.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional

from scheep import SExpression
from scheep.errors import MalformedSyntax, UnboundVariable
from scheep.types.environment import Environment
from scheep.types.symbol import ELLIPSIS, Symbol

Bindings = dict[Symbol, list[SExpression]]

_UNBOUND = object()


class PatternKind(Enum):
    EMPTY = auto()
    ELLIPSIS = auto()
    LITERAL = auto()
    VARIABLE = auto()
    SUBLIST = auto()
    DATUM = auto()


@dataclass(frozen=True)
class MatchContext:
    literals: frozenset[Symbol]
    def_env: Environment
    use_env: Environment


def classify(patterns: list[SExpression], literals: frozenset[Symbol]) -> PatternKind:
    """Classify the head of a pattern sequence."""
    if not patterns:
        return PatternKind.EMPTY
    head = patterns[0]
    if head == ELLIPSIS:
        raise MalformedSyntax("ellipsis must follow a sub-pattern")
    if len(patterns) > 1 and patterns[1] == ELLIPSIS:
        return PatternKind.ELLIPSIS
    if isinstance(head, Symbol):
        return PatternKind.LITERAL if head in literals else PatternKind.VARIABLE
    if isinstance(head, list):
        return PatternKind.SUBLIST
    return PatternKind.DATUM


def merge_bindings(*binding_sets: Bindings) -> Bindings:
    """Concatenate the sequences stored under identical keys, in order."""
    merged: Bindings = {}
    for bindings in binding_sets:
        for name, forms in bindings.items():
            merged.setdefault(name, []).extend(forms)
    return merged


def pattern_variables(pattern: SExpression, literals: Iterable[Symbol] = ()) -> list[Symbol]:
    """Pattern variables in order of first appearance."""
    literals = frozenset(literals)
    found: list[Symbol] = []

    def walk(p):
        if isinstance(p, Symbol):
            if p != ELLIPSIS and p not in literals and p not in found:
                found.append(p)
        elif isinstance(p, list):
            for item in p:
                walk(item)

    walk(pattern)
    return found


def ellipsis_variables(pattern: SExpression, literals: Iterable[Symbol] = ()) -> set[Symbol]:
    """Variables that occur inside a sub-pattern followed by an ellipsis."""
    literals = frozenset(literals)
    result: set[Symbol] = set()

    def walk(p):
        if not isinstance(p, list):
            return
        for i, item in enumerate(p):
            if i + 1 < len(p) and p[i + 1] == ELLIPSIS:
                result.update(pattern_variables(item, literals))
            walk(item)

    walk(pattern)
    return result


def same_literal(ctx: MatchContext, pattern_sym: Symbol, form: SExpression) -> bool:
    """True when `form` names the same binding in the use env as `pattern_sym` in the def env."""
    if not isinstance(form, Symbol):
        return False
    def_binding = _resolve(ctx.def_env, pattern_sym)
    use_binding = _resolve(ctx.use_env, form)
    if def_binding is _UNBOUND or use_binding is _UNBOUND:
        # Free identifiers match only when both are free and spelled alike
        return def_binding is use_binding and pattern_sym == form
    if def_binding is use_binding:
        return True
    return type(def_binding) is type(use_binding) and def_binding == use_binding


def _resolve(env: Environment, name: Symbol):
    try:
        return env.lookup(name)
    except UnboundVariable:
        return _UNBOUND


def _min_length(patterns: list[SExpression]) -> int:
    if ELLIPSIS in patterns:
        raise MalformedSyntax("only one ellipsis is allowed per list pattern")
    return len(patterns)


def _match_sequence(
    patterns: list[SExpression], forms: list[SExpression], ctx: MatchContext, acc: Bindings
) -> Optional[Bindings]:
    while True:
        match classify(patterns, ctx.literals):
            case PatternKind.EMPTY:
                return acc if not forms else None

            case PatternKind.ELLIPSIS:
                sub, trailing = patterns[0], patterns[2:]
                count = len(forms) - _min_length(trailing)
                if count < 0:
                    return None
                # Zero repetitions still bind every variable, to an empty list
                matches: list[Bindings] = [{v: [] for v in pattern_variables(sub, ctx.literals)}]
                for form in forms[:count]:
                    one = _match_sequence([sub], [form], ctx, {})
                    if one is None:
                        return None
                    matches.append(one)
                acc = merge_bindings(acc, *matches)
                patterns, forms = trailing, forms[count:]

            case PatternKind.VARIABLE:
                if not forms:
                    return None
                acc = merge_bindings(acc, {patterns[0]: [forms[0]]})
                patterns, forms = patterns[1:], forms[1:]

            case PatternKind.LITERAL:
                if not forms or not same_literal(ctx, patterns[0], forms[0]):
                    return None
                patterns, forms = patterns[1:], forms[1:]

            case PatternKind.SUBLIST:
                if not forms or not isinstance(forms[0], list):
                    return None
                inner = _match_sequence(patterns[0], forms[0], ctx, {})
                if inner is None:
                    return None
                acc = merge_bindings(acc, inner)
                patterns, forms = patterns[1:], forms[1:]

            case PatternKind.DATUM:
                # Only symbols, ellipses and sublists are pattern syntax
                return None


def match(
    pattern: SExpression,
    form: SExpression,
    literals: Iterable[Symbol],
    def_env: Environment,
    use_env: Environment,
) -> Optional[Bindings]:
    """Match `pattern` against `form`; return the bindings, or None if they differ."""
    if not isinstance(pattern, list):
        pattern = [pattern]
        form = [form]
    elif not isinstance(form, list):
        return None
    ctx = MatchContext(frozenset(literals), def_env, use_env)
    return _match_sequence(list(pattern), list(form), ctx, {})
