"""syntax-rules transformers (non-hygienic).

A SyntaxRules value holds its literals, its (pattern, template) rules and the
environment it was defined in. Expansion picks the first rule whose pattern
matches the use form; the keyword position of each pattern is ignored.
"""

from __future__ import annotations

import logging

from scheep import SExpression
from scheep.errors import MalformedSyntax
from scheep.macros.pattern import ellipsis_variables, match
from scheep.macros.template import expand_template
from scheep.types.environment import Environment
from scheep.types.symbol import Symbol

logger = logging.getLogger(__name__)

SYNTAX_RULES = Symbol("syntax-rules")


class SyntaxRules:
    __slots__ = ("literals", "rules", "env", "name")

    def __init__(
        self,
        literals: list[Symbol],
        rules: list[tuple[list[SExpression], SExpression]],
        env: Environment,
        name: str | None = None,
    ):
        self.literals = literals
        self.rules = rules
        self.env = env
        self.name = name

    def expand(self, form: list[SExpression], use_env: Environment) -> SExpression:
        for pattern, template in self.rules:
            bindings = match(pattern[1:], form[1:], self.literals, self.env, use_env)
            if bindings is not None:
                expansion = expand_template(template, bindings, ellipsis_variables(pattern, self.literals))
                logger.debug("Expanded %s => %s", form, expansion)
                return expansion
        raise MalformedSyntax(f"no syntax rule of {self.name or 'macro'} matches {form!r}")

    def __repr__(self) -> str:
        return f"#<syntax {self.name or 'anonymous'}>"


def parse_syntax_rules(rules_form: SExpression, env: Environment, name: str | None = None) -> SyntaxRules:
    """Build a SyntaxRules from (syntax-rules (literal...) (pattern template)...)."""
    if not (isinstance(rules_form, list) and rules_form and rules_form[0] == SYNTAX_RULES):
        raise MalformedSyntax(f"expected (syntax-rules ...), got {rules_form!r}")
    if len(rules_form) < 2 or not isinstance(rules_form[1], list):
        raise MalformedSyntax("syntax-rules requires a literal list")

    literals = rules_form[1]
    for lit in literals:
        if not isinstance(lit, Symbol):
            raise MalformedSyntax(f"syntax-rules literal must be a symbol, got {lit!r}")

    rules = []
    for rule in rules_form[2:]:
        if not (isinstance(rule, list) and len(rule) == 2 and isinstance(rule[0], list) and rule[0]):
            raise MalformedSyntax(f"syntax rule must be (pattern template), got {rule!r}")
        rules.append((rule[0], rule[1]))
    return SyntaxRules(list(literals), rules, env, name)
