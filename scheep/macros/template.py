"""Template instantiation for syntax-rules.

Substitutes matched forms for pattern variables. `sub ...` in a template is
repeated once per entry of the ellipsis variables it mentions. Bindings are
flat lists, so one level of ellipsis nesting is supported.
"""

from __future__ import annotations

from typing import Iterator

from scheep import SExpression
from scheep.errors import MalformedSyntax
from scheep.macros.pattern import Bindings, pattern_variables
from scheep.types.symbol import ELLIPSIS, Symbol


def expand_template(template: SExpression, bindings: Bindings, ellipsis_vars: set[Symbol]) -> SExpression:
    if isinstance(template, Symbol):
        if template not in bindings:
            return template
        if template in ellipsis_vars:
            raise MalformedSyntax(f"pattern variable {template} must be followed by ... in the template")
        return bindings[template][0]

    if not isinstance(template, list):
        return template

    result = []
    i = 0
    while i < len(template):
        sub = template[i]
        if sub == ELLIPSIS:
            raise MalformedSyntax("ellipsis must follow a sub-template")
        if i + 1 < len(template) and template[i + 1] == ELLIPSIS:
            result.extend(_repeat(sub, bindings, ellipsis_vars))
            i += 2
        else:
            result.append(expand_template(sub, bindings, ellipsis_vars))
            i += 1
    return result


def _repeat(sub: SExpression, bindings: Bindings, ellipsis_vars: set[Symbol]) -> Iterator[SExpression]:
    names = [v for v in pattern_variables(sub) if v in ellipsis_vars and v in bindings]
    if not names:
        raise MalformedSyntax(f"no ellipsis pattern variable in repeated template {sub!r}")

    lengths = {len(bindings[n]) for n in names}
    if len(lengths) != 1:
        raise MalformedSyntax(f"ellipsis variables {', '.join(map(str, names))} matched different counts")

    inner_vars = ellipsis_vars - set(names)
    for i in range(lengths.pop()):
        local = dict(bindings)
        for n in names:
            local[n] = [bindings[n][i]]
        yield expand_template(sub, local, inner_vars)
