# Core type aliases for Scheep's data model.
# Expressions are plain Python values: int/float for numbers, str for text,
# bool for booleans, Symbol for identifiers and list for list forms. No Cons
# type or separate AST is built; code is evaluated in this tree shape.
#
# Naming guidance:
# - SExpression: use in reader/macro code for syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code for evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, handed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.2.0"
