"""Application engine for Scheep.

Procedures are the closed set {PrimitiveProcedure, CompoundProcedure}:
- A primitive receives the argument list spread positionally; arity checks
  are the host function's business and its failures propagate unchanged.
- A compound procedure gets a new frame on its captured environment and its
  body is evaluated there. The last body expression is evaluated by an
  ordinary recursive call, so host stack depth grows with Scheme call depth.
"""

from scheep import LispValue, EvaluatorFn
from scheep.errors import NotAProcedure
from scheep.evaluation.special_forms.begin_form import eval_sequence
from scheep.types.procedure import CompoundProcedure, PrimitiveProcedure


def apply_procedure(procedure: object, arguments: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    match procedure:
        case PrimitiveProcedure():
            return procedure.implementation(*arguments)
        case CompoundProcedure():
            # Raises ArityMismatch when the counts differ
            call_env = procedure.env.extend(procedure.parameters, arguments)
            return eval_sequence(procedure.body, call_env, evaluate_fn)
        case _:
            raise NotAProcedure(procedure)
