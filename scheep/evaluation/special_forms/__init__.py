"""Special forms of the Scheep evaluator.

Importing this package registers the built-in forms in SPECIAL_FORMS.
"""

from scheep.evaluation.special_forms.registry import SPECIAL_FORMS, register_special_form
from scheep.evaluation.special_forms.quote_form import quote_form
from scheep.evaluation.special_forms.set_form import set_form
from scheep.evaluation.special_forms.define_form import define_form
from scheep.evaluation.special_forms.if_form import if_form
from scheep.evaluation.special_forms.lambda_form import lambda_form
from scheep.evaluation.special_forms.begin_form import begin_form
from scheep.evaluation.special_forms.define_syntax_form import define_syntax_form

for _tag, _handler in (
    ("quote", quote_form),
    ("set!", set_form),
    ("define", define_form),
    ("if", if_form),
    ("lambda", lambda_form),
    ("begin", begin_form),
    ("define-syntax", define_syntax_form),
):
    register_special_form(_tag, _handler)

__all__ = ["SPECIAL_FORMS", "register_special_form"]
