"""Registry of special forms for the Eta evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so
these names cannot be shadowed by bindings.

Every handler takes (tail, env, evaluate_fn), where tail is the list of
unevaluated argument forms, and returns a value or a TailCall for the
evaluator loop to continue with.
"""

from eta.types.symbol import Symbol
from eta.evaluation.special_forms.quote_form import quote_form
from eta.evaluation.special_forms.cond_form import cond_form
from eta.evaluation.special_forms.let_form import let_form
from eta.evaluation.special_forms.lambda_form import lambda_form
from eta.evaluation.special_forms.apply_form import apply_form
from eta.evaluation.special_forms.eval_form import eval_form
from eta.evaluation.special_forms.quit_form import quit_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("cond"): cond_form,
    Symbol("let"): let_form,
    Symbol("lambda"): lambda_form,
    Symbol("apply"): apply_form,
    Symbol("eval"): eval_form,
    Symbol("quit"): quit_form,
}
