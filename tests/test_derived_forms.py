import pytest

from scheep.errors import MalformedSyntax
from scheep.evaluation.derived_forms import DERIVED_FORMS
from scheep.evaluation.derived_forms.cond_form import cond_to_if, sequence_to_exp
from scheep.evaluation.derived_forms.let_form import let_to_combination
from scheep.evaluation.evaluator import evaluate
from scheep.types.symbol import Symbol

S = Symbol
ELSE = S("else")


def test_cond_is_derived_not_special():
    assert S("cond") in DERIVED_FORMS
    assert S("let") in DERIVED_FORMS


@pytest.mark.parametrize("actions,expected", [
    ([], []),
    ([1], 1),
    ([1, 2], [S("begin"), 1, 2]),
])
def test_sequence_to_exp(actions, expected):
    assert sequence_to_exp(actions) == expected


def test_cond_rewrites_to_nested_if():
    expr = [S("cond"), [S("a"), 1], [S("b"), 2, 3], [ELSE, 4]]
    assert cond_to_if(expr) == [S("if"), S("a"), 1, [S("if"), S("b"), [S("begin"), 2, 3], 4]]


def test_cond_without_else_ends_in_false():
    assert cond_to_if([S("cond"), [S("a"), 1]]) == [S("if"), S("a"), 1, False]
    assert cond_to_if([S("cond")]) is False


def test_cond_clause_without_actions_rewrites_to_empty_form():
    assert cond_to_if([S("cond"), [S("a")]]) == [S("if"), S("a"), [], False]


def test_cond_evaluation(env):
    assert evaluate([S("cond"), [False, 1], [ELSE, 2]], env) == 2
    assert evaluate([S("cond"), [[S("="), 1, 1], 10], [ELSE, 20]], env) == 10
    assert evaluate([S("cond"), [False, 1]], env) is False


def test_cond_non_final_else_fails_before_evaluation(env, output):
    expr = [S("cond"),
            [[S("display"), "side effect"], 1],
            [ELSE, 2],
            [True, 3]]
    with pytest.raises(MalformedSyntax):
        evaluate(expr, env)
    assert output.getvalue() == ""


@pytest.mark.parametrize("clause", [[], 5, S("x")])
def test_cond_malformed_clause(env, clause):
    with pytest.raises(MalformedSyntax):
        evaluate([S("cond"), clause], env)


def test_let_rewrites_to_lambda_application():
    expr = [S("let"), [[S("a"), 1], [S("b"), 2]], [S("+"), S("a"), S("b")]]
    assert let_to_combination(expr) == [
        [S("lambda"), [S("a"), S("b")], [S("+"), S("a"), S("b")]], 1, 2
    ]


def test_let_evaluation_scopes_bindings(env):
    evaluate([S("define"), S("a"), 100], env)
    assert evaluate([S("let"), [[S("a"), 1], [S("b"), S("a")]], [S("list"), S("a"), S("b")]], env) == [1, 100]
    assert evaluate(S("a"), env) == 100


@pytest.mark.parametrize("expr", [
    [S("let"), [[S("a"), 1]]],
    [S("let"), S("a"), 1],
    [S("let"), [[S("a")]], S("a")],
    [S("let"), [[1, 2]], 1],
])
def test_let_malformed(env, expr):
    with pytest.raises(MalformedSyntax):
        evaluate(expr, env)
