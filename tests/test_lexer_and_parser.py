import copy

import pytest

from scheep.errors import ScheepSyntaxError
from scheep.reader.parser import TokenStream, lex, read
from scheep.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("#t #f #true #false", [("boolean", "#t"), ("boolean", "#f"), ("boolean", "#true"), ("boolean", "#false")]),
        ("#tx", [("symbol", "#tx")]),
        ("(set! x 1)", [("lparen", "("), ("symbol", "set!"), ("symbol", "x"), ("symbol", "1"), ("rparen", ")")]),
        ("   ", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("3.14", 3.14),
        ("1e3", 1000.0),
        ("#t", True),
        ("#false", False),
        ('"hello"', "hello"),
        ('"say \\"hi\\"\\n"', 'say "hi"\n'),
        ("'a", [Symbol("quote"), Symbol("a")]),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("()", []),
        ("(a (b (c)) 1)", [Symbol("a"), [Symbol("b"), [Symbol("c")]], 1]),
        ("...", Symbol("...")),
        ("-", Symbol("-")),
        ("nan", Symbol("nan")),
        ("inf", Symbol("inf")),
    ]
)
def test_parse_expr(source, expected):
    result = TokenStream(lex(source)).parse_expr()
    assert result == expected
    assert type(result) is type(expected)


def test_read_multiple_expressions():
    assert read("(define x 1) ; trailing comment\n x") == [
        [Symbol("define"), Symbol("x"), 1],
        Symbol("x"),
    ]
    assert read("") == []


@pytest.mark.parametrize("source,message", [
    ("(a b", "Unmatched '('"),
    (")", "Unexpected ')'"),
    ('"abc', "Unterminated string"),
    ("'", "Quote at end"),
])
def test_reader_errors(source, message):
    with pytest.raises(ScheepSyntaxError) as info:
        read(source)
    assert str(info.value).startswith(message)


@pytest.mark.parametrize("source,expected", [
    ('"line one\nline two"', "line one\nline two"),
    ('"tab\\there"', "tab\there"),
    ('"back\\\\slash"', "back\\slash"),
    ('""', ""),
])
def test_string_literals(source, expected):
    assert read(source) == [expected]


@pytest.mark.parametrize("source", ['"\\x"', '"\\N"', '"\\u12"', '"a\\qb"'])
def test_unknown_string_escape(source):
    with pytest.raises(ScheepSyntaxError, match="Unknown string escape"):
        read(source)


def test_symbols_are_interned():
    assert read("foo")[0] is Symbol("foo")
    assert copy.deepcopy([Symbol("foo")])[0] is Symbol("foo")
    assert Symbol("foo") != Symbol("bar")
    assert Symbol("foo") != "foo"
