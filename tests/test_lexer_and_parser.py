import pytest
from hypothesis import given, strategies as st

from eta.errors import EtaSyntaxError
from eta.printer import print_value
from eta.reader.parser import lex, parse, TokenStream
from eta.types.nil import Nil
from eta.types.pair import Pair, make_list
from eta.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ('"a \\"b\\""', [("string", '"a \\"b\\""')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(+ 1 -2)", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "-2"), ("rparen", ")")]),
        ("#t #f", [("symbol", "#t"), ("symbol", "#f")]),
        ("()", [("lparen", "("), ("rparen", ")")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("()", Nil),
        ("123", 123.0),
        ("-45", -45.0),
        ("3.14", 3.14),
        ("1e3", 1000.0),
        ("#t", True),
        ("#f", False),
        ('"hello"', "hello"),
        ('"line\\nbreak"', "line\nbreak"),
        ("foo", Symbol("foo")),
        ("-", Symbol("-")),
        ("inf", Symbol("inf")),
        ("#nil", Symbol("#nil")),
        ("'a", make_list([Symbol("quote"), Symbol("a")])),
        ("(a b c)", make_list([Symbol("a"), Symbol("b"), Symbol("c")])),
        ("(a . b)", Pair(Symbol("a"), Symbol("b"))),
        ("(1 2 . 3)", Pair(1.0, Pair(2.0, 3.0))),
    ]
)
def test_parser(source, expected):
    result = parse(source)
    assert len(result) == 1
    assert result[0] == expected


def test_numbers_are_floats_and_booleans_are_not_numbers():
    assert type(parse("7")[0]) is float
    assert parse("#t")[0] is True
    assert parse("#f")[0] is False


def test_nested_lists():
    source = "((a b) (c d))"
    expected = make_list([
        make_list([Symbol("a"), Symbol("b")]),
        make_list([Symbol("c"), Symbol("d")]),
    ])
    assert parse(source) == [expected]


def test_quote_desugars_nested():
    [form] = parse("'(1 '2)")
    assert print_value(form) == "(quote (1 (quote 2)))"


def test_multiple_top_level_forms():
    forms = parse("(let x 1) x ; trailing comment\n(+ x 1)")
    assert len(forms) == 3
    assert forms[1] == Symbol("x")


def test_parse_all_is_lazy():
    stream = TokenStream(lex("1 2 )"))
    forms = stream.parse_all()
    assert next(forms) == 1.0
    assert next(forms) == 2.0
    with pytest.raises(EtaSyntaxError):
        next(forms)


def test_parse_is_idempotent():
    source = "(let fact (lambda (x) (cond ((eq x 1) 1) (#t (* x (fact (- x 1)))))))"
    assert parse(source) == parse(source)


@pytest.mark.parametrize(
    "source",
    [
        "(",
        "(a (b c)",
        ")",
        "(a))",
        '"unterminated',
        "'",
        "(. a)",
        "(a . b c)",
        ".",
        '"bad \\q escape"',
        "1e400",
        "(+ 1 -1e400)",
    ]
)
def test_syntax_errors(source):
    with pytest.raises(EtaSyntaxError):
        parse(source)


def test_syntax_error_rejects_whole_text():
    # Nothing is returned for the well-formed prefix
    with pytest.raises(EtaSyntaxError):
        parse("(+ 1 2) (car")


# -------------------------------
# parse / print round trip
# -------------------------------

_symbols = st.from_regex(r"[a-z][a-z0-9\-?!*]{0,8}", fullmatch=True).filter(lambda s: s != "nil")
_atoms = st.one_of(
    st.booleans(),
    st.integers(min_value=-10**9, max_value=10**9).map(float),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=0xD7FF), max_size=12),
    _symbols.map(Symbol),
)
_forms = st.recursive(
    _atoms,
    lambda children: st.lists(children, max_size=5).map(make_list),
    max_leaves=20,
)


@given(_forms)
def test_print_then_parse_round_trip(form):
    text = print_value(form)
    assert parse(text) == [form]
    assert print_value(parse(text)[0]) == text


def test_large_finite_literal_prints_back():
    [value] = parse("1e300")
    assert parse(print_value(value)) == [value]
