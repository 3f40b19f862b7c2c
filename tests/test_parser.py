"""Tests for the expression parser."""

import pytest

from pylox.report import TextSpan
from pylox.report.reporter import Reporter
from pylox.syntax.ast import Binary, Grouping, Literal, Operator, Unary
from pylox.syntax.lexer import Lexer
from pylox.syntax.parser import Parser
from pylox.syntax.token import Token


def parse(source: str):
    reporter = Reporter()
    tokens = Lexer(source, reporter).tokenize()
    return Parser(tokens, reporter).parse(), reporter


def render(source: str) -> str:
    expr, reporter = parse(source)
    assert expr is not None, [str(d) for d in reporter.diagnostics]
    return str(expr)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 + 2", "(+ 1.0 2.0)"),
        ("1 + 2 * 3", "(+ 1.0 (* 2.0 3.0))"),
        ("1 * 2 + 3", "(+ (* 1.0 2.0) 3.0)"),
        ("1 - 2 - 3", "(- (- 1.0 2.0) 3.0)"),
        ("8 / 4 / 2", "(/ (/ 8.0 4.0) 2.0)"),
        ("(1 + 2) * 3", "(* (group (+ 1.0 2.0)) 3.0)"),
        ("1 < 2 == true", "(== (< 1.0 2.0) true)"),
        ("1 >= 2 != 3 <= 4", "(!= (>= 1.0 2.0) (<= 3.0 4.0))"),
        ("1 == 2 == 3", "(== (== 1.0 2.0) 3.0)"),
        ("-1 - -2", "(- (- 1.0) (- 2.0))"),
        ("!!true", "(! (! true))"),
        ("-(-1)", "(- (group (- 1.0)))"),
        ("!nil == false", "(== (! nil) false)"),
        ("((1))", "(group (group 1.0))"),
        ("2.5", "2.5"),
        ('"hello world"', "hello world"),
        ('"a" + "b"', "(+ a b)"),
    ],
)
def test_rendered_tree(source, expected):
    assert render(source) == expected


def test_tree_structure():
    expr, _ = parse("-1 + (2)")

    assert isinstance(expr, Binary)
    assert expr.op is Operator.PLUS
    assert isinstance(expr.left, Unary)
    assert expr.left.op is Operator.MINUS
    assert expr.left.operand == Literal(1.0, expr.left.operand.span)
    assert isinstance(expr.right, Grouping)


def test_literal_kinds():
    assert parse("true")[0].value is True
    assert parse("false")[0].value is False
    assert parse("nil")[0].value is None
    assert parse('"s"')[0].value == "s"


def test_binary_keeps_operator_span():
    expr, _ = parse("1\n+ 2")

    assert expr.op_span.start_line == 2
    assert expr.span == TextSpan(1, 1, 2, 4)


@pytest.mark.parametrize(
    "source,diagnostic",
    [
        ("(1 + 2", "[line 1] Error at end: Expected ')' after expression."),
        ("(1 2)", "[line 1] Error at '2': Expected ')' after expression."),
        ("1 +", "[line 1] Error at end: Expected expression."),
        ("", "[line 1] Error at end: Expected expression."),
        ("+ 1", "[line 1] Error at '+': Expected expression."),
        ("1 +\n)", "[line 2] Error at ')': Expected expression."),
        ("foo", "[line 1] Error at 'foo': Expected expression."),
        ("1 2", "[line 1] Error at '2': Expected end of expression."),
        ("(1))", "[line 1] Error at ')': Expected end of expression."),
    ],
)
def test_syntax_errors(source, diagnostic):
    expr, reporter = parse(source)

    assert expr is None
    assert [str(d) for d in reporter.diagnostics] == [diagnostic]
    assert reporter.return_code == 65


def test_first_error_aborts_parse():
    expr, reporter = parse("(1 + ) * (2 +")

    assert expr is None
    assert len(reporter.diagnostics) == 1


def test_parser_can_run_twice():
    reporter = Reporter()
    parser = Parser(Lexer("1 + 2", reporter).tokenize(), reporter)

    assert str(parser.parse()) == str(parser.parse())


def test_operator_from_token():
    span = TextSpan(1, 1, 1, 2)

    assert Operator.from_token(Token(Token.Kind.STAR, "*", span)) is Operator.STAR
    assert Operator.from_token(Token(Token.Kind.EQUAL, "=", span)) is Operator.EQUAL
    assert str(Operator.LESS_EQUAL) == "<="


def test_operator_from_non_operator_token():
    with pytest.raises(ValueError):
        Operator.from_token(Token(Token.Kind.LEFT_PAREN, "(", TextSpan(1, 1, 1, 2)))
