import pytest

from exprtree.parser import build
from exprtree.runtime import InvalidExpressionError, UnboundVariableError, evaluate
from exprtree.tokenizer import lex


@pytest.mark.parametrize(
    "code, variables, expected_ret_val",
    [
        pytest.param("1", {}, 1),
        pytest.param("42", {}, 42),
        pytest.param("x", {"x": 7.5}, 7.5),
        pytest.param("-1", {}, -1),
        pytest.param("--3", {}, 3),
        pytest.param("---3", {}, -3),
        pytest.param("1+2", {}, 3),
        pytest.param("(1+2)", {}, 3),
        pytest.param("-(1+2)", {}, -3),
        pytest.param("(((1)))", {}, 1),
        pytest.param("2+3*4", {}, 14),
        pytest.param("(2+3)*4", {}, 20),
        pytest.param("1 * 4 + 5", {}, 9),
        pytest.param("1 + 4 * 5", {}, 21),
        pytest.param("-2*3", {}, -6),
        pytest.param("2*-3", {}, -6),
        pytest.param("2--3", {}, 5),
        pytest.param("2-3-4", {}, -5),
        pytest.param("2/4/2", {}, 0.25),
        pytest.param("10 / 5 / 2 / 2", {}, 0.5),
        pytest.param("10 + 2 * (5 + 3 - 1)", {}, 24),
        pytest.param("2⋅3", {}, 6),
        pytest.param("a + b", {"a": 1, "b": 2}, 3),
        pytest.param("x*x - 2*x + 1", {"x": 3}, 4),
        pytest.param("(x + y) / -(y - x)", {"x": 1, "y": 3}, -2),
        pytest.param("(1 + 2", {}, 3),
    ],
)
def test_eval_arithmetic(code: str, variables: dict[str, float], expected_ret_val: float) -> None:
    tokens = lex(code)
    ast = build(tokens)
    assert evaluate(ast, variables) == expected_ret_val


@pytest.mark.parametrize(
    "code",
    [
        pytest.param("2+"),
        pytest.param("*3"),
        pytest.param("-"),
        pytest.param("()"),
        pytest.param("2 (3)"),
        pytest.param("1 + ()"),
        pytest.param(""),
    ],
)
def test_malformed_input_fails_on_evaluation(code: str) -> None:
    ast = build(lex(code))
    with pytest.raises(InvalidExpressionError):
        evaluate(ast, {})


def test_unbound_variable() -> None:
    ast = build(lex("x"))
    with pytest.raises(UnboundVariableError) as excinfo:
        evaluate(ast, {})
    assert excinfo.value.name == "x"


def test_unbound_variable_deep_in_tree() -> None:
    ast = build(lex("1 + 2 * (3 - q)"))
    with pytest.raises(UnboundVariableError):
        evaluate(ast, {"x": 1})


def test_division_by_zero_propagates() -> None:
    with pytest.raises(ZeroDivisionError):
        evaluate(build(lex("1/(2-2)")), {})


def test_tree_is_reusable() -> None:
    ast = build(lex("x * (y + 1)"))
    assert evaluate(ast, {"x": 2, "y": 3}) == 8
    assert evaluate(ast, {"x": 2, "y": 3}) == 8
    assert evaluate(ast, {"x": -1, "y": 0}) == -1
    with pytest.raises(UnboundVariableError):
        evaluate(ast, {"x": 1})
    assert evaluate(ast, {"x": 2, "y": 3}) == 8


@pytest.mark.parametrize(
    "code, expected_label",
    [
        pytest.param("2+", "+"),
        pytest.param("1 * (3 / )", "/"),
        pytest.param("-", "−"),
        pytest.param("", None),
    ],
)
def test_invalid_expression_names_node(code: str, expected_label: str | None) -> None:
    with pytest.raises(InvalidExpressionError) as excinfo:
        evaluate(build(lex(code)), {})
    assert excinfo.value.label == expected_label


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("+".join(["1"] * 5000), 5000, id="sum"),
        pytest.param("-".join(["1"] * 5000), -4998, id="difference"),
        pytest.param("*".join(["x"] * 5000), 1, id="product"),
        pytest.param("+".join(["2*x"] * 3000), 6000, id="sum-of-products"),
        pytest.param("-" * 3000 + "x", 1, id="even-negations"),
        pytest.param("-" * 3001 + "x", -1, id="odd-negations"),
    ],
)
def test_long_chains(code: str, expected_ret_val: float) -> None:
    assert evaluate(build(lex(code)), {"x": 1}) == expected_ret_val
