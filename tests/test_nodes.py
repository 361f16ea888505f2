import dataclasses

import pytest

from exprtree.nodes import BinaryOperation, Expression, NumberConstant, UnaryOperation, Variable
from exprtree.parser import build
from exprtree.tokenizer import BinaryOperator, UnaryOperator, lex


@pytest.mark.parametrize(
    "node, expected_label",
    [
        pytest.param(Variable("x"), "x"),
        pytest.param(NumberConstant(120), "120"),
        pytest.param(UnaryOperation(UnaryOperator.NEG, None), "−"),
        pytest.param(BinaryOperation(BinaryOperator.MUL, None, None), "⋅"),
        pytest.param(BinaryOperation(BinaryOperator.DIV, None, None), "/"),
        pytest.param(BinaryOperation(BinaryOperator.ADD, None, None), "+"),
        pytest.param(BinaryOperation(BinaryOperator.SUB, None, None), "-"),
    ],
)
def test_label(node: Expression, expected_label: str) -> None:
    assert node.label == expected_label


def test_label_ignores_children() -> None:
    ast = build(lex("(a+b)*(c-d)"))
    assert ast is not None
    assert ast.label == "⋅"


def test_nodes_are_frozen() -> None:
    node = BinaryOperation(BinaryOperator.ADD, NumberConstant(1), None)
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.right = NumberConstant(2)  # type: ignore[misc]
