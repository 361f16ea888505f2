from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from exprtree.nodes import BinaryOperation, Expression, NumberConstant, UnaryOperation, Variable
from exprtree.tokenizer import BinaryOperator, UnaryOperator

Number = int | float


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return f"[Runtime error] {self.errmsg}"


@dataclass
class InvalidExpressionError(CalcRuntimeError):
    """An operator is missing an operand, so the source text was malformed."""

    label: Optional[str]


@dataclass
class UnboundVariableError(CalcRuntimeError):
    name: str


BINARY_OPERATION_IMPLS: dict[BinaryOperator, Callable[[Number, Number], Number]] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: lambda a, b: a / b,
}

UNARY_OPERATION_IMPLS: dict[UnaryOperator, Callable[[Number], Number]] = {
    UnaryOperator.NEG: lambda a: -a,
}


def evaluate(expression: Optional[Expression], variables: Mapping[str, Number]) -> Number:
    if expression is None:
        raise InvalidExpressionError("Empty expression", label=None)

    # explicit stack, long operator chains make trees deeper than the recursion limit
    results: list[Number] = []
    pending: list[tuple[Expression, bool]] = [(expression, False)]
    while pending:
        node, operands_done = pending.pop()
        if isinstance(node, NumberConstant):
            results.append(node.value)
        elif isinstance(node, Variable):
            if node.name not in variables:
                raise UnboundVariableError(f"Reference to unbound variable {node.name!r}", name=node.name)
            results.append(variables[node.name])
        elif isinstance(node, UnaryOperation):
            if operands_done:
                results.append(UNARY_OPERATION_IMPLS[node.operator](results.pop()))
                continue
            if node.operand is None:
                raise InvalidExpressionError(f"Operand missing for {node.label!r}", label=node.label)
            pending.append((node, True))
            pending.append((node.operand, False))
        elif isinstance(node, BinaryOperation):
            if operands_done:
                right_res = results.pop()
                left_res = results.pop()
                results.append(BINARY_OPERATION_IMPLS[node.operator](left_res, right_res))
                continue
            if node.left is None or node.right is None:
                raise InvalidExpressionError(f"Operand missing for {node.label!r}", label=node.label)
            pending.append((node, True))
            pending.append((node.right, False))
            pending.append((node.left, False))
        else:
            raise RuntimeError(f"Unexpected expression type: {node}")

    return results[-1]
