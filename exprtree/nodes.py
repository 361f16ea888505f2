from dataclasses import dataclass
from typing import Optional

from exprtree.tokenizer import BinaryOperator, Operator, UnaryOperator

OPERATOR_LABELS: dict[Operator, str] = {
    UnaryOperator.NEG: "−",
    BinaryOperator.MUL: "⋅",
    BinaryOperator.DIV: "/",
    BinaryOperator.ADD: "+",
    BinaryOperator.SUB: "-",
}


@dataclass(frozen=True)
class Variable:
    name: str

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class NumberConstant:
    value: int

    @property
    def label(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UnaryOperation:
    """Unary minus applied to ``operand``; ``None`` marks a missing operand."""

    operator: UnaryOperator
    operand: Optional["Expression"]

    @property
    def label(self) -> str:
        return OPERATOR_LABELS[self.operator]


@dataclass(frozen=True)
class BinaryOperation:
    """Either side may be ``None`` when the source had nothing there, e.g. ``2+``."""

    operator: BinaryOperator
    left: Optional["Expression"]
    right: Optional["Expression"]

    @property
    def label(self) -> str:
        return OPERATOR_LABELS[self.operator]


Expression = Variable | NumberConstant | UnaryOperation | BinaryOperation
