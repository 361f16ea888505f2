import logging
from dataclasses import dataclass, field
from typing import Optional

from exprtree.nodes import BinaryOperation, Expression, NumberConstant, UnaryOperation, Variable
from exprtree.tokenizer import (
    BinaryOperator,
    Bracket,
    NumberToken,
    Operator,
    OperatorToken,
    Token,
    UnaryOperator,
    VariableToken,
    untokenize,
)

logger = logging.getLogger(__name__)


@dataclass
class ParserError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        parsed_tokens = self.tokens[: self.error_token_idx]
        filler_whitespace = " " * len(untokenize(parsed_tokens))
        return "\n".join([f"Parser error: {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


@dataclass
class Group:
    """Items between a pair of brackets, or the whole top level."""

    items: list["ExpressionItem"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + " ".join(str(item) for item in self.items) + "]"


ExpressionItem = Token | Group


# larger binds weaker, so it is picked earlier as a split point
PRECEDENCES: dict[Operator, int] = {
    UnaryOperator.NEG: 1,
    BinaryOperator.MUL: 2,
    BinaryOperator.DIV: 2,
    BinaryOperator.ADD: 3,
    BinaryOperator.SUB: 3,
}


def get_op_precedence(op: Operator) -> int:
    return PRECEDENCES[op]


def build(tokens: list[Token]) -> Optional[Expression]:
    top_level = group_brackets(tokens)
    logger.debug("Grouped expression: %s", top_level)
    return build_range(top_level.items, 0, len(top_level.items))


def group_brackets(tokens: list[Token]) -> Group:
    """Nest the flat token list by brackets.

    A bracket left open just ends the input: its group stays the last item of
    the enclosing one. A closing bracket with nothing open raises ``ParserError``.
    """
    top_level = Group()
    stack = [top_level]
    for i, token in enumerate(tokens):
        if token is Bracket.OPEN:
            group = Group()
            stack[-1].items.append(group)
            stack.append(group)
        elif token is Bracket.CLOSE:
            if len(stack) == 1:
                raise ParserError("Unmatched closing bracket", tokens=tokens, error_token_idx=i)
            stack.pop()
        else:
            stack[-1].items.append(token)
    return top_level


def find_main_connective(items: list[ExpressionItem], start: int, end: int) -> Optional[int]:
    """Index of the weakest-binding operator in ``items[start:end]``, rightmost among equals.

    Groups are opaque here, their operators are resolved when the group itself is built.
    """
    max_precedence = 0
    main_connective_idx: Optional[int] = None
    for i in range(start, end):
        item = items[i]
        if isinstance(item, OperatorToken):
            precedence = get_op_precedence(item.operator)
            if precedence >= max_precedence:
                max_precedence = precedence
                main_connective_idx = i
    return main_connective_idx


def build_range(items: list[ExpressionItem], start: int, end: int) -> Optional[Expression]:
    main_connective_idx = find_main_connective(items, start, end)

    if main_connective_idx is None:
        if end - start != 1:
            return None
        item = items[start]
        if isinstance(item, Group):
            return build_range(item.items, 0, len(item.items))
        elif isinstance(item, VariableToken):
            return Variable(item.name)
        elif isinstance(item, NumberToken):
            return NumberConstant(item.value)
        else:
            raise RuntimeError(f"Unexpected expression item: {item}")

    connective = items[main_connective_idx]
    if not isinstance(connective, OperatorToken):
        raise RuntimeError(f"Main connective is not an operator: {connective}")

    if isinstance(connective.operator, UnaryOperator):
        # each minus takes the rest of the range after its first item,
        # so every item up to and including the chosen one adds a level
        expression = build_range(items, main_connective_idx + 1, end)
        for _ in range(start, main_connective_idx + 1):
            expression = UnaryOperation(operator=connective.operator, operand=expression)
        return expression

    # splitting at the rightmost weakest operator again and again folds the chain to the left
    precedence = get_op_precedence(connective.operator)
    splits: list[tuple[int, Operator]] = []
    for i in range(start, end):
        item = items[i]
        if isinstance(item, OperatorToken) and get_op_precedence(item.operator) == precedence:
            splits.append((i, item.operator))

    expression = build_range(items, start, splits[0][0])
    for split_no, (split_idx, operator) in enumerate(splits):
        next_split_idx = splits[split_no + 1][0] if split_no + 1 < len(splits) else end
        if not isinstance(operator, BinaryOperator):
            raise RuntimeError(f"Unexpected binary operator: {operator}")
        expression = BinaryOperation(
            operator=operator,
            left=expression,
            right=build_range(items, split_idx + 1, next_split_idx),
        )
    return expression
