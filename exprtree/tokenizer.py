import enum
from dataclasses import dataclass


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class UnaryOperator(PrintableEnum):
    NEG = enum.auto()


class BinaryOperator(PrintableEnum):
    MUL = enum.auto()
    DIV = enum.auto()
    ADD = enum.auto()
    SUB = enum.auto()


Operator = UnaryOperator | BinaryOperator


class Bracket(PrintableEnum):
    OPEN = enum.auto()
    CLOSE = enum.auto()


@dataclass(frozen=True)
class VariableToken:
    name: str

    def __str__(self) -> str:
        return f"<VARIABLE>{self.name}"


@dataclass(frozen=True)
class NumberToken:
    value: int

    def __str__(self) -> str:
        return f"<NUMBER>{self.value}"


@dataclass(frozen=True)
class OperatorToken:
    operator: Operator

    def __str__(self) -> str:
        return f"<{self.operator}>{OPERATOR_LEXEMES[self.operator]}"


Token = VariableToken | NumberToken | OperatorToken | Bracket


SINGLE_CHAR_TOKENS: dict[str, Token] = {
    "+": OperatorToken(BinaryOperator.ADD),
    "*": OperatorToken(BinaryOperator.MUL),
    "⋅": OperatorToken(BinaryOperator.MUL),
    "/": OperatorToken(BinaryOperator.DIV),
    "(": Bracket.OPEN,
    ")": Bracket.CLOSE,
}

# a minus right after one of these (or at the very start) negates instead of subtracting
UNARY_MINUS_PRECEDERS = "(*+/-"

DIGITS = "0123456789"

OPERATOR_LEXEMES: dict[Operator, str] = {
    UnaryOperator.NEG: "-",
    BinaryOperator.MUL: "*",
    BinaryOperator.DIV: "/",
    BinaryOperator.ADD: "+",
    BinaryOperator.SUB: "-",
}


def lex(code: str) -> list[Token]:
    code = code.replace(" ", "")
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if code[i] in DIGITS:
            number_end_idx = i + 1
            while number_end_idx < len(code) and code[number_end_idx] in DIGITS:
                number_end_idx += 1
            tokens.append(NumberToken(int(code[i:number_end_idx])))
            i = number_end_idx - 1  # to account for += 1 later
        elif code[i] == "-":
            if i == 0 or code[i - 1] in UNARY_MINUS_PRECEDERS:
                tokens.append(OperatorToken(UnaryOperator.NEG))
            else:
                tokens.append(OperatorToken(BinaryOperator.SUB))
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(SINGLE_CHAR_TOKENS[code[i]])
        else:
            # anything unrecognized names a variable
            tokens.append(VariableToken(code[i]))
        i += 1

    return tokens


def lexeme(token: Token) -> str:
    if isinstance(token, VariableToken):
        return token.name
    elif isinstance(token, NumberToken):
        return str(token.value)
    elif isinstance(token, OperatorToken):
        return OPERATOR_LEXEMES[token.operator]
    elif token is Bracket.OPEN:
        return "("
    else:
        return ")"


def untokenize(tokens: list[Token]) -> str:
    return "".join(lexeme(t) for t in tokens)
