import logging

from exprtree.parser import ParserError, build
from exprtree.runtime import CalcRuntimeError, evaluate
from exprtree.tokenizer import lex

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "80225/-2",
    "7/6/2000",
    "2-3-4",
    "--3",
    "2⋅x + y",
    "2 +",
    "()",
    "(1 + 2",
    "1 + 2)",
    "z * 2",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    tokens = lex(code)
    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        expression = build(tokens)
    except ParserError as e:
        print(e)
        continue
    print(f"ast: {expression}")

    variables: dict[str, float] = {"x": 2.0, "y": 0.5}
    try:
        print(f"result: {evaluate(expression, variables)}")
    except (CalcRuntimeError, ZeroDivisionError) as e:
        print(e)
