from exprtree.parser import ParserError, build
from exprtree.runtime import CalcRuntimeError, evaluate
from exprtree.tokenizer import lex


if __name__ == "__main__":
    variables: dict[str, float] = dict()

    while True:
        code = input("> ")

        # "x = 5" binds a variable, anything else is an expression
        name, eq, value = code.partition("=")
        if eq:
            name = name.strip()
            if len(name) != 1:
                print(f"Variable names are single characters, got {name!r}")
                continue
            try:
                variables[name] = float(value)
            except ValueError:
                print(f"Not a number: {value.strip()!r}")
            continue

        try:
            expression = build(lex(code))
        except ParserError as e:
            print(e)
            continue

        try:
            result = evaluate(expression, variables)
        except (CalcRuntimeError, ZeroDivisionError) as e:
            print(e)
            continue

        print(result)
