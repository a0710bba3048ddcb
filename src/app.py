"""CLI interface for the calculator."""
import sys
from src.calculator.errors import CalculatorError
from src.graph.build_graph import build_graph
from src.graph.state import build_initial_state
from src.config import CALC_PROMPT, LOG_LEVEL, RESULT_PRECISION, SHOW_TRACE
from src.observability.telemetry import format_trace_summary, clear_trace
from src.observability.logging_config import configure_logging

QUIT_COMMANDS = ("q", "quit", "exit")


def format_result(value: float, precision: int = RESULT_PRECISION) -> str:
    """Format a result with `precision` significant digits, e.g. 3.5, 1e+06, nan."""
    return f"{value:.{precision}g}"


def run_expression(graph, expression: str, out=None, err=None) -> bool:
    """Evaluate one expression and print it. Returns False if it failed."""
    out = out or sys.stdout
    err = err or sys.stderr
    clear_trace()
    try:
        result = graph.invoke(build_initial_state(expression))
    except CalculatorError as e:
        print(f"Error: {e}", file=err)
        return False
    finally:
        if SHOW_TRACE:
            print(format_trace_summary(), file=out)

    print(f"Postfix: {result['postfix_text']}", file=out)
    print(f"Result: {format_result(result['result'])}", file=out)
    return True


def repl(graph, stdin=None, out=None, err=None):
    """Read expressions until EOF or a quit command."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    while True:
        out.write(CALC_PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            break
        expression = line.strip()
        if not expression:
            continue
        if expression.lower() in QUIT_COMMANDS:
            break
        run_expression(graph, expression, out=out, err=err)


def main(argv=None):
    configure_logging(LOG_LEVEL)
    argv = sys.argv[1:] if argv is None else argv

    graph = build_graph()

    if argv:
        ok = run_expression(graph, " ".join(argv))
        sys.exit(0 if ok else 1)

    repl(graph)


if __name__ == "__main__":
    main()
