import time
from enum import Enum
from src.calculator.converter import format_postfix, to_postfix
from src.calculator.errors import InvalidExpression
from src.calculator.evaluator import evaluate_postfix
from src.calculator.tokenizer import tokenize
from src.calculator.validator import check_tokens
from src.graph.state import State
from src.guards.policy import apply_guards
from src.observability.telemetry import log_guard_result, log_stage_entry, log_stage_exit


class NodeName(str, Enum):
    GUARD = "guard"
    TOKENIZE = "tokenize"
    VALIDATE = "validate"
    CONVERT = "convert"
    EVALUATE = "evaluate"


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


def guard_node(state: State) -> State:
    """Reject oversized or non-arithmetic input before tokenizing."""
    passed, refusal_msg, normalized = apply_guards(state["expression"])
    log_guard_result(state["expression"], passed, refusal_msg)
    if not passed:
        raise InvalidExpression(refusal_msg)
    state["expression"] = normalized
    return state


def tokenize_node(state: State) -> State:
    log_stage_entry(NodeName.TOKENIZE.value, state)
    started = time.perf_counter()
    state["tokens"] = tokenize(state["expression"])
    state["stage_count"] += 1
    log_stage_exit(NodeName.TOKENIZE.value, _elapsed_ms(started),
                   " ".join(t.text for t in state["tokens"]))
    return state


def validate_node(state: State) -> State:
    """Gate: raises InvalidExpression, so later stages only see valid tokens."""
    log_stage_entry(NodeName.VALIDATE.value, state)
    started = time.perf_counter()
    check_tokens(state["tokens"])
    state["stage_count"] += 1
    log_stage_exit(NodeName.VALIDATE.value, _elapsed_ms(started), "valid")
    return state


def convert_node(state: State) -> State:
    log_stage_entry(NodeName.CONVERT.value, state)
    started = time.perf_counter()
    state["postfix"] = to_postfix(state["tokens"])
    state["postfix_text"] = format_postfix(state["postfix"])
    state["stage_count"] += 1
    log_stage_exit(NodeName.CONVERT.value, _elapsed_ms(started), state["postfix_text"])
    return state


def evaluate_node(state: State) -> State:
    log_stage_entry(NodeName.EVALUATE.value, state)
    started = time.perf_counter()
    state["result"] = evaluate_postfix(state["postfix"])
    state["stage_count"] += 1
    log_stage_exit(NodeName.EVALUATE.value, _elapsed_ms(started), state["result"])
    return state
