from typing import TypedDict, List, Optional
from src.calculator.tokens import Token


class State(TypedDict):
    expression: str
    tokens: List[Token]
    postfix: List[Token]
    postfix_text: str
    result: Optional[float]
    stage_count: int


def build_initial_state(expression: str) -> State:
    state = State(
        expression=expression,
        tokens=[],
        postfix=[],
        postfix_text="",
        result=None,
        stage_count=0)
    return state
