"""Build the LangGraph calculation pipeline."""
from langgraph.graph import StateGraph, END, START
from src.graph.state import State
from src.graph.nodes import (
    NodeName, guard_node, tokenize_node,
    validate_node, convert_node, evaluate_node
)


def build_graph():
    """Build and return the compiled calculator graph."""
    graph = StateGraph(State)

    graph.add_node(NodeName.GUARD.value, guard_node)
    graph.add_node(NodeName.TOKENIZE.value, tokenize_node)
    graph.add_node(NodeName.VALIDATE.value, validate_node)
    graph.add_node(NodeName.CONVERT.value, convert_node)
    graph.add_node(NodeName.EVALUATE.value, evaluate_node)

    graph.add_edge(START, NodeName.GUARD.value)
    graph.add_edge(NodeName.GUARD.value, NodeName.TOKENIZE.value)
    graph.add_edge(NodeName.TOKENIZE.value, NodeName.VALIDATE.value)
    graph.add_edge(NodeName.VALIDATE.value, NodeName.CONVERT.value)
    graph.add_edge(NodeName.CONVERT.value, NodeName.EVALUATE.value)
    graph.add_edge(NodeName.EVALUATE.value, END)

    return graph.compile()


if __name__ == "__main__":
    graph = build_graph()
    print("Graph built successfully!")
    print(f"Nodes: {list(graph.nodes.keys())}")
