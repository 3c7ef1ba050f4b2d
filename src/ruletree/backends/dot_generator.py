"""
Graphviz DOT diagram generator for composition trees.

Converts a Composite tree into Graphviz DOT format for visualization.
Every tree position becomes its own DOT node, so a rule shared between
several positions is drawn once per position.

Supports multiple modes:
    - SIMPLE: Tree structure only
    - OUTCOME: Positions coloured by evaluation against a candidate,
      remainder leaves drawn bold
"""

import logging
from enum import Enum
from typing import Any, List

from ruletree.composite import (
    Composite,
    Leaf,
    Combination,
    Invert,
    Constant,
)
from ruletree.evaluator import evaluate

logger = logging.getLogger(__name__)

_MISSING = object()


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"      # Just the tree
    OUTCOME = "outcome"    # Satisfied / unsatisfied per position


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    # Escape backslashes first
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def _node_label(node: Composite) -> str:
    if isinstance(node, Leaf):
        return node.rule.describe()
    if isinstance(node, Combination):
        return node.keyword.upper()
    if isinstance(node, Invert):
        return "NOT"
    if isinstance(node, Constant):
        return "TRUE" if node.value else "FALSE"
    raise TypeError(f"Unsupported composite type: {type(node)}")


def _node_shape(node: Composite) -> str:
    return "box" if isinstance(node, Leaf) else "ellipse"


def _children(node: Composite) -> tuple:
    if isinstance(node, Combination):
        return node.children
    if isinstance(node, Invert):
        return (node.child,)
    return ()


def generate_dot(node: Composite, mode: DotMode = DotMode.SIMPLE, candidate: Any = _MISSING) -> str:
    """
    Generate Graphviz DOT format for a composition tree.

    Args:
        node: Root of the tree to visualize
        mode: Visualization mode (SIMPLE, OUTCOME)
        candidate: Candidate to evaluate against; required for OUTCOME

    Returns:
        String containing DOT graph definition

    Raises:
        ValueError: if mode is OUTCOME and no candidate is given
    """
    if mode == DotMode.OUTCOME and candidate is _MISSING:
        raise ValueError("DotMode.OUTCOME requires a candidate")

    lines: List[str] = []

    # Header
    lines.append("digraph composite {")
    lines.append("  rankdir=TB;")
    lines.append("  node [style=filled, fillcolor=lightblue];")

    counter = 0

    def visit(current: Composite, failing_path: bool) -> str:
        nonlocal counter
        dot_id = f"n{counter}"
        counter += 1

        attrs = [
            f"label={_escape_dot_string(_node_label(current))}",
            f"shape={_node_shape(current)}",
        ]
        if mode == DotMode.OUTCOME:
            satisfied = evaluate(current, candidate)
            attrs.append(f"fillcolor={'palegreen' if satisfied else 'lightcoral'}")
            # A leaf is in the remainder when every position above it fails
            failing_path = failing_path and not satisfied
            if failing_path and isinstance(current, Leaf):
                attrs.append('style="filled,bold"')
                attrs.append("penwidth=2")
        lines.append(f"  {dot_id} [{', '.join(attrs)}];")

        for child in _children(current):
            child_id = visit(child, failing_path)
            lines.append(f"  {dot_id} -> {child_id};")
        return dot_id

    visit(node, mode == DotMode.OUTCOME)

    # Footer
    lines.append("}")

    return "\n".join(lines)


def save_dot_file(node: Composite, filename: str, mode: DotMode = DotMode.SIMPLE,
                  candidate: Any = _MISSING) -> None:
    """
    Generate DOT and save to file.

    Args:
        node: Tree to visualize
        filename: Output file path (.dot extension recommended)
        mode: Visualization mode
        candidate: Candidate for OUTCOME mode
    """
    dot = generate_dot(node, mode=mode, candidate=candidate)
    with open(filename, 'w') as f:
        f.write(dot)
    logger.debug("Wrote %s DOT diagram to %s", mode.value, filename)


__all__ = ["DotMode", "generate_dot", "save_dot_file"]
