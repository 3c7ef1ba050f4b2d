"""
Evaluator — decides whether a candidate satisfies a Composite tree.

Pure recursive walk. No state is kept between calls, so the same tree
can be evaluated concurrently against different candidates.
"""

from __future__ import annotations

from typing import Any

from ruletree.composite import (
    Composite,
    Leaf,
    And,
    Or,
    Xor,
    Invert,
    Constant,
)


def evaluate(node: Composite, candidate: Any) -> bool:
    """
    Evaluate a composition tree against a candidate.

    Args:
        node: Composite node to evaluate
        candidate: Value handed to every atomic rule

    Returns:
        True if the candidate satisfies the tree

    Raises:
        TypeError: if node is not one of the known Composite kinds
    """
    if isinstance(node, Leaf):
        return bool(node.rule.is_satisfied_by(candidate))

    if isinstance(node, And):
        return all(evaluate(child, candidate) for child in node.children)

    if isinstance(node, Or):
        return any(evaluate(child, candidate) for child in node.children)

    if isinstance(node, Xor):
        # Exactly one, not an odd count
        satisfied = sum(1 for child in node.children if evaluate(child, candidate))
        return satisfied == 1

    if isinstance(node, Invert):
        return not evaluate(node.child, candidate)

    if isinstance(node, Constant):
        return node.value

    raise TypeError(f"Unsupported composite type: {type(node)}")


__all__ = ["evaluate"]
