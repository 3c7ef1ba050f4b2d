"""
Explainer — answers "why did this candidate fail?".

remainder_unsatisfied_by() returns the smallest sub-tree of a composition
that is responsible for a failed evaluation, or None when the candidate
satisfies the tree.

Only children that currently evaluate False contribute to a remainder.
Two consequences are kept as-is (see DESIGN.md, open questions):
    - An Xor that fails because several children are satisfied reports
      only its unsatisfied children, possibly nothing.
    - An Invert delegates to its child, which has no remainder when it is
      satisfied, i.e. exactly when the Invert fails.
Both cases are logged at DEBUG level.

Every remainder returned evaluates False against the same candidate.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ruletree.composite import (
    Composite,
    Leaf,
    Combination,
    Xor,
    Invert,
    Constant,
)
from ruletree.evaluator import evaluate

logger = logging.getLogger(__name__)


def remainder_unsatisfied_by(node: Composite, candidate: Any) -> Optional[Composite]:
    """
    Compute the part of a tree the candidate does not satisfy.

    Args:
        node: Composite node to explain
        candidate: Value the tree is evaluated against

    Returns:
        None if the candidate satisfies node (or nothing can be reported),
        otherwise a Composite. A single remainder is returned unwrapped;
        several are wrapped in a new node of the failing combinator's kind.

    Raises:
        TypeError: if node is not one of the known Composite kinds
    """
    if evaluate(node, candidate):
        return None
    return _unsatisfied_remainder(node, candidate)


def _unsatisfied_remainder(node: Composite, candidate: Any) -> Optional[Composite]:
    """Remainder of a node already known to evaluate False."""
    if isinstance(node, Leaf):
        return node

    if isinstance(node, Combination):
        remainders: List[Composite] = []
        for child in node.children:
            if evaluate(child, candidate):
                continue
            remainder = _unsatisfied_remainder(child, candidate)
            if remainder is not None:
                remainders.append(remainder)

        if not remainders:
            if isinstance(node, Xor):
                logger.debug("Xor failed but no unsatisfied child has a remainder: %s", node)
            return None
        if len(remainders) == 1:
            return remainders[0]
        return type(node)(tuple(remainders))

    if isinstance(node, Invert):
        # The child is satisfied here, so it has nothing to report
        remainder = remainder_unsatisfied_by(node.child, candidate)
        if remainder is None:
            logger.debug("Inverted rule is satisfied, no remainder: %s", node)
        return remainder

    if isinstance(node, Constant):
        return None

    raise TypeError(f"Unsupported composite type: {type(node)}")


__all__ = ["remainder_unsatisfied_by"]
