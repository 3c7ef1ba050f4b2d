"""
Diagnostic export of composition trees and explanations.

Dumps tree structure to an intermediate dict, then to JSON or YAML.
Export is one-way: atomic rules are caller code, so a dump cannot be
turned back into rules.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from ruletree.composite import (
    Composite,
    Leaf,
    Combination,
    Invert,
    Constant,
)
from ruletree.evaluator import evaluate
from ruletree.explainer import remainder_unsatisfied_by
from ruletree.backends.text_renderer import render


def composite_to_dict(node: Composite | None) -> Any:
    if node is None:
        return None
    if isinstance(node, Leaf):
        return {
            "type": "rule",
            "rule": type(node.rule).__name__,
            "description": node.rule.describe(),
        }
    if isinstance(node, Combination):
        return {
            "type": node.keyword,
            "children": [composite_to_dict(child) for child in node.children],
        }
    if isinstance(node, Invert):
        return {"type": "not", "child": composite_to_dict(node.child)}
    if isinstance(node, Constant):
        return {"type": "constant", "value": node.value}
    raise TypeError(f"Unsupported composite type: {type(node)}")


def composite_to_json(node: Composite) -> str:
    return json.dumps(composite_to_dict(node), sort_keys=True)


def composite_to_yaml(node: Composite) -> str:
    return yaml.safe_dump(composite_to_dict(node), sort_keys=False)


def explanation_to_dict(node: Composite, candidate: Any) -> Dict[str, Any]:
    """
    Describe the outcome of evaluating node against candidate.

    Keys:
        rule: rendered tree
        satisfied: evaluation result
        remainder: dict form of the remainder, or None
        remainder_text: rendered remainder, or None
    """
    remainder = remainder_unsatisfied_by(node, candidate)
    return {
        "rule": render(node),
        "satisfied": evaluate(node, candidate),
        "remainder": composite_to_dict(remainder),
        "remainder_text": render(remainder) if remainder is not None else None,
    }


def explanation_to_yaml(node: Composite, candidate: Any) -> str:
    return yaml.safe_dump(explanation_to_dict(node, candidate), sort_keys=False)


__all__ = [
    "composite_to_dict",
    "composite_to_json",
    "composite_to_yaml",
    "explanation_to_dict",
    "explanation_to_yaml",
]
