"""
Composite Analyzer — Inventory and diagnostics of composition trees.

This module provides lightweight analysis of Composite trees:
    - Size and depth metrics
    - Atomic rule inventory (distinct and shared rules)
    - Node kind counts
    - Warning flags for structures that are easy to misread

IMPORTANT: This is read-only. It does NOT modify or simplify the tree.
It only produces reports.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List

from ruletree.composite import (
    Composite,
    Leaf,
    Combination,
    Xor,
    Invert,
    Constant,
)
from ruletree.backends.text_renderer import render


@dataclass
class CompositeMetrics:
    """Metrics about a single composition tree."""
    depth: int = 0
    node_count: int = 0
    leaf_count: int = 0
    kind_counts: Dict[str, int] = field(default_factory=lambda: defaultdict(int))
    # id(rule) -> number of positions the rule occupies
    rule_positions: Dict[int, int] = field(default_factory=lambda: defaultdict(int))
    rule_descriptions: Dict[int, str] = field(default_factory=dict)


def _kind_name(node: Composite) -> str:
    if isinstance(node, Leaf):
        return "leaf"
    if isinstance(node, Combination):
        return node.keyword
    if isinstance(node, Invert):
        return "not"
    if isinstance(node, Constant):
        return "constant"
    raise TypeError(f"Unsupported composite type: {type(node)}")


def _analyze_node(node: Composite, metrics: CompositeMetrics) -> int:
    """Recursively accumulate metrics; returns the depth of node."""
    metrics.node_count += 1
    metrics.kind_counts[_kind_name(node)] += 1

    if isinstance(node, Leaf):
        metrics.leaf_count += 1
        metrics.rule_positions[id(node.rule)] += 1
        metrics.rule_descriptions[id(node.rule)] = node.rule.describe()
        return 0

    if isinstance(node, Combination):
        return 1 + max((_analyze_node(child, metrics) for child in node.children), default=0)

    if isinstance(node, Invert):
        return 1 + _analyze_node(node.child, metrics)

    # Constants
    return 0


def _find_double_inversions(node: Composite, found: List[str]) -> None:
    if isinstance(node, Invert):
        if isinstance(node.child, Invert):
            found.append(render(node))
        _find_double_inversions(node.child, found)
    elif isinstance(node, Combination):
        for child in node.children:
            _find_double_inversions(child, found)


def _walk_combinations(node: Composite) -> List[Combination]:
    result: List[Combination] = []
    if isinstance(node, Combination):
        result.append(node)
        for child in node.children:
            result.extend(_walk_combinations(child))
    elif isinstance(node, Invert):
        result.extend(_walk_combinations(node.child))
    return result


@dataclass
class CompositeReport:
    """Analysis report for a composition tree."""

    text: str
    depth: int = 0
    node_count: int = 0
    leaf_count: int = 0
    distinct_rules: int = 0
    kind_counts: Dict[str, int] = field(default_factory=dict)

    # Rules occupying more than one position (description -> positions)
    shared_rules: Dict[str, int] = field(default_factory=dict)

    double_inversions: List[str] = field(default_factory=list)
    constants_in_combinators: int = 0
    duplicate_children: List[str] = field(default_factory=list)
    wide_xors: List[str] = field(default_factory=list)

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_composite(node: Composite, max_depth: int = 5) -> CompositeReport:
    """
    Perform analysis of a composition tree.

    Checks for:
    - Size, depth and rule inventory
    - Double inversions (not not X)
    - TRUE / FALSE constants inside combinators
    - Identical children inside one combinator
    - Xor with more than two children (exactly-one semantics)
    - Depth above max_depth

    Returns a CompositeReport with metrics and warnings.
    """
    report = CompositeReport(text=render(node))

    # =========================================================================
    # 1. METRICS
    # =========================================================================

    metrics = CompositeMetrics()
    report.depth = _analyze_node(node, metrics)
    report.node_count = metrics.node_count
    report.leaf_count = metrics.leaf_count
    report.kind_counts = dict(metrics.kind_counts)
    report.distinct_rules = len(metrics.rule_positions)

    for rule_id, positions in metrics.rule_positions.items():
        if positions > 1:
            report.shared_rules[metrics.rule_descriptions[rule_id]] = positions

    # =========================================================================
    # 2. STRUCTURE CHECKS
    # =========================================================================

    _find_double_inversions(node, report.double_inversions)

    for combination in _walk_combinations(node):
        children = combination.children
        report.constants_in_combinators += sum(
            1 for child in children if isinstance(child, Constant)
        )
        for i, child in enumerate(children):
            if any(child is other or child == other for other in children[:i]):
                report.duplicate_children.append(render(combination))
                break
        if isinstance(combination, Xor) and len(children) > 2:
            report.wide_xors.append(render(combination))

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    for text in report.double_inversions:
        report.add_warning(f"Double inversion kept as written: {text}")

    if report.constants_in_combinators:
        report.add_warning(
            f"Constant TRUE/FALSE inside combinators: {report.constants_in_combinators} occurrence(s)"
        )

    for text in report.duplicate_children:
        report.add_warning(f"Duplicate children in combinator: {text}")

    for text in report.wide_xors:
        report.add_warning(f"Xor with more than two children is satisfied by exactly one: {text}")

    if report.depth > max_depth:
        report.add_warning(f"High composition complexity: depth {report.depth}")

    return report


__all__ = ["CompositeMetrics", "CompositeReport", "analyze_composite"]
