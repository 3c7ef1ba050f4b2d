"""
ruletree — Composable Boolean Rule Trees

Callers define atomic yes/no rules over a candidate value, then combine
them with AND / OR / XOR / NOT into an immutable tree that is itself a rule.

ARCHITECTURAL GUARANTEE:
------------------------
    - Trees are immutable; combining always builds new nodes.
    - Querying (evaluate, explain, render) never mutates a tree.
    - The engine never inspects the internals of an atomic rule.

Layers:
    composite      rule capability, node types, builders
    evaluator      satisfaction of a tree by a candidate
    explainer      remainder of a failed tree
    backends       text and DOT rendering
    analyzer       read-only structure report
    serialization  one-way JSON / YAML diagnostic dumps
"""

__version__ = "0.1.0"
