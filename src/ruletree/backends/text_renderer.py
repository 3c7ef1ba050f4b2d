"""
Plain-text renderer for composition trees.

Produces a parenthesized infix form for diagnostics, e.g.

    (MinimumGithubContributions(min_contributions=5) and (C++ or Python))

The output is for humans only; nothing parses it back.
"""

from ruletree.composite import (
    Composite,
    Leaf,
    Combination,
    Invert,
    Constant,
)


def render(node: Composite) -> str:
    """
    Render a composition tree as text.

    Leaves use their rule's describe() text, combinators join their
    children with their keyword, Invert is prefixed with "not".
    """
    if isinstance(node, Leaf):
        return node.rule.describe()

    if isinstance(node, Combination):
        separator = f" {node.keyword} "
        return "(" + separator.join(render(child) for child in node.children) + ")"

    if isinstance(node, Invert):
        return f"not {render(node.child)}"

    if isinstance(node, Constant):
        return "true" if node.value else "false"

    raise TypeError(f"Unsupported composite type: {type(node)}")


__all__ = ["render"]
