"""
Rule Composition Model

Atomic rules are caller-defined yes/no tests over a candidate value.
They are combined into immutable trees (Composite nodes) that behave
as a single rule again.

The node set is closed:
    - Leaf      wraps one atomic rule
    - And       all children satisfied
    - Or        at least one child satisfied
    - Xor       exactly one child satisfied
    - Invert    child not satisfied
    - Constant  TRUE / FALSE

ARCHITECTURAL RULE:
    Nodes are structure only. Evaluation lives in ruletree.evaluator,
    explanation in ruletree.explainer, rendering in ruletree.backends.
    Nodes delegate to those layers; they never carry query state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Tuple, Type


class Rule(ABC):
    """
    Base class for every rule, atomic or composite.

    Subclasses implement is_satisfied_by(). Implementations MUST be
    deterministic and side-effect free: the explainer evaluates the
    same rule several times against the same candidate.

    describe() is the text shown for this rule by the renderers.
    Dataclass rules get a useful default from their repr, e.g.
        MaxDesiredSalary(max_salary=90000)

    The builder methods never modify self; they return new nodes.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: Any) -> bool:
        ...

    def describe(self) -> str:
        return repr(self)

    def composite(self) -> "Composite":
        return composite(self)

    def and_(self, other: "Rule") -> "Composite":
        return conjoin(self, other)

    def or_(self, other: "Rule") -> "Composite":
        return disjoin(self, other)

    def xor(self, other: "Rule") -> "Composite":
        return exclusive(self, other)

    def invert(self) -> "Composite":
        return negate(self)

    def __and__(self, other: "Rule") -> "Composite":
        return conjoin(self, other)

    def __or__(self, other: "Rule") -> "Composite":
        return disjoin(self, other)

    def __xor__(self, other: "Rule") -> "Composite":
        return exclusive(self, other)

    def __invert__(self) -> "Composite":
        return negate(self)


class Composite(Rule):
    """
    Base class for all composition nodes.

    A Composite is itself a Rule, so trees nest freely.
    Querying is delegated to the evaluator / explainer / text renderer.
    """

    def is_satisfied_by(self, candidate: Any) -> bool:
        from ruletree.evaluator import evaluate

        return evaluate(self, candidate)

    def remainder_unsatisfied_by(self, candidate: Any) -> Optional["Composite"]:
        from ruletree.explainer import remainder_unsatisfied_by

        return remainder_unsatisfied_by(self, candidate)

    def describe(self) -> str:
        from ruletree.backends.text_renderer import render

        return render(self)

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class Leaf(Composite):
    """
    Wraps a single atomic rule.

    The rule is held by reference. The same Leaf (or the same rule)
    may appear at several positions of one or more trees.
    """

    rule: Rule


@dataclass(frozen=True)
class Combination(Composite):
    """
    Variadic combinator holding an ordered tuple of children.

    Abstract: only And, Or and Xor are instantiated.
    Lists are accepted and frozen into tuples on construction.
    The builders always produce two or more children.
    """

    keyword: ClassVar[str] = ""

    children: Tuple[Composite, ...]

    def __post_init__(self) -> None:
        if type(self) is Combination:
            raise TypeError("Combination is abstract, use And, Or or Xor")
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class And(Combination):
    keyword: ClassVar[str] = "and"


@dataclass(frozen=True)
class Or(Combination):
    keyword: ClassVar[str] = "or"


@dataclass(frozen=True)
class Xor(Combination):
    """Satisfied when exactly one child is satisfied (not parity)."""

    keyword: ClassVar[str] = "xor"


@dataclass(frozen=True)
class Invert(Composite):
    """
    Negates a single child.

    Double inversion is kept as written: not not X stays two nodes.
    """

    child: Composite


@dataclass(frozen=True)
class Constant(Composite):
    value: bool


TRUE = Constant(True)
FALSE = Constant(False)


# =============================================================================
# BUILDERS
# =============================================================================


def composite(rule: Rule) -> Composite:
    """
    Lift a rule into a Composite node.

    Bare rules become a Leaf; Composite nodes are returned unchanged.
    Wrapping once and reusing the Leaf shares the rule between trees.
    """
    if isinstance(rule, Composite):
        return rule
    if isinstance(rule, Rule):
        return Leaf(rule)
    raise TypeError(f"Expected a Rule, got {type(rule).__name__}")


def _combine(kind: Type[Combination], left: Rule, right: Rule) -> Composite:
    left = composite(left)
    right = composite(right)
    # Only merge into the left operand, and only within one operator kind
    if isinstance(left, kind):
        if isinstance(right, kind):
            return kind(left.children + right.children)
        return kind(left.children + (right,))
    return kind((left, right))


def conjoin(left: Rule, right: Rule) -> Composite:
    """left AND right, flattening into an existing And on the left."""
    return _combine(And, left, right)


def disjoin(left: Rule, right: Rule) -> Composite:
    """left OR right, flattening into an existing Or on the left."""
    return _combine(Or, left, right)


def exclusive(left: Rule, right: Rule) -> Composite:
    """left XOR right, flattening into an existing Xor on the left."""
    return _combine(Xor, left, right)


def negate(rule: Rule) -> Composite:
    return Invert(composite(rule))


__all__ = [
    "Rule",
    "Composite",
    "Leaf",
    "Combination",
    "And",
    "Or",
    "Xor",
    "Invert",
    "Constant",
    "TRUE",
    "FALSE",
    "composite",
    "conjoin",
    "disjoin",
    "exclusive",
    "negate",
]
