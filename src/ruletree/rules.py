"""
Function-backed atomic rules.

Most rules are small classes, but a plain function is often enough:

    @rule
    def is_zero(candidate):
        return candidate == 0

    @rule_factory
    def greater_than(candidate, value):
        return candidate > value

    in_range = greater_than(5) & less_than(10)

The wrapped function must be pure; see ruletree.composite.Rule.
"""

import functools
from typing import Any, Callable, Optional

from ruletree.composite import Rule


class PredicateRule(Rule):
    """
    Atomic rule backed by a callable.

    Properties:
        predicate: Callable taking the candidate, returning a truthy value
        description: Text used by renderers (defaults to the callable name)
    """

    def __init__(self, predicate: Callable[[Any], Any], description: Optional[str] = None):
        if not callable(predicate):
            raise TypeError(f"Expected a callable, got {type(predicate).__name__}")
        self.predicate = predicate
        self.description = description or getattr(predicate, "__name__", repr(predicate))

    def is_satisfied_by(self, candidate: Any) -> bool:
        return bool(self.predicate(candidate))

    def describe(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"PredicateRule({self.description!r})"


def rule(func: Callable[[Any], Any]) -> PredicateRule:
    """Decorator turning a one-argument predicate into a rule."""
    return PredicateRule(func, func.__name__)


def rule_factory(func: Callable[..., Any]) -> Callable[..., PredicateRule]:
    """
    Decorator for parameterized predicates.

    The decorated function takes the candidate first, then its parameters.
    Calling the result with the parameters builds a rule described as
    name(param, ...).
    """

    @functools.wraps(func)
    def factory(*args: Any, **kwargs: Any) -> PredicateRule:
        params = [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
        description = f"{func.__name__}({', '.join(params)})"
        return PredicateRule(lambda candidate: func(candidate, *args, **kwargs), description)

    return factory


__all__ = ["PredicateRule", "rule", "rule_factory"]
