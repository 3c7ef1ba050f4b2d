"""
Shared sample rules over integer candidates.
"""

from dataclasses import dataclass

import pytest

from ruletree.composite import Rule


@dataclass(frozen=True)
class GreaterThan(Rule):
    value: int

    def is_satisfied_by(self, candidate: int) -> bool:
        return candidate > self.value


@dataclass(frozen=True)
class LessThan(Rule):
    value: int

    def is_satisfied_by(self, candidate: int) -> bool:
        return candidate < self.value


@dataclass(frozen=True)
class Zero(Rule):
    def is_satisfied_by(self, candidate: int) -> bool:
        return candidate == 0


@pytest.fixture
def greater_than_5():
    return GreaterThan(5)


@pytest.fixture
def less_than_10():
    return LessThan(10)


@pytest.fixture
def zero():
    return Zero()
