"""
Tests for the composition model and builders.

These tests verify:
    - Wrapping atomic rules into Leaf nodes
    - Builder results and flattening
    - Immutability of nodes and of builder inputs
    - Python operator aliases
"""

import pytest

from ruletree.composite import (
    Rule,
    Composite,
    Leaf,
    Combination,
    And,
    Or,
    Xor,
    Invert,
    Constant,
    TRUE,
    FALSE,
    composite,
    conjoin,
    disjoin,
    exclusive,
    negate,
)

from conftest import GreaterThan, LessThan, Zero


class TestComposite:
    """Test lifting atomic rules into nodes."""

    def test_wrap_rule_in_leaf(self, greater_than_5):
        """A bare rule becomes a Leaf holding the same rule."""
        node = composite(greater_than_5)
        assert isinstance(node, Leaf)
        assert node.rule is greater_than_5

    def test_composite_method(self, greater_than_5):
        """Rule.composite() is the method form of composite()."""
        assert greater_than_5.composite() == Leaf(greater_than_5)

    def test_composite_returns_nodes_unchanged(self, greater_than_5, less_than_10):
        """Wrapping a node again returns the very same node."""
        node = greater_than_5 & less_than_10
        assert composite(node) is node
        assert node.composite() is node

    def test_composite_is_a_rule(self, greater_than_5):
        """Nodes are rules themselves and can be nested freely."""
        node = composite(greater_than_5)
        assert isinstance(node, Composite)
        assert isinstance(node, Rule)

    def test_non_rule_rejected(self):
        """Only rules can be wrapped."""
        with pytest.raises(TypeError):
            composite(lambda x: x > 5)

    def test_non_rule_operand_rejected(self, greater_than_5):
        """Combining with a non-rule fails instead of building a broken tree."""
        with pytest.raises(TypeError):
            greater_than_5.and_(5)


class TestBuilders:
    """Test and / or / xor / invert results."""

    def test_and_of_two_rules(self, greater_than_5, less_than_10):
        node = greater_than_5.and_(less_than_10)
        assert node == And((Leaf(greater_than_5), Leaf(less_than_10)))

    def test_or_of_two_rules(self, greater_than_5, less_than_10):
        node = greater_than_5.or_(less_than_10)
        assert node == Or((Leaf(greater_than_5), Leaf(less_than_10)))

    def test_xor_of_two_rules(self, greater_than_5, less_than_10):
        node = greater_than_5.xor(less_than_10)
        assert node == Xor((Leaf(greater_than_5), Leaf(less_than_10)))

    def test_invert_rule(self, greater_than_5):
        assert greater_than_5.invert() == Invert(Leaf(greater_than_5))

    def test_double_invert_is_kept(self, greater_than_5):
        """not not X stays two Invert nodes."""
        node = greater_than_5.invert().invert()
        assert node == Invert(Invert(Leaf(greater_than_5)))

    def test_module_functions_match_methods(self, greater_than_5, less_than_10):
        assert conjoin(greater_than_5, less_than_10) == greater_than_5.and_(less_than_10)
        assert disjoin(greater_than_5, less_than_10) == greater_than_5.or_(less_than_10)
        assert exclusive(greater_than_5, less_than_10) == greater_than_5.xor(less_than_10)
        assert negate(greater_than_5) == greater_than_5.invert()

    def test_operators_match_methods(self, greater_than_5, less_than_10):
        assert (greater_than_5 & less_than_10) == greater_than_5.and_(less_than_10)
        assert (greater_than_5 | less_than_10) == greater_than_5.or_(less_than_10)
        assert (greater_than_5 ^ less_than_10) == greater_than_5.xor(less_than_10)
        assert ~greater_than_5 == greater_than_5.invert()

    def test_composite_operand_is_not_wrapped_in_leaf(self, greater_than_5, less_than_10, zero):
        """A node passed as the other operand is used as is."""
        inner = less_than_10 | zero
        node = greater_than_5 & inner
        assert node.children[1] is inner


class TestFlattening:
    """Test one-level flattening into the left operand."""

    def test_and_appends_rule(self, greater_than_5, less_than_10, zero):
        """And(a, b) and c -> And(a, b, c)."""
        node = (greater_than_5 & less_than_10) & zero
        assert node == And((Leaf(greater_than_5), Leaf(less_than_10), Leaf(zero)))

    def test_and_extends_with_and(self):
        """And(a, b) and And(c, d) -> And(a, b, c, d)."""
        a, b, c, d = GreaterThan(1), GreaterThan(2), GreaterThan(3), GreaterThan(4)
        node = (a & b) & (c & d)
        assert node == And(tuple(Leaf(r) for r in (a, b, c, d)))

    def test_flattening_never_crosses_kinds(self):
        """And(a, b) and Or(c, d) -> And(a, b, Or(c, d))."""
        a, b, c, d = GreaterThan(1), GreaterThan(2), GreaterThan(3), GreaterThan(4)
        node = (a & b) & (c | d)
        assert node == And((Leaf(a), Leaf(b), Or((Leaf(c), Leaf(d)))))

    def test_right_operand_not_merged_into_new_node(self, greater_than_5, less_than_10, zero):
        """a and And(b, c) -> And(a, And(b, c))."""
        inner = less_than_10 & zero
        node = greater_than_5 & inner
        assert node == And((Leaf(greater_than_5), inner))

    def test_or_and_xor_flatten_too(self, greater_than_5, less_than_10, zero):
        assert len(((greater_than_5 | less_than_10) | zero).children) == 3
        assert len(((greater_than_5 ^ less_than_10) ^ zero).children) == 3

    def test_invert_is_never_flattened(self, greater_than_5, less_than_10):
        node = ~(greater_than_5 & less_than_10) & greater_than_5
        assert isinstance(node.children[0], Invert)
        assert len(node.children) == 2


class TestImmutability:
    """Nodes never change; builders always return new nodes."""

    def test_children_are_tuples(self, greater_than_5, less_than_10):
        node = greater_than_5 & less_than_10
        assert isinstance(node.children, tuple)

    def test_combination_is_abstract(self, greater_than_5, less_than_10):
        """Only the concrete And / Or / Xor kinds can be built."""
        with pytest.raises(TypeError):
            Combination((Leaf(greater_than_5), Leaf(less_than_10)))

    def test_list_children_frozen(self, greater_than_5, less_than_10):
        node = And([Leaf(greater_than_5), Leaf(less_than_10)])
        assert isinstance(node.children, tuple)

    def test_nodes_are_frozen(self, greater_than_5):
        node = composite(greater_than_5)
        with pytest.raises(AttributeError):
            node.rule = LessThan(3)

    def test_flattening_leaves_input_untouched(self, greater_than_5, less_than_10, zero):
        """Combining an And builds a new node; the original keeps two children."""
        original = greater_than_5 & less_than_10
        extended = original & zero
        assert len(original.children) == 2
        assert len(extended.children) == 3
        assert extended is not original

    def test_leaf_reused_in_several_trees(self, greater_than_5, less_than_10):
        shared = composite(greater_than_5)
        first = shared & less_than_10
        second = shared.invert()
        assert first.children[0] is shared
        assert second.child is shared


class TestConstants:

    def test_true_and_false(self):
        assert TRUE == Constant(True)
        assert FALSE == Constant(False)
        assert TRUE != FALSE

    def test_constants_combine(self, greater_than_5):
        node = TRUE & greater_than_5
        assert node == And((TRUE, Leaf(greater_than_5)))
