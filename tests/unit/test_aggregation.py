"""
Unit tests for the aggregation engine
"""

import logging

import pytest
from ghg_sunburst.core.aggregation import AggregatedNode, aggregate, subtree_value
from ghg_sunburst.core.hierarchy_store import EntityTree


def assert_conserved(node: AggregatedNode):
    for child in node.children:
        assert_conserved(child)
    if node.children:
        assert node.value == pytest.approx(sum(c.value for c in node.children))


def chain(depth: int, leaf_value: float) -> EntityTree:
    node = EntityTree(name=f'L{depth}', contribution=leaf_value)
    for d in range(depth - 1, -1, -1):
        node = EntityTree(name=f'L{d}', children=(node,))
    return node


class TestAggregate:
    """Test bottom-up aggregation"""

    def test_single_leaf(self):
        """Test a leaf takes its own contribution"""
        node = aggregate(EntityTree(name='Leaf', contribution=10))

        assert node.value == 10
        assert node.children == ()

    def test_deeply_nested(self):
        """Test value survives a long single-child chain"""
        node = aggregate(chain(8, 0.5))

        assert node.value == pytest.approx(0.5)
        assert_conserved(node)

    def test_conservation_fixture(self, steel_aggregated):
        """Test parent value equals the sum of child values everywhere"""
        assert_conserved(steel_aggregated)
        assert steel_aggregated.value == pytest.approx(1.0)

    def test_children_take_precedence(self, steel_aggregated):
        """Test a declared value on an internal node is ignored"""
        epg = next(c for c in steel_aggregated.children if c.name == 'Electric Power Generation')
        natural_gas = next(c for c in epg.children if c.name == 'Natural Gas')

        assert natural_gas.value == pytest.approx(0.10)

    def test_missing_contribution_is_zero(self):
        """Test leaves without a contribution count as zero"""
        tree = EntityTree(name='root', children=(EntityTree(name='a'), EntityTree(name='b', contribution=2)))

        assert aggregate(tree).value == 2

    @pytest.mark.parametrize('bad', ['abc', float('nan'), float('inf'), -1.0, [1]])
    def test_invalid_contribution_is_zero(self, bad, caplog):
        """Test invalid contributions are dropped with a warning"""
        with caplog.at_level(logging.WARNING):
            node = aggregate(EntityTree(name='bad', contribution=bad))

        assert node.value == 0.0
        assert 'bad' in caplog.text

    def test_numeric_strings_accepted(self):
        assert aggregate(EntityTree(name='s', contribution='0.25')).value == pytest.approx(0.25)

    def test_empty_tree(self):
        """Test the sentinel tree aggregates to zero"""
        assert aggregate(EntityTree(name='No Data')).value == 0.0

    def test_idempotent(self, steel_tree):
        """Test repeated aggregation gives equal fresh trees"""
        first = aggregate(steel_tree)
        second = aggregate(steel_tree)

        assert first == second
        assert first is not second

    def test_keeps_tags(self, steel_aggregated):
        assert steel_aggregated.identifier == '331110'
        assert steel_aggregated.children[0].category_kind == 'activity_category'

    def test_walk_depths(self, steel_aggregated):
        depths = {node.name: depth for node, depth in steel_aggregated.walk() if depth <= 1}

        assert depths['331110'] == 0
        assert depths['Fuel Combustion'] == 1


class TestSubtreeValue:
    """Test standalone subtree values"""

    def test_matches_aggregate(self, steel_tree):
        assert subtree_value(steel_tree) == pytest.approx(aggregate(steel_tree).value)

    def test_leaf(self):
        assert subtree_value(EntityTree(name='x', contribution=3)) == 3


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
