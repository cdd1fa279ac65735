"""
Unit tests for the radial partition layout
"""

import math

import pytest
from ghg_sunburst.core.aggregation import AggregatedNode
from ghg_sunburst.core.constants import CATEGORY_COLORS, FALLBACK_COLOR
from ghg_sunburst.core.radial_layout import (
    FULL_CIRCLE,
    clamp_share,
    layout,
    sort_by_category_order,
)


def agg(name, value=None, children=(), kind=None):
    """Aggregated node; internal values derived from children"""
    children = tuple(children)
    if value is None:
        value = sum(c.value for c in children)
    return AggregatedNode(name=name, value=value, category_kind=kind, children=children)


def by_name(nodes, name, depth=None):
    return next(n for n in nodes if n.name == name and (depth is None or n.depth == depth))


class TestOrdering:
    """Test sibling ordering"""

    def test_depth1_canonical_order(self, steel_layout):
        """Test the first ring follows the canonical category order"""
        assert [c.name for c in steel_layout.root.children] == [
            'Electric Power Generation', 'Fuel Combustion', 'Process & Fugitive Gases',
        ]

    def test_depth1_unmatched_after_canonical(self):
        """Test unknown categories follow canonical ones, largest first"""
        root = agg('root', children=[
            agg('Other small', 1.0),
            agg('Process & Fugitive Gases', 2.0),
            agg('Other big', 9.0),
            agg('Electric Power Generation', 3.0),
        ])
        result = layout(root)

        assert [c.name for c in result.root.children] == [
            'Electric Power Generation', 'Process & Fugitive Gases', 'Other big', 'Other small',
        ]

    def test_deeper_rings_by_value(self, steel_layout):
        """Test deeper siblings sort by descending value"""
        fuel = by_name(steel_layout.nodes, 'Fuel Combustion')

        assert [c.name for c in fuel.children] == ['Natural Gas', 'Coal']

    def test_ties_keep_insertion_order(self):
        items = [agg('b', 1.0), agg('a', 1.0), agg('c', 2.0)]

        assert [i.name for i in sort_by_category_order(items, 2)] == ['c', 'b', 'a']


class TestPartition:
    """Test angular partition geometry"""

    def test_root_full_circle(self, steel_layout):
        assert steel_layout.root.angle_start == 0.0
        assert steel_layout.root.angle_end == pytest.approx(FULL_CIRCLE)

    def test_children_contiguous_and_complete(self, steel_layout):
        """Test children tile their parent's span exactly"""
        for node in [steel_layout.root] + steel_layout.nodes:
            if not node.children:
                continue
            assert node.children[0].angle_start == pytest.approx(node.angle_start)
            for left, right in zip(node.children, node.children[1:]):
                assert right.angle_start == pytest.approx(left.angle_end)
            assert node.children[-1].angle_end == pytest.approx(node.angle_end)
            assert sum(c.span for c in node.children) == pytest.approx(node.span)

    def test_span_proportional_to_value(self, steel_layout):
        """Test every span is value share of the full circle"""
        for node in steel_layout.nodes:
            assert node.span == pytest.approx(FULL_CIRCLE * node.value / steel_layout.total)

    def test_padding(self, steel_layout):
        """Test painted spans lose exactly one pad per arc"""
        pad = 1 / 300.0
        for node in [steel_layout.root] + steel_layout.nodes:
            if not node.children:
                continue
            painted = sum(c.paint_end - c.paint_start for c in node.children)
            assert painted == pytest.approx(node.span - pad * len(node.children))

    def test_padding_never_inverts(self):
        result = layout(agg('root', children=[agg('tiny', 1e-9), agg('big', 1.0)]), radius=10.0)
        tiny = by_name(result.nodes, 'tiny')

        assert tiny.paint_end >= tiny.paint_start

    def test_uniform_radial_bands(self, steel_layout):
        """Test each depth occupies one ring of radius / (height + 1)"""
        band = 300.0 / 4
        for node in steel_layout.nodes:
            assert node.radius_inner == pytest.approx(node.depth * band)
            assert node.radius_outer == pytest.approx((node.depth + 1) * band)

    def test_zero_parent_gives_zero_spans(self):
        result = layout(agg('root', children=[agg('a', 0.0), agg('b', 0.0)]))

        assert all(n.span == 0.0 for n in result.nodes)


class TestVisibility:
    """Test the minimum-share predicate"""

    @pytest.mark.parametrize('share', [0.0, 0.25, 0.5, 0.99, 1.0])
    def test_first_ring_always_visible(self, steel_aggregated, share):
        result = layout(steel_aggregated, share)

        assert all(n.visible for n in result.nodes if n.depth <= 1)

    def test_threshold_hides_small_arcs(self, steel_aggregated):
        result = layout(steel_aggregated, 0.06)
        fuel = by_name(result.nodes, 'Fuel Combustion')
        coal = by_name(fuel.children, 'Coal')
        refrigerants = by_name(result.nodes, 'Refrigerants')

        assert not coal.visible
        assert refrigerants.visible
        assert coal.span > 0  # geometry kept

    def test_monotonic(self, steel_aggregated):
        """Test raising the threshold never reveals an arc"""
        shares = [0.0, 0.01, 0.03, 0.06, 0.2, 0.3, 0.5, 1.0]
        previous = None
        for share in shares:
            visible = {n.key for n in layout(steel_aggregated, share).visible_nodes()}
            if previous is not None:
                assert visible <= previous
            previous = visible

    @pytest.mark.parametrize('share', [-0.5, None, float('nan'), 'x'])
    def test_threshold_clamped(self, steel_aggregated, share):
        result = layout(steel_aggregated, share)

        assert result.min_share == 0.0
        assert all(n.visible for n in result.nodes)

    def test_clamp_share(self):
        assert clamp_share(-1) == 0.0
        assert clamp_share(0.2) == 0.2

    def test_zero_root_nothing_visible(self):
        result = layout(agg('root', children=[agg('Fuel Combustion', children=[agg('x', 0.0)])]))

        assert result.visible_nodes() == []


class TestColorsAndIndex:
    """Test color inheritance, index and hit-testing"""

    def test_color_inherited_from_first_ring(self, steel_layout):
        for node in steel_layout.nodes:
            category = node.path_nodes()[0]
            assert node.color == CATEGORY_COLORS[category.name]

    def test_fallback_color(self):
        result = layout(agg('root', children=[agg('Unknown', children=[agg('leaf', 1.0)])]))

        assert {n.color for n in result.nodes} == {FALLBACK_COLOR}

    def test_index_and_paths(self, steel_layout):
        for node in steel_layout.nodes:
            assert steel_layout.index[node.key] is node
            assert steel_layout.contains(node)
        co2 = steel_layout.index[(0, 0, 0)]
        assert co2.path() == ('Electric Power Generation', 'Coal', 'CO2')

    def test_descendants_and_ancestors(self, steel_layout):
        epg = steel_layout.root.children[0]

        assert len(list(epg.descendants())) == 1 + 2 + 3
        assert epg.children[0].children[0].ancestors()[-1] is steel_layout.root

    def test_find(self, steel_layout):
        coal = steel_layout.find('Coal', 2)

        assert [n.parent.name for n in coal] == ['Electric Power Generation', 'Fuel Combustion']

    def test_hit_test(self, steel_layout):
        epg = steel_layout.root.children[0]

        assert steel_layout.hit_test(epg.mid_angle, 100.0) is epg
        assert steel_layout.hit_test(epg.mid_angle + FULL_CIRCLE, 100.0) is epg
        assert steel_layout.hit_test(epg.mid_angle, 10.0) is None  # centre disc
        assert steel_layout.hit_test(epg.mid_angle, 400.0) is None

    def test_hit_test_skips_invisible(self, steel_aggregated):
        result = layout(steel_aggregated, 0.06, radius=300.0)
        coal = by_name(by_name(result.nodes, 'Fuel Combustion').children, 'Coal')

        assert result.hit_test(coal.mid_angle, (coal.radius_inner + coal.radius_outer) / 2) is None

    def test_default_pad_follows_radius(self, steel_aggregated):
        result = layout(steel_aggregated, radius=250.0)

        assert result.nodes[0].pad_angle == pytest.approx(1 / 250.0)
        assert math.isclose(layout(steel_aggregated, pad_angle=0.0).nodes[0].pad_angle, 0.0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
