"""
Shared fixtures for GHG sunburst tests
"""

import json
from pathlib import Path

import pytest

from ghg_sunburst.core.aggregation import aggregate
from ghg_sunburst.core.hierarchy_store import build_tree
from ghg_sunburst.core.radial_layout import layout

FIXTURES = Path(__file__).parent / 'fixtures'


def raw(name, kind=None, contribution=None, children=None, **extra):
    """Build a raw dataset node"""
    node = {'name': name, **extra}
    if kind:
        node['category'] = kind
    if contribution is not None:
        node['contribution'] = contribution
    if children is not None:
        node['children'] = children
    return node


def dataset_of(*entities):
    return {'name': 'GHG Emissions', 'children': list(entities)}


@pytest.fixture
def fixtures_dir():
    return FIXTURES


@pytest.fixture
def dataset():
    return json.loads((FIXTURES / 'sample_sunburst.json').read_text(encoding='utf-8'))


@pytest.fixture
def steel_tree(dataset):
    return build_tree(dataset, '331110')


@pytest.fixture
def steel_aggregated(steel_tree):
    return aggregate(steel_tree)


@pytest.fixture
def steel_layout(steel_aggregated):
    return layout(steel_aggregated, 0.0, radius=300.0)


@pytest.fixture
def shared_names_dataset():
    """'X' sits under two activity categories with 3 and 5; gas 'Y' under both"""
    return dataset_of(raw('A', identifier='A', children=[
        raw('Electric Power Generation', 'activity_category', children=[
            raw('X', 'activity_type', children=[raw('Y', 'gas_category', 2.0), raw('Z', 'gas_category', 1.0)]),
        ]),
        raw('Fuel Combustion', 'activity_category', children=[
            raw('X', 'activity_type', children=[raw('Y', 'gas_category', 5.0)]),
            raw('W', 'activity_type', children=[raw('Z', 'gas_category', 2.0)]),
        ]),
    ]))
