# tests/test_manager.py
"""
Testes para o ColoringManager (escolha do algoritmo + cache).
"""

import pytest
import shapely.geometry as sgeom

from geocolor.core.cache import ColorCache
from geocolor.core.coloring import find_conflicts
from geocolor.core.manager import ColoringManager
from geocolor.interface.palette import get_palette


@pytest.fixture
def features():
    return [
        {'id': f"r{i}c{j}", 'geometry': sgeom.box(j, i, j + 1, i + 1)}
        for i in range(3) for j in range(3)
    ]


def test_graph_mode_colors_and_caches(features):
    manager = ColoringManager(mode='graph')
    first = manager.color_regions(features)

    assert set(first) == {f['id'] for f in features}
    assert find_conflicts(manager.adjacency, first) == []
    assert manager.cache.misses == 1

    second = manager.color_regions(features)
    assert second == first
    assert manager.cache.hits == 1


def test_graph_mode_cache_sees_geometry_changes(features):
    manager = ColoringManager(mode='graph')
    manager.color_regions(features)

    moved = [dict(f) for f in features]
    moved[0]['geometry'] = sgeom.box(10, 10, 11, 11)
    manager.color_regions(moved)

    assert manager.cache.hits == 0
    assert manager.cache.misses == 2
    assert manager.adjacency['r0c0'] == set()


def test_hash_mode_is_order_independent(features):
    manager = ColoringManager(mode='hash')
    forward = manager.color_regions(features)
    backward = manager.color_regions(list(reversed(features)))

    assert forward == backward
    # Mesmo conjunto de ids -> mesma chave de cache
    assert manager.cache.hits == 1


def test_shared_cache_between_managers(features):
    cache = ColorCache(maxsize=8)
    ColoringManager(mode='graph', cache=cache).color_regions(features)
    ColoringManager(mode='hash', cache=cache).color_regions(features)
    assert len(cache) == 2


def test_custom_palette_is_validated():
    manager = ColoringManager(palette=['#111111', '#222222'])
    assert manager.palette == ['#111111', '#222222']

    with pytest.raises(ValueError):
        ColoringManager(palette=['vermelho'])


def test_default_palette():
    assert ColoringManager().palette == get_palette()


@pytest.mark.parametrize("kwargs", [{'mode': 'random'}, {'strategy': 'dsatur'}])
def test_invalid_options(kwargs):
    with pytest.raises(ValueError):
        ColoringManager(**kwargs)


def test_empty_palette_yields_empty_mapping(features):
    assert ColoringManager(palette=[]).color_regions(features) == {}
    assert ColoringManager(palette=[], mode='hash').color_regions(features) == {}


def test_graph_mode_cache_sees_interior_vertex_moves():
    """Mesma caixa e mesmo número de vértices, mas agora C toca A em (2, 2)."""
    palette = ['#aaaaaa', '#bbbbbb']
    a = {'id': 'A', 'geometry': sgeom.box(0, 0, 2, 2)}
    b = {'id': 'B', 'geometry': sgeom.box(10, 10, 11, 11)}
    c = {'id': 'C', 'geometry': sgeom.Polygon([(1, 1), (3, 1), (3, 3), (1, 3)])}
    c_moved = {'id': 'C', 'geometry': sgeom.Polygon([(2, 2), (3, 1), (3, 3), (1, 3)])}

    manager = ColoringManager(palette=palette)
    manager.color_regions([a, b, c])
    assert manager.adjacency['A'] == set()

    coloring = manager.color_regions([a, b, c_moved])
    assert manager.cache.hits == 0
    assert manager.adjacency['A'] == {'C'}
    assert coloring['A'] != coloring['C']


def test_shared_cache_separates_precisions():
    cache = ColorCache()
    features = [
        {'id': 'a', 'geometry': sgeom.box(0, 0, 1, 1)},
        {'id': 'b', 'geometry': sgeom.Polygon([(1.00000001, 1), (2, 1), (2, 2), (1, 2)])},
    ]
    palette = ['#111111', '#222222']

    fine = ColoringManager(palette=palette, strategy='first', cache=cache, precision=9)
    coarse = ColoringManager(palette=palette, strategy='first', cache=cache, precision=6)

    assert fine.color_regions(features) == {'a': '#111111', 'b': '#111111'}
    coloring = coarse.color_regions(features)

    assert cache.hits == 0
    assert coarse.adjacency == {'a': {'b'}, 'b': {'a'}}
    assert coloring['a'] != coloring['b']


def test_cache_hit_restores_matching_adjacency(features):
    manager = ColoringManager(mode='graph')
    manager.color_regions(features)
    grid_adjacency = manager.adjacency

    manager.color_regions([{'id': 'z', 'geometry': sgeom.box(50, 50, 51, 51)}])
    assert manager.adjacency == {'z': set()}

    manager.color_regions(features)
    assert manager.cache.hits == 1
    assert manager.adjacency == grid_adjacency
