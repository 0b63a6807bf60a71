# tests/test_precompute.py
"""
Testes para o pipeline de pré-cálculo da coloração.
"""

import json

import geopandas as gpd
import pandas as pd
import pytest
import shapely.geometry as sgeom

from geocolor.core.coloring import find_conflicts
from geocolor.core.manager import ColoringManager
from geocolor.pipeline.precompute import ColoringPrecomputer, load_coloring_cache, usage_report


@pytest.fixture
def source(tmp_path):
    df = pd.DataFrame({
        'cod_ine': [f"0200{i}" for i in range(4)],
        'geometry': [sgeom.box(j, i, j + 1, i + 1) for i in range(2) for j in range(2)],
    })
    path = tmp_path / "municipios.geojson"
    gpd.GeoDataFrame(df, crs="EPSG:4326").to_file(path, driver="GeoJSON")
    return path


def test_usage_report_counts_every_palette_color():
    report = usage_report({'a': '#A', 'b': '#A', 'c': '#B'}, ['#A', '#B', '#C'])

    assert list(report['color']) == ['#A', '#B', '#C']
    assert list(report['regions']) == [2, 1, 0]
    assert report['share'].iloc[0] == pytest.approx(2 / 3)


def test_usage_report_empty_coloring():
    report = usage_report({}, ['#A'])
    assert list(report['regions']) == [0]


def test_run_graph_mode(tmp_path, source):
    output = tmp_path / "cache" / "coloring.json"
    report = tmp_path / "cache" / "report.csv"
    precomputer = ColoringPrecomputer(id_column='cod_ine')

    assert precomputer.run(source, output, report) is True

    coloring = load_coloring_cache(output)
    assert set(coloring) == {"02000", "02001", "02002", "02003"}
    # 4 quadrados que se tocam todos (bordas ou canto)
    assert len(set(coloring.values())) == 4
    assert find_conflicts(precomputer.adjacency, coloring) == []

    with open(output, encoding='utf-8') as f:
        payload = json.load(f)
    assert payload['metadata']['mode'] == 'graph'
    assert payload['metadata']['regions'] == 4

    df = pd.read_csv(report, sep=';')
    assert df['regions'].sum() == 4


def test_run_hash_mode(tmp_path, source):
    output = tmp_path / "coloring_hash.json"
    precomputer = ColoringPrecomputer(mode='hash', id_column='cod_ine')

    assert precomputer.run(source, output) is True
    assert precomputer.adjacency is None
    assert len(load_coloring_cache(output)) == 4


def test_run_missing_source(tmp_path):
    precomputer = ColoringPrecomputer()
    assert precomputer.run(tmp_path / "nada.geojson", tmp_path / "out.json") is False


def test_compute_reuses_external_manager_cache():
    features = [{'id': 'a', 'geometry': sgeom.box(0, 0, 1, 1)},
                {'id': 'b', 'geometry': sgeom.box(1, 0, 2, 1)}]
    manager = ColoringManager()
    manager.color_regions(features)

    precomputer = ColoringPrecomputer(manager=manager)
    coloring = precomputer.compute(features)

    assert manager.cache.hits == 1
    assert precomputer.adjacency == {'a': {'b'}, 'b': {'a'}}
    assert coloring['a'] != coloring['b']


def test_load_coloring_cache_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_coloring_cache(tmp_path / "nada.json")
