# tests/test_data_loader.py
"""
Testes para o carregamento de regiões com geopandas.
"""

import geopandas as gpd
import pandas as pd
import pytest
import shapely.geometry as sgeom

from geocolor.core.adjacency import build_adjacency
from geocolor.utils.data_loader import RegionLoader


@pytest.fixture
def gdf():
    df = pd.DataFrame({
        'cod_ine': [45001, 45002, 45003],
        'name': ['Ajofrín', 'Alameda de la Sagra', 'Albarreal de Tajo'],
        'poblacion': [2300, None, 700],
        'geometry': [sgeom.box(0, 0, 1, 1), sgeom.box(1, 0, 2, 1), None],
    })
    return gpd.GeoDataFrame(df, crs="EPSG:4326")


def test_features_from_geodataframe_with_id_column(gdf):
    features = RegionLoader.features_from_geodataframe(gdf, id_column='cod_ine')

    assert [f['id'] for f in features] == ['45001', '45002', '45003']
    assert features[0]['type'] == 'Feature'
    assert features[0]['geometry']['type'] == 'Polygon'
    assert features[0]['properties']['cod_ine'] == 45001
    assert features[1]['properties']['poblacion'] is None
    assert features[2]['geometry'] is None


def test_features_from_geodataframe_slug_ids(gdf):
    features = RegionLoader.features_from_geodataframe(gdf, name_column='name')
    assert [f['id'] for f in features] == ['ajofrin', 'alameda-de-la-sagra', 'albarreal-de-tajo']


def test_features_without_ids_use_position(gdf):
    features = RegionLoader.features_from_geodataframe(gdf)
    assert all(f['id'] is None for f in features)
    assert build_adjacency(features) == {'0': {'1'}, '1': {'0'}, '2': set()}


def test_empty_geodataframe():
    assert RegionLoader.features_from_geodataframe(gpd.GeoDataFrame()) == []
    assert RegionLoader.features_from_geodataframe(None) == []


def test_load_features_from_geojson(tmp_path, gdf):
    path = tmp_path / "municipios.geojson"
    gdf.iloc[:2].to_file(path, driver="GeoJSON")

    features = RegionLoader.load_features(path, id_column='cod_ine')
    assert sorted(f['id'] for f in features) == ['45001', '45002']
    adjacency = build_adjacency(features)
    assert adjacency['45001'] == {'45002'}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        RegionLoader.read_geodataframe(tmp_path / "nao_existe.geojson")
