"""
Módulo utilitário para carregar regiões (municípios, províncias) de arquivos
geográficos e convertê-las em features GeoJSON para a coloração.
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import geopandas as gpd
import pandas as pd
from shapely.geometry import mapping

from geocolor.utils.slug import slugify

logger = logging.getLogger(__name__)


class RegionLoader:
    """Lê GeoJSON/Shapefile com geopandas e produz features para o motor de coloração."""

    @staticmethod
    def read_geodataframe(path: Union[str, Path]) -> gpd.GeoDataFrame:
        """Lê o arquivo geográfico. Levanta FileNotFoundError se não existir."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Arquivo geográfico não encontrado: {path}")

        logger.info(f"Carregando regiões de {path}...")
        gdf = gpd.read_file(path)
        logger.info(f"  ✓ {len(gdf)} geometrias carregadas")
        return gdf

    @staticmethod
    def _clean_value(value):
        if pd.api.types.is_scalar(value) and pd.isna(value):
            return None
        if hasattr(value, 'item') and pd.api.types.is_scalar(value):
            # numpy -> tipos nativos (serializáveis em JSON)
            return value.item()
        return value

    @classmethod
    def features_from_geodataframe(cls, gdf: gpd.GeoDataFrame,
                                   id_column: Optional[str] = None,
                                   name_column: Optional[str] = None) -> List[Dict]:
        """
        Converte um GeoDataFrame em features GeoJSON.

        Args:
            gdf: GeoDataFrame de regiões.
            id_column: Coluna com o identificador. Se omitida (ou vazia na
                linha) e ``name_column`` for dada, o id é o slug do nome; senão
                fica a cargo da cadeia
                ``id -> properties.id -> posição`` da coloração.
            name_column: Coluna com o nome da região.

        Returns:
            Lista de dicts ``{"type": "Feature", "id", "properties", "geometry"}``.
        """
        if gdf is None or gdf.empty:
            return []

        geom_col = gdf.geometry.name
        prop_cols = [c for c in gdf.columns if c != geom_col]

        features = []
        for _, row in gdf.iterrows():
            properties = {c: cls._clean_value(row[c]) for c in prop_cols}

            geom = row[geom_col]
            geometry = None if geom is None or geom.is_empty else mapping(geom)

            region_id = None
            if id_column is not None:
                region_id = properties.get(id_column)
            if region_id is None and name_column is not None and properties.get(name_column) is not None:
                region_id = slugify(properties[name_column])
            if region_id is not None:
                region_id = str(region_id)

            features.append({
                'type': 'Feature',
                'id': region_id,
                'properties': properties,
                'geometry': geometry,
            })

        missing = sum(1 for f in features if f['geometry'] is None)
        if missing:
            logger.warning(f"{missing} regiões sem geometria (ficarão sem vizinhos).")
        return features

    @classmethod
    def load_features(cls, path: Union[str, Path], id_column: Optional[str] = None,
                      name_column: Optional[str] = None) -> List[Dict]:
        gdf = cls.read_geodataframe(path)
        return cls.features_from_geodataframe(gdf, id_column=id_column, name_column=name_column)
