# geocolor/core/geometry.py
"""
Utilitários geométricos usados pela coloração de mapas.

As regiões chegam como features GeoJSON (dicts), geometrias shapely ou
qualquer objeto com ``__geo_interface__``. Nada aqui altera a geometria de
entrada: apenas lemos as coordenadas para obter caixas envolventes e
conjuntos de vértices.
"""
import math
from numbers import Real
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional, Set, Tuple

import numpy as np

from geocolor.config import VERTEX_PRECISION

Point = Tuple[float, float]
VertexKey = Tuple[float, float]


class BoundingBox(NamedTuple):
    """Caixa envolvente alinhada aos eixos (AABB)."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    empty: bool = False


EMPTY_BBOX = BoundingBox(0.0, 0.0, 0.0, 0.0, empty=True)


def _get(obj: Any, key: str):
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def resolve_region_id(region: Any, index: int) -> str:
    """
    Resolve o identificador de uma região: ``id``, depois ``properties.id``,
    depois a posição na lista. O primeiro valor definido (não ``None``) vence.
    """
    region_id = _get(region, 'id')
    if region_id is None:
        properties = _get(region, 'properties')
        if properties is not None:
            region_id = _get(properties, 'id')
    if region_id is None:
        region_id = index
    return str(region_id)


def get_geometry(region: Any) -> Optional[Mapping]:
    """
    Retorna a geometria de uma região como mapping GeoJSON
    (``{"type": ..., "coordinates": ...}``) ou ``None``.

    Aceita features GeoJSON, geometrias GeoJSON "nuas" e objetos que expõem
    ``__geo_interface__`` (shapely, GeoSeries).
    """
    if region is None:
        return None

    if isinstance(region, Mapping):
        if 'coordinates' in region or 'geometries' in region:
            return region
        geom = region.get('geometry')
    elif hasattr(region, '__geo_interface__'):
        geom = region
    else:
        geom = getattr(region, 'geometry', None)

    if geom is None:
        return None

    if not isinstance(geom, Mapping):
        geom = getattr(geom, '__geo_interface__', None)
        if not isinstance(geom, Mapping):
            return None

    # Feature/FeatureCollection vindos de __geo_interface__
    if geom.get('type') == 'Feature':
        return get_geometry(geom.get('geometry'))
    return geom


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _collect(coords, out: List[Point]):
    if coords is None or isinstance(coords, (str, bytes)):
        return
    try:
        items = list(coords)
    except TypeError:
        return
    if not items:
        return

    if _is_number(items[0]):
        # Posição [x, y, (z)]; z é ignorado
        if len(items) >= 2 and _is_number(items[1]):
            x, y = float(items[0]), float(items[1])
            if math.isfinite(x) and math.isfinite(y):
                out.append((x, y))
        return

    for sub in items:
        _collect(sub, out)


def flatten_coordinates(geometry: Optional[Mapping]) -> List[Point]:
    """Achata a árvore de coordenadas de uma geometria numa lista de pares (x, y)."""
    points: List[Point] = []
    if not geometry:
        return points

    if geometry.get('type') == 'GeometryCollection':
        for sub in geometry.get('geometries') or []:
            if isinstance(sub, Mapping):
                points.extend(flatten_coordinates(sub))
        return points

    _collect(geometry.get('coordinates'), points)
    return points


def region_points(region: Any) -> List[Point]:
    return flatten_coordinates(get_geometry(region))


def bbox_of(points: Iterable[Point]) -> BoundingBox:
    """Calcula a caixa envolvente de uma lista de pontos; vazia se não houver pontos."""
    points = list(points)
    if not points:
        return EMPTY_BBOX
    arr = np.asarray(points, dtype=float)
    min_x, min_y = arr.min(axis=0)
    max_x, max_y = arr.max(axis=0)
    return BoundingBox(float(min_x), float(min_y), float(max_x), float(max_y))


def bboxes_intersect(a: BoundingBox, b: BoundingBox) -> bool:
    """Teste clássico de sobreposição AABB. Caixas vazias nunca se intersectam."""
    if a.empty or b.empty:
        return False
    return not (a.max_x < b.min_x or a.min_x > b.max_x or
                a.max_y < b.min_y or a.min_y > b.max_y)


def vertex_key(point: Point, precision: int = VERTEX_PRECISION) -> VertexKey:
    # + 0.0 normaliza -0.0 para 0.0
    return (round(point[0], precision) + 0.0, round(point[1], precision) + 0.0)


def vertex_keys(points: Iterable[Point], precision: int = VERTEX_PRECISION) -> Set[VertexKey]:
    """Conjunto de vértices arredondados, usado para detectar vértices compartilhados."""
    return {vertex_key(p, precision) for p in points}
