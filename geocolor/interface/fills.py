# geocolor/interface/fills.py
"""
Resolução do preenchimento (cor + opacidade) de cada município no mapa.

Ordem de prioridade:
1. Estado da resposta no quiz (correcta / fallida / pendiente).
2. Modo 'por-provincia': cor fixa da província.
3. Demais modos ('colorido', 'por-comunidad', 'poblacion', 'altitud'): cor
   individual calculada pela coloração do mapa.
"""
from typing import Any, Dict, Iterable, Mapping, Optional

from geocolor.interface.palette import (
    PROVINCE_FALLBACK,
    PROVINCE_PALETTE,
    STATUS_FILL,
    UNIFORM_FILL,
)

# Modos de cor do mapa; todos exceto 'por-provincia' usam a coloração por município
COLOR_MODES = ('colorido', 'por-provincia', 'por-comunidad', 'poblacion', 'altitud')

OPACITY_STATUS = 0.95
OPACITY_DIMMED = 0.25
OPACITY_DEFAULT = 0.85


def _get(obj: Any, key: str):
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def feature_region_id(feature: Any) -> str:
    """Id usado pelo mapa: ``properties.id``, depois ``id``, senão 'sin-id'."""
    properties = _get(feature, 'properties') or {}
    region_id = _get(properties, 'id')
    if region_id is None:
        region_id = _get(feature, 'id')
    return 'sin-id' if region_id is None else str(region_id)


def resolve_fill(region_id: str, color_mode: str, coloring: Mapping[str, str],
                 provincia: str = '', status: Optional[str] = None) -> str:
    if color_mode not in COLOR_MODES:
        raise ValueError(f"Modo de cor desconhecido: {color_mode!r} (use {COLOR_MODES})")
    if status:
        return STATUS_FILL.get(status, UNIFORM_FILL)
    if color_mode == 'por-provincia':
        return PROVINCE_PALETTE.get(provincia, PROVINCE_FALLBACK)
    return coloring.get(region_id, UNIFORM_FILL)


def resolve_opacity(provincia: str, selected_provinces: Iterable[str],
                    status: Optional[str] = None) -> float:
    if status:
        return OPACITY_STATUS
    if provincia not in set(selected_provinces):
        return OPACITY_DIMMED
    return OPACITY_DEFAULT


def resolve_fills(features: Iterable[Any], coloring: Mapping[str, str], color_mode: str,
                  selected_provinces: Iterable[str] = (),
                  statuses: Optional[Mapping[str, str]] = None,
                  info_by_id: Optional[Mapping[str, Mapping]] = None) -> Dict[str, Dict]:
    """
    Calcula o estilo de cada feature.

    Returns:
        Dict id -> {'fill', 'opacity', 'dimmed', 'provincia'}
    """
    statuses = statuses or {}
    info_by_id = info_by_id or {}
    selected = set(selected_provinces)

    styles = {}
    for feature in features:
        region_id = feature_region_id(feature)
        info = info_by_id.get(region_id) or {}
        provincia = info.get('provincia')
        if provincia is None:
            provincia = _get(_get(feature, 'properties') or {}, 'provincia')
        provincia = '' if provincia is None else str(provincia)

        status = statuses.get(region_id)
        styles[region_id] = {
            'fill': resolve_fill(region_id, color_mode, coloring, provincia, status),
            'opacity': resolve_opacity(provincia, selected, status),
            'dimmed': not status and provincia not in selected,
            'provincia': provincia,
        }
    return styles
