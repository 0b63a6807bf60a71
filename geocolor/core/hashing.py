# geocolor/core/hashing.py
"""
Coloração determinística por hash do identificador.

Não usa adjacência: duas regiões vizinhas podem receber a mesma cor. Em troca
o resultado depende apenas do conjunto de ids e da paleta, o que evita que as
cores "pisquem" quando o mesmo conjunto é recolorido.
"""
import logging
from typing import Dict, Iterable, Optional, Sequence

from geocolor.interface.palette import get_palette

logger = logging.getLogger(__name__)

_MASK_32 = 0xFFFFFFFF


def stable_hash(value: str) -> int:
    """
    Hash polinomial ``h = h * 31 + code``, limitado a 32 bits sem sinal.

    Itera sobre unidades UTF-16, de modo que caracteres fora do BMP contam
    como dois códigos (par substituto).
    """
    h = 0
    data = str(value).encode('utf-16-le', 'surrogatepass')
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        h = (h * 31 + code) & _MASK_32
    return h


def hash_order(ids: Iterable[str]) -> list:
    """Ids únicos ordenados por (hash, id), independente da ordem de entrada."""
    unique = {str(region_id) for region_id in ids}
    return sorted(unique, key=lambda region_id: (stable_hash(region_id), region_id))


def assign_hash_colors(ids: Iterable[str],
                       palette: Optional[Sequence[str]] = None) -> Dict[str, str]:
    """Atribui ``palette[posição % len(palette)]`` seguindo a ordem de ``hash_order``."""
    palette = list(get_palette() if palette is None else palette)
    if not palette:
        logger.warning("Paleta vazia: nenhuma cor atribuída.")
        return {}

    ordered = hash_order(ids)
    coloring = {region_id: palette[i % len(palette)] for i, region_id in enumerate(ordered)}
    logger.debug(f"Coloração por hash: {len(coloring)} ids, {len(palette)} cores.")
    return coloring
