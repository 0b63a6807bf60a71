# geocolor/core/coloring.py
"""
Coloração gulosa do grafo de adjacência.

As regiões são processadas em ordem decrescente de grau (empates pela ordem
de inserção). Cada região recebe uma cor da paleta que nenhum vizinho já
colorido usa. Se todas as cores estiverem proibidas, reutiliza a cor menos
usada: é uma degradação aceita, não um erro.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from geocolor.config import DEFAULT_STRATEGY, VERTEX_PRECISION
from geocolor.core.adjacency import Adjacency, build_adjacency, max_degree
from geocolor.interface.palette import get_palette

logger = logging.getLogger(__name__)

# 'balanced': cor permitida menos usada no mapa (empate pela ordem da paleta)
# 'first':    primeira cor permitida da paleta
STRATEGIES = ('balanced', 'first')


def degree_order(adjacency: Adjacency) -> List[str]:
    """Ids ordenados por grau decrescente; ``sorted`` é estável, então empates mantêm a ordem de inserção."""
    return sorted(adjacency, key=lambda region_id: -len(adjacency[region_id]))


def _least_used(indices, usage: List[int]) -> int:
    return min(indices, key=lambda k: (usage[k], k))


def assign_graph_colors(adjacency: Adjacency,
                        palette: Optional[Sequence[str]] = None,
                        strategy: str = DEFAULT_STRATEGY) -> Dict[str, str]:
    """
    Atribui uma cor da paleta a cada região do grafo.

    Args:
        adjacency: Dict id -> set de vizinhos (saída de ``build_adjacency``).
        palette: Lista ordenada de cores hex. ``None`` usa ``get_palette()``.
        strategy: 'balanced' (padrão) ou 'first'.

    Returns:
        Dict id -> cor. Vizinhos recebem cores diferentes sempre que a paleta
        tem mais cores que o grau máximo do grafo.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Estratégia de coloração desconhecida: {strategy!r} (use {STRATEGIES})")

    palette = list(get_palette() if palette is None else palette)
    if not adjacency:
        return {}
    if not palette:
        logger.warning("Paleta vazia: nenhuma cor atribuída.")
        return {}

    usage = [0] * len(palette)
    all_indices = range(len(palette))
    color_by_id: Dict[str, str] = {}
    exhausted = 0

    for region_id in degree_order(adjacency):
        forbidden = {color_by_id[nb] for nb in adjacency[region_id] if nb in color_by_id}
        candidates = [k for k in all_indices if palette[k] not in forbidden]

        if not candidates:
            chosen = _least_used(all_indices, usage)
            exhausted += 1
            logger.debug(f"Paleta esgotada para {region_id}: reutilizando {palette[chosen]}")
        elif strategy == 'first':
            chosen = candidates[0]
        else:
            chosen = _least_used(candidates, usage)

        usage[chosen] += 1
        color_by_id[region_id] = palette[chosen]

    if exhausted:
        logger.warning(f"{exhausted} regiões reutilizaram uma cor de vizinho "
                       f"(paleta de {len(palette)} cores, grau máximo {max_degree(adjacency)}).")

    logger.info(f"Coloração concluída: {len(color_by_id)} regiões, "
                f"{len(set(color_by_id.values()))} cores usadas.")
    return color_by_id


def assign_colors(regions: Sequence[Any],
                  palette: Optional[Sequence[str]] = None,
                  strategy: str = DEFAULT_STRATEGY,
                  precision: int = VERTEX_PRECISION) -> Dict[str, str]:
    """Constrói a adjacência das regiões e aplica a coloração gulosa."""
    adjacency = build_adjacency(regions, precision=precision)
    return assign_graph_colors(adjacency, palette, strategy=strategy)


def find_conflicts(adjacency: Adjacency, coloring: Dict[str, str]) -> List[Tuple[str, str]]:
    """Lista os pares de vizinhos (a < b) que receberam a mesma cor."""
    conflicts = []
    for region_id, nbrs in adjacency.items():
        color = coloring.get(region_id)
        if color is None:
            continue
        for nb in nbrs:
            if region_id < nb and coloring.get(nb) == color:
                conflicts.append((region_id, nb))
    return sorted(conflicts)
