# geocolor/core/adjacency.py
import logging
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence, Set

import networkx as nx

from geocolor.config import VERTEX_PRECISION
from geocolor.core.geometry import (
    BoundingBox,
    VertexKey,
    bbox_of,
    bboxes_intersect,
    region_points,
    resolve_region_id,
    vertex_keys,
)

logger = logging.getLogger(__name__)

Adjacency = Dict[str, Set[str]]


def build_adjacency(regions: Sequence[Any], precision: int = VERTEX_PRECISION) -> Adjacency:
    """
    Constrói o grafo de vizinhança entre regiões.

    Para cada par (i, j) com i < j:
    1. Descarta o par se as caixas envolventes não se intersectam.
    2. Caso contrário, arredonda os vértices das duas geometrias para
       ``precision`` casas decimais e considera as regiões vizinhas se
       compartilham pelo menos um vértice.

    A detecção por vértice compartilhado é uma aproximação: fronteiras que se
    tocam sem um vértice em comum (p.ex. após simplificação independente)
    não são detectadas.

    Args:
        regions: Lista de features/geometrias.
        precision: Casas decimais usadas na comparação de vértices.

    Returns:
        Dict id -> set de ids vizinhos. Todo id de entrada tem uma entrada,
        possivelmente vazia. O grafo é simétrico.
    """
    n = len(regions)
    ids: List[str] = [resolve_region_id(region, i) for i, region in enumerate(regions)]
    points = [region_points(region) for region in regions]
    bboxes: List[BoundingBox] = [bbox_of(p) for p in points]
    keys: List[Optional[Set[VertexKey]]] = [None] * n

    adjacency: Adjacency = {}
    for region_id in ids:
        adjacency.setdefault(region_id, set())

    duplicates = [rid for rid, count in Counter(ids).items() if count > 1]
    if duplicates:
        logger.warning(f"{len(duplicates)} ids duplicados na entrada (ex.: {duplicates[:5]}). "
                       f"As vizinhanças serão mescladas.")

    candidates = 0
    for i in range(n):
        for j in range(i + 1, n):
            if not bboxes_intersect(bboxes[i], bboxes[j]):
                continue
            candidates += 1

            id_a, id_b = ids[i], ids[j]
            if id_a == id_b:
                continue

            if keys[i] is None:
                keys[i] = vertex_keys(points[i], precision)
            if keys[j] is None:
                keys[j] = vertex_keys(points[j], precision)

            if not keys[i].isdisjoint(keys[j]):
                adjacency[id_a].add(id_b)
                adjacency[id_b].add(id_a)
                logger.debug(f"Vizinhos: {id_a} <-> {id_b}")

    edges = sum(len(nbrs) for nbrs in adjacency.values()) // 2
    logger.info(f"Grafo de adjacência construído: {len(adjacency)} regiões, "
                f"{candidates} pares candidatos, {edges} conexões.")
    return adjacency


def max_degree(adjacency: Adjacency) -> int:
    """Maior número de vizinhos de uma região (0 para grafo vazio)."""
    return max((len(nbrs) for nbrs in adjacency.values()), default=0)


def is_symmetric(adjacency: Adjacency) -> bool:
    for region_id, nbrs in adjacency.items():
        for nb in nbrs:
            if region_id not in adjacency.get(nb, ()):
                return False
    return True


def to_networkx(adjacency: Adjacency) -> nx.Graph:
    """Converte o dicionário de adjacência num ``nx.Graph`` (útil para diagnósticos)."""
    G = nx.Graph()
    G.add_nodes_from(adjacency)
    for region_id, nbrs in adjacency.items():
        for nb in nbrs:
            G.add_edge(region_id, nb)
    return G


def degree_summary(adjacency: Adjacency) -> Dict[str, float]:
    """Resumo do grafo: nós, arestas, grau máximo/médio, componentes e regiões isoladas."""
    G = to_networkx(adjacency)
    n = G.number_of_nodes()
    return {
        'nodes': n,
        'edges': G.number_of_edges(),
        'max_degree': max_degree(adjacency),
        'mean_degree': (2 * G.number_of_edges() / n) if n else 0.0,
        'components': nx.number_connected_components(G) if n else 0,
        'isolated': nx.number_of_isolates(G),
    }
