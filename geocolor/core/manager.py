# geocolor/core/manager.py
import logging
from typing import Any, Dict, Optional, Sequence

from geocolor.config import DEFAULT_STRATEGY, VERTEX_PRECISION
from geocolor.core.adjacency import Adjacency, build_adjacency
from geocolor.core.cache import ColorCache
from geocolor.core.coloring import STRATEGIES, assign_graph_colors
from geocolor.core.geometry import bbox_of, region_points, resolve_region_id, vertex_keys
from geocolor.core.hashing import assign_hash_colors
from geocolor.interface.palette import get_palette, validate_palette

MODES = ('graph', 'hash')


class ColoringManager:
    """
    Orquestrador da coloração de mapas.
    Escolhe o algoritmo (grafo de adjacência ou hash) e memoriza o resultado
    por conjunto de regiões num ``ColorCache``.
    """

    def __init__(self, palette: Optional[Sequence[str]] = None, mode: str = 'graph',
                 strategy: str = DEFAULT_STRATEGY, theme: str = "default",
                 cache: Optional[ColorCache] = None, precision: int = VERTEX_PRECISION):
        if mode not in MODES:
            raise ValueError(f"Modo de coloração desconhecido: {mode!r} (use {MODES})")
        if strategy not in STRATEGIES:
            raise ValueError(f"Estratégia de coloração desconhecida: {strategy!r} (use {STRATEGIES})")

        self.logger = logging.getLogger("GeoColor.Manager")
        self.palette = validate_palette(palette) if palette is not None else get_palette()
        self.mode = mode
        self.strategy = strategy
        self.theme = theme
        self.precision = precision
        self.cache = cache if cache is not None else ColorCache()
        # Última adjacência calculada (modo 'graph')
        self.adjacency: Optional[Adjacency] = None

    def region_signature(self, regions: Sequence[Any]) -> tuple:
        """
        Assinatura do conjunto de regiões usada como chave de cache.

        No modo 'hash' só importa o conjunto de ids. No modo 'graph' a ordem e a
        geometria também importam: cada região contribui com id, caixa envolvente
        e o conjunto de vértices arredondados na precisão do manager, que é
        exatamente o que a detecção de vizinhança compara.
        """
        if self.mode == 'hash':
            return tuple(sorted({resolve_region_id(r, i) for i, r in enumerate(regions)}))

        signature = [('precision', self.precision)]
        for i, region in enumerate(regions):
            points = region_points(region)
            signature.append((resolve_region_id(region, i), bbox_of(points),
                              frozenset(vertex_keys(points, self.precision))))
        return tuple(signature)

    def build_adjacency(self, regions: Sequence[Any]) -> Adjacency:
        return build_adjacency(regions, precision=self.precision)

    def color_regions(self, regions: Sequence[Any]) -> Dict[str, str]:
        """Retorna o mapeamento id -> cor para as regiões, reutilizando o cache quando possível."""
        key = self.cache.make_key(self.palette, self.region_signature(regions),
                                  theme=self.theme, strategy=f"{self.mode}:{self.strategy}")
        cached = self.cache.get(key)
        if cached is not None:
            if self.mode == 'graph':
                self.adjacency = self.cache.get_adjacency(key)
                if self.adjacency is None:
                    self.adjacency = self.build_adjacency(regions)
            self.logger.debug(f"Coloração reaproveitada do cache ({len(cached)} regiões).")
            return cached

        if self.mode == 'hash':
            ids = [resolve_region_id(r, i) for i, r in enumerate(regions)]
            coloring = assign_hash_colors(ids, self.palette)
        else:
            self.adjacency = self.build_adjacency(regions)
            coloring = assign_graph_colors(self.adjacency, self.palette, strategy=self.strategy)

        self.cache.put(key, coloring, adjacency=self.adjacency if self.mode == 'graph' else None)
        self.logger.info(f"Coloração ({self.mode}) calculada para {len(coloring)} regiões.")
        return coloring
