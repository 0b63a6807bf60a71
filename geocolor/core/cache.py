# geocolor/core/cache.py
import logging
from collections import OrderedDict
from typing import Dict, Hashable, Optional, Sequence, Set, Tuple

from geocolor.config import CACHE_MAXSIZE

CacheKey = Tuple[Hashable, ...]


class ColorCache:
    """
    Cache LRU de colorações, pertencente a quem o cria.

    A chave combina paleta, tema, estratégia e a assinatura do conjunto de
    regiões (ver ``make_key``). Ao ultrapassar ``maxsize`` a entrada usada há
    mais tempo é descartada. ``maxsize=None`` deixa o cache sem limite;
    ``maxsize <= 0`` desativa o armazenamento.

    No modo 'graph' a adjacência usada na coloração é guardada junto, para que
    diagnósticos feitos após um acerto no cache vejam o grafo correto.
    """

    def __init__(self, maxsize: Optional[int] = CACHE_MAXSIZE):
        self.maxsize = maxsize
        self._data: "OrderedDict[CacheKey, Tuple[Dict[str, str], Optional[Dict[str, Set[str]]]]]" = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.logger = logging.getLogger("GeoColor.Cache")

    @staticmethod
    def make_key(palette: Sequence[str], signature: Tuple[Hashable, ...], theme: str = "default",
                 strategy: str = "graph") -> CacheKey:
        """Chave estável: paleta (na ordem recebida), tema, estratégia e assinatura das regiões."""
        return (tuple(palette), theme, strategy, tuple(signature))

    @staticmethod
    def _copy_adjacency(adjacency):
        if adjacency is None:
            return None
        return {region_id: set(nbrs) for region_id, nbrs in adjacency.items()}

    def get(self, key: CacheKey) -> Optional[Dict[str, str]]:
        if key in self._data:
            self._data.move_to_end(key)
            self.hits += 1
            return dict(self._data[key][0])
        self.misses += 1
        return None

    def get_adjacency(self, key: CacheKey) -> Optional[Dict[str, Set[str]]]:
        """Adjacência guardada com a coloração (não conta como acerto/falha)."""
        entry = self._data.get(key)
        if entry is None:
            return None
        return self._copy_adjacency(entry[1])

    def put(self, key: CacheKey, coloring: Dict[str, str],
            adjacency: Optional[Dict[str, Set[str]]] = None):
        if self.maxsize is not None and self.maxsize <= 0:
            return
        self._data[key] = (dict(coloring), self._copy_adjacency(adjacency))
        self._data.move_to_end(key)
        if self.maxsize is not None:
            while len(self._data) > self.maxsize:
                evicted, _ = self._data.popitem(last=False)
                self.logger.debug(f"Entrada removida do cache (LRU): tema={evicted[1]}, estratégia={evicted[2]}")

    def clear(self):
        """Limpa o cache e os contadores."""
        self._data.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self):
        return len(self._data)

    def __contains__(self, key):
        return key in self._data
