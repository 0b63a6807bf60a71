from .adjacency import build_adjacency, max_degree, to_networkx
from .cache import ColorCache
from .coloring import assign_colors, assign_graph_colors, find_conflicts
from .hashing import assign_hash_colors, stable_hash
from .manager import ColoringManager

__all__ = [
    'build_adjacency', 'max_degree', 'to_networkx',
    'ColorCache',
    'assign_colors', 'assign_graph_colors', 'find_conflicts',
    'assign_hash_colors', 'stable_hash',
    'ColoringManager',
]
