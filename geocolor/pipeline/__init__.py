from .precompute import ColoringPrecomputer, load_coloring_cache, usage_report

__all__ = ['ColoringPrecomputer', 'load_coloring_cache', 'usage_report']
