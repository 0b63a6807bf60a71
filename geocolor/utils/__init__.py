from .data_loader import RegionLoader
from .slug import slugify

__all__ = ['RegionLoader', 'slugify']
