# geocolor/utils/slug.py
import re
import unicodedata

DEFAULT_SEPARATOR = '-'


def _normalize(value: str) -> str:
    # NFD separa acentos (e o til do ñ) em marcas combinantes, que são descartadas
    decomposed = unicodedata.normalize('NFD', value)
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.lower()


def slugify(value: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Gera um identificador estável a partir de um nome ('Ciudad Real' -> 'ciudad-real')."""
    sep = re.escape(separator)
    slug = re.sub(r'[^a-z0-9]+', separator, _normalize(str(value)))
    slug = re.sub(f'{sep}{{2,}}', separator, slug)
    return re.sub(f'^{sep}|{sep}$', '', slug)
