# geocolor/interface/palette.py

"""
Configuração centralizada de paletas de cores para o GeoColor.
Edite a lista CUSTOM_PALETTE abaixo para alterar as cores do mapa.
"""
import re
from typing import List, Sequence

# Paleta padrão (tons pastel / vibrantes) - Mantida como fallback
DEFAULT_PALETTE = [
    '#ff6b6b', '#f59e0b', '#f97316', '#f472b6', '#60a5fa',
    '#34d399', '#7c3aed', '#06b6d4', '#fbbf24', '#a78bfa'
]

# ==============================================================================
# ÁREA DE PERSONALIZAÇÃO DO USUÁRIO
# ==============================================================================
# Adicione/Remova cores hexadecimais nesta lista.
# O sistema usará estas cores para pintar os municípios vizinhos.
# Quanto mais cores, menor a chance de repetir cores em vizinhos.

CUSTOM_PALETTE = [
    # Exemplo: '#FF0000', '#00FF00', '#0000FF'
    # Se mantiver vazia ou comentar, o sistema usará a DEFAULT_PALETTE
]

# ==============================================================================

# Cores fixas por província (modo 'por-provincia')
PROVINCE_PALETTE = {
    'toledo': '#818cf8',
    'ciudad-real': '#f97316',
    'cuenca': '#22d3ee',
    'guadalajara': '#8b5cf6',
    'albacete': '#34d399',
}
PROVINCE_FALLBACK = '#fbbf24'

UNIFORM_FILL = '#c7d2fe'

# Cores de estado das respostas do quiz
STATUS_FILL = {
    'correcta': '#22c55e',
    'fallida': '#f87171',
    'pendiente': UNIFORM_FILL,
}

_HEX_COLOR = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')


def get_palette() -> List[str]:
    """Retorna a paleta ativa (Customizada se houver, senão Padrão)."""
    if CUSTOM_PALETTE:
        return list(CUSTOM_PALETTE)
    return list(DEFAULT_PALETTE)


def validate_palette(palette: Sequence[str]) -> List[str]:
    """
    Valida uma paleta de cores hexadecimais.

    Returns:
        A paleta como lista.

    Raises:
        ValueError: se alguma entrada não for uma cor hex (#rgb, #rrggbb ou
            #rrggbbaa) ou se houver cores repetidas.
    """
    palette = list(palette)
    invalid = [c for c in palette if not isinstance(c, str) or not _HEX_COLOR.match(c)]
    if invalid:
        raise ValueError(f"Cores inválidas na paleta: {invalid}")

    seen = set()
    repeated = []
    for color in palette:
        key = color.lower()
        if key in seen:
            repeated.append(color)
        seen.add(key)
    if repeated:
        raise ValueError(f"Cores repetidas na paleta: {repeated}")
    return palette
