# geocolor/config.py
from pathlib import Path
import logging
import sys

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"
RAW_DIR = DATA_DIR / "01_raw"
CACHE_DIR = DATA_DIR / "02_cache"

FILES = {
    # Inputs (coloque aqui o GeoJSON/Shapefile de municípios)
    "municipios": RAW_DIR / "es_municipios.geojson",
    "provincias": RAW_DIR / "es_provincias.geojson",

    # Outputs
    "coloring_graph": CACHE_DIR / "coloring_graph.json",
    "coloring_hash": CACHE_DIR / "coloring_hash.json",
    "coloring_report": CACHE_DIR / "coloring_report.csv",
}

# Casas decimais usadas para comparar vértices entre regiões
VERTEX_PRECISION = 6

# Estratégia padrão do algoritmo guloso ('balanced' ou 'first')
DEFAULT_STRATEGY = "balanced"

# Número máximo de colorações guardadas no ColorCache
CACHE_MAXSIZE = 128


def setup_logging(level=logging.INFO):
    """Configura logging centralizado para o projeto."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )
    return logging.getLogger("GeoColor")
