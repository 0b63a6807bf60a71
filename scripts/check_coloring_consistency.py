#!/usr/bin/env python3
"""
Script para verificar a consistência da coloração pré-calculada.
Verifica se municípios vizinhos receberam cores diferentes e se todo
município do arquivo geográfico tem uma cor.
"""

import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.append(str(PROJECT_ROOT))

from geocolor.config import FILES, setup_logging
from geocolor.core.adjacency import build_adjacency, degree_summary
from geocolor.core.coloring import find_conflicts
from geocolor.pipeline.precompute import load_coloring_cache
from geocolor.utils.data_loader import RegionLoader

setup_logging()
logger = logging.getLogger("GeoColor.Check")


def main():
    try:
        features = RegionLoader.load_features(FILES['municipios'], id_column='id', name_column='name')
        coloring = load_coloring_cache(FILES['coloring_graph'])
    except FileNotFoundError as e:
        logger.error(f"❌ {e}")
        logger.info("Execute primeiro: python scripts/s01_precompute_coloring.py")
        return 1

    adjacency = build_adjacency(features)
    summary = degree_summary(adjacency)
    logger.info(f"Regiões: {summary['nodes']} | Conexões: {summary['edges']} | "
                f"Grau máximo: {summary['max_degree']} | Componentes: {summary['components']}")

    missing = [rid for rid in adjacency if rid not in coloring]
    conflicts = find_conflicts(adjacency, coloring)

    if missing:
        logger.warning(f"⚠️ {len(missing)} regiões sem cor no cache (ex.: {missing[:10]})")
    if conflicts:
        logger.warning(f"⚠️ {len(conflicts)} pares de vizinhos com a mesma cor:")
        for a, b in conflicts[:20]:
            logger.warning(f"   {a} <-> {b}: {coloring[a]}")

    if not missing and not conflicts:
        logger.info("✅ Coloração consistente: nenhum conflito encontrado.")
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
