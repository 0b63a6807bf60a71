#!/usr/bin/env python3
"""
Script para pré-calcular a coloração dos municípios.

Gera dois caches em data/02_cache/:
- coloring_graph.json: coloração gulosa pelo grafo de adjacência
  (vizinhos com cores diferentes sempre que a paleta permite).
- coloring_hash.json: coloração determinística por hash do id
  (sem garantia de vizinhança, estável entre execuções).

A camada de renderização lê esses arquivos em vez de recalcular a coloração.
"""

import logging
import sys
from pathlib import Path

# Adicionar raiz do projeto ao path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.append(str(PROJECT_ROOT))

from geocolor.config import FILES, setup_logging
from geocolor.pipeline.precompute import ColoringPrecomputer

setup_logging()
logger = logging.getLogger("GeoColor.Precompute")


def main():
    """Função principal."""
    logger.info("=" * 80)
    logger.info("PRÉ-CÁLCULO DE COLORAÇÃO DE MUNICÍPIOS")
    logger.info("=" * 80)

    source = FILES['municipios']

    # === FASE 1: COLORAÇÃO POR GRAFO ===
    logger.info("FASE 1: Coloração por grafo de adjacência...")
    graph_precomputer = ColoringPrecomputer(mode='graph', id_column='id', name_column='name')
    if not graph_precomputer.run(source, FILES['coloring_graph'], FILES['coloring_report']):
        return 1

    # === FASE 2: COLORAÇÃO POR HASH ===
    # Reaproveita as features já carregadas
    logger.info("FASE 2: Coloração determinística por hash...")
    hash_precomputer = ColoringPrecomputer(mode='hash')
    hash_precomputer.compute(graph_precomputer.features)
    if not hash_precomputer.save_coloring(FILES['coloring_hash']):
        return 1

    logger.info("=" * 80)
    logger.info("✓ PRÉ-CÁLCULO CONCLUÍDO COM SUCESSO")
    logger.info(f"   • {FILES['coloring_graph'].name}")
    logger.info(f"   • {FILES['coloring_hash'].name}")
    logger.info(f"   • {FILES['coloring_report'].name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
