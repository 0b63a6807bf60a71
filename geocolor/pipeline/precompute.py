# geocolor/pipeline/precompute.py
"""
Pré-cálculo da coloração de municípios.

Lê o arquivo geográfico, calcula a coloração e salva o resultado em JSON para
que a camada de renderização não precise recalculá-la a cada abertura.
"""
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd

from geocolor.config import DEFAULT_STRATEGY
from geocolor.core.adjacency import Adjacency, degree_summary
from geocolor.core.coloring import find_conflicts
from geocolor.core.manager import ColoringManager
from geocolor.utils.data_loader import RegionLoader


def usage_report(coloring: Dict[str, str], palette: Sequence[str]) -> pd.DataFrame:
    """Tabela com quantas regiões usam cada cor da paleta (inclusive cores não usadas)."""
    counts = pd.Series(list(coloring.values()), dtype=object).value_counts()
    df = pd.DataFrame({'color': list(palette)})
    df['regions'] = df['color'].map(counts).fillna(0).astype(int)
    total = len(coloring)
    df['share'] = df['regions'] / total if total else 0.0
    return df


def load_coloring_cache(path: Union[str, Path]) -> Dict[str, str]:
    """Carrega o mapeamento id -> cor salvo por ``ColoringPrecomputer.save_coloring``."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Cache de coloração não encontrado: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        payload = json.load(f)
    return {str(k): v for k, v in payload.get('coloring', {}).items()}


class ColoringPrecomputer:
    def __init__(self, palette: Optional[Sequence[str]] = None, mode: str = 'graph',
                 strategy: str = DEFAULT_STRATEGY, id_column: Optional[str] = None,
                 name_column: Optional[str] = None, manager: Optional[ColoringManager] = None):
        # Um manager externo permite reaproveitar o cache de quem já coloriu as regiões
        self.manager = manager or ColoringManager(palette=palette, mode=mode, strategy=strategy)
        self.id_column = id_column
        self.name_column = name_column
        self.features: List[Dict] = []
        self.adjacency: Optional[Adjacency] = None
        self.coloring: Dict[str, str] = {}
        self.logger = logging.getLogger("GeoColor.Precompute")

    def load(self, source: Union[str, Path]) -> List[Dict]:
        self.features = RegionLoader.load_features(source, id_column=self.id_column,
                                                   name_column=self.name_column)
        return self.features

    def compute(self, features: Optional[List[Dict]] = None) -> Dict[str, str]:
        """Calcula a coloração; no modo 'graph' também guarda a adjacência para diagnóstico."""
        if features is not None:
            self.features = features

        self.logger.info(f"Calculando coloração ({self.manager.mode}) para {len(self.features)} regiões...")
        self.coloring = self.manager.color_regions(self.features)

        if self.manager.mode == 'graph':
            self.adjacency = self.manager.adjacency
            if self.adjacency is None:
                self.adjacency = self.manager.build_adjacency(self.features)
            summary = degree_summary(self.adjacency)
            conflicts = find_conflicts(self.adjacency, self.coloring)
            self.logger.info(f"  ✓ Grau máximo {summary['max_degree']}, "
                             f"{summary['isolated']} regiões isoladas, {len(conflicts)} conflitos")
        return self.coloring

    def save_coloring(self, output_path: Union[str, Path]) -> bool:
        """Salva a coloração em JSON com metadados."""
        output_path = Path(output_path)
        self.logger.info(f"Salvando cache de coloração em {output_path}...")

        payload = {
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                "mode": self.manager.mode,
                "strategy": self.manager.strategy,
                "palette": list(self.manager.palette),
                "regions": len(self.coloring),
            },
            "coloring": self.coloring,
        }

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            file_size = output_path.stat().st_size / 1024  # KB
            self.logger.info(f"  ✓ Cache salvo com sucesso ({file_size:.2f} KB)")
            return True
        except OSError as e:
            self.logger.error(f"Erro ao salvar cache: {e}")
            return False

    def save_report(self, report_path: Union[str, Path]) -> bool:
        report_path = Path(report_path)
        try:
            report_path.parent.mkdir(parents=True, exist_ok=True)
            usage_report(self.coloring, self.manager.palette).to_csv(report_path, index=False, sep=';')
            self.logger.info(f"Relatório de uso de cores exportado para {report_path}")
            return True
        except OSError as e:
            self.logger.error(f"Erro ao salvar relatório: {e}")
            return False

    def run(self, source: Union[str, Path], output_path: Union[str, Path],
            report_path: Optional[Union[str, Path]] = None) -> bool:
        """Executa load -> compute -> save. Retorna False em caso de falha (já registrada no log)."""
        try:
            self.load(source)
        except FileNotFoundError as e:
            self.logger.error(f"Arquivo não encontrado: {e}")
            return False
        except Exception as e:
            self.logger.error(f"Erro ao carregar regiões: {type(e).__name__}: {e}")
            return False

        self.compute()
        if not self.save_coloring(output_path):
            return False
        if report_path is not None:
            return self.save_report(report_path)
        return True
