import logging

# Importações modulares do pacote geocolor/
from geocolor.config import FILES, setup_logging
from geocolor.core.coloring import find_conflicts
from geocolor.core.manager import ColoringManager
from geocolor.pipeline.precompute import ColoringPrecomputer
from geocolor.utils.data_loader import RegionLoader


class GeoColorApp:
    """
    Orquestrador principal do GeoColor.
    Carrega os municípios, calcula as duas colorações e exporta os caches.
    """
    def __init__(self):
        setup_logging()
        self.logger = logging.getLogger("GeoColor")

        self.features = []
        self.graph_manager = ColoringManager(mode='graph')
        self.hash_manager = ColoringManager(mode='hash')

    def step_0_load_regions(self):
        """Carrega o arquivo geográfico de municípios."""
        self.logger.info("Etapa 0: Carregando municípios...")
        try:
            self.features = RegionLoader.load_features(FILES['municipios'], id_column='id', name_column='name')
            self.logger.info(f"  ✓ {len(self.features)} municípios carregados")
            return True
        except FileNotFoundError as e:
            self.logger.error(f"Arquivo não encontrado: {e}")
            self.logger.error("Verifique se os arquivos estão em data/01_raw/")
            return False

    def step_1_graph_coloring(self):
        """Coloração pelo grafo de adjacência."""
        self.logger.info("Etapa 1: Coloração por grafo de adjacência...")
        coloring = self.graph_manager.color_regions(self.features)
        conflicts = find_conflicts(self.graph_manager.adjacency or {}, coloring)
        self.logger.info(f"  ✓ {len(set(coloring.values()))} cores, {len(conflicts)} conflitos")
        return coloring

    def step_2_hash_coloring(self):
        """Coloração determinística por hash."""
        self.logger.info("Etapa 2: Coloração por hash...")
        return self.hash_manager.color_regions(self.features)

    def step_3_export(self):
        """Exporta os caches JSON e o relatório de uso de cores."""
        self.logger.info("Etapa 3: Exportando caches...")
        graph = ColoringPrecomputer(manager=self.graph_manager)
        graph.compute(self.features)
        hashed = ColoringPrecomputer(manager=self.hash_manager)
        hashed.compute(self.features)
        return (graph.save_coloring(FILES['coloring_graph'])
                and graph.save_report(FILES['coloring_report'])
                and hashed.save_coloring(FILES['coloring_hash']))


# --- Bloco de Execução via Terminal ---
if __name__ == "__main__":
    app = GeoColorApp()

    if app.step_0_load_regions():
        graph_colors = app.step_1_graph_coloring()
        print(f"Grafo: {len(graph_colors)} municípios coloridos.")

        hash_colors = app.step_2_hash_coloring()
        print(f"Hash: {len(hash_colors)} municípios coloridos.")

        if app.step_3_export():
            print("\nPipeline GeoColor finalizado com sucesso!")
