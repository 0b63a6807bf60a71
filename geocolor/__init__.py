"""GeoColor - coloração de mapas de municípios espanhóis."""

__version__ = "0.1.0"
