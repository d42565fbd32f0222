"""Co-authorship network between municipalities, drawn on a world map."""

from coauthor_map.network import create_network, adjacency_to_edges

__all__ = ["create_network", "adjacency_to_edges"]
