import pandas as pd

from coauthor_map.config import (ADJACENCY_CSV, BASEMAP_SHP, COORDINATES_CSV, FIGDIR,
                                 PARTICIPATION_CSV, R_METRICS)
from coauthor_map.graph import build_graph
from coauthor_map.load import check_alignment, load_adjacency, load_basemap, load_coordinates, load_participation
from coauthor_map.plot import plot_network_map


def load_communities(G):
    path = R_METRICS / "community_membership.csv"
    if not path.exists():
        return None
    df = pd.read_csv(path, dtype={"locality": str})
    membership = dict(zip(df["locality"], df["community"]))
    missing = [n for n in G.nodes() if str(n) not in membership]
    if missing:
        raise ValueError(f"{path} has no community for {missing}; run 02_analysis.py again.")
    return {n: int(membership[str(n)]) for n in G.nodes()}


def main():
    FIGDIR.mkdir(parents=True, exist_ok=True)
    participation = load_participation(PARTICIPATION_CSV)
    coordinates = check_alignment(participation, load_coordinates(COORDINATES_CSV))
    adjacency = load_adjacency(ADJACENCY_CSV)

    G = build_graph(adjacency, coordinates)
    world = load_basemap(BASEMAP_SHP)
    out = plot_network_map(G, world, FIGDIR / "network_map.png", communities=load_communities(G))
    print(f"Fertige Karte unter {out.resolve()}")

if __name__ == "__main__":
    main()
