import igraph as ig
import leidenalg
import networkx as nx
import numpy as np
import pandas as pd

from coauthor_map.config import LAT_COL, LON_COL, SEED


def build_graph(adjacency: pd.DataFrame, coordinates: pd.DataFrame) -> nx.Graph:
    """
    Ungerichteter Graph aus der Adjazenzmatrix.
    Alle Lokalitäten werden Knoten (auch isolierte), Koordinaten als lon/lat-Attribute.
    """
    if list(adjacency.index) != list(coordinates.index):
        raise ValueError("Adjacency and coordinates are not indexed by the same localities.")

    G = nx.Graph()
    for name, row in coordinates.iterrows():
        G.add_node(name, lon=float(row[LON_COL]), lat=float(row[LAT_COL]))

    values = adjacency.to_numpy()
    names = list(adjacency.index)
    iu, ju = np.nonzero(np.triu(values, k=1))
    G.add_weighted_edges_from((names[i], names[j], int(values[i, j])) for i, j in zip(iu, ju))
    return G


def node_positions(G):
    return {n: (d["lon"], d["lat"]) for n, d in G.nodes(data=True)}


def compute_global_metrics(G):
    """Globale und LCC-Kennzahlen"""
    components = sorted(nx.connected_components(G), key=len, reverse=True)
    lcc_nodes = components[0] if components else set()
    H = G.subgraph(lcc_nodes).copy()

    def scope(label, Gx, n_components):
        n = Gx.number_of_nodes()
        return {
            "scope": label,
            "nodes": n,
            "edges": Gx.number_of_edges(),
            "isolated": nx.number_of_isolates(Gx),
            "total_weight": int(Gx.size(weight="weight")),
            "density": nx.density(Gx) if n > 1 else np.nan,
            "components": n_components,
        }

    metrics = pd.DataFrame([
        scope("global", G, len(components)),
        scope("lcc", H, 1 if lcc_nodes else 0),
    ])
    return H, metrics


def weighted_degree(G) -> pd.DataFrame:
    degree = dict(G.degree())
    strength = dict(G.degree(weight="weight"))
    df = pd.DataFrame({
        "locality": list(G.nodes()),
        "degree": [degree[n] for n in G.nodes()],
        "strength": [strength[n] for n in G.nodes()],
    })
    return df.sort_values(["strength", "degree"], ascending=False, kind="stable").reset_index(drop=True)


def community_analysis(G):
    """
    Leiden-Communities (gewichtet) über die nicht-isolierten Lokalitäten.
    Isolierte Lokalitäten bekommen je eine eigene Community.
    Gibt Mapping Lokalität -> Community und eine Zusammenfassung pro Community zurück.
    """
    connected = [n for n in G.nodes() if G.degree(n) > 0]
    membership = {}

    if connected:
        # NetworkX -> iGraph conversion
        H = G.subgraph(connected)
        mapping = {n: i for i, n in enumerate(H.nodes())}
        rev_mapping = {i: n for n, i in mapping.items()}
        edges = [(mapping[u], mapping[v]) for u, v in H.edges()]
        g = ig.Graph(n=len(mapping), edges=edges, directed=False)
        g.es["weight"] = [H[u][v]["weight"] for u, v in H.edges()]

        partition = leidenalg.find_partition(
            g, leidenalg.ModularityVertexPartition, weights="weight", seed=SEED
        )
        for i, label in enumerate(partition.membership):
            membership[rev_mapping[i]] = label

    next_id = max(membership.values(), default=-1) + 1
    for n in G.nodes():
        if n not in membership:
            membership[n] = next_id
            next_id += 1

    rows = []
    for comm_id in sorted(set(membership.values())):
        members = [n for n in G.nodes() if membership[n] == comm_id]
        Gc = G.subgraph(members)
        rows.append({
            "community": comm_id,
            "size": len(members),
            "internal_weight": int(Gc.size(weight="weight")),
            "members": ";".join(str(m) for m in members),
        })
    summary = pd.DataFrame(rows).sort_values("size", ascending=False, kind="stable").reset_index(drop=True)
    return membership, summary


def membership_table(membership) -> pd.DataFrame:
    return pd.DataFrame({"locality": list(membership), "community": list(membership.values())})
