from coauthor_map.config import ADJACENCY_CSV, COORDINATES_CSV, PARTICIPATION_CSV, R_METRICS
from coauthor_map.graph import (build_graph, community_analysis, compute_global_metrics, membership_table,
                                weighted_degree)
from coauthor_map.load import check_alignment, load_adjacency, load_coordinates, load_participation

R_METRICS.mkdir(parents=True, exist_ok=True)


def load_graph():
    participation = load_participation(PARTICIPATION_CSV)
    coordinates = check_alignment(participation, load_coordinates(COORDINATES_CSV))
    adjacency = load_adjacency(ADJACENCY_CSV)
    return build_graph(adjacency, coordinates)


def main():
    G = load_graph()

    H, metrics = compute_global_metrics(G)
    metrics.to_csv(R_METRICS / "metrics_global.csv", index=False, float_format="%.6f")
    print("geschrieben:", R_METRICS / "metrics_global.csv")

    df_deg = weighted_degree(G)
    df_deg.to_csv(R_METRICS / "weighted_degree.csv", index=False)
    print("geschrieben:", R_METRICS / "weighted_degree.csv")

    # Membership immer neu schreiben, auch ohne Kanten (dann nur Singletons)
    if H.number_of_edges() == 0:
        print("Keine Kanten – jede Lokalität bildet eine eigene Community.")

    membership, summary = community_analysis(G)
    membership_table(membership).to_csv(R_METRICS / "community_membership.csv", index=False)
    print("geschrieben:", R_METRICS / "community_membership.csv")
    summary.to_csv(R_METRICS / "community_metrics.csv", index=False)
    print("geschrieben:", R_METRICS / "community_metrics.csv")
    print("Analyse abgeschlossen.")

if __name__=="__main__":
    main()
