from coauthor_map.config import ADJACENCY_CSV, COORDINATES_CSV, EDGES_CSV, PARTICIPATION_CSV, RESULTS
from coauthor_map.load import check_alignment, load_coordinates, load_participation
from coauthor_map.network import adjacency_to_edges, create_network

RESULTS.mkdir(parents=True, exist_ok=True)

# Load participation table and coordinates, fail before building anything
participation = load_participation(PARTICIPATION_CSV)
coordinates = check_alignment(participation, load_coordinates(COORDINATES_CSV))

adjacency = create_network(participation)
adjacency.to_csv(ADJACENCY_CSV)

edges_df = adjacency_to_edges(adjacency)
edges_df.to_csv(EDGES_CSV, index=False)

isolated = int((adjacency.sum(axis=1) == 0).sum())
print(f"geschrieben: {ADJACENCY_CSV} | Manuskripte: {len(participation)} | Lokalitäten: {len(coordinates)} | isoliert: {isolated}")
print(f"geschrieben: {EDGES_CSV} | Kanten: {len(edges_df)}")
