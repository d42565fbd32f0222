import os
from pathlib import Path

# Paths
DATA_DIR    = Path(os.environ.get("COAUTHOR_DATA_DIR", "./data/raw"))
RESULTS     = Path(os.environ.get("COAUTHOR_RESULTS_DIR", "./data/results"))
FIGDIR      = Path(os.environ.get("COAUTHOR_FIG_DIR", "./outputs/figures"))

PARTICIPATION_CSV = DATA_DIR / "participation.csv"   # manuscripts x municipalities
COORDINATES_CSV   = DATA_DIR / "coordinates.csv"     # municipality, longitude, latitude
BASEMAP_SHP       = Path(os.environ.get("COAUTHOR_BASEMAP", str(DATA_DIR / "world" / "world.shp")))

ADJACENCY_CSV = RESULTS / "adjacency.csv"
EDGES_CSV     = RESULTS / "edges.csv"
R_METRICS     = RESULTS / "metrics"

# Column names
MANUSCRIPT_COL = "manuscript"     # optional id column in PARTICIPATION_CSV
LOCALITY_COL   = "municipality"   # optional name column in COORDINATES_CSV
LON_COL        = "longitude"
LAT_COL        = "latitude"

# Parameter
SEED = 42
