from pathlib import Path

import geopandas as gpd
import pandas as pd

from coauthor_map.config import LAT_COL, LOCALITY_COL, LON_COL, MANUSCRIPT_COL


def _require_file(path):
    path = Path(path)
    if not path.exists() or path.stat().st_size == 0:
        raise FileNotFoundError(f"Input file not found/empty: {path}")
    return path


def load_participation(path) -> pd.DataFrame:
    """
    Liest die Participation-Tabelle (Manuskripte x Lokalitäten).
    Eine optionale Manuskript-Spalte wird zum Index, Kopfzeilen werden getrimmt.
    """
    df = pd.read_csv(_require_file(path))
    df.columns = [str(c).strip() for c in df.columns]
    if MANUSCRIPT_COL in df.columns:
        df = df.set_index(MANUSCRIPT_COL)
    return df


def load_coordinates(path) -> pd.DataFrame:
    """Liest die Koordinaten (eine Zeile pro Lokalität, gleiche Reihenfolge wie die Spalten)"""
    path = _require_file(path)
    # alles als Text lesen, sonst verlieren Gemeindecodes wie 01001 ihre führenden Nullen
    df = pd.read_csv(path, dtype=str)
    df.columns = [str(c).strip() for c in df.columns]

    # Basic checks
    missing = [c for c in (LON_COL, LAT_COL) if c not in df.columns]
    if missing:
        raise ValueError(f"In {path} the columns {missing} are missing.")

    for col, limit in ((LON_COL, 180.0), (LAT_COL, 90.0)):
        vals = pd.to_numeric(df[col], errors="coerce")
        bad = vals.isna()
        if bad.any():
            raise ValueError(f"In {path} column '{col}' has non-numeric values in rows {df.index[bad].tolist()}.")
        out = vals.abs() > limit
        if out.any():
            raise ValueError(f"In {path} column '{col}' is out of range (|{col}| <= {limit:g}) "
                             f"in rows {df.index[out].tolist()}.")
        df[col] = vals.astype(float)
    return df


def check_alignment(participation: pd.DataFrame, coordinates: pd.DataFrame) -> pd.DataFrame:
    """
    Prüft, dass jede Lokalität genau ein Koordinatenpaar hat (kein stilles Abschneiden).
    Gibt die Koordinaten mit den Lokalitätsnamen als Index zurück.
    """
    n_loc = participation.shape[1]
    n_coord = len(coordinates)
    if n_loc != n_coord:
        raise ValueError(f"Dimension mismatch: {n_loc} locality columns but {n_coord} coordinate rows.")

    localities = [str(c) for c in participation.columns]
    if LOCALITY_COL in coordinates.columns:
        names = coordinates[LOCALITY_COL].astype(str).str.strip().tolist()
        diff = [(i, a, b) for i, (a, b) in enumerate(zip(localities, names)) if a != b]
        if diff:
            i, a, b = diff[0]
            raise ValueError(f"Locality name mismatch at position {i}: column '{a}' vs coordinate row '{b}' "
                             f"({len(diff)} mismatches).")

    out = coordinates[[LON_COL, LAT_COL]].copy()
    out.index = pd.Index(participation.columns)
    return out


def load_basemap(path) -> gpd.GeoDataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Basemap not found under {path}")
    return gpd.read_file(path)


def load_adjacency(path) -> pd.DataFrame:
    """Liest eine gespeicherte Adjazenzmatrix (Index und Spalten = Lokalitäten)"""
    path = _require_file(path)
    df = pd.read_csv(path, index_col=0, dtype=str)
    df.index = df.index.astype(str)
    df.columns = [str(c) for c in df.columns]
    if list(df.index) != list(df.columns):
        raise ValueError(f"{path} is not a square locality x locality matrix.")
    return df.astype("int64")
