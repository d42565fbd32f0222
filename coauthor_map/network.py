import numpy as np
import pandas as pd


def _count_matrix(participation: pd.DataFrame) -> np.ndarray:
    """
    Prüft die Participation-Tabelle und gibt die Zählwerte als Array zurück.
    Jede fehlgeschlagene Prüfung wirft einen ValueError mit der betroffenen Spalte.
    """
    n_rows, n_cols = participation.shape
    if n_rows == 0 or n_cols == 0:
        raise ValueError(f"Participation table is empty ({n_rows} manuscripts x {n_cols} localities).")
    if n_cols < 2:
        raise ValueError(f"Participation table has a single locality ({participation.columns[0]!r}); "
                         "a network needs at least two.")

    dupes = participation.columns[participation.columns.duplicated()].tolist()
    if dupes:
        raise ValueError(f"Duplicate locality columns: {dupes}")

    for col in participation.columns:
        s = participation[col]
        if (not pd.api.types.is_numeric_dtype(s) or pd.api.types.is_bool_dtype(s)
                or pd.api.types.is_complex_dtype(s)):
            bad = s[pd.to_numeric(s, errors="coerce").isna()]
            sample = bad.iloc[0] if len(bad) else s.iloc[0]
            raise ValueError(f"Locality {col!r} has non-numeric cells (e.g. {sample!r}).")
        if s.isna().any():
            raise ValueError(f"Locality {col!r} has missing cells in rows {s[s.isna()].index.tolist()}.")
        if (s < 0).any():
            raise ValueError(f"Locality {col!r} has negative author counts.")
        if ((s % 1) != 0).any():
            raise ValueError(f"Locality {col!r} has non-integer author counts.")

    return participation.to_numpy(dtype=float)


def create_network(participation: pd.DataFrame) -> pd.DataFrame:
    """
    Baut die gewichtete Adjazenzmatrix der Lokalitäten.

    Pro Manuskript wird ein Präsenzvektor (count > 0) gebildet; das äußere UND
    des Vektors mit sich selbst ist die Indikatormatrix dieses Manuskripts.
    Die Indikatormatrizen werden aufsummiert, die Diagonale zuletzt genullt.
    Die Anzahl der Autor:innen pro Lokalität geht nicht ins Gewicht ein.
    """
    counts = _count_matrix(participation)
    n = counts.shape[1]

    adjacency = np.zeros((n, n), dtype=np.int64)
    indicator = np.zeros((n, n), dtype=bool)
    for row in counts:
        present = row > 0
        np.logical_and.outer(present, present, out=indicator)
        adjacency += indicator
    np.fill_diagonal(adjacency, 0)

    localities = list(participation.columns)
    return pd.DataFrame(adjacency, index=localities, columns=localities)


def adjacency_to_edges(adjacency: pd.DataFrame) -> pd.DataFrame:
    """Kantenliste u, v, weight aus dem oberen Dreieck (nur Gewicht > 0)"""
    values = adjacency.to_numpy()
    iu, ju = np.triu_indices(values.shape[0], k=1)
    weights = values[iu, ju]
    keep = weights > 0
    names = adjacency.columns
    return pd.DataFrame({
        "u": names[iu[keep]],
        "v": names[ju[keep]],
        "weight": weights[keep],
    })
