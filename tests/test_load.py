import pandas as pd
import pytest

from coauthor_map.load import (check_alignment, load_adjacency, load_basemap, load_coordinates,
                               load_participation)
from coauthor_map.network import create_network


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_participation_uses_manuscript_index(tmp_path):
    path = write(tmp_path, "p.csv", "manuscript, Graz ,Wien\nm1,1,2\nm2,0,1\n")
    df = load_participation(path)
    assert list(df.columns) == ["Graz", "Wien"]
    assert list(df.index) == ["m1", "m2"]
    assert df.loc["m1", "Wien"] == 2


def test_load_participation_without_id_column(tmp_path):
    path = write(tmp_path, "p.csv", "Graz,Wien\n1,2\n")
    assert list(load_participation(path).columns) == ["Graz", "Wien"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_participation(tmp_path / "nope.csv")


def test_load_coordinates(tmp_path):
    path = write(tmp_path, "c.csv", "municipality,longitude,latitude\nGraz,15.44,47.07\nWien,16.37,48.21\n")
    df = load_coordinates(path)
    assert df["longitude"].tolist() == [15.44, 16.37]
    assert df["latitude"].dtype == float


def test_coordinates_missing_column(tmp_path):
    path = write(tmp_path, "c.csv", "municipality,lon,latitude\nGraz,15.44,47.07\n")
    with pytest.raises(ValueError, match="longitude"):
        load_coordinates(path)


def test_coordinates_non_numeric(tmp_path):
    path = write(tmp_path, "c.csv", "longitude,latitude\n15.44,47.07\nabc,48.21\n")
    with pytest.raises(ValueError, match="non-numeric"):
        load_coordinates(path)


def test_coordinates_out_of_range(tmp_path):
    path = write(tmp_path, "c.csv", "longitude,latitude\n15.44,97.07\n")
    with pytest.raises(ValueError, match="out of range"):
        load_coordinates(path)


def test_alignment_indexes_coordinates_by_locality(participation):
    coords = pd.DataFrame({"municipality": ["A", "B", "C"], "longitude": [1.0, 2.0, 3.0], "latitude": [4.0, 5.0, 6.0]})
    aligned = check_alignment(participation, coords)
    assert list(aligned.index) == ["A", "B", "C"]
    assert list(aligned.columns) == ["longitude", "latitude"]
    assert aligned.loc["C", "longitude"] == 3.0


@pytest.mark.parametrize("n_rows", [2, 4])
def test_alignment_dimension_mismatch(participation, n_rows):
    coords = pd.DataFrame({"longitude": [0.0] * n_rows, "latitude": [0.0] * n_rows})
    with pytest.raises(ValueError, match="Dimension mismatch"):
        check_alignment(participation, coords)


def test_alignment_name_mismatch(participation):
    coords = pd.DataFrame({"municipality": ["A", "C", "B"], "longitude": [1.0, 2.0, 3.0], "latitude": [4.0, 5.0, 6.0]})
    with pytest.raises(ValueError, match="position 1"):
        check_alignment(participation, coords)


def test_load_adjacency_from_saved_matrix(tmp_path, participation):
    M = create_network(participation)
    M.to_csv(tmp_path / "adjacency.csv")
    loaded = load_adjacency(tmp_path / "adjacency.csv")
    assert loaded.equals(M)


def test_load_adjacency_not_square(tmp_path):
    path = write(tmp_path, "adjacency.csv", ",A,B\nA,0,1\nC,1,0\n")
    with pytest.raises(ValueError, match="square"):
        load_adjacency(path)


def test_load_basemap_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_basemap(tmp_path / "world.shp")


def test_zero_padded_municipality_codes_stay_aligned(tmp_path):
    p = write(tmp_path, "p.csv", "manuscript,01001,01002\nm1,1,1\n")
    c = write(tmp_path, "c.csv", "municipality,longitude,latitude\n01001,1,1\n01002,2,2\n")
    coords = load_coordinates(c)
    assert coords["municipality"].tolist() == ["01001", "01002"]
    aligned = check_alignment(load_participation(p), coords)
    assert list(aligned.index) == ["01001", "01002"]
    assert aligned.loc["01002", "latitude"] == 2.0


def test_load_adjacency_keeps_zero_padded_codes(tmp_path):
    p = write(tmp_path, "p.csv", "manuscript,01001,01002,10003\nm1,1,1,0\nm2,0,1,1\n")
    M = create_network(load_participation(p))
    M.to_csv(tmp_path / "adjacency.csv")
    loaded = load_adjacency(tmp_path / "adjacency.csv")
    assert list(loaded.index) == list(loaded.columns) == ["01001", "01002", "10003"]
    assert loaded.loc["01001", "01002"] == 1
    assert loaded.loc["01002", "10003"] == 1
    assert loaded.dtypes.eq("int64").all()
