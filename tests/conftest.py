import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest


@pytest.fixture
def participation():
    # 2 manuscripts, localities A, B, C
    return pd.DataFrame({"A": [1, 0], "B": [1, 1], "C": [0, 2]}, index=pd.Index(["m1", "m2"], name="manuscript"))


@pytest.fixture
def coordinates():
    return pd.DataFrame(
        {"longitude": [13.4, 2.35, -74.0], "latitude": [52.5, 48.86, 40.7]},
        index=pd.Index(["A", "B", "C"]),
    )
