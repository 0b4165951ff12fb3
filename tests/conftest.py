import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from shade_swatch import Color  # noqa: E402


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def steel():
    """rgb(100, 150, 200), fully opaque."""
    return Color(100, 150, 200)


@pytest.fixture
def grey():
    return Color(128, 128, 128)
