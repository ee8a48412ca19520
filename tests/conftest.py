import pytest
import geopandas as gpd
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend for testing
import matplotlib.pyplot as plt
from shapely.geometry import box


@pytest.fixture
def world():
    """Two rectangular 'countries' either side of the prime meridian."""
    return gpd.GeoDataFrame({
        'NAME': ['West', 'East'],
        'geometry': [box(-170, -60, -1, 70), box(1, -60, 170, 70)]
    }, crs="EPSG:4326")


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')
