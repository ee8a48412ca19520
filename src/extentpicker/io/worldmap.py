import os
from functools import lru_cache

import requests
import geopandas as gpd

from extentpicker import config
from extentpicker.constants import NATURAL_EARTH_BASE_URL, RESOLUTION_DATASETS
from extentpicker.exceptions import DatasetLoadFailed
from extentpicker.types import Resolution


def world_boundaries_url(resolution="low"):
    """
    URL of the Natural Earth admin 0 countries GeoJSON for a resolution level.
    """
    scale = RESOLUTION_DATASETS[Resolution.resolve(resolution).value]
    return f"{NATURAL_EARTH_BASE_URL}/{scale}/cultural/ne_{scale}_admin_0_countries.json"


def get_cached_world_file(resolution="low", cache_dir=None):
    """
    Get path to the cached world boundaries file, downloading it if necessary.

    Args:
        resolution (str or Resolution): "low" (1:110m) or "medium" (1:50m).
        cache_dir (str, optional): Directory to cache into. Defaults to config.CACHE_DIR.

    Returns:
        str: Local path of the GeoJSON file.

    Raises:
        DatasetLoadFailed: If the download fails.
    """
    resolution = Resolution.resolve(resolution)
    scale = RESOLUTION_DATASETS[resolution.value]

    cache_dir = cache_dir or config.CACHE_DIR
    os.makedirs(cache_dir, exist_ok=True)
    local_path = os.path.join(cache_dir, f"ne_{scale}_admin_0_countries.geojson")

    if not os.path.exists(local_path):
        url = world_boundaries_url(resolution)
        print(f"Downloading {resolution.value} resolution world map from {url}")
        # Write next to the target first so an interrupted download is never cached
        tmp_path = local_path + ".part"
        try:
            r = requests.get(url, timeout=60)
            r.raise_for_status()
            with open(tmp_path, 'wb') as f:
                f.write(r.content)
        except (requests.RequestException, OSError) as e:
            # Clean up partial file if failed
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise DatasetLoadFailed(f"Failed to download world boundaries from {url}: {e}") from e
        os.replace(tmp_path, local_path)

    return local_path


@lru_cache(maxsize=None)
def _read_world_boundaries(resolution, cache_dir):
    path = get_cached_world_file(resolution, cache_dir=cache_dir)
    try:
        world = gpd.read_file(path)
    except Exception as e:
        # Drop the unreadable file (e.g. an HTML error page) so the next call downloads again
        os.remove(path)
        raise DatasetLoadFailed(f"Failed to read world boundaries from {path}: {e}") from e

    if world.crs is None:
        world = world.set_crs(config.DEFAULT_CRS)
    return world.to_crs(config.DEFAULT_CRS)


def get_world_boundaries(resolution="low", cache_dir=None):
    """
    Load (downloading once) the Natural Earth world country boundaries.

    Results are kept in memory per resolution, so repeated calls are cheap.
    Each call returns its own copy, so callers may modify it freely.

    Args:
        resolution (str or Resolution): "low" is coarser but faster to load than "medium".
        cache_dir (str, optional): Directory to cache into. Defaults to config.CACHE_DIR.

    Returns:
        geopandas.GeoDataFrame: Country polygons in EPSG:4326.

    Raises:
        InvalidArgument: If the resolution is not recognised.
        DatasetLoadFailed: If the dataset cannot be downloaded or read.
    """
    resolution = Resolution.resolve(resolution)
    return _read_world_boundaries(resolution, cache_dir or config.CACHE_DIR).copy()
