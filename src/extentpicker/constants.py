# constants.py

NATURAL_EARTH_BASE_URL = "https://raw.githubusercontent.com/martynafford/natural-earth-geojson/master"

# Resolution level -> Natural Earth admin 0 countries scale
RESOLUTION_DATASETS = {
    "low": "110m",
    "medium": "50m",
}
