import math
import numbers
import warnings

import numpy as np
import matplotlib.pyplot as plt

from extentpicker import config
from extentpicker.exceptions import CaptureFailed, InvalidArgument
from extentpicker.io.worldmap import get_world_boundaries
from extentpicker.types import Extent, Resolution
from extentpicker.viz.plot import draw_extent, is_interactive_backend, plot_world_map, zero_margins


def _check_round_to(round_to):
    """Normalise a rounding precision; None means no rounding."""
    if round_to is None:
        return None
    if isinstance(round_to, bool) or not isinstance(round_to, numbers.Real):
        raise InvalidArgument(f"round_to must be a non-negative integer or None, got {round_to!r}")
    if round_to == math.inf:
        return None
    if not float(round_to).is_integer() or round_to < 0:
        raise InvalidArgument(f"round_to must be a non-negative integer or None, got {round_to!r}")
    return int(round_to)


def _check_initial_extent(initial_extent):
    extent = Extent.from_vector(initial_extent)
    if extent.xmin == extent.xmax or extent.ymin == extent.ymax:
        raise InvalidArgument(f"initial_extent must have xmin < xmax and ymin < ymax, got {extent.as_vector()}")

    if extent.xmin < -180 or extent.xmax > 180 or extent.ymin < -90 or extent.ymax > 90:
        warnings.warn(
            f"initial_extent {extent.as_vector()} reaches beyond longitude -180..180 / latitude -90..90",
            UserWarning,
            stacklevel=3,
        )
    return extent


def round_extent(extent, round_to=config.DEFAULT_ROUND_TO):
    """
    Round the four values of an extent for display.

    Args:
        extent (Extent or sequence): Extent in (xmin, xmax, ymin, ymax) order.
        round_to (int or None): Decimal places. None or math.inf leaves values as they are.

    Returns:
        tuple: Four floats.
    """
    round_to = _check_round_to(round_to)
    values = Extent.from_vector(extent).as_vector()
    if round_to is None:
        return values
    return tuple(round(v, round_to) for v in values)


def format_extent(values):
    """
    Format extent values as a vector expression, e.g. "c(-3.4, 10.2, -2.9, 5.1)".

    Whole numbers are written without a decimal point.
    """
    if isinstance(values, Extent):
        values = values.as_vector()
    # + 0.0 turns -0.0 into 0.0
    parts = [np.format_float_positional(float(v) + 0.0, trim="-") for v in values]
    return f"c({', '.join(parts)})"


def capture_extent(ax):
    """
    Wait for two clicks on the map and return the extent they span.

    The captured extent is outlined on the map.

    Args:
        ax (matplotlib.axes.Axes): Axes holding the plotted map.

    Returns:
        Extent: Bounding box of the two clicked points.

    Raises:
        CaptureFailed: If the matplotlib backend cannot take clicks, or the
            window was closed before two points were clicked.
    """
    if not is_interactive_backend():
        raise CaptureFailed(
            "The active matplotlib backend is not interactive, so map clicks cannot be captured. "
            "Use an interactive backend such as TkAgg or QtAgg."
        )

    points = ax.figure.ginput(2, timeout=0)
    if len(points) < 2:
        raise CaptureFailed(f"Expected two clicks on the map, got {len(points)}.")

    extent = Extent.from_points(points[0], points[1])
    draw_extent(ax, extent)
    return extent


def pick_extent(initial_extent=config.DEFAULT_EXTENT, resolution=config.DEFAULT_RESOLUTION, round_to=config.DEFAULT_ROUND_TO):
    """
    Open a world map and let the user click two points to define an extent.

    The rounded extent is printed as a vector for copy/paste; the extent
    returned is not rounded.

    Args:
        initial_extent (sequence or Extent): Viewport (xmin, xmax, ymin, ymax) of the
            map. Should be larger than the target extent so it can be clicked within;
            a smaller one zooms in for more precise clicks.
        resolution (str or Resolution): "low" is less detailed but faster to load than "medium".
        round_to (int or None): Decimal places in the printed extent. None or math.inf
            prints full precision.

    Returns:
        Extent: The full precision extent of the two clicks.

    Raises:
        InvalidArgument: If an argument is not valid. Nothing is plotted in that case.
        DatasetLoadFailed: If the world map cannot be loaded.
        CaptureFailed: If two clicks could not be captured.
    """
    resolution = Resolution.resolve(resolution)
    round_to = _check_round_to(round_to)
    initial_extent = _check_initial_extent(initial_extent)

    world = get_world_boundaries(resolution)

    with zero_margins():
        fig, ax = plot_world_map(world, initial_extent)
        print("click at two points on the map to define an extent")
        try:
            extent = capture_extent(ax)
        except CaptureFailed:
            plt.close(fig)
            raise

    print(f"extent: {format_extent(round_extent(extent, round_to))}")
    return extent
