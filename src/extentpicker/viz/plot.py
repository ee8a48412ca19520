"""
World map plotting functions for interactive extent selection.
"""

import matplotlib as mpl
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from extentpicker import config
from extentpicker.types import Extent


ZERO_MARGIN_PARAMS = {
    "figure.subplot.left": 0.0,
    "figure.subplot.bottom": 0.0,
    "figure.subplot.right": 1.0,
    "figure.subplot.top": 1.0,
    "axes.xmargin": 0.0,
    "axes.ymargin": 0.0,
}


def zero_margins():
    """
    Context manager that removes figure and axes margins.

    The previous matplotlib rcParams are restored when the block exits,
    whether it exits normally or with an exception.
    """
    return plt.rc_context(ZERO_MARGIN_PARAMS)


def plot_world_map(world, extent, fill=config.LAND_COLOR, border=config.BORDER_COLOR):
    """
    Plot country polygons limited to a lon/lat viewport.
    
    Parameters
    
    world : GeoDataFrame
        Country polygons in EPSG:4326
    extent : Extent or sequence
        Viewport as (xmin, xmax, ymin, ymax)
    fill : str, optional
        Polygon fill colour
    border : str, optional
        Country border colour
        
    Returns
    
    tuple
        (fig, ax) matplotlib figure and axes objects
    """
    extent = Extent.from_vector(extent)

    fig, ax = plt.subplots()
    world.plot(ax=ax, color=fill, edgecolor=border)

    ax.set_xlim(extent.xmin, extent.xmax)
    ax.set_ylim(extent.ymin, extent.ymax)
    ax.set_axis_off()
    return fig, ax


def draw_extent(ax, extent, color=config.EXTENT_COLOR):
    """
    Outline a captured extent on the map.

    Returns

    matplotlib.patches.Rectangle
        The patch added to the axes
    """
    patch = Rectangle(
        (extent.xmin, extent.ymin),
        extent.width,
        extent.height,
        fill=False,
        edgecolor=color,
        linewidth=1.5,
    )
    ax.add_patch(patch)
    ax.figure.canvas.draw_idle()
    return patch


def is_interactive_backend(backend=None):
    """
    Check whether a matplotlib backend can receive mouse clicks.

    Parameters

    backend : str, optional
        Backend name, defaults to the active backend
    """
    if backend is None:
        backend = mpl.get_backend()
    backend = backend.lower()
    if "inline" in backend:
        return False
    return backend not in config.NON_INTERACTIVE_BACKENDS
