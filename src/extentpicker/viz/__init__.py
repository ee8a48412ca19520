"""
Map rendering for extent selection.
"""

from .plot import (
    zero_margins,
    plot_world_map,
    draw_extent,
    is_interactive_backend
)

__all__ = [
    'zero_margins',
    'plot_world_map',
    'draw_extent',
    'is_interactive_backend',
]
