"""
Tests for the map rendering helpers
- plot.py: zero_margins, plot_world_map, draw_extent, is_interactive_backend
"""

import pytest
import matplotlib as mpl

from extentpicker.types import Extent
from extentpicker.viz import zero_margins, plot_world_map, draw_extent, is_interactive_backend
from extentpicker.viz.plot import ZERO_MARGIN_PARAMS


def test_zero_margins_sets_and_restores():
    before = {k: mpl.rcParams[k] for k in ZERO_MARGIN_PARAMS}

    with zero_margins():
        for key, value in ZERO_MARGIN_PARAMS.items():
            assert mpl.rcParams[key] == value

    assert {k: mpl.rcParams[k] for k in ZERO_MARGIN_PARAMS} == before


def test_zero_margins_restores_on_error():
    before = {k: mpl.rcParams[k] for k in ZERO_MARGIN_PARAMS}

    with pytest.raises(KeyError):
        with zero_margins():
            raise KeyError("boom")

    assert {k: mpl.rcParams[k] for k in ZERO_MARGIN_PARAMS} == before


def test_plot_world_map(world):
    with zero_margins():
        fig, ax = plot_world_map(world, (-20, 20, -10, 10))

    assert ax.get_xlim() == (-20, 20)
    assert ax.get_ylim() == (-10, 10)
    assert not ax.axison
    assert len(ax.collections) > 0
    # Figure keeps the zero margins after the rc context has exited
    assert fig.subplotpars.left == 0
    assert fig.subplotpars.top == 1


def test_plot_world_map_rejects_bad_extent(world):
    from extentpicker.exceptions import InvalidArgument

    with pytest.raises(InvalidArgument):
        plot_world_map(world, (20, -20, -10, 10))


def test_draw_extent(world):
    fig, ax = plot_world_map(world, (-180, 180, -90, 90))
    patch = draw_extent(ax, Extent(-3.4, 10.2, -2.9, 5.1))

    assert patch in ax.patches
    assert patch.get_xy() == (-3.4, -2.9)
    assert patch.get_width() == pytest.approx(13.6)
    assert patch.get_height() == pytest.approx(8.0)


@pytest.mark.parametrize("backend, expected", [
    ("agg", False),
    ("Agg", False),
    ("pdf", False),
    ("module://matplotlib_inline.backend_inline", False),
    ("TkAgg", True),
    ("QtAgg", True),
    ("macosx", True),
])
def test_is_interactive_backend(backend, expected):
    assert is_interactive_backend(backend) is expected


def test_is_interactive_backend_uses_active_backend():
    # Tests run on Agg
    assert is_interactive_backend() is False
