# Command-line interface
import argparse
import sys

from extentpicker.config import DEFAULT_EXTENT, DEFAULT_RESOLUTION, DEFAULT_ROUND_TO
from extentpicker.core import pick_extent
from extentpicker.exceptions import ExtentPickerError
from extentpicker.types import Resolution


def build_parser():
    p = argparse.ArgumentParser(
        prog='find-extent',
        description='Click twice on a world map to define a longitude/latitude extent',
    )
    p.add_argument('--extent', nargs=4, type=float, default=list(DEFAULT_EXTENT),
                   metavar=('XMIN', 'XMAX', 'YMIN', 'YMAX'),
                   help='initial map view; zoom in for more precise clicks')
    p.add_argument('--resolution', choices=[r.value for r in Resolution], default=DEFAULT_RESOLUTION,
                   help='detail of national borders ("low" loads faster)')
    rounding = p.add_mutually_exclusive_group()
    rounding.add_argument('--round', dest='round_to', type=int, default=DEFAULT_ROUND_TO,
                          help='decimal places of the printed extent')
    rounding.add_argument('--no-round', dest='round_to', action='store_const', const=None,
                          help='print the extent at full precision')
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        pick_extent(initial_extent=args.extent, resolution=args.resolution, round_to=args.round_to)
    except ExtentPickerError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
