import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from shapely.geometry import box

from extentpicker.exceptions import InvalidArgument


class Resolution(str, Enum):
    """Level of national border detail in the plotted world map."""
    LOW = "low"
    MEDIUM = "medium"

    @classmethod
    def resolve(cls, value):
        """
        Turn a user supplied resolution into a Resolution.

        Accepts a Resolution, its exact name, or an unambiguous prefix of it
        (e.g. "med" for "medium").

        Raises:
            InvalidArgument: If the value does not identify exactly one level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value:
            name = value.lower()
            matches = [r for r in cls if r.value == name]
            if not matches:
                matches = [r for r in cls if r.value.startswith(name)]
            if len(matches) == 1:
                return matches[0]
        choices = ", ".join(repr(r.value) for r in cls)
        raise InvalidArgument(f"resolution must be one of {choices}, got {value!r}")


def _as_coordinate(value, name):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class Extent:
    """Longitude/latitude bounding box in (xmin, xmax, ymin, ymax) order."""
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    def __post_init__(self):
        for name in ("xmin", "xmax", "ymin", "ymax"):
            object.__setattr__(self, name, _as_coordinate(getattr(self, name), name))
        if self.xmin > self.xmax:
            raise InvalidArgument(f"xmin ({self.xmin}) is greater than xmax ({self.xmax})")
        if self.ymin > self.ymax:
            raise InvalidArgument(f"ymin ({self.ymin}) is greater than ymax ({self.ymax})")

    @classmethod
    def from_points(cls, p1: Tuple[float, float], p2: Tuple[float, float]) -> "Extent":
        """Bounding box of two (x, y) points given in any order."""
        (x1, y1), (x2, y2) = p1, p2
        return cls(min(x1, x2), max(x1, x2), min(y1, y2), max(y1, y2))

    @classmethod
    def from_vector(cls, values) -> "Extent":
        """
        Build an extent from a four-number sequence (xmin, xmax, ymin, ymax).
        Extent instances are returned unchanged.
        """
        if isinstance(values, cls):
            return values
        if isinstance(values, (str, bytes)):
            raise InvalidArgument(f"extent must be a sequence of four numbers, got {values!r}")
        try:
            values = list(values)
        except TypeError:
            raise InvalidArgument(f"extent must be a sequence of four numbers, got {values!r}") from None
        if len(values) != 4:
            raise InvalidArgument(f"extent must have four values (xmin, xmax, ymin, ymax), got {len(values)}")
        return cls(*values)

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def as_vector(self) -> Tuple[float, float, float, float]:
        return (self.xmin, self.xmax, self.ymin, self.ymax)

    def as_bbox(self) -> Tuple[float, float, float, float]:
        """Same box as (west, south, east, north)."""
        return (self.xmin, self.ymin, self.xmax, self.ymax)

    def to_geometry(self):
        return box(self.xmin, self.ymin, self.xmax, self.ymax)
