"""Core geometry values shared by the map components.

``Point`` and ``Bounds`` are immutable pydantic models. The math is planar:
latitude and longitude are treated as plain y/x components, so the same
types describe pixel-space coordinates as well.
"""

import logging
import math
from typing import Any, Iterable, Iterator, Sequence

from pydantic import BaseModel, model_validator

logger = logging.getLogger(__name__)

# Fallback map center (London).
DEFAULT_LATITUDE = 51.505
DEFAULT_LONGITUDE = -0.09

EMPTY_POINTS_MESSAGE = "At least one point is required to create a bounds. (Parameter 'points')"


def _format_coordinate(value: float) -> str:
    """Render a coordinate the way map clients print numbers.

    Integral values drop the trailing ``.0`` and keep the sign of ``-0.0``;
    non-finite values print as ``NaN``, ``Infinity`` and ``-Infinity``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e15:
        text = str(int(value))
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-" + text
        return text
    return repr(value)


def _divide(value: float, factor: float) -> float:
    """IEEE division: a zero divisor gives a signed infinity or NaN."""
    if factor != 0:
        return value / factor
    if value == 0 or math.isnan(value):
        return math.nan
    return math.copysign(math.inf, value) * math.copysign(1.0, factor)


def _round_half_even(value: float) -> float:
    """Round to the nearest integer, passing NaN and infinities through."""
    if not math.isfinite(value):
        return value
    return float(round(value))


class Point(BaseModel):
    """A 2D map coordinate.

    Values are stored exactly as given; latitude and longitude are not
    clamped to geographic limits.
    """

    model_config = {"frozen": True}

    latitude: float
    longitude: float

    @model_validator(mode="before")
    @classmethod
    def coerce_pair(cls, data: Any) -> Any:
        """Accept a ``[latitude, longitude]`` pair in place of a mapping."""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"Expected a [latitude, longitude] pair, got {len(data)} values")
            return {"latitude": data[0], "longitude": data[1]}
        return data

    @classmethod
    def create(cls, latitude: float, longitude: float) -> "Point":
        """Create a point from its two components."""
        return cls(latitude=latitude, longitude=longitude)

    @classmethod
    def default(cls) -> "Point":
        """The fallback map center."""
        return cls.create(DEFAULT_LATITUDE, DEFAULT_LONGITUDE)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Point":
        """Build a point from ``[latitude, longitude]``."""
        return cls.model_validate(list(values))

    @classmethod
    def from_tuple(cls, pair: tuple[float, float]) -> "Point":
        latitude, longitude = pair
        return cls.create(latitude, longitude)

    def to_list(self) -> list[float]:
        """Leaflet array form, ``[latitude, longitude]``."""
        return [self.latitude, self.longitude]

    def to_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        # Supports ``latitude, longitude = point``.
        yield self.latitude
        yield self.longitude

    def __str__(self) -> str:
        return f"[{_format_coordinate(self.latitude)}, {_format_coordinate(self.longitude)}]"

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point.create(self.latitude + other.latitude, self.longitude + other.longitude)

    def __sub__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point.create(self.latitude - other.latitude, self.longitude - other.longitude)

    def __mul__(self, factor: object) -> "Point":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point.create(self.latitude * factor, self.longitude * factor)

    def __truediv__(self, factor: object) -> "Point":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point.create(_divide(self.latitude, factor), _divide(self.longitude, factor))

    def scale(self, factor: float) -> "Point":
        """Multiply both components by ``factor``."""
        return self * factor

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        d_lat = self.latitude - other.latitude
        d_lon = self.longitude - other.longitude
        return math.sqrt(d_lat * d_lat + d_lon * d_lon)


class Bounds(BaseModel):
    """An axis-aligned rectangle given by its southwest and northeast corners.

    Corners passed to ``create`` are stored as given. Callers that pass them
    out of order get negative sizes and inverted predicates; use
    ``from_points`` when the corner order is not known.
    """

    model_config = {"frozen": True}

    southwest: Point
    northeast: Point

    @model_validator(mode="before")
    @classmethod
    def coerce_corner_pairs(cls, data: Any) -> Any:
        """Accept the ``[[sw_lat, sw_lon], [ne_lat, ne_lon]]`` array form."""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"Expected [southwest, northeast] corners, got {len(data)} values")
            return {"southwest": data[0], "northeast": data[1]}
        return data

    @classmethod
    def create(cls, southwest: Point, northeast: Point) -> "Bounds":
        return cls(southwest=southwest, northeast=northeast)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Bounds":
        """Create the smallest bounds containing every point.

        Raises:
            ValueError: If ``points`` is empty.
        """
        points = list(points)
        if not points:
            raise ValueError(EMPTY_POINTS_MESSAGE)

        southwest = Point.create(
            min(p.latitude for p in points),
            min(p.longitude for p in points),
        )
        northeast = Point.create(
            max(p.latitude for p in points),
            max(p.longitude for p in points),
        )
        logger.debug("Built bounds %s-%s from %d points", southwest, northeast, len(points))
        return cls.create(southwest, northeast)

    @classmethod
    def from_sequence(cls, corners: Sequence[Sequence[float]]) -> "Bounds":
        return cls.model_validate(list(corners))

    def to_list(self) -> list[list[float]]:
        """Leaflet ``LatLngBounds`` array form."""
        return [self.southwest.to_list(), self.northeast.to_list()]

    @property
    def width(self) -> float:
        return self.northeast.longitude - self.southwest.longitude

    @property
    def height(self) -> float:
        return self.northeast.latitude - self.southwest.latitude

    def center(self, rounded: bool = False) -> Point:
        """Midpoint of the two corners.

        With ``rounded`` set, each finite coordinate is rounded half-to-even.
        """
        latitude = (self.southwest.latitude + self.northeast.latitude) * 0.5
        longitude = (self.southwest.longitude + self.northeast.longitude) * 0.5
        if rounded:
            return Point.create(_round_half_even(latitude), _round_half_even(longitude))
        return Point.create(latitude, longitude)

    def get_size(self) -> Point:
        """Width and height packed as a point (a vector, not a coordinate)."""
        return Point.create(self.width, self.height)

    def bottom_left(self) -> Point:
        return self.southwest

    def top_right(self) -> Point:
        return self.northeast

    def top_left(self) -> Point:
        return Point.create(self.southwest.latitude, self.northeast.longitude)

    def bottom_right(self) -> Point:
        return Point.create(self.northeast.latitude, self.southwest.longitude)

    def contains(self, target: "Point | Bounds") -> bool:
        """Check whether a point or another bounds lies inside, edges included."""
        if isinstance(target, Point):
            southwest = northeast = target
        elif isinstance(target, Bounds):
            southwest, northeast = target.southwest, target.northeast
        else:
            raise TypeError(f"Expected Point or Bounds, got {type(target).__name__}")

        return (
            southwest.latitude >= self.southwest.latitude
            and northeast.latitude <= self.northeast.latitude
            and southwest.longitude >= self.southwest.longitude
            and northeast.longitude <= self.northeast.longitude
        )

    def intersects(self, other: "Bounds") -> bool:
        """True when the bounds share at least one point, touching edges included."""
        return not (
            other.southwest.longitude > self.northeast.longitude
            or other.northeast.longitude < self.southwest.longitude
            or other.southwest.latitude > self.northeast.latitude
            or other.northeast.latitude < self.southwest.latitude
        )

    def overlaps(self, other: "Bounds") -> bool:
        """True when the intersection of the bounds has a positive area."""
        if not self.intersects(other):
            return False

        south = max(self.southwest.latitude, other.southwest.latitude)
        west = max(self.southwest.longitude, other.southwest.longitude)
        north = min(self.northeast.latitude, other.northeast.latitude)
        east = min(self.northeast.longitude, other.northeast.longitude)

        return south < north and west < east

    def extend(self, target: "Point | Bounds") -> "Bounds":
        """Return new bounds grown to include a point or another bounds."""
        if isinstance(target, Point):
            southwest = northeast = target
        elif isinstance(target, Bounds):
            southwest, northeast = target.southwest, target.northeast
        else:
            raise TypeError(f"Expected Point or Bounds, got {type(target).__name__}")

        return Bounds.create(
            Point.create(
                min(self.southwest.latitude, southwest.latitude),
                min(self.southwest.longitude, southwest.longitude),
            ),
            Point.create(
                max(self.northeast.latitude, northeast.latitude),
                max(self.northeast.longitude, northeast.longitude),
            ),
        )

    def pad(self, buffer_ratio: float) -> "Bounds":
        """Grow (or shrink, for negative ratios) by a share of the current size.

        No clamping is applied: shrinking by more than half inverts the bounds.
        """
        lat_buffer = self.height * buffer_ratio
        lon_buffer = self.width * buffer_ratio
        return Bounds.create(
            Point.create(self.southwest.latitude - lat_buffer, self.southwest.longitude - lon_buffer),
            Point.create(self.northeast.latitude + lat_buffer, self.northeast.longitude + lon_buffer),
        )
