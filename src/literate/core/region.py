"""Map region fitting for a set of book locations."""

from dataclasses import dataclass
from typing import Iterable, Optional

from .book import Book, BookLocation

# Smallest span (degrees) a fitted region may have on either axis.
MIN_SPAN_DELTA = 0.02
# Multiplier applied to the bounding box so markers are not on the edge.
SPAN_PADDING_FACTOR = 1.5


@dataclass(frozen=True)
class MapSpan:
    """Angular extent of a map viewport, in degrees."""

    latitude_delta: float
    longitude_delta: float


@dataclass(frozen=True)
class MapRegion:
    """A map viewport described by its center and span."""

    center: BookLocation
    span: MapSpan

    def bounds(self) -> tuple[float, float, float, float]:
        """Return the viewport as (south, west, north, east)."""
        half_lat = self.span.latitude_delta / 2.0
        half_lon = self.span.longitude_delta / 2.0
        return (
            self.center.latitude - half_lat,
            self.center.longitude - half_lon,
            self.center.latitude + half_lat,
            self.center.longitude + half_lon,
        )

    def contains(self, location: BookLocation) -> bool:
        """Whether the location lies inside the viewport (edges included)."""
        south, west, north, east = self.bounds()
        return south <= location.latitude <= north and west <= location.longitude <= east


# Initial viewport of the listings map, kept when nothing can be fitted.
DEFAULT_REGION = MapRegion(
    center=BookLocation(latitude=37.7749, longitude=-122.4194),
    span=MapSpan(latitude_delta=0.1, longitude_delta=0.1),
)


def region_that_fits(books: Iterable[Book]) -> Optional[MapRegion]:
    """
    Compute the smallest padded region containing every located book.

    Books without a location are ignored. The span on each axis is the
    bounding box extent times SPAN_PADDING_FACTOR, never below
    MIN_SPAN_DELTA, so a single point still yields a usable viewport.

    Args:
        books: Books to frame, in any order.

    Returns:
        MapRegion, or None when no book has a location. Callers should keep
        their current viewport in that case.
    """
    min_lat = max_lat = min_lon = max_lon = None

    for book in books:
        location = book.location
        if location is None:
            continue
        if min_lat is None:
            min_lat = max_lat = location.latitude
            min_lon = max_lon = location.longitude
            continue
        min_lat = min(min_lat, location.latitude)
        max_lat = max(max_lat, location.latitude)
        min_lon = min(min_lon, location.longitude)
        max_lon = max(max_lon, location.longitude)

    if min_lat is None:
        return None

    center = BookLocation(
        latitude=(min_lat + max_lat) / 2.0,
        longitude=(min_lon + max_lon) / 2.0,
    )
    span = MapSpan(
        latitude_delta=max(MIN_SPAN_DELTA, (max_lat - min_lat) * SPAN_PADDING_FACTOR),
        longitude_delta=max(MIN_SPAN_DELTA, (max_lon - min_lon) * SPAN_PADDING_FACTOR),
    )
    return MapRegion(center=center, span=span)
