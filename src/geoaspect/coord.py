"""Coordinate systems for longitude/latitude plots and the aspect ratios they force.

Three variants are supported. ``CARTESIAN`` never forces a ratio and lets the
caller auto-size the panel. ``FAST_GEOGRAPHIC`` (a.k.a. quickmap) sets the
height/width ratio so that one degree of latitude and one degree of longitude
have their true relative ground lengths at the center of the plot, which
approximates a Mercator projection without reprojecting any primitive.
``TRUE_PROJECTION`` hands the question to an external projection object.

All coordinate systems share the Cartesian range contract: ``train`` applies
limit overrides and expansion, ``transform`` rescales into the unit panel and
``distance`` measures paths relative to the panel diagonal.
"""

from __future__ import annotations

import enum
import logging
import math
import warnings
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple, Union

import numpy as np

from .distance import GeoPoint, central_angle
from .errors import (
    DegenerateRangeWarning,
    InvalidRange,
    InvalidRangeWarning,
    OutOfDomain,
    OutOfDomainWarning,
)

logger = logging.getLogger(__name__)

# The quickmap ratio probes half a degree either side of the center, so the
# center must stay at least that far from a pole.
POLE_MARGIN_DEG = 0.5
DEFAULT_EXPAND_MULT = 0.05
ZERO_WIDTH_EXPANSION = 1.0


@dataclass(frozen=True)
class Range:
    min: float
    max: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise InvalidRange(f"Range bounds must be finite, got ({self.min}, {self.max})")
        if self.min > self.max:
            raise InvalidRange(f"Invalid range: require min <= max, got ({self.min}, {self.max})")
        if not math.isfinite(self.max - self.min):
            raise InvalidRange(f"Range span overflows: ({self.min}, {self.max})")

    @classmethod
    def of(cls, bounds: RangeLike) -> Range:
        if isinstance(bounds, Range):
            return bounds
        try:
            lo, hi = bounds
            return cls(float(lo), float(hi))
        except (TypeError, ValueError) as exc:
            if isinstance(exc, InvalidRange):
                raise
            raise InvalidRange(f"Expected a (min, max) pair, got {bounds!r}") from exc

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def center(self) -> float:
        return (self.min + self.max) / 2.0

    def expand(self, mult: float = DEFAULT_EXPAND_MULT, zero_width: float = ZERO_WIDTH_EXPANSION) -> Range:
        if self.span == 0:
            return Range(self.min - zero_width / 2.0, self.max + zero_width / 2.0)
        pad = self.span * mult
        return Range(self.min - pad, self.max + pad)

    def as_tuple(self) -> Tuple[float, float]:
        return self.min, self.max


RangeLike = Union[Range, Sequence[float]]


@dataclass(frozen=True)
class PanelRanges:
    x: Range
    y: Range


class CoordVariant(enum.Enum):
    CARTESIAN = "cartesian"
    FAST_GEOGRAPHIC = "quickmap"
    TRUE_PROJECTION = "projected"


class Projection(Protocol):
    def aspect(self, range_x: Range, range_y: Range) -> Optional[float]:
        ...


def quickmap_aspect(range_x: Range, range_y: Range) -> float:
    """Aspect ratio approximating Mercator at the center of the given ranges.

    Raises ``InvalidRange`` for a zero-width horizontal range and
    ``OutOfDomain`` when the center is too close to a pole for the ratio to
    stay bounded. A zero-height vertical range yields 0.0 and a
    ``DegenerateRangeWarning``.
    """
    if range_x.span == 0:
        raise InvalidRange(f"Zero-width horizontal range at x={range_x.min:g}")

    x_center = range_x.center
    y_center = range_y.center
    if abs(y_center) > 90.0 - POLE_MARGIN_DEG:
        raise OutOfDomain(
            f"Center latitude {y_center:g} is within {POLE_MARGIN_DEG:g} degrees of a pole"
        )

    # length of one degree in either direction from the center; only their
    # ratio is used, so the result is exact at the center and drifts toward
    # the edges
    x_dist = central_angle(GeoPoint(x_center - 0.5, y_center), GeoPoint(x_center + 0.5, y_center))
    y_dist = central_angle(GeoPoint(x_center, y_center - 0.5), GeoPoint(x_center, y_center + 0.5))
    if x_dist <= 0.0:
        raise OutOfDomain(f"Longitude degree length vanishes at center ({x_center:g}, {y_center:g})")

    aspect = range_y.span / range_x.span * (y_dist / x_dist)
    if not math.isfinite(aspect):
        raise OutOfDomain(f"Unbounded aspect ratio for x={range_x.as_tuple()}, y={range_y.as_tuple()}")

    if aspect == 0.0:
        logger.warning("Zero-height vertical range at y=%g collapses the panel", range_y.min)
        warnings.warn(
            f"Zero-height vertical range at y={range_y.min:g}; aspect ratio is 0",
            DegenerateRangeWarning,
            stacklevel=2,
        )
    return aspect


def resolve_aspect(
    variant: Union[CoordVariant, str],
    range_x: RangeLike,
    range_y: RangeLike,
    projection: Optional[Projection] = None,
) -> Optional[float]:
    """Aspect ratio (height/width scale factor) for ``variant``, or None when unset.

    Degenerate or out-of-domain ranges never produce NaN or infinity: they
    fall back to None with an ``InvalidRangeWarning`` or ``OutOfDomainWarning``
    so the caller can render with its default sizing.
    """
    variant = CoordVariant(variant)

    if variant is CoordVariant.CARTESIAN:
        return None

    if variant is CoordVariant.TRUE_PROJECTION:
        if projection is None:
            raise ValueError("A projection is required to resolve the aspect of a projected coordinate system")
        return projection.aspect(Range.of(range_x), Range.of(range_y))

    try:
        aspect = quickmap_aspect(Range.of(range_x), Range.of(range_y))
    except InvalidRange as exc:
        logger.warning("Falling back to automatic aspect: %s", exc)
        warnings.warn(str(exc), InvalidRangeWarning, stacklevel=2)
        return None
    except OutOfDomain as exc:
        logger.warning("Falling back to automatic aspect: %s", exc)
        warnings.warn(str(exc), OutOfDomainWarning, stacklevel=2)
        return None

    logger.debug("quickmap aspect for x=%s y=%s: %.6f", range_x, range_y, aspect)
    return aspect


class CartesianCoord:
    variant = CoordVariant.CARTESIAN

    def __init__(
        self,
        xlim: Optional[RangeLike] = None,
        ylim: Optional[RangeLike] = None,
        expand: bool = True,
    ):
        self.xlim = Range.of(xlim) if xlim is not None else None
        self.ylim = Range.of(ylim) if ylim is not None else None
        self.expand = expand

    def __repr__(self) -> str:
        return f"{type(self).__name__}(xlim={self.xlim}, ylim={self.ylim}, expand={self.expand})"

    def _train_axis(self, trained: RangeLike, limits: Optional[Range]) -> Range:
        rng = limits if limits is not None else Range.of(trained)
        if self.expand:
            rng = rng.expand()
        return rng

    def train(self, x_range: RangeLike, y_range: RangeLike) -> PanelRanges:
        """Panel ranges from the scales' trained ranges, honouring xlim/ylim."""
        return PanelRanges(
            x=self._train_axis(x_range, self.xlim),
            y=self._train_axis(y_range, self.ylim),
        )

    def transform(self, x, y, ranges: PanelRanges) -> Tuple[np.ndarray, np.ndarray]:
        return _rescale(x, ranges.x), _rescale(y, ranges.y)

    def distance(self, x, y, ranges: PanelRanges) -> np.ndarray:
        """Length of each path segment relative to the panel diagonal."""
        max_dist = math.hypot(ranges.x.span, ranges.y.span)
        if max_dist == 0.0:
            raise InvalidRange("Cannot measure distances in a panel with zero extent")
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        return np.hypot(np.diff(x), np.diff(y)) / max_dist

    def aspect(self, ranges: PanelRanges) -> Optional[float]:
        return resolve_aspect(self.variant, ranges.x, ranges.y)


class QuickmapCoord(CartesianCoord):
    variant = CoordVariant.FAST_GEOGRAPHIC


class ProjectedCoord(CartesianCoord):
    variant = CoordVariant.TRUE_PROJECTION

    def __init__(
        self,
        projection: Projection,
        xlim: Optional[RangeLike] = None,
        ylim: Optional[RangeLike] = None,
        expand: bool = True,
    ):
        super().__init__(xlim=xlim, ylim=ylim, expand=expand)
        self.projection = projection

    def aspect(self, ranges: PanelRanges) -> Optional[float]:
        return resolve_aspect(self.variant, ranges.x, ranges.y, projection=self.projection)


def _rescale(values, rng: Range) -> np.ndarray:
    values = np.asarray(values, dtype=float)
    if rng.span == 0:
        return np.full_like(values, 0.5)
    return (values - rng.min) / rng.span


def coord_cartesian(
    xlim: Optional[RangeLike] = None,
    ylim: Optional[RangeLike] = None,
    expand: bool = True,
) -> CartesianCoord:
    return CartesianCoord(xlim=xlim, ylim=ylim, expand=expand)


def coord_quickmap(
    xlim: Optional[RangeLike] = None,
    ylim: Optional[RangeLike] = None,
    expand: bool = True,
) -> QuickmapCoord:
    """Cartesian coordinates with an aspect ratio approximating Mercator."""
    return QuickmapCoord(xlim=xlim, ylim=ylim, expand=expand)


def coord_projected(
    projection: Projection,
    xlim: Optional[RangeLike] = None,
    ylim: Optional[RangeLike] = None,
    expand: bool = True,
) -> ProjectedCoord:
    return ProjectedCoord(projection, xlim=xlim, ylim=ylim, expand=expand)
