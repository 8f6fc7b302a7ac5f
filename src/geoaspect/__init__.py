"""geoaspect: aspect ratios for longitude/latitude plots.

Modules:
- distance: great-circle central angle between two points.
- coord: coordinate systems and the aspect ratio each one forces.
- panel: fitting a panel to an aspect ratio.
- map: Folium preview of a data range sized by its aspect.
"""

from .coord import (
    CartesianCoord,
    CoordVariant,
    PanelRanges,
    ProjectedCoord,
    QuickmapCoord,
    Range,
    coord_cartesian,
    coord_projected,
    coord_quickmap,
    quickmap_aspect,
    resolve_aspect,
)
from .distance import EARTH_RADIUS_M, GeoPoint, central_angle, distance_m
from .errors import (
    AspectWarning,
    DegenerateRangeWarning,
    GeoAspectError,
    InvalidRange,
    InvalidRangeWarning,
    OutOfDomain,
    OutOfDomainWarning,
)
from .panel import panel_size

__all__ = [
    "EARTH_RADIUS_M",
    "GeoPoint",
    "central_angle",
    "distance_m",
    "Range",
    "PanelRanges",
    "CoordVariant",
    "CartesianCoord",
    "QuickmapCoord",
    "ProjectedCoord",
    "coord_cartesian",
    "coord_quickmap",
    "coord_projected",
    "quickmap_aspect",
    "resolve_aspect",
    "panel_size",
    "GeoAspectError",
    "InvalidRange",
    "OutOfDomain",
    "AspectWarning",
    "InvalidRangeWarning",
    "OutOfDomainWarning",
    "DegenerateRangeWarning",
]
