from __future__ import annotations

import logging

import folium
from folium.plugins import MeasureControl

from .coord import CoordVariant, Range, RangeLike, resolve_aspect
from .panel import panel_size

logger = logging.getLogger(__name__)

OSM_TILES = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTR = "&copy; OpenStreetMap contributors"


def create_range_map(
    range_x: RangeLike,
    range_y: RangeLike,
    width: int = 800,
    max_height: int = 800,
    show_range: bool = True,
) -> folium.Map:
    rx = Range.of(range_x)
    ry = Range.of(range_y)

    aspect = resolve_aspect(CoordVariant.FAST_GEOGRAPHIC, rx, ry)
    panel_w, panel_h = panel_size(aspect, width, max_height)
    # a collapsed panel would make an invisible map
    panel_w, panel_h = max(1, round(panel_w)), max(1, round(panel_h))
    logger.debug("map panel %dx%d px for aspect %s", panel_w, panel_h, aspect)

    m = folium.Map(location=[ry.center, rx.center], width=panel_w, height=panel_h, tiles=None)
    folium.TileLayer(
        tiles=OSM_TILES,
        attr=OSM_ATTR,
        name="OpenStreetMap",
        control=False,
        overlay=False,
        show=True,
    ).add_to(m)

    folium.Marker([ry.center, rx.center], popup="Center", icon=folium.Icon(color="red")).add_to(m)

    bounds = [[ry.min, rx.min], [ry.max, rx.max]]
    if show_range:
        folium.Rectangle(bounds=bounds, color="blue", weight=2, fill=True, fill_opacity=0.2).add_to(m)
    m.fit_bounds(bounds)

    # Add measurement tool (users can click to measure distances/areas)
    m.add_child(MeasureControl(primary_length_unit="kilometers", secondary_length_unit="meters"))

    return m


def save_range_map(
    range_x: RangeLike,
    range_y: RangeLike,
    out_html: str = "range_map.html",
    width: int = 800,
    max_height: int = 800,
) -> str:
    m = create_range_map(range_x, range_y, width=width, max_height=max_height, show_range=True)
    m.save(out_html)
    return out_html
