import folium
import pytest

import geoaspect
from geoaspect.map import create_range_map, save_range_map


def test_create_range_map_draws_range():
    m = create_range_map((165.9, 178.6), (-47.3, -34.4))
    assert isinstance(m, folium.Map)
    html = m.get_root().render()
    assert "L.rectangle" in html


def test_create_range_map_without_range():
    m = create_range_map((165.9, 178.6), (-47.3, -34.4), show_range=False)
    assert "L.rectangle" not in m.get_root().render()


def test_zero_width_range_still_renders():
    with pytest.warns(geoaspect.InvalidRangeWarning):
        m = create_range_map((5.0, 5.0), (0.0, 10.0))
    assert isinstance(m, folium.Map)


def test_save_range_map(tmp_path):
    out = tmp_path / "nz.html"
    path = save_range_map((165.9, 178.6), (-47.3, -34.4), out_html=str(out))
    assert path == str(out)
    assert out.exists()
    assert out.stat().st_size > 0
