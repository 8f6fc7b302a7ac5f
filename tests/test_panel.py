import pytest

from geoaspect import panel_size


def test_unset_aspect_keeps_box():
    assert panel_size(None, 800, 600) == (800, 600)


def test_wide_panel_limited_by_width():
    assert panel_size(0.5, 800, 600) == (800, 400.0)


def test_tall_panel_limited_by_height():
    assert panel_size(2.0, 800, 600) == (300.0, 600)


def test_zero_aspect_collapses_height():
    assert panel_size(0.0, 800, 600) == (800, 0.0)


@pytest.mark.parametrize("aspect", [-1.0, float("inf"), float("nan")])
def test_invalid_aspect_rejected(aspect):
    with pytest.raises(ValueError):
        panel_size(aspect, 800, 600)


def test_box_must_be_positive():
    with pytest.raises(ValueError):
        panel_size(1.0, 0, 600)
