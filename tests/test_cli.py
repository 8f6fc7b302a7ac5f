import pytest

from geoaspect.cli import main


def test_aspect_quickmap(capsys):
    assert main(["aspect", "--xmin", "170", "--xmax", "171", "--ymin", "60", "--ymax", "61", "--no-expand"]) == 0
    out = capsys.readouterr().out.strip()
    assert float(out) == pytest.approx(2.0, rel=0.05)


def test_aspect_cartesian_is_unset(capsys):
    assert main(["aspect", "--variant", "cartesian", "--xmin", "0", "--xmax", "1", "--ymin", "0", "--ymax", "1"]) == 0
    assert capsys.readouterr().out.strip() == "unset"


def test_aspect_zero_width_is_unset(capsys):
    with pytest.warns(UserWarning):
        code = main(["aspect", "--xmin", "5", "--xmax", "5", "--ymin", "0", "--ymax", "10", "--no-expand"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "unset"


def test_aspect_limits_override_trained_range(capsys):
    main(["aspect", "--xmin", "0", "--xmax", "1", "--ymin", "0", "--ymax", "1", "--xlim", "0", "2", "--no-expand"])
    out = capsys.readouterr().out.strip()
    assert float(out) == pytest.approx(0.5, rel=0.01)


def test_aspect_inverted_range_rejected(capsys):
    assert main(["aspect", "--xmin", "3", "--xmax", "1", "--ymin", "0", "--ymax", "1"]) == 2
    assert "Invalid range" in capsys.readouterr().err


def test_distance_meters(capsys):
    assert main(["distance", "--lon1", "0", "--lat1", "0", "--lon2", "0", "--lat2", "1"]) == 0
    d = float(capsys.readouterr().out.strip())
    assert 111_000 <= d <= 111_500


def test_distance_radians(capsys):
    assert main(["distance", "--lon1", "0", "--lat1", "0", "--lon2", "180", "--lat2", "0", "--radians"]) == 0
    assert float(capsys.readouterr().out.strip()) == pytest.approx(3.141592654)


def test_map_writes_html(tmp_path, capsys):
    out = tmp_path / "range.html"
    args = ["map", "--west", "165.9", "--south", "-47.3", "--east", "178.6", "--north", "-34.4", "--out-html", str(out)]
    assert main(args) == 0
    assert capsys.readouterr().out.strip() == str(out)
    assert out.exists()
