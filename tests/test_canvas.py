import pytest

from rasterkit.canvas import Canvas
from rasterkit.vector import Vector

HEADER = "P3 \n100 100\n255\n"


def test_header_written_on_creation(tmp_path):
    path = tmp_path / "first.ppm"
    with Canvas(path, 100, 100, 1, 1, 1):
        pass
    assert path.read_text() == HEADER


def test_dimensions_exposed(tmp_path):
    with Canvas(tmp_path / "a.ppm", 100, 50, 2, 3, 4) as canvas:
        assert (canvas.width, canvas.height) == (100, 50)
        assert canvas.viewport_width == 2
        assert canvas.viewport_height == 3
        assert canvas.viewport_distance == 4
        assert canvas.name == str(tmp_path / "a.ppm")


def test_plot_appends_pixel_line(tmp_path):
    path = tmp_path / "p.ppm"
    with Canvas(path, 100, 100, 1, 1, 1) as canvas:
        canvas.plot(Vector(255, 255, 255))
        canvas.plot(Vector(0, 0, 0))
    assert path.read_text() == HEADER + "255 255 255 \n0 0 0 \n"


def test_plot_when_closed_raises(tmp_path):
    canvas = Canvas(tmp_path / "c.ppm", 1, 1, 1, 1, 1)
    canvas.close()
    assert canvas.closed
    with pytest.raises(ValueError):
        canvas.plot(Vector())


def test_write_reopens_closed_canvas(tmp_path):
    path = tmp_path / "w.ppm"
    canvas = Canvas(path, 1, 1, 1, 1, 1)
    canvas.close()
    canvas.write("hello")
    assert not canvas.closed
    canvas.close()
    assert path.read_text() == "hello"


def test_write_appends_when_open(tmp_path):
    path = tmp_path / "w2.ppm"
    with Canvas(path, 100, 100, 1, 1, 1) as canvas:
        canvas.write("# note\n")
    assert path.read_text() == HEADER + "# note\n"


def test_rename_writes_header_to_new_file(tmp_path):
    old = tmp_path / "old.ppm"
    new = tmp_path / "new.ppm"
    with Canvas(old, 100, 100, 1, 1, 1) as canvas:
        canvas.plot(Vector(1, 2, 3))
        canvas.rename(new)
        assert canvas.name == str(new)
    assert old.read_text() == HEADER + "1 2 3 \n"
    assert new.read_text() == HEADER


def test_close_is_idempotent(tmp_path):
    canvas = Canvas(tmp_path / "i.ppm", 1, 1, 1, 1, 1)
    canvas.close()
    canvas.close()
    assert canvas.closed


def test_out_of_range_dimension_raises(tmp_path):
    with pytest.raises(ValueError):
        Canvas(tmp_path / "bad.ppm", 70000, 1, 1, 1, 1)


def test_non_integer_dimension_raises(tmp_path):
    with pytest.raises(TypeError):
        Canvas(tmp_path / "bad.ppm", 1.5, 1, 1, 1, 1)