"""Tests for render.py (rendering to PNG)."""

import matplotlib

matplotlib.use("Agg")

import pytest

from facesketch.models import Edge, Point
from facesketch.render import face_color, render_png
from facesketch.sketch import RECTANGLE, Click, Sketch, replay


@pytest.fixture
def rectangle():
    return replay(Sketch(tool=RECTANGLE), [Click(0, 0), Click(200, 100)])


def test_face_color_is_stable():
    assert face_color(5) == face_color(5)
    assert face_color(5) != face_color(6)
    assert face_color(5).startswith("#")
    assert face_color("f1") == face_color("f1")


def test_renders_sketch(rectangle, tmp_path):
    out = tmp_path / "sketch.png"
    render_png(rectangle, out)
    assert out.exists()
    assert out.stat().st_size > 0


def test_renders_with_preview(rectangle, tmp_path):
    sketch = replay(rectangle, [Click(50, 50)])
    out = tmp_path / "nested" / "preview.png"
    render_png(sketch, out, preview=sketch.preview(100, 3))
    assert out.exists()


def test_skips_edges_with_missing_points(tmp_path):
    sketch = Sketch(points=[Point(1, 0, 0), Point(2, 10, 10)], edges=[Edge(1, 2), Edge(2, 3)])
    out = tmp_path / "partial.png"
    render_png(sketch, out)
    assert out.exists()


def test_empty_sketch_rejected(tmp_path):
    with pytest.raises(ValueError):
        render_png(Sketch(), tmp_path / "empty.png")
