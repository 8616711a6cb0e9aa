"""Tests for the Pillow-backed and recording canvases."""

from treecycle.canvas import Canvas, PillowCanvas, RecordingCanvas
from treecycle.models import palette


def test_canvases_satisfy_protocol():
    assert isinstance(PillowCanvas(10, 10), Canvas)
    assert isinstance(RecordingCanvas(), Canvas)


def test_drawing_is_invisible_until_present():
    canvas = PillowCanvas(40, 30, palette.SKY_BLUE)
    canvas.clear(palette.WHITE)
    canvas.fill_rect(0, 0, 10, 10, palette.MAGENTA)
    assert canvas.front.getpixel((5, 5)) == palette.SKY_BLUE

    canvas.present()
    assert canvas.front.getpixel((5, 5)) == palette.MAGENTA
    assert canvas.front.getpixel((20, 20)) == palette.WHITE
    assert canvas.frames_presented == 1


def test_buffers_alternate():
    canvas = PillowCanvas(20, 20)
    canvas.clear(palette.YELLOW)
    canvas.present()
    canvas.clear(palette.LEAF_GREEN)
    canvas.present()
    assert canvas.front.getpixel((0, 0)) == palette.LEAF_GREEN
    canvas.clear(palette.BROWN)
    canvas.present()
    assert canvas.front.getpixel((0, 0)) == palette.BROWN


def test_snapshot_is_a_copy():
    canvas = PillowCanvas(20, 20)
    canvas.clear(palette.YELLOW)
    canvas.present()
    snap = canvas.snapshot()
    canvas.clear(palette.BROWN)
    canvas.present()
    assert snap.getpixel((0, 0)) == palette.YELLOW


def test_reversed_rect_corners():
    canvas = PillowCanvas(20, 20, palette.WHITE)
    canvas.clear(palette.WHITE)
    canvas.fill_rect(15, 15, 5, 5, palette.BROWN)
    canvas.present()
    assert canvas.front.getpixel((10, 10)) == palette.BROWN


def test_ellipse_and_line():
    canvas = PillowCanvas(50, 50, palette.WHITE)
    canvas.clear(palette.WHITE)
    canvas.fill_ellipse((25, 25), 5, 5, palette.MAGENTA)
    canvas.line((0, 45), (49, 45), palette.BROWN, 3)
    canvas.present()
    assert canvas.front.getpixel((25, 25)) == palette.MAGENTA
    assert canvas.front.getpixel((25, 10)) == palette.WHITE
    assert canvas.front.getpixel((30, 45)) == palette.BROWN


def test_text_marks_pixels():
    canvas = PillowCanvas(200, 40, palette.SKY_BLUE)
    canvas.clear(palette.SKY_BLUE)
    canvas.text((5, 5), "Phase 1", palette.WHITE, size=2)
    canvas.present()
    assert palette.WHITE in {color for _, color in canvas.front.getcolors(200 * 40)}


def test_recording_clear_drops_pending():
    canvas = RecordingCanvas()
    canvas.line((0, 0), (1, 1), palette.BROWN)
    canvas.clear(palette.SKY_BLUE)
    canvas.fill_rect(0, 0, 1, 1, palette.SOIL_BROWN)
    canvas.present()
    assert [c.kind for c in canvas.presented] == ["clear", "rect"]
    assert canvas.pending == []
    assert canvas.count("rect", palette.SOIL_BROWN) == 1
    assert canvas.count("line") == 0
