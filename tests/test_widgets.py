"""Tests for the TUI widgets and the Textual app."""

import pytest
from PIL import Image

from treecycle.app import TreeCycleApp
from treecycle.models import Phase, palette
from treecycle.widgets.canvas_view import HALF_BLOCK, fit_cells, image_to_text
from treecycle.widgets.phase_strip import render_strip


class TestFitCells:
    def test_width_bound(self):
        # 800x600 into 80x100 cells: width limits, 80 cols x 30 rows.
        assert fit_cells((800, 600), 80, 100) == (80, 30)

    def test_height_bound(self):
        # 800x600 into 200x30 cells: 60 pixel rows -> 80 cols x 30 rows.
        assert fit_cells((800, 600), 200, 30) == (80, 30)

    def test_empty_area(self):
        assert fit_cells((800, 600), 0, 20) == (0, 0)
        assert fit_cells((800, 600), 20, 0) == (0, 0)


class TestImageToText:
    def test_dimensions(self):
        image = Image.new("RGB", (40, 40), palette.SKY_BLUE)
        text = image_to_text(image, 10, 5)
        lines = text.plain.split("\n")
        assert len(lines) == 5
        assert all(line == HALF_BLOCK * 10 for line in lines)

    def test_top_and_bottom_colours(self):
        image = Image.new("RGB", (4, 4), palette.SKY_BLUE)
        image.paste(palette.SOIL_BROWN, (0, 2, 4, 4))
        text = image_to_text(image, 1, 2)
        styles = [span.style for span in text.spans]
        top_cell, bottom_cell = styles[0], styles[-1]
        assert top_cell.color.triplet == palette.SKY_BLUE
        assert bottom_cell.bgcolor.triplet == palette.SOIL_BROWN


class TestPhaseStrip:
    def test_current_phase_highlighted(self):
        strip = render_strip(Phase.GROWTH, 0.5, 0.0, 3)
        assert "[bold reverse] Tree Growth [/]" in strip
        assert " Seedling ->" in strip
        assert "growth ####...." in strip
        assert "bloom ........" in strip
        assert strip.endswith("cycle 3")

    def test_gauges_clamped(self):
        strip = render_strip(Phase.RESET, 1.7, -0.2, 0)
        assert "growth ########" in strip
        assert "bloom ........" in strip


class TestApp:
    @pytest.mark.asyncio
    async def test_space_restarts_and_escape_exits(self, small_config):
        app = TreeCycleApp(small_config)
        async with app.run_test() as pilot:
            app._ticker.pause()
            for _ in range(4):
                app.tick()
            assert app.loop.engine.frame >= 4
            await pilot.press("space")
            assert app.loop.engine.phase is Phase.GERMINATION
            assert app.loop.engine.phase_timer == 0
            await pilot.press("escape")
        assert app.return_value is None

    @pytest.mark.asyncio
    async def test_tick_updates_canvas(self, small_config):
        app = TreeCycleApp(small_config)
        async with app.run_test(size=(80, 30)):
            app.tick()
            assert app.canvas.frames_presented >= 1
            assert app.sub_title == small_config.canvas.title
