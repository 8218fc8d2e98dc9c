"""
Tests for PrintExporter.

Capabilities are mocked for the pipeline tests; one end-to-end test
runs the matplotlib rasterizer and composer for real.
"""

import asyncio
from unittest.mock import MagicMock

import numpy as np
import pytest

from paceband.config import settings
from paceband.features.splits import RaceDistance, compute_splits
from paceband.features.band import render_band
from paceband.features.export import (
    Bitmap,
    ExportCaptureError,
    ExportComposeError,
    ExportFailed,
    ExportGuard,
    ExportSucceeded,
    PageLayout,
    PrintExporter,
    export_filename,
)
from paceband.features.export.exporter import CAPTURE_FAILED_MESSAGE, COMPOSE_FAILED_MESSAGE


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def surface():
    splits = compute_splits("03:00:00", 42.195, "km")
    return render_band(splits, "03:00:00", RaceDistance(42.195, "km"))


def _bitmap(height: int, width: int) -> Bitmap:
    return Bitmap(pixels=np.zeros((height, width, 4), dtype=np.float32), png=b"")


@pytest.fixture
def rasterizer():
    """Rasterizer returning a 100x400 px bitmap and recording the view."""
    mock = MagicMock()
    mock.seen_home = []

    def capture(surface, *, scale, background):
        mock.seen_home.append(surface.is_home)
        return _bitmap(400, 100)

    mock.capture.side_effect = capture
    return mock


@pytest.fixture
def composer():
    mock = MagicMock()
    mock.save.return_value = b"%PDF-fake"
    return mock


@pytest.fixture
def exporter(rasterizer, composer):
    return PrintExporter(
        rasterizer=rasterizer,
        composer=composer,
        layout=PageLayout(),
        scale=2.0,
        background="#ffffff",
    )


# =============================================================================
# Test capture
# =============================================================================

class TestCapture:
    """Tests for the capture step."""

    def test_captures_from_home_view(self, exporter, rasterizer, surface):
        surface.pan(1.0, 10.0)
        exporter.export_sync(surface, "03:00:00")
        assert rasterizer.seen_home == [True]

    def test_restores_view_after_capture(self, exporter, surface):
        surface.pan(1.0, 10.0)
        panned = surface.get_view()

        exporter.export_sync(surface, "03:00:00")
        assert surface.get_view() == panned

    def test_restores_view_after_failure(self, exporter, rasterizer, surface):
        rasterizer.capture.side_effect = RuntimeError("unsupported content")
        surface.pan(1.0, 10.0)
        panned = surface.get_view()

        exporter.export_sync(surface, "03:00:00")
        assert surface.get_view() == panned

    def test_passes_scale_and_background(self, rasterizer, composer, surface):
        exporter = PrintExporter(rasterizer=rasterizer, composer=composer, scale=3.0, background="#fafafa")
        exporter.export_sync(surface, "03:00:00")

        kwargs = rasterizer.capture.call_args.kwargs
        assert kwargs == {"scale": 3.0, "background": "#fafafa"}

    def test_capture_error_wrapped(self, exporter, rasterizer, surface):
        rasterizer.capture.side_effect = RuntimeError("cross-origin image")
        with pytest.raises(ExportCaptureError):
            exporter.capture(surface)


# =============================================================================
# Test compose
# =============================================================================

class TestCompose:
    """Tests for page layout and the compose step."""

    def test_band_centred_at_fixed_width(self, exporter, composer, surface):
        exporter.export_sync(surface, "03:00:00")

        composer.new_page.assert_called_once_with(210.0, 297.0)
        doc, bitmap, x, y, width, height = composer.embed_image.call_args.args
        assert doc is composer.new_page.return_value
        assert x == pytest.approx(75.0)
        assert y == pytest.approx(10.0)
        assert width == pytest.approx(60.0)
        assert height == pytest.approx(240.0)

    def test_aspect_ratio_preserved(self):
        x, y, width, height = PageLayout().place(_bitmap(300, 150))
        assert height / width == pytest.approx(2.0)

    def test_width_independent_of_resolution(self):
        low = PageLayout().place(_bitmap(200, 50))
        high = PageLayout().place(_bitmap(800, 200))
        assert low == pytest.approx(high)

    def test_too_tall_for_page(self):
        with pytest.raises(ExportComposeError):
            PageLayout().place(_bitmap(1000, 100))

    def test_empty_bitmap(self):
        with pytest.raises(ExportComposeError):
            PageLayout().place(_bitmap(0, 0))

    def test_composer_error_wrapped(self, exporter, composer):
        composer.save.side_effect = OSError("disk full")
        with pytest.raises(ExportComposeError):
            exporter.compose(_bitmap(400, 100))


# =============================================================================
# Test export
# =============================================================================

class TestExport:
    """Tests for the full export pipeline."""

    def test_success(self, exporter, rasterizer, surface):
        result = asyncio.run(exporter.export(surface, "03:00:00"))

        assert result == ExportSucceeded(filename="pace-band-03:00:00.pdf", content=b"%PDF-fake")
        assert rasterizer.capture.call_count == 1

    def test_capture_failure(self, exporter, rasterizer, composer, surface):
        rasterizer.capture.side_effect = RuntimeError("unsupported content")

        result = asyncio.run(exporter.export(surface, "03:00:00"))

        assert isinstance(result, ExportFailed)
        assert result.message == CAPTURE_FAILED_MESSAGE
        assert isinstance(result.error, ExportCaptureError)
        composer.new_page.assert_not_called()

    def test_compose_failure_returns_no_content(self, exporter, rasterizer, composer, surface):
        rasterizer.capture.side_effect = None
        rasterizer.capture.return_value = _bitmap(1000, 100)

        result = asyncio.run(exporter.export(surface, "03:00:00"))

        assert isinstance(result, ExportFailed)
        assert result.message == COMPOSE_FAILED_MESSAGE
        assert isinstance(result.error, ExportComposeError)
        assert not hasattr(result, "content")
        composer.save.assert_not_called()

    def test_not_retried(self, exporter, rasterizer, surface):
        rasterizer.capture.side_effect = RuntimeError("boom")
        asyncio.run(exporter.export(surface, "03:00:00"))
        assert rasterizer.capture.call_count == 1

    @pytest.mark.parametrize("fail", [False, True])
    def test_guard_released(self, exporter, rasterizer, surface, fail):
        """Guard is free before and after, on success and on failure."""
        if fail:
            rasterizer.capture.side_effect = RuntimeError("capture failed")
        guard = ExportGuard()

        async def run():
            with guard.acquire():
                assert guard.busy
                return await exporter.export(surface, "03:00:00")

        assert not guard.busy
        result = asyncio.run(run())
        assert not guard.busy
        assert isinstance(result, ExportFailed if fail else ExportSucceeded)

    def test_defaults_from_settings(self):
        exporter = PrintExporter()
        assert exporter.scale == settings.export_scale
        assert exporter.layout.band_width_mm == settings.band_width_mm
        assert exporter.background == settings.export_background


# =============================================================================
# Test filename
# =============================================================================

class TestExportFilename:
    """Tests for export_filename function."""

    def test_embeds_goal_time(self):
        assert export_filename("03:00:00") == "pace-band-03:00:00.pdf"

    def test_different_goals_do_not_collide(self):
        assert export_filename("03:00:00") != export_filename("03:30:00")

    @pytest.mark.parametrize("seed,expected", [
        ("3:00:00 \u2713", "pace-band-3:00:00.pdf"),
        ("3:00:00\u3000", "pace-band-3:00:00.pdf"),
        ('3:00:00"x', "pace-band-3:00:00_x.pdf"),
        ("3:00/00", "pace-band-3:00_00.pdf"),
        ("../../3:00:00", "pace-band-3:00:00.pdf"),
        ("3:00\\00", "pace-band-3:00_00.pdf"),
    ])
    def test_unsafe_characters_replaced(self, seed, expected):
        assert export_filename(seed) == expected

    def test_name_is_single_ascii_component(self):
        name = export_filename("\u00e9/\x00\n")
        assert name.isascii()
        assert "/" not in name
        assert "\x00" not in name


# =============================================================================
# Test matplotlib end to end
# =============================================================================

class TestMatplotlibExport:
    """Real rasterizer and composer."""

    def test_pdf_output(self, surface):
        result = PrintExporter(layout=PageLayout(), scale=2.0, background="#ffffff").export_sync(
            surface, "03:00:00"
        )

        assert isinstance(result, ExportSucceeded)
        assert result.content.startswith(b"%PDF")
        # A4 media box in points
        assert b"595.27" in result.content
        assert b"841.88" in result.content

    @pytest.mark.parametrize("distance,unit", [(58, "km"), (100, "km"), (62.137, "mi")])
    def test_ultra_fits_one_page(self, distance, unit):
        splits = compute_splits("10:00:00", distance, unit)
        ultra = render_band(splits, "10:00:00", RaceDistance(distance, unit))

        result = PrintExporter().export_sync(ultra, "10:00:00")

        assert isinstance(result, ExportSucceeded)
        assert result.content.startswith(b"%PDF")

    def test_capture_is_oversampled(self, surface):
        from paceband.features.export import MatplotlibRasterizer

        fig = surface.figure
        bitmap = MatplotlibRasterizer().capture(surface, scale=2.0, background="#ffffff")

        assert bitmap.png.startswith(b"\x89PNG")
        assert bitmap.width == pytest.approx(fig.get_figwidth() * fig.dpi * 2, abs=2)
        assert bitmap.height == pytest.approx(fig.get_figheight() * fig.dpi * 2, abs=2)
