"""
Print Exporter

Turns a rendered band into a one-page PDF at real-world size:

1. Capture - rasterize the band at an oversampled resolution, with the
   view reset to the home position and restored afterward
2. Compose - embed the bitmap on an A4 page at a fixed physical width,
   centred, below a fixed top margin
3. Emit - name the file after the goal time and hand back the bytes

Failures in steps 1-2 come back as ExportFailed; nothing is retried
and no partial bytes are returned.
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from paceband.config import settings
from paceband.features.band.renderer import BandSurface
from .capabilities import (
    Bitmap,
    DocumentComposer,
    MatplotlibComposer,
    MatplotlibRasterizer,
    Rasterizer,
)
from .exceptions import ExportCaptureError, ExportComposeError, ExportError

logger = logging.getLogger(__name__)

CAPTURE_FAILED_MESSAGE = "Could not capture the pace band, please try again"
COMPOSE_FAILED_MESSAGE = "Could not build the PDF, please try again"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9:._-]+")


@dataclass(frozen=True)
class ExportSucceeded:
    filename: str
    content: bytes


@dataclass(frozen=True)
class ExportFailed:
    message: str
    error: ExportError


ExportResult = Union[ExportSucceeded, ExportFailed]


@dataclass(frozen=True)
class PageLayout:
    """Physical page geometry in millimetres."""
    page_width_mm: float = 210.0
    page_height_mm: float = 297.0
    band_width_mm: float = 60.0
    top_margin_mm: float = 10.0

    @classmethod
    def from_settings(cls) -> "PageLayout":
        return cls(
            page_width_mm=settings.page_width_mm,
            page_height_mm=settings.page_height_mm,
            band_width_mm=settings.band_width_mm,
            top_margin_mm=settings.top_margin_mm,
        )

    def place(self, bitmap: Bitmap) -> Tuple[float, float, float, float]:
        """
        Position of the band on the page: (x, y, width, height) in mm.

        Width is fixed; height follows the bitmap aspect ratio.

        Raises:
            ExportComposeError: If the bitmap is empty or too tall for the page
        """
        if bitmap.width <= 0 or bitmap.height <= 0:
            raise ExportComposeError("Captured bitmap is empty")

        width = self.band_width_mm
        height = bitmap.height * width / bitmap.width
        x = (self.page_width_mm - width) / 2
        y = self.top_margin_mm
        if y + height > self.page_height_mm:
            raise ExportComposeError(
                f"Band is {height:.0f}mm tall and does not fit on one page"
            )
        return x, y, width, height


def export_filename(seed: str) -> str:
    """
    File name for an export, e.g. 'pace-band-03:00:00.pdf'.

    Runs of characters outside [A-Za-z0-9:._-] in the seed become a
    single '_', so the name stays one ASCII path component that is
    safe in a header and on disk.
    """
    safe = _UNSAFE_FILENAME_CHARS.sub("_", seed.strip()).strip("._") or "band"
    return f"pace-band-{safe}.pdf"


class PrintExporter:
    """
    Rasterize-then-embed PDF exporter.

    Not safe to run twice at once on the same surface; callers hold
    an ExportGuard around export().
    """

    def __init__(
        self,
        rasterizer: Optional[Rasterizer] = None,
        composer: Optional[DocumentComposer] = None,
        layout: Optional[PageLayout] = None,
        scale: Optional[float] = None,
        background: Optional[str] = None,
    ):
        self.rasterizer = rasterizer or MatplotlibRasterizer()
        self.composer = composer or MatplotlibComposer()
        self.layout = layout or PageLayout.from_settings()
        self.scale = scale if scale is not None else settings.export_scale
        self.background = background or settings.export_background

    def capture(self, surface: BandSurface) -> Bitmap:
        """Rasterize the surface from its home view, then restore the view."""
        saved_view = surface.get_view()
        surface.reset_view()
        try:
            return self.rasterizer.capture(
                surface, scale=self.scale, background=self.background
            )
        except Exception as e:
            raise ExportCaptureError(str(e)) from e
        finally:
            surface.set_view(saved_view)

    def compose(self, bitmap: Bitmap) -> bytes:
        """Build the PDF page around a captured bitmap."""
        try:
            x, y, width, height = self.layout.place(bitmap)
            doc = self.composer.new_page(self.layout.page_width_mm, self.layout.page_height_mm)
            self.composer.embed_image(doc, bitmap, x, y, width, height)
            return self.composer.save(doc)
        except ExportComposeError:
            raise
        except Exception as e:
            raise ExportComposeError(str(e)) from e

    def export_sync(self, surface: BandSurface, filename_seed: str) -> ExportResult:
        """Blocking export, see export()."""
        filename = export_filename(filename_seed)
        logger.info(f"Exporting {filename}")

        try:
            bitmap = self.capture(surface)
        except ExportCaptureError as e:
            logger.exception(f"Capture failed for {filename}")
            return ExportFailed(message=CAPTURE_FAILED_MESSAGE, error=e)

        try:
            content = self.compose(bitmap)
        except ExportComposeError as e:
            logger.exception(f"Compose failed for {filename}")
            return ExportFailed(message=COMPOSE_FAILED_MESSAGE, error=e)

        logger.info(f"Exported {filename} ({len(content)} bytes, {bitmap.width}x{bitmap.height}px)")
        return ExportSucceeded(filename=filename, content=content)

    async def export(self, surface: BandSurface, filename_seed: str) -> ExportResult:
        """
        Export a band to PDF.

        Rendering is blocking work, so it runs in a worker thread.

        Args:
            surface: Rendered band
            filename_seed: Goal time text, embedded in the file name

        Returns:
            ExportSucceeded with the PDF bytes, or ExportFailed with a
            message for the user
        """
        return await asyncio.to_thread(self.export_sync, surface, filename_seed)
