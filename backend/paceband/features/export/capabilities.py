"""
Rasterizer and document composer capabilities.

The exporter depends only on the two protocols below; the matplotlib
implementations are the defaults.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Protocol

import matplotlib.image as mpimg
import numpy as np
from matplotlib.figure import Figure

from paceband.features.band.renderer import BandSurface

MM_PER_INCH = 25.4


@dataclass(frozen=True)
class Bitmap:
    """Captured raster of a surface."""
    pixels: np.ndarray   # height x width x channels
    png: bytes

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


@dataclass
class PageDocument:
    """A single page being composed."""
    figure: Figure
    width_mm: float
    height_mm: float


class Rasterizer(Protocol):
    def capture(self, surface: BandSurface, *, scale: float, background: str) -> Bitmap:
        ...


class DocumentComposer(Protocol):
    def new_page(self, width_mm: float, height_mm: float) -> PageDocument:
        ...

    def embed_image(
        self,
        doc: PageDocument,
        bitmap: Bitmap,
        x_mm: float,
        y_mm: float,
        width_mm: float,
        height_mm: float,
    ) -> None:
        ...

    def save(self, doc: PageDocument) -> bytes:
        ...


class MatplotlibRasterizer:
    """Renders the surface figure to PNG at figure dpi times scale."""

    def capture(self, surface: BandSurface, *, scale: float, background: str) -> Bitmap:
        fig = surface.figure
        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=fig.dpi * scale, facecolor=background)
        png = buf.getvalue()
        buf.seek(0)
        pixels = mpimg.imread(buf, format="png")
        return Bitmap(pixels=pixels, png=png)


class MatplotlibComposer:
    """
    Composes pages as matplotlib figures sized in millimetres.

    Positions are measured from the top-left corner of the page, as
    on paper.
    """

    def new_page(self, width_mm: float, height_mm: float) -> PageDocument:
        fig = Figure(figsize=(width_mm / MM_PER_INCH, height_mm / MM_PER_INCH), facecolor="white")
        return PageDocument(figure=fig, width_mm=width_mm, height_mm=height_mm)

    def embed_image(
        self,
        doc: PageDocument,
        bitmap: Bitmap,
        x_mm: float,
        y_mm: float,
        width_mm: float,
        height_mm: float,
    ) -> None:
        # Figure coordinates run bottom-up
        rect = (
            x_mm / doc.width_mm,
            1 - (y_mm + height_mm) / doc.height_mm,
            width_mm / doc.width_mm,
            height_mm / doc.height_mm,
        )
        ax = doc.figure.add_axes(rect)
        ax.imshow(bitmap.pixels, interpolation="none", aspect="auto")
        ax.axis("off")

    def save(self, doc: PageDocument) -> bytes:
        buf = io.BytesIO()
        doc.figure.savefig(buf, format="pdf")
        return buf.getvalue()
