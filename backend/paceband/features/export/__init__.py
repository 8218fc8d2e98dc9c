"""
PDF export module.

Usage:
    from paceband.features.export import PrintExporter, export_guard

    with export_guard.acquire():
        result = await PrintExporter().export(surface, "03:00:00")

Components:
- PrintExporter: capture, compose, emit
- ExportGuard: one export in flight at a time
- MatplotlibRasterizer / MatplotlibComposer: default capabilities
"""

from .capabilities import (
    Bitmap,
    PageDocument,
    Rasterizer,
    DocumentComposer,
    MatplotlibRasterizer,
    MatplotlibComposer,
)
from .exceptions import (
    ExportError,
    ExportCaptureError,
    ExportComposeError,
    ExportBusyError,
)
from .exporter import (
    PrintExporter,
    PageLayout,
    ExportSucceeded,
    ExportFailed,
    ExportResult,
    export_filename,
)
from .guard import ExportGuard, export_guard

__all__ = [
    # Capabilities
    "Bitmap",
    "PageDocument",
    "Rasterizer",
    "DocumentComposer",
    "MatplotlibRasterizer",
    "MatplotlibComposer",
    # Errors
    "ExportError",
    "ExportCaptureError",
    "ExportComposeError",
    "ExportBusyError",
    # Exporter
    "PrintExporter",
    "PageLayout",
    "ExportSucceeded",
    "ExportFailed",
    "ExportResult",
    "export_filename",
    # Guard
    "ExportGuard",
    "export_guard",
]
