"""Export errors."""


class ExportError(Exception):
    """Base export error."""
    pass


class ExportCaptureError(ExportError):
    """Rasterizing the band failed."""
    pass


class ExportComposeError(ExportError):
    """Building the PDF page failed after a good capture."""
    pass


class ExportBusyError(ExportError):
    """Another export is still running."""
    pass
