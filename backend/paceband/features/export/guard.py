"""Single-flight guard for PDF exports."""

import logging
from contextlib import contextmanager
from typing import Iterator

from .exceptions import ExportBusyError

logger = logging.getLogger(__name__)


class ExportGuard:
    """
    Busy flag allowing one export in flight at a time.

    Usage:
        guard = ExportGuard()
        with guard.acquire():
            result = await exporter.export(surface, goal_time)

    A second acquire while the first is held raises ExportBusyError.
    The flag is released on every exit path.
    """

    def __init__(self):
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    @contextmanager
    def acquire(self) -> Iterator[None]:
        if self._busy:
            raise ExportBusyError("An export is already in progress")
        self._busy = True
        logger.debug("Export guard acquired")
        try:
            yield
        finally:
            self._busy = False
            logger.debug("Export guard released")


# Global guard shared by the API routes
export_guard = ExportGuard()
