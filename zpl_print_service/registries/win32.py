"""
Windows Registry
================

Printers known to the Windows spooler, via pywin32.
Jobs use the RAW datatype so the driver does not render the ZPL.
"""

import logging
from typing import List

from .base import PrintJob, PrintService, PrintServiceRegistry
from ..errors import JobSubmissionError, RegistryUnavailableError
from ..models import Document

logger = logging.getLogger(__name__)


def _import_win32print():
    try:
        import win32print
    except ImportError as e:
        raise RegistryUnavailableError(
            f'Missing module: {e}. Install: pip install pywin32'
        ) from e
    return win32print


class Win32PrintJob(PrintJob):
    """RAW spooler job: StartDocPrinter / WritePrinter / EndDocPrinter."""

    def print(self, document: Document):
        win32print = _import_win32print()
        name = self.service.name

        logger.info("Submitting '%s' to Windows printer '%s'", document.name, name)
        try:
            handle = win32print.OpenPrinter(name)
            try:
                self.job_id = win32print.StartDocPrinter(handle, 1, (document.name, None, 'RAW'))
                try:
                    win32print.StartPagePrinter(handle)
                    win32print.WritePrinter(handle, document.data)
                    win32print.EndPagePrinter(handle)
                finally:
                    win32print.EndDocPrinter(handle)
            finally:
                win32print.ClosePrinter(handle)
        except Exception as e:
            # pywintypes.error is not importable without pywin32 installed
            raise JobSubmissionError(f"Cannot submit job to '{name}': {e}", service=name) from e

        logger.info("Windows job %s queued on '%s'", self.job_id, name)
        return self.job_id


class Win32PrintService(PrintService):
    """A Windows printer (local or connection)."""

    def create_print_job(self) -> Win32PrintJob:
        return Win32PrintJob(self)


class Win32Registry(PrintServiceRegistry):
    """Local printers and printer connections of this Windows host."""

    kind = 'win32'

    def _services(self) -> List[PrintService]:
        win32print = _import_win32print()
        printers = win32print.EnumPrinters(
            win32print.PRINTER_ENUM_LOCAL | win32print.PRINTER_ENUM_CONNECTIONS
        )
        # EnumPrinters returns tuples; the name is at index 2
        return [Win32PrintService(p[2]) for p in printers if p[2]]
