"""
CUPS Registry
=============

Print queues of a CUPS server (Linux, macOS) via pycups.
Jobs are submitted raw so the queue forwards the ZPL to the printer untouched.
"""

import logging
import os
import tempfile
from typing import List, Optional

from .base import PrintJob, PrintService, PrintServiceRegistry
from ..errors import JobSubmissionError, RegistryUnavailableError
from ..models import Document

logger = logging.getLogger(__name__)


def _import_cups():
    try:
        import cups
    except ImportError as e:
        raise RegistryUnavailableError(
            f'Missing module: {e}. Install: pip install pycups'
        ) from e
    return cups


class CupsPrintJob(PrintJob):
    """Job submitted through ``Connection.printFile``."""

    def print(self, document: Document):
        cups = _import_cups()
        service = self.service
        options = {
            'document-format': document.flavor.mime_type,
            'raw': 'true',
        }

        temp_file_path = None
        try:
            with tempfile.NamedTemporaryFile(mode='wb', delete=False, suffix='.zpl') as tmp:
                tmp.write(document.data)
                temp_file_path = tmp.name

            logger.info("Submitting '%s' to CUPS queue '%s'", document.name, service.name)
            self.job_id = service.connection.printFile(
                service.name, temp_file_path, document.name, options
            )
        except cups.IPPError as e:
            raise JobSubmissionError(
                f"CUPS rejected job for '{service.name}': {e}", service=service.name
            ) from e
        except (RuntimeError, OSError) as e:
            raise JobSubmissionError(
                f"Cannot submit job to '{service.name}': {e}", service=service.name
            ) from e
        finally:
            if temp_file_path and os.path.exists(temp_file_path):
                os.remove(temp_file_path)

        logger.info("CUPS job %s queued on '%s'", self.job_id, service.name)
        return self.job_id


class CupsPrintService(PrintService):
    """A CUPS queue."""

    def __init__(self, name: str, connection, attributes: Optional[dict] = None):
        super().__init__(name)
        self.connection = connection
        self.attributes = attributes or {}

    def create_print_job(self) -> CupsPrintJob:
        return CupsPrintJob(self)


class CupsRegistry(PrintServiceRegistry):
    """Queues of the local (or configured) CUPS server."""

    kind = 'cups'

    def __init__(self, host: Optional[str] = None, port: Optional[int] = None):
        self.host = host
        self.port = port

    def _connect(self):
        cups = _import_cups()
        kwargs = {}
        if self.host:
            kwargs['host'] = self.host
        if self.port:
            kwargs['port'] = self.port
        try:
            return cups.Connection(**kwargs)
        except RuntimeError as e:
            raise RegistryUnavailableError(f'Cannot connect to CUPS: {e}') from e

    def _services(self) -> List[PrintService]:
        cups = _import_cups()
        connection = self._connect()
        try:
            printers = connection.getPrinters()
        except cups.IPPError as e:
            raise RegistryUnavailableError(f'Cannot list CUPS queues: {e}') from e

        return [CupsPrintService(name, connection, attrs) for name, attrs in printers.items()]
