"""
Local Queue Dispatcher
======================

Hands raw command bytes to a print service registered with the OS
(CUPS queue or Windows printer). The spooler forwards the auto-sensed
document to the printer; no job status is awaited.
"""

import logging
from typing import Any, Dict, Iterable, List

from .base import BaseDispatcher
from ..errors import (
    AmbiguousServiceError,
    JobSubmissionError,
    PrintDispatchError,
    ServiceNotFoundError,
)
from ..models import AUTOSENSE, Document, LookupStatus, ServiceLookup
from ..registries import PrintService, PrintServiceRegistry

logger = logging.getLogger(__name__)


def find_service(services: Iterable[PrintService], name: str) -> ServiceLookup:
    """Match services by exact name; the result tells found, not found or ambiguous."""
    return ServiceLookup(name=name, matches=[s for s in services if s.name == name])


class LocalQueueDispatcher(BaseDispatcher):
    """Dispatcher for printers behind the local print spooler."""

    transport = 'local'

    def __init__(self, registry: PrintServiceRegistry, flavor=AUTOSENSE):
        self.registry = registry
        self.flavor = flavor

    def list_service_names(self) -> List[str]:
        """Names of the services that accept the dispatcher's flavor."""
        return self.registry.service_names(self.flavor)

    def resolve(self, service_name: str) -> PrintService:
        """
        Find the one service called ``service_name``.

        Raises:
            ServiceNotFoundError: No service has that name
            AmbiguousServiceError: More than one service has that name
        """
        lookup = find_service(self.registry.lookup_services(self.flavor), service_name)
        logger.info("Lookup of print service '%s': %s", service_name, lookup.status.value)

        if lookup.status is LookupStatus.NOT_FOUND:
            raise ServiceNotFoundError(
                f"Print service '{service_name}' not found", service=service_name
            )
        if lookup.status is LookupStatus.AMBIGUOUS:
            raise AmbiguousServiceError(
                f"Print service name '{service_name}' is ambiguous "
                f"({len(lookup.matches)} services match)",
                service=service_name,
            )
        return lookup.service

    def submit(self, service_name: str, buffer: bytes, document_name: str = 'ZPL Print'):
        """
        Resolve the service and submit the buffer as one print job.

        Returns:
            The submitted job

        Raises:
            ServiceResolutionError: Name did not match exactly one service
            JobSubmissionError: Spooler refused the job
        """
        data = self._check_buffer(buffer)
        service = self.resolve(service_name)
        document = Document(data, self.flavor, document_name)

        try:
            job = service.create_print_job()
            job.print(document)
        except PrintDispatchError:
            raise
        except Exception as e:
            raise JobSubmissionError(
                f"Cannot submit job to '{service_name}': {e}", service=service_name
            ) from e

        logger.info("Submitted %d bytes to print service '%s'", len(data), service_name)
        return job

    def dispatch(self, service_name: str, buffer: bytes) -> Dict[str, Any]:
        """
        Send a command buffer to a local print service.

        Args:
            service_name: Exact name of the registered service
            buffer: Raw command bytes

        Returns:
            Dict with success status, service, job_id and bytes_sent
        """
        def action():
            job = self.submit(service_name, buffer)
            return {
                'service': service_name,
                'job_id': job.job_id,
                'bytes_sent': len(buffer),
            }

        return self._run(action, service=service_name)
