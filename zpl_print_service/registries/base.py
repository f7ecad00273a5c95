"""
Base Registry
=============

Abstract print services, jobs and registries.
"""

from abc import ABC, abstractmethod
from typing import FrozenSet, List, Optional

from ..models import AUTOSENSE, DocFlavor, Document


class PrintJob(ABC):
    """Single-use handle for one submission to a print service."""

    def __init__(self, service: 'PrintService'):
        self.service = service
        self.job_id = None

    @abstractmethod
    def print(self, document: Document):
        """
        Submit a document.

        Raises:
            JobSubmissionError: The spooler rejected the job
        """
        pass


class PrintService(ABC):
    """A printer queue known to the OS."""

    flavors: FrozenSet[DocFlavor] = frozenset({AUTOSENSE})

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.name!r})'

    def supports(self, flavor: DocFlavor) -> bool:
        """Check if the service accepts documents of this flavor."""
        return flavor in self.flavors

    @abstractmethod
    def create_print_job(self) -> PrintJob:
        """Get a new job handle."""
        pass


class PrintServiceRegistry(ABC):
    """Source of the currently registered print services."""

    kind = ''

    @abstractmethod
    def _services(self) -> List[PrintService]:
        """
        Enumerate services.

        Raises:
            RegistryUnavailableError: The OS registry cannot be queried
        """
        pass

    def lookup_services(self, flavor: Optional[DocFlavor] = None) -> List[PrintService]:
        """Current services, optionally only those accepting ``flavor``."""
        services = self._services()
        if flavor is None:
            return services
        return [s for s in services if s.supports(flavor)]

    def service_names(self, flavor: Optional[DocFlavor] = None) -> List[str]:
        return [s.name for s in self.lookup_services(flavor)]
