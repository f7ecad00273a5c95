"""
Memory Registry
===============

In-process print services that keep submitted documents instead of
printing them. Used for dry runs and tests.
"""

import itertools
from typing import Iterable, List, Optional

from .base import PrintJob, PrintService, PrintServiceRegistry
from ..models import Document


class MemoryPrintJob(PrintJob):

    def print(self, document: Document):
        self.job_id = self.service.record(document)
        return self.job_id


class MemoryPrintService(PrintService):
    """
    Service recording the documents it receives.

    ``keep`` caps how many documents and jobs are retained (oldest dropped);
    None keeps all of them.
    """

    def __init__(self, name: str, flavors=None, keep: Optional[int] = None):
        super().__init__(name)
        if flavors is not None:
            self.flavors = frozenset(flavors)
        self.keep = keep
        self.documents: List[Document] = []
        self.jobs: List[MemoryPrintJob] = []
        self._job_ids = itertools.count(1)

    def _trim(self, items: list):
        if self.keep is not None and len(items) > self.keep:
            del items[:len(items) - self.keep]

    def create_print_job(self) -> MemoryPrintJob:
        job = MemoryPrintJob(self)
        self.jobs.append(job)
        self._trim(self.jobs)
        return job

    def record(self, document: Document) -> int:
        """Store a submitted document; returns its job id."""
        self.documents.append(document)
        self._trim(self.documents)
        return next(self._job_ids)


class MemoryRegistry(PrintServiceRegistry):

    kind = 'memory'

    def __init__(self, services: Iterable = (), keep: Optional[int] = None):
        self.keep = keep
        self.services: List[PrintService] = [
            MemoryPrintService(s, keep=keep) if isinstance(s, str) else s for s in services
        ]

    def add(self, name: str) -> MemoryPrintService:
        service = MemoryPrintService(name, keep=self.keep)
        self.services.append(service)
        return service

    def _services(self) -> List[PrintService]:
        return list(self.services)
