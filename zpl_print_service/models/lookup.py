"""
Service Lookup Result
=====================

Outcome of matching a service name against the registered print services.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class LookupStatus(str, Enum):
    FOUND = 'found'
    NOT_FOUND = 'not_found'
    AMBIGUOUS = 'ambiguous'


@dataclass
class ServiceLookup:
    """Name lookup result: the requested name and every service matching it."""

    name: str
    matches: List[Any] = field(default_factory=list)

    @property
    def status(self) -> LookupStatus:
        if not self.matches:
            return LookupStatus.NOT_FOUND
        if len(self.matches) > 1:
            return LookupStatus.AMBIGUOUS
        return LookupStatus.FOUND

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def service(self) -> Optional[Any]:
        """The single matching service, or None unless status is FOUND."""
        return self.matches[0] if self.found else None
