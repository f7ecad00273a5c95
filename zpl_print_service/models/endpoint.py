"""
Network Endpoint Model
======================

Host and raw port of a network printer. Built per call, never stored.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any

from ..config import ZPL_PORT


@dataclass(frozen=True)
class NetworkEndpoint:
    """TCP address of a printer's raw port."""

    host: str
    port: int = ZPL_PORT

    def __str__(self) -> str:
        return f'{self.host}:{self.port}'

    @property
    def address(self) -> tuple:
        """Address tuple accepted by ``socket.create_connection``."""
        return (self.host, self.port)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
