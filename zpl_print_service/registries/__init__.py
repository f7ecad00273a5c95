"""
ZPL Print Service Registries
============================

OS print-service registries the local queue dispatcher looks services up in.
"""

import sys
from typing import Optional

from .base import PrintJob, PrintService, PrintServiceRegistry
from .cups import CupsRegistry
from .memory import MemoryRegistry, MemoryPrintService
from .win32 import Win32Registry
from ..config import MEMORY_KEEP_DOCUMENTS, MEMORY_SERVICES, REGISTRY

__all__ = [
    'PrintJob', 'PrintService', 'PrintServiceRegistry',
    'CupsRegistry', 'Win32Registry', 'MemoryRegistry', 'MemoryPrintService',
    'get_registry',
]

# Registry types
REGISTRIES = {
    'cups': CupsRegistry,
    'win32': Win32Registry,
    'memory': MemoryRegistry,
}


def get_registry(kind: Optional[str] = None) -> PrintServiceRegistry:
    """
    Create a registry by kind.

    Args:
        kind: cups, win32, memory or auto (default from config)

    Returns:
        Registry instance
    """
    kind = (kind or REGISTRY).lower()
    if kind == 'auto':
        kind = 'win32' if sys.platform == 'win32' else 'cups'

    registry_class = REGISTRIES.get(kind)
    if not registry_class:
        raise ValueError(f'Invalid registry type. Valid: {list(REGISTRIES.keys()) + ["auto"]}')
    if registry_class is MemoryRegistry:
        return MemoryRegistry(MEMORY_SERVICES, keep=MEMORY_KEEP_DOCUMENTS)
    return registry_class()
