"""
ZPL Print Service Models
"""

from .endpoint import NetworkEndpoint
from .document import DocFlavor, Document, AUTOSENSE
from .lookup import LookupStatus, ServiceLookup

__all__ = [
    'NetworkEndpoint', 'DocFlavor', 'Document', 'AUTOSENSE',
    'LookupStatus', 'ServiceLookup',
]
