"""
Document Model
==============

A command buffer tagged with the flavor the print service should treat it as.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocFlavor:
    """Format tag handed to a print service alongside the data."""

    name: str
    mime_type: str

    def __str__(self) -> str:
        return self.mime_type


# Raw bytes; the spooler senses the format and passes it through untouched
AUTOSENSE = DocFlavor(name='autosense', mime_type='application/octet-stream')


@dataclass(frozen=True)
class Document:
    """Opaque print data plus its flavor."""

    data: bytes
    flavor: DocFlavor = AUTOSENSE
    name: str = 'ZPL Print'

    def __post_init__(self):
        if not isinstance(self.data, (bytes, bytearray)):
            raise TypeError('Document data must be bytes')

    def __len__(self) -> int:
        return len(self.data)
