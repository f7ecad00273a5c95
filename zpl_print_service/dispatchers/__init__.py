"""
ZPL Print Service Dispatchers
=============================

Transports that deliver raw command buffers to printers.
"""

from .base import BaseDispatcher
from .local import LocalQueueDispatcher, find_service
from .network import SocketDispatcher

__all__ = ['BaseDispatcher', 'LocalQueueDispatcher', 'SocketDispatcher', 'find_service']
