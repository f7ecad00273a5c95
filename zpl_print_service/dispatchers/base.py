"""
Base Dispatcher
===============

Abstract base class for print dispatchers.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from ..errors import PrintDispatchError

logger = logging.getLogger(__name__)


class BaseDispatcher(ABC):
    """Delivers an opaque command buffer to one kind of printer endpoint."""

    transport = ''

    @abstractmethod
    def dispatch(self, target, buffer: bytes) -> Dict[str, Any]:
        """
        Deliver a command buffer.

        Args:
            target: Destination (endpoint or service name)
            buffer: Raw command bytes, sent untouched

        Returns:
            Dict with success status and details; failures carry
            ``reason`` and ``error``
        """
        pass

    def _run(self, action: Callable[[], Dict[str, Any]], **context) -> Dict[str, Any]:
        """Run a raising delivery action and report its outcome as a dict."""
        try:
            result = action()
        except PrintDispatchError as e:
            logger.error('%s dispatch failed (%s): %s', self.transport, e.reason, e.message)
            data = e.to_dict()
            for key, value in context.items():
                data.setdefault(key, value)
            return data

        result['success'] = True
        return result

    @staticmethod
    def _check_buffer(buffer) -> bytes:
        if not isinstance(buffer, (bytes, bytearray)):
            raise TypeError(f'Command buffer must be bytes, not {type(buffer).__name__}')
        return bytes(buffer)
