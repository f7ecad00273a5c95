"""
Socket Dispatcher
=================

Sends raw command bytes to a network printer's raw port (usually 9100).
Works with Zebra, CAB (in ZPL emulation mode) and any printer accepting
unformatted data over TCP. Fire-and-forget: nothing is read back.
"""

import logging
import socket
from typing import Any, Dict, Optional

from .base import BaseDispatcher
from ..errors import DeliveryError
from ..models import NetworkEndpoint

logger = logging.getLogger(__name__)


class SocketDispatcher(BaseDispatcher):
    """Dispatcher for printers reachable over a raw TCP socket."""

    transport = 'socket'

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: Connect/write timeout in seconds; None blocks with the
                OS defaults
        """
        self.timeout = timeout

    def send(self, endpoint: NetworkEndpoint, buffer: bytes) -> int:
        """
        Write the whole buffer to the endpoint.

        The connection is closed before returning on every path.

        Returns:
            Number of bytes sent

        Raises:
            DeliveryError: Host unresolved, connection refused, timeout or
                write failure
        """
        data = self._check_buffer(buffer)
        host, port = endpoint.address

        logger.info('Sending %d bytes to %s', len(data), endpoint)
        try:
            with socket.create_connection((host, port), timeout=self.timeout) as sock:
                sock.sendall(data)
        except socket.gaierror as e:
            raise DeliveryError(f'Cannot resolve host {host}: {e}', host=host, port=port) from e
        except UnicodeError as e:
            # IDNA encoding of the host name (empty or overlong label)
            raise DeliveryError(f'Cannot resolve host {host}: {e}', host=host, port=port) from e
        except socket.timeout as e:
            raise DeliveryError(f'Connection timeout to {host}:{port}', host=host, port=port) from e
        except ConnectionRefusedError as e:
            raise DeliveryError(f'Connection refused by {host}:{port}', host=host, port=port) from e
        except OSError as e:
            raise DeliveryError(f'Delivery to {host}:{port} failed: {e}', host=host, port=port) from e

        logger.info('Delivered %d bytes to %s', len(data), endpoint)
        return len(data)

    def dispatch(self, endpoint: NetworkEndpoint, buffer: bytes) -> Dict[str, Any]:
        """
        Send a command buffer to a network printer.

        Args:
            endpoint: Printer host and raw port
            buffer: Raw command bytes

        Returns:
            Dict with success status, host, port and bytes_sent
        """
        def action():
            result = endpoint.to_dict()
            result['bytes_sent'] = self.send(endpoint, buffer)
            return result

        return self._run(action, host=endpoint.host, port=endpoint.port)
