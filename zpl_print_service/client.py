"""
ZPL Print Service Client
========================

Python SDK for the ZPL Print Service JSON API.

Usage:
    from zpl_print_service.client import PrintClient

    client = PrintClient('http://localhost:5100', api_key='your-key')

    # Local print services
    services = client.list_services()

    # Network printer
    result = client.print_remote('10.0.0.5', '^XA^FDHello^FS^XZ')

    # Local queue
    result = client.print_local('Zebra-ZPL', '^XA^FDHello^FS^XZ')
"""

import requests
from typing import Dict, Any, List


class PrintClient:
    """Client for ZPL Print Service."""

    def __init__(self, base_url: str = 'http://localhost:5100', api_key: str = None):
        """
        Initialize client.

        Args:
            base_url: Base URL of the print service
            api_key: API key for authentication
        """
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key

    def _headers(self) -> Dict[str, str]:
        """Get request headers."""
        headers = {'Content-Type': 'application/json'}
        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'
        return headers

    def _request(self, method: str, endpoint: str, data: Dict = None) -> Dict[str, Any]:
        """Make API request."""
        url = f'{self.base_url}{endpoint}'

        if data and self.api_key:
            data['api_key'] = self.api_key

        if method not in ('GET', 'POST'):
            raise ValueError(f'Unknown method: {method}')

        try:
            if method == 'GET':
                response = requests.get(url, headers=self._headers(), timeout=30)
            else:
                response = requests.post(url, json=data, headers=self._headers(), timeout=60)

            return response.json()

        except requests.exceptions.Timeout:
            return {'success': False, 'error': 'Request timeout'}
        except requests.exceptions.ConnectionError:
            return {'success': False, 'error': f'Cannot connect to {self.base_url}'}
        except ValueError as e:
            # Non-JSON response body
            return {'success': False, 'error': str(e)}

    # =========================================================================
    # Health
    # =========================================================================

    def health(self) -> Dict[str, Any]:
        """Check service health."""
        return self._request('GET', '/health')

    def is_online(self) -> bool:
        """Check if service is online."""
        result = self.health()
        return result.get('status') == 'online'

    # =========================================================================
    # Printing
    # =========================================================================

    def list_services(self) -> List[str]:
        """Names of the local print services the server can print to."""
        result = self._request('GET', '/api/services')
        return result.get('services', [])

    def print_remote(self, host: str, command: str, port: int = 9100) -> Dict[str, Any]:
        """
        Send a command to a network printer through the service.

        Args:
            host: Printer host name or IP
            command: ZPL command text
            port: Printer raw port
        """
        data = {
            'host': host,
            'port': port,
            'command': command,
        }
        return self._request('POST', '/api/print/remote', data)

    def print_local(self, service_name: str, command: str) -> Dict[str, Any]:
        """
        Send a command to a print service registered on the server host.

        Args:
            service_name: Exact print service name
            command: ZPL command text
        """
        data = {
            'service_name': service_name,
            'command': command,
        }
        return self._request('POST', '/api/print/local', data)
