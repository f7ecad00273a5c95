"""
ZPL Print Service Configuration
"""

import os
from pathlib import Path

# =============================================================================
# Server Configuration
# =============================================================================

PORT = int(os.environ.get('ZPL_PRINT_PORT', 5100))
HOST = os.environ.get('ZPL_PRINT_HOST', '0.0.0.0')
DEBUG = os.environ.get('ZPL_PRINT_DEBUG', 'false').lower() == 'true'

# API Key for the JSON endpoints
API_KEY = os.environ.get('ZPL_PRINT_API_KEY', 'zpl-print-2026')

# Flask session key (flash messages on the print forms)
SECRET_KEY = os.environ.get('ZPL_PRINT_SECRET_KEY', 'zpl-print-dev-secret')

LOG_LEVEL = os.environ.get('ZPL_PRINT_LOG_LEVEL', 'INFO').upper()

# =============================================================================
# Printer Defaults
# =============================================================================

# Raw port most network label printers listen on
ZPL_PORT = int(os.environ.get('ZPL_PORT', 9100))

DEFAULT_HOST = os.environ.get('ZPL_DEFAULT_HOST', '127.0.0.1')
DEFAULT_SERVICE = os.environ.get('ZPL_DEFAULT_SERVICE', 'Zebra-ZPL')

# Unset means blocking sockets with the OS connect/write defaults
_timeout = os.environ.get('ZPL_SOCKET_TIMEOUT')
SOCKET_TIMEOUT = float(_timeout) if _timeout else None

COMMAND_ENCODING = os.environ.get('ZPL_COMMAND_ENCODING', 'utf-8')

# =============================================================================
# Local Print Services
# =============================================================================

# auto, cups, win32 or memory
REGISTRY = os.environ.get('ZPL_PRINT_REGISTRY', 'auto').lower()

# Services the memory registry starts with (comma separated)
MEMORY_SERVICES = [
    name.strip()
    for name in os.environ.get('ZPL_PRINT_MEMORY_SERVICES', 'Zebra-ZPL').split(',')
    if name.strip()
]

# Documents and jobs each memory service keeps; older ones are dropped
MEMORY_KEEP_DOCUMENTS = int(os.environ.get('ZPL_PRINT_MEMORY_KEEP', 50))

# =============================================================================
# Sample Command
# =============================================================================

SAMPLE_FILE = os.environ.get(
    'ZPL_SAMPLE_FILE',
    str(Path(__file__).parent / 'samples' / 'shipping_label.zpl'),
)
