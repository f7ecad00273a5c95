"""
ZPL Print Service
=================

Sends raw ZPL label commands to printers.

Transports:
- Network printers over a raw TCP socket (port 9100)
- Local print queues (CUPS on Linux/macOS, spooler on Windows)

Usage:
    python -m zpl_print_service          # web forms + JSON API
    zpl-print-network --host 10.0.0.5    # send sample label over TCP
    zpl-print-local --service Zebra-ZPL  # send sample label to a queue

Web Endpoints:
    GET/POST /printers/local      - Local queue print form
    GET/POST /printers/remote     - Network print form
    GET  /api/services            - Registered local print services
    POST /api/print/remote        - Send command to host:port
    POST /api/print/local         - Send command to a local service
"""

__version__ = '1.0.0'
__author__ = 'ZPL Print Service contributors'
