"""
ZPL Print Service - Command Line Samples
========================================

Send the sample label (or a command file) straight to a printer.

    zpl-print-network --host 10.0.0.5 --port 9100
    zpl-print-local --service Zebra-ZPL
    zpl-print-local --list

Both exit with 0 when the command was handed over and 1 otherwise.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import (
    COMMAND_ENCODING,
    DEFAULT_HOST,
    DEFAULT_SERVICE,
    LOG_LEVEL,
    SOCKET_TIMEOUT,
    ZPL_PORT,
)
from .dispatchers import LocalQueueDispatcher, SocketDispatcher
from .errors import PrintDispatchError
from .log import setup_logging
from .models import NetworkEndpoint
from .registries import REGISTRIES, get_registry
from .samples import load_sample_command

logger = logging.getLogger(__name__)


def _read_command(path: Optional[str]) -> bytes:
    """Command bytes from ``path`` or the packaged sample."""
    return load_sample_command(path).encode(COMMAND_ENCODING)


def _add_common_arguments(parser: argparse.ArgumentParser):
    parser.add_argument('--file', '-f', help='ZPL command file (default: packaged shipping label)')
    parser.add_argument('--log-level', default=LOG_LEVEL, help='Logging level (default: %(default)s)')


def network_main(argv: Optional[List[str]] = None) -> int:
    """Send a command to a network printer's raw port."""
    parser = argparse.ArgumentParser(
        prog='zpl-print-network',
        description='Send a ZPL command to a network printer over TCP.',
    )
    parser.add_argument('--host', default=DEFAULT_HOST, help='Printer host (default: %(default)s)')
    parser.add_argument('--port', type=int, default=ZPL_PORT, help='Raw port (default: %(default)s)')
    parser.add_argument('--timeout', type=float, default=SOCKET_TIMEOUT,
                        help='Socket timeout in seconds (default: none)')
    _add_common_arguments(parser)
    args = parser.parse_args(argv)

    setup_logging(args.log_level.upper())

    try:
        buffer = _read_command(args.file)
    except (OSError, UnicodeError) as e:
        logger.error('Cannot read command file: %s', e)
        return 1

    endpoint = NetworkEndpoint(args.host, args.port)
    result = SocketDispatcher(timeout=args.timeout).dispatch(endpoint, buffer)
    if not result['success']:
        return 1

    logger.info('Label sent to %s (%d bytes)', endpoint, result['bytes_sent'])
    return 0


def local_main(argv: Optional[List[str]] = None) -> int:
    """Send a command to a print service registered with the OS."""
    parser = argparse.ArgumentParser(
        prog='zpl-print-local',
        description='Send a ZPL command to a local print queue.',
    )
    parser.add_argument('--service', '-s', default=DEFAULT_SERVICE,
                        help='Exact print service name (default: %(default)s)')
    parser.add_argument('--registry', choices=sorted(REGISTRIES) + ['auto'],
                        help='Print service registry (default: ZPL_PRINT_REGISTRY or auto)')
    parser.add_argument('--list', action='store_true', help='List print services and exit')
    _add_common_arguments(parser)
    args = parser.parse_args(argv)

    setup_logging(args.log_level.upper())

    dispatcher = LocalQueueDispatcher(get_registry(args.registry))

    if args.list:
        try:
            names = dispatcher.list_service_names()
        except PrintDispatchError as e:
            logger.error('Cannot list print services: %s', e.message)
            return 1
        for name in names:
            print(name)
        return 0

    try:
        buffer = _read_command(args.file)
    except (OSError, UnicodeError) as e:
        logger.error('Cannot read command file: %s', e)
        return 1

    result = dispatcher.dispatch(args.service, buffer)
    if not result['success']:
        return 1

    logger.info("Label queued on '%s' (job %s)", args.service, result['job_id'])
    return 0


def run_network():
    sys.exit(network_main())


def run_local():
    sys.exit(local_main())
