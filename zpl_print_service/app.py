"""
ZPL Print Service - Web Application
===================================

HTML print forms plus a small JSON API over the two dispatchers.

Run: python -m zpl_print_service
"""

import logging
import platform
import socket
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from flask import (
    Blueprint,
    Flask,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)
from flask_cors import CORS

from . import __version__
from .config import (
    API_KEY,
    COMMAND_ENCODING,
    DEBUG,
    DEFAULT_HOST,
    HOST,
    LOG_LEVEL,
    PORT,
    SECRET_KEY,
    SOCKET_TIMEOUT,
    ZPL_PORT,
)
from .dispatchers import LocalQueueDispatcher, SocketDispatcher
from .errors import PrintDispatchError
from .log import setup_logging
from .models import NetworkEndpoint
from .registries import PrintServiceRegistry, get_registry
from .samples import load_sample_command

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / 'templates'

# HTTP status for failed JSON dispatches, by failure reason
REASON_STATUS = {
    'service_not_found': 404,
    'ambiguous_service': 409,
    'registry_unavailable': 503,
    'delivery_failed': 502,
    'job_submission_failed': 502,
}

bp = Blueprint('printers', __name__)

# =============================================================================
# Helpers
# =============================================================================


def _local_dispatcher() -> LocalQueueDispatcher:
    return current_app.extensions['zpl_local_dispatcher']


def _socket_dispatcher() -> SocketDispatcher:
    return SocketDispatcher(timeout=current_app.config['SOCKET_TIMEOUT'])


def _encode(command: str) -> bytes:
    return command.encode(current_app.config['COMMAND_ENCODING'])


def _check_api_key() -> bool:
    """Validate API key from request."""
    api_key = current_app.config['API_KEY']
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    auth_header = request.headers.get('Authorization', '')

    # Check body
    if data.get('api_key') == api_key:
        return True

    # Check header (Bearer token)
    if auth_header.startswith('Bearer ') and auth_header[7:] == api_key:
        return True

    return False


def _parse_port(value) -> Optional[int]:
    """Port number in 1..65535, or None if ``value`` is not one."""
    try:
        port = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return port if 0 < port < 65536 else None


def _service_names() -> Tuple[list, Optional[str]]:
    """Registered service names and, if the registry failed, its error."""
    try:
        return _local_dispatcher().list_service_names(), None
    except PrintDispatchError as e:
        logger.warning('Cannot list print services: %s', e.message)
        return [], e.message


def _validate_local_form(form) -> Tuple[Dict[str, str], Dict[str, str]]:
    values = {
        'service_name': form.get('service_name', '').strip(),
        'print_command': form.get('print_command', ''),
    }
    errors = {}
    if not values['service_name']:
        errors['service_name'] = 'Service name is required'
    if not values['print_command'].strip():
        errors['print_command'] = 'Print command is required'
    return values, errors


def _validate_remote_form(form) -> Tuple[Dict[str, Any], Dict[str, str]]:
    values = {
        'host_name': form.get('host_name', '').strip(),
        'bound_port': form.get('bound_port', '').strip(),
        'print_command': form.get('print_command', ''),
    }
    errors = {}
    if not values['host_name']:
        errors['host_name'] = 'Host name is required'
    port = _parse_port(values['bound_port'])
    if port is None:
        errors['bound_port'] = 'Port must be a number between 1 and 65535'
    else:
        values['bound_port'] = port
    if not values['print_command'].strip():
        errors['print_command'] = 'Print command is required'
    return values, errors


def _render_local_form(form: Dict[str, Any], errors: Optional[Dict[str, str]] = None, status: int = 200):
    service_names, registry_error = _service_names()
    errors = dict(errors or {})
    if registry_error and 'form' not in errors:
        errors['registry'] = registry_error
    return render_template(
        'local_print_form.html',
        form=form,
        errors=errors,
        service_names=service_names,
    ), status


def _render_remote_form(form: Dict[str, Any], errors: Optional[Dict[str, str]] = None, status: int = 200):
    return render_template('remote_print_form.html', form=form, errors=errors or {}), status


# =============================================================================
# Print Forms
# =============================================================================

@bp.route('/', methods=['GET'])
def index():
    return redirect(url_for('.local_print_form'))


@bp.route('/printers/local', methods=['GET'])
def local_print_form():
    """Show local printing form."""
    logger.info('Show local printing form')
    return _render_local_form({
        'service_name': '',
        'print_command': current_app.config['DEFAULT_COMMAND'],
    })


@bp.route('/printers/local', methods=['POST'])
def handle_local_print():
    """Send the submitted command to a local print service."""
    form, errors = _validate_local_form(request.form)
    logger.info("Handle local print request for service '%s'", form['service_name'])
    if errors:
        return _render_local_form(form, errors, 400)

    result = _local_dispatcher().dispatch(form['service_name'], _encode(form['print_command']))
    if not result['success']:
        field = 'service_name' if result['reason'] in ('service_not_found', 'ambiguous_service') else 'form'
        return _render_local_form(form, {field: result['error']}, 400)

    flash(f"Label sent to '{form['service_name']}' (job {result['job_id']})", 'success')
    return redirect(url_for('.local_print_form'))


@bp.route('/printers/remote', methods=['GET'])
def remote_print_form():
    """Show remote print form."""
    logger.info('Show remote print form')
    return _render_remote_form({
        'host_name': current_app.config['DEFAULT_HOST'],
        'bound_port': current_app.config['ZPL_PORT'],
        'print_command': current_app.config['DEFAULT_COMMAND'],
    })


@bp.route('/printers/remote', methods=['POST'])
def handle_remote_print():
    """Send the submitted command to host:port."""
    form, errors = _validate_remote_form(request.form)
    if errors:
        logger.info('Error on remote print form: %s', ', '.join(sorted(errors)))
        return _render_remote_form(form, errors, 400)

    endpoint = NetworkEndpoint(form['host_name'], form['bound_port'])
    result = _socket_dispatcher().dispatch(endpoint, _encode(form['print_command']))
    if not result['success']:
        return _render_remote_form(form, {'form': result['error']}, 400)

    flash(f"Label sent to {endpoint} ({result['bytes_sent']} bytes)", 'success')
    return redirect(url_for('.remote_print_form'))


# =============================================================================
# Health & Info Endpoints
# =============================================================================

@bp.route('/health', methods=['GET'])
def health():
    """Health check with system info."""
    return jsonify({
        'status': 'online',
        'version': __version__,
        'hostname': socket.gethostname(),
        'platform': platform.system(),
        'python': sys.version.split()[0],
        'registry': _local_dispatcher().registry.kind,
        'timestamp': datetime.now().isoformat(),
    })


@bp.route('/api', methods=['GET'])
def api_info():
    """API info (JSON)."""
    return jsonify({
        'service': 'ZPL Print Service',
        'version': __version__,
        'status': 'running',
        'endpoints': {
            'health': '/health',
            'services': '/api/services',
            'print_remote': '/api/print/remote',
            'print_local': '/api/print/local',
        }
    })


# =============================================================================
# Print API
# =============================================================================

@bp.route('/api/services', methods=['GET'])
def list_services():
    """List local print services accepting raw documents."""
    try:
        names = _local_dispatcher().list_service_names()
    except PrintDispatchError as e:
        return jsonify(e.to_dict()), REASON_STATUS.get(e.reason, 500)

    return jsonify({
        'success': True,
        'services': names,
        'count': len(names),
    })


@bp.route('/api/print/remote', methods=['POST'])
def api_print_remote():
    """Send a command to a network printer."""
    if not _check_api_key():
        return jsonify({'success': False, 'error': 'Invalid API key'}), 401

    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify({'success': False, 'error': 'Request body required'}), 400

    host = str(data.get('host') or '').strip()
    if not host:
        return jsonify({'success': False, 'error': 'host required'}), 400

    port = _parse_port(data.get('port', current_app.config['ZPL_PORT']))
    if port is None:
        return jsonify({'success': False, 'error': 'port must be a number between 1 and 65535'}), 400

    command = data.get('command')
    if not isinstance(command, str) or not command.strip():
        return jsonify({'success': False, 'error': 'command required'}), 400

    result = _socket_dispatcher().dispatch(NetworkEndpoint(host, port), _encode(command))
    if not result['success']:
        return jsonify(result), REASON_STATUS.get(result['reason'], 500)
    return jsonify(result)


@bp.route('/api/print/local', methods=['POST'])
def api_print_local():
    """Send a command to a local print service."""
    if not _check_api_key():
        return jsonify({'success': False, 'error': 'Invalid API key'}), 401

    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify({'success': False, 'error': 'Request body required'}), 400

    service_name = str(data.get('service_name') or '').strip()
    if not service_name:
        return jsonify({'success': False, 'error': 'service_name required'}), 400

    command = data.get('command')
    if not isinstance(command, str) or not command.strip():
        return jsonify({'success': False, 'error': 'command required'}), 400

    result = _local_dispatcher().dispatch(service_name, _encode(command))
    if not result['success']:
        return jsonify(result), REASON_STATUS.get(result['reason'], 500)
    return jsonify(result)


# =============================================================================
# Application Setup
# =============================================================================

def create_app(
    registry: Optional[PrintServiceRegistry] = None,
    default_command: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
) -> Flask:
    """
    Build the web application.

    Args:
        registry: Local print-service registry (default from ZPL_PRINT_REGISTRY)
        default_command: Command prefilled in the forms (default: packaged sample)
        config: Extra Flask config overriding the environment defaults

    Returns:
        Flask app
    """
    app = Flask(__name__, template_folder=str(TEMPLATE_DIR))
    app.config.update(
        SECRET_KEY=SECRET_KEY,
        API_KEY=API_KEY,
        COMMAND_ENCODING=COMMAND_ENCODING,
        DEFAULT_HOST=DEFAULT_HOST,
        ZPL_PORT=ZPL_PORT,
        SOCKET_TIMEOUT=SOCKET_TIMEOUT,
    )
    if config:
        app.config.update(config)

    app.config['DEFAULT_COMMAND'] = (
        default_command if default_command is not None else load_sample_command()
    )
    app.extensions['zpl_local_dispatcher'] = LocalQueueDispatcher(registry or get_registry())

    CORS(app)
    app.register_blueprint(bp)
    return app


# =============================================================================
# Main
# =============================================================================

def main():
    """Run the service."""
    setup_logging(LOG_LEVEL)
    app = create_app()

    print("=" * 60)
    print("  ZPL Print Service")
    print("=" * 60)
    print(f"  Version: {__version__}")
    print(f"  Port: {PORT}")
    print(f"  Registry: {app.extensions['zpl_local_dispatcher'].registry.kind}")
    print("=" * 60)
    print("  Print Forms:")
    print("    GET/POST /printers/local              - Local queue print form")
    print("    GET/POST /printers/remote             - Network print form")
    print("=" * 60)
    print("  API Endpoints:")
    print("    GET  /health                          - Health check")
    print("    GET  /api/services                    - Local print services")
    print("    POST /api/print/remote                - Send command to host:port")
    print("    POST /api/print/local                 - Send command to a service")
    print("=" * 60)

    app.run(host=HOST, port=PORT, debug=DEBUG)


if __name__ == '__main__':
    main()
