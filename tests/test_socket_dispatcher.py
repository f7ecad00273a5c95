import socket
import unittest
from unittest import mock

from printer_stub import RecordingPrinter, unused_port

from zpl_print_service.dispatchers import SocketDispatcher
from zpl_print_service.errors import DeliveryError
from zpl_print_service.models import NetworkEndpoint
from zpl_print_service.samples import load_sample_command

HELLO = b'^XA^FDHello^FS^XZ'


class TestSocketDispatcher(unittest.TestCase):

    def setUp(self):
        self.dispatcher = SocketDispatcher(timeout=5)

    def test_delivers_exact_bytes(self):
        with RecordingPrinter() as printer:
            result = self.dispatcher.dispatch(NetworkEndpoint('127.0.0.1', printer.port), HELLO)
            self.assertTrue(printer.wait(), 'connection was not closed')

        self.assertEqual(printer.received, HELLO)
        self.assertTrue(result['success'])
        self.assertEqual(result['host'], '127.0.0.1')
        self.assertEqual(result['port'], printer.port)
        self.assertEqual(result['bytes_sent'], len(HELLO))

    def test_delivers_sample_label_untouched(self):
        buffer = load_sample_command().encode('utf-8')
        with RecordingPrinter() as printer:
            sent = self.dispatcher.send(NetworkEndpoint('127.0.0.1', printer.port), buffer)
            printer.wait()

        self.assertEqual(sent, len(buffer))
        self.assertEqual(printer.received, buffer)

    def test_connection_refused(self):
        port = unused_port()
        result = self.dispatcher.dispatch(NetworkEndpoint('127.0.0.1', port), HELLO)

        self.assertFalse(result['success'])
        self.assertEqual(result['reason'], 'delivery_failed')
        self.assertEqual(result['port'], port)
        self.assertIn('127.0.0.1', result['error'])

    def test_send_raises_delivery_error(self):
        with self.assertRaises(DeliveryError) as ctx:
            self.dispatcher.send(NetworkEndpoint('127.0.0.1', unused_port()), HELLO)
        self.assertEqual(ctx.exception.reason, 'delivery_failed')

    def test_host_name_with_invalid_label(self):
        for host in ('printer..local', 'a' * 64 + '.example'):
            result = self.dispatcher.dispatch(NetworkEndpoint(host, 9100), HELLO)

            self.assertFalse(result['success'], host)
            self.assertEqual(result['reason'], 'delivery_failed')
            self.assertIn('Cannot resolve host', result['error'])

    def test_unresolved_host(self):
        with mock.patch('socket.create_connection', side_effect=socket.gaierror(-2, 'Name or service not known')):
            result = self.dispatcher.dispatch(NetworkEndpoint('printer.invalid', 9100), HELLO)

        self.assertFalse(result['success'])
        self.assertEqual(result['reason'], 'delivery_failed')
        self.assertIn('printer.invalid', result['error'])

    def test_timeout(self):
        with mock.patch('socket.create_connection', side_effect=socket.timeout()):
            result = self.dispatcher.dispatch(NetworkEndpoint('10.0.0.5', 9100), HELLO)

        self.assertEqual(result['reason'], 'delivery_failed')
        self.assertIn('timeout', result['error'])

    def test_write_failure_closes_connection(self):
        conn = mock.MagicMock()
        conn.__enter__.return_value = conn
        conn.__exit__.return_value = False
        conn.sendall.side_effect = BrokenPipeError('Broken pipe')

        with mock.patch('socket.create_connection', return_value=conn) as create:
            result = self.dispatcher.dispatch(NetworkEndpoint('10.0.0.5', 9100), HELLO)

        create.assert_called_once_with(('10.0.0.5', 9100), timeout=5)
        conn.sendall.assert_called_once_with(HELLO)
        conn.__exit__.assert_called_once()
        self.assertFalse(result['success'])
        self.assertEqual(result['reason'], 'delivery_failed')

    def test_no_timeout_by_default(self):
        conn = mock.MagicMock()
        conn.__enter__.return_value = conn
        conn.__exit__.return_value = False

        with mock.patch('socket.create_connection', return_value=conn) as create:
            endpoint = NetworkEndpoint('10.0.0.5')
            SocketDispatcher().send(endpoint, HELLO)

        create.assert_called_once_with(endpoint.address, timeout=None)

    def test_rejects_text_buffer(self):
        with self.assertRaises(TypeError):
            self.dispatcher.dispatch(NetworkEndpoint('127.0.0.1', 9100), HELLO.decode())


if __name__ == '__main__':
    unittest.main()
