import unittest

from printer_stub import RecordingPrinter, unused_port

from zpl_print_service.app import create_app
from zpl_print_service.registries import MemoryRegistry

HELLO = '^XA^FDHello^FS^XZ'
API_KEY = 'test-key'


class AppTestCase(unittest.TestCase):

    def setUp(self):
        self.registry = MemoryRegistry(['Zebra-ZPL', 'Office'])
        self.app = create_app(
            registry=self.registry,
            default_command='^XA^FDDefault^FS^XZ',
            config={
                'TESTING': True,
                'API_KEY': API_KEY,
                'SECRET_KEY': 'test-secret',
                'SOCKET_TIMEOUT': 5,
            },
        )
        self.client = self.app.test_client()

    @property
    def zebra(self):
        return self.registry.services[0]


class TestLocalPrintForm(AppTestCase):

    def test_root_redirects_to_local_form(self):
        response = self.client.get('/')
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.headers['Location'].endswith('/printers/local'))

    def test_form_lists_services_and_default_command(self):
        response = self.client.get('/printers/local')
        body = response.get_data(as_text=True)

        self.assertEqual(response.status_code, 200)
        self.assertIn('Zebra-ZPL', body)
        self.assertIn('Office', body)
        self.assertIn('^XA^FDDefault^FS^XZ', body)

    def test_submit_prints_and_redirects(self):
        response = self.client.post('/printers/local', data={
            'service_name': 'Zebra-ZPL',
            'print_command': HELLO,
        })

        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.headers['Location'].endswith('/printers/local'))
        self.assertEqual([d.data for d in self.zebra.documents], [HELLO.encode()])

    def test_success_message_is_flashed(self):
        response = self.client.post('/printers/local', data={
            'service_name': 'Zebra-ZPL',
            'print_command': HELLO,
        }, follow_redirects=True)

        self.assertEqual(response.status_code, 200)
        self.assertIn("Label sent to &#39;Zebra-ZPL&#39;", response.get_data(as_text=True))

    def test_blank_fields_rerender_form(self):
        response = self.client.post('/printers/local', data={
            'service_name': ' ',
            'print_command': '',
        })
        body = response.get_data(as_text=True)

        self.assertEqual(response.status_code, 400)
        self.assertIn('Service name is required', body)
        self.assertIn('Print command is required', body)
        self.assertEqual(self.zebra.jobs, [])

    def test_unknown_service_rerenders_form(self):
        response = self.client.post('/printers/local', data={
            'service_name': 'Missing',
            'print_command': HELLO,
        })

        self.assertEqual(response.status_code, 400)
        self.assertIn('not found', response.get_data(as_text=True))

    def test_ambiguous_service_rerenders_form(self):
        self.registry.add('Office')
        response = self.client.post('/printers/local', data={
            'service_name': 'Office',
            'print_command': HELLO,
        })

        self.assertEqual(response.status_code, 400)
        self.assertIn('ambiguous', response.get_data(as_text=True))


class TestRemotePrintForm(AppTestCase):

    def test_form_defaults(self):
        response = self.client.get('/printers/remote')
        body = response.get_data(as_text=True)

        self.assertEqual(response.status_code, 200)
        self.assertIn('value="127.0.0.1"', body)
        self.assertIn('^XA^FDDefault^FS^XZ', body)

    def test_submit_sends_command(self):
        with RecordingPrinter() as printer:
            response = self.client.post('/printers/remote', data={
                'host_name': '127.0.0.1',
                'bound_port': str(printer.port),
                'print_command': HELLO,
            })
            printer.wait()

        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.headers['Location'].endswith('/printers/remote'))
        self.assertEqual(printer.received, HELLO.encode())

    def test_invalid_port(self):
        for port in ('abc', '0', '70000', ''):
            response = self.client.post('/printers/remote', data={
                'host_name': '127.0.0.1',
                'bound_port': port,
                'print_command': HELLO,
            })
            self.assertEqual(response.status_code, 400, port)
            self.assertIn('Port must be a number', response.get_data(as_text=True))

    def test_invalid_host_name_rerenders_form(self):
        response = self.client.post('/printers/remote', data={
            'host_name': 'a' * 64 + '.example',
            'bound_port': '9100',
            'print_command': HELLO,
        })

        self.assertEqual(response.status_code, 400)
        self.assertIn('Cannot resolve host', response.get_data(as_text=True))

    def test_blank_host(self):
        response = self.client.post('/printers/remote', data={
            'host_name': '',
            'bound_port': '9100',
            'print_command': HELLO,
        })

        self.assertEqual(response.status_code, 400)
        self.assertIn('Host name is required', response.get_data(as_text=True))

    def test_unreachable_printer_rerenders_form(self):
        response = self.client.post('/printers/remote', data={
            'host_name': '127.0.0.1',
            'bound_port': str(unused_port()),
            'print_command': HELLO,
        })

        self.assertEqual(response.status_code, 400)
        self.assertIn('Connection refused', response.get_data(as_text=True))


class TestJsonApi(AppTestCase):

    def _post(self, url, payload, api_key=API_KEY):
        headers = {'Authorization': f'Bearer {api_key}'} if api_key else {}
        return self.client.post(url, json=payload, headers=headers)

    def test_health(self):
        data = self.client.get('/health').get_json()
        self.assertEqual(data['status'], 'online')
        self.assertEqual(data['registry'], 'memory')

    def test_api_info(self):
        data = self.client.get('/api').get_json()
        self.assertEqual(data['endpoints']['print_local'], '/api/print/local')

    def test_list_services(self):
        data = self.client.get('/api/services').get_json()
        self.assertEqual(data, {'success': True, 'services': ['Zebra-ZPL', 'Office'], 'count': 2})

    def test_requires_api_key(self):
        response = self._post('/api/print/local', {'service_name': 'Zebra-ZPL', 'command': HELLO}, api_key=None)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(self.zebra.jobs, [])

    def test_api_key_in_body(self):
        response = self._post('/api/print/local', {
            'service_name': 'Zebra-ZPL',
            'command': HELLO,
            'api_key': API_KEY,
        }, api_key=None)
        self.assertEqual(response.status_code, 200)

    def test_print_local(self):
        response = self._post('/api/print/local', {'service_name': 'Zebra-ZPL', 'command': HELLO})
        data = response.get_json()

        self.assertEqual(response.status_code, 200)
        self.assertTrue(data['success'])
        self.assertEqual(data['service'], 'Zebra-ZPL')
        self.assertEqual(data['job_id'], self.zebra.jobs[0].job_id)
        self.assertEqual(self.zebra.documents[0].data, HELLO.encode())

    def test_print_local_not_found(self):
        response = self._post('/api/print/local', {'service_name': 'Missing', 'command': HELLO})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()['reason'], 'service_not_found')

    def test_print_local_ambiguous(self):
        self.registry.add('Office')
        response = self._post('/api/print/local', {'service_name': 'Office', 'command': HELLO})
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.get_json()['reason'], 'ambiguous_service')

    def test_print_local_validation(self):
        response = self._post('/api/print/local', {'service_name': 'Zebra-ZPL', 'command': '  '})
        self.assertEqual(response.status_code, 400)

    def test_print_remote(self):
        with RecordingPrinter() as printer:
            response = self._post('/api/print/remote', {
                'host': '127.0.0.1',
                'port': printer.port,
                'command': HELLO,
            })
            printer.wait()

        data = response.get_json()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(data['bytes_sent'], len(HELLO))
        self.assertEqual(printer.received, HELLO.encode())

    def test_print_remote_unreachable(self):
        response = self._post('/api/print/remote', {
            'host': '127.0.0.1',
            'port': unused_port(),
            'command': HELLO,
        })
        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.get_json()['reason'], 'delivery_failed')

    def test_body_must_be_an_object(self):
        for payload in (['x'], 'x', 42):
            for url in ('/api/print/local', '/api/print/remote'):
                response = self._post(url, payload)
                self.assertEqual(response.status_code, 400, (url, payload))
                self.assertEqual(response.get_json()['error'], 'Request body required')
        self.assertEqual(self.zebra.jobs, [])

    def test_non_object_body_without_key_is_unauthorized(self):
        response = self._post('/api/print/local', ['x'], api_key=None)
        self.assertEqual(response.status_code, 401)

    def test_print_remote_validation(self):
        self.assertEqual(self._post('/api/print/remote', {'command': HELLO}).status_code, 400)
        self.assertEqual(
            self._post('/api/print/remote', {'host': '127.0.0.1', 'port': 'x', 'command': HELLO}).status_code,
            400,
        )


if __name__ == '__main__':
    unittest.main()
