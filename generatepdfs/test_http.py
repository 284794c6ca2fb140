"""
Tests for the HTTP transport.
"""

from unittest import TestCase

import httpx
import respx

from generatepdfs.errors import GeneratePDFsRuntimeError
from generatepdfs.http import HTTPClient


class HTTPClientTestCase(TestCase):
    """Test cases for HTTPClient."""

    def setUp(self):
        self.router = respx.mock(assert_all_called=False)
        self.router.start()
        self.addCleanup(self.router.stop)

        self.base_url = 'https://api.example.com'
        self.client = HTTPClient(base_url=self.base_url, api_token='secret-token', timeout=10.0)

    def test_build_url(self):
        """Test joining of relative paths and passthrough of absolute URLs."""
        self.assertEqual(self.client.build_url('/pdfs/1'), 'https://api.example.com/pdfs/1')
        self.assertEqual(
            self.client.build_url('https://cdn.example.com/file.pdf'),
            'https://cdn.example.com/file.pdf',
        )

    def test_base_url_path_prefix_kept(self):
        """Test that a base URL with a path prefix keeps the prefix."""
        client = HTTPClient(base_url='https://example.com/api/v1/', api_token='t')
        self.assertEqual(client.build_url('/pdfs/1'), 'https://example.com/api/v1/pdfs/1')

    def test_get_sends_bearer_token(self):
        """Test that GET carries the Authorization header."""
        route = self.router.get(f'{self.base_url}/test').mock(
            return_value=httpx.Response(200, json={'status': 'ok'})
        )

        self.assertEqual(self.client.get('/test'), {'status': 'ok'})
        self.assertEqual(route.calls.last.request.headers['Authorization'], 'Bearer secret-token')

    def test_post_declares_json(self):
        """Test that POST sends a JSON content type."""
        route = self.router.post(f'{self.base_url}/test').mock(
            return_value=httpx.Response(201, json={'id': 1})
        )

        self.assertEqual(self.client.post('/test', json={'name': 'x'}), {'id': 1})
        self.assertEqual(route.calls.last.request.headers['Content-Type'], 'application/json')

    def test_no_retry_on_server_error(self):
        """Test that a failing request is sent exactly once."""
        route = self.router.get(f'{self.base_url}/test').mock(
            return_value=httpx.Response(503)
        )

        with self.assertRaises(GeneratePDFsRuntimeError) as cm:
            self.client.get('/test')

        self.assertEqual(route.call_count, 1)
        self.assertEqual(str(cm.exception), 'API request failed: 503 Service Unavailable')

    def test_error_message_has_no_token(self):
        """Test that the token never appears in error messages."""
        self.router.get(f'{self.base_url}/test').mock(return_value=httpx.Response(401))

        with self.assertRaises(GeneratePDFsRuntimeError) as cm:
            self.client.get('/test')

        self.assertNotIn('secret-token', str(cm.exception))

    def test_timeout_becomes_runtime_error(self):
        """Test that timeouts are surfaced as GeneratePDFsRuntimeError."""
        self.router.get(f'{self.base_url}/slow').mock(side_effect=httpx.ReadTimeout('timed out'))

        with self.assertRaises(GeneratePDFsRuntimeError):
            self.client.get('/slow')

    def test_request_bytes(self):
        """Test that request_bytes returns the raw body."""
        self.router.get(f'{self.base_url}/file.pdf').mock(
            return_value=httpx.Response(200, content=b'%PDF')
        )

        self.assertEqual(self.client.request_bytes(f'{self.base_url}/file.pdf'), b'%PDF')
