#!/usr/bin/env python3

# Allow direct execution
import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


from unittest import mock

from ytplay.app.probe import probe
from ytplay.infra.network.http import HttpHost, split_url


class FakeResponse:
    def __init__(self, body, chunk=4, status_code=200):
        self.body = body
        self.chunk = chunk
        self.status_code = status_code
        self.closed = False

    @property
    def ok(self):
        return self.status_code < 400

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), self.chunk):
            yield self.body[i:i + self.chunk]

    def close(self):
        self.closed = True


class TestSplitUrl(unittest.TestCase):
    def test_split(self):
        self.assertEqual(split_url('https://www.youtube.com/watch?v=x'), ('https', 'www.youtube.com/watch?v=x'))
        self.assertEqual(split_url('HTTP://example.com'), ('http', 'example.com'))

    def test_relative_rejected(self):
        with self.assertRaises(ValueError):
            split_url('www.youtube.com/watch')


class TestHttpHost(unittest.TestCase):
    def test_peek_is_buffered(self):
        session = mock.Mock()
        response = FakeResponse(b'\n  <!DOCTYPE html><html>')
        session.get.return_value = response

        with HttpHost('https://example.com/watch', session=session) as host:
            self.assertEqual(host.url, 'https://example.com/watch')
            self.assertEqual(host.peek(3), b'\n  ')
            self.assertEqual(host.peek(9), b'\n  <!DOCT')
            self.assertTrue(probe(host))
        session.get.assert_called_once()
        self.assertTrue(response.closed)
        # the caller owns the session
        session.close.assert_not_called()

    def test_peek_past_end(self):
        session = mock.Mock()
        session.get.return_value = FakeResponse(b'tiny')
        host = HttpHost('http://example.com/', session=session)
        self.assertEqual(host.peek(100), b'tiny')
        self.assertEqual(host.peek(200), b'tiny')
        session.get.assert_called_once()

    def test_error_status_still_peeks_body(self):
        session = mock.Mock()
        session.get.return_value = FakeResponse(b'<!DOCTYPE html><title>Not Found</title>', status_code=404)
        with HttpHost('https://example.com/missing', session=session) as host:
            self.assertTrue(probe(host))

        session.get.return_value = FakeResponse(b'Forbidden', status_code=403)
        with HttpHost('https://example.com/private', session=session) as host:
            self.assertFalse(probe(host))

    def test_non_http_never_connects(self):
        session = mock.Mock()
        host = HttpHost('ftp://example.com/file', session=session)
        self.assertEqual(host.peek(9), b'')
        self.assertFalse(probe(host))
        session.get.assert_not_called()


if __name__ == '__main__':
    unittest.main()
