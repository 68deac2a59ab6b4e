#!/usr/bin/env python3

# Allow direct execution
import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


from test.helper import FakeHost
from ytplay.app.probe import peek_significant, probe


class TestProbe(unittest.TestCase):
    def test_non_http_scheme_never_peeks(self):
        host = FakeHost('ftp://example.com/video', b'<!DOCTYPE html>')
        self.assertFalse(probe(host))
        self.assertEqual(host.peeks, [])

    def test_doctype_accepted(self):
        for scheme in ('http', 'https'):
            host = FakeHost(f'{scheme}://example.com/watch', b'<!DOCTYPE html><html></html>')
            self.assertTrue(probe(host))
            self.assertEqual(host.peeks, [9])

    def test_leading_whitespace_grows_peek(self):
        host = FakeHost('https://example.com/', b' \r\n\t<!doctype html>')
        self.assertTrue(probe(host))
        self.assertEqual(host.peeks, [9, 10, 11, 12, 13])

    def test_inner_whitespace_is_ignored(self):
        host = FakeHost('https://example.com/', b'<!DOC TYPE html>')
        self.assertTrue(probe(host))
        self.assertEqual(host.peeks, [9, 10])

    def test_eight_matching_chars_not_enough(self):
        host = FakeHost('https://example.com/', b'<!doctyp>')
        self.assertFalse(probe(host))

        host = FakeHost('https://example.com/', b'<!doctyp   e')
        self.assertTrue(probe(host))
        self.assertEqual(host.peeks[-1], 12)

    def test_other_content_rejected(self):
        self.assertFalse(probe(FakeHost('https://example.com/a.mp4', b'\x00\x00\x00\x20ftypisom')))
        self.assertFalse(probe(FakeHost('https://example.com/list', b'#EXTM3U\n#EXTINF:-1,x\n')))

    def test_short_resource_stops_at_end(self):
        host = FakeHost('http://example.com/', b'  <!do \n')
        self.assertEqual(peek_significant(host), b'<!do')
        self.assertFalse(probe(host))
        self.assertEqual(host.peeks[-1], 9)

    def test_empty_resource(self):
        self.assertFalse(probe(FakeHost('https://example.com/', b'')))


if __name__ == '__main__':
    unittest.main()
