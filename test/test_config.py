#!/usr/bin/env python3

# Allow direct execution
import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


import tempfile
from unittest import mock

from ytplay.core.config import DEFAULT_FORMAT, ConfigError, Settings, load_settings


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        settings = Settings.from_env({})
        self.assertEqual(settings.tools, ['youtube-dl', 'yt-dlp'])
        self.assertEqual(settings.format_selector, DEFAULT_FORMAT)
        self.assertEqual(settings.subtitle_language, 'en')
        self.assertEqual(settings.downloader, 'curl')
        self.assertIsNone(settings.download_dir)
        self.assertIsNone(settings.tool_timeout)

    def test_overrides(self):
        settings = Settings.from_env({
            'YTPLAY_TOOLS': ' yt-dlp , youtube-dl ,',
            'YTPLAY_FORMAT': 'best',
            'YTPLAY_SUB_LANG': 'de',
            'YTPLAY_DOWNLOADER': '/usr/local/bin/curl',
            'YTPLAY_DOWNLOAD_DIR': '/srv/subs',
            'YTPLAY_TOOL_TIMEOUT': '30',
            'YTPLAY_LOG_LEVEL': 'debug',
        })
        self.assertEqual(settings.tools, ['yt-dlp', 'youtube-dl'])
        self.assertEqual(settings.format_selector, 'best')
        self.assertEqual(settings.subtitle_language, 'de')
        self.assertEqual(settings.downloader, '/usr/local/bin/curl')
        self.assertEqual(settings.download_dir, '/srv/subs')
        self.assertEqual(settings.tool_timeout, 30.0)
        self.assertEqual(settings.log_level, 'DEBUG')

    def test_invalid(self):
        for env in ({'YTPLAY_TOOLS': ' , '}, {'YTPLAY_TOOL_TIMEOUT': 'soon'}, {'YTPLAY_TOOL_TIMEOUT': '-1'}):
            with self.assertRaises(ConfigError):
                Settings.from_env(env)

    def test_dotenv_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, '.env')
            with open(path, 'w') as f:
                f.write('YTPLAY_TOOLS=yt-dlp\nYTPLAY_SUB_LANG=fr\n')
            with mock.patch.dict(os.environ, {}, clear=True):
                settings = load_settings(path)
        self.assertEqual(settings.tools, ['yt-dlp'])
        self.assertEqual(settings.subtitle_language, 'fr')

    def test_environment_beats_dotenv(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, '.env')
            with open(path, 'w') as f:
                f.write('YTPLAY_SUB_LANG=fr\n')
            with mock.patch.dict(os.environ, {'YTPLAY_SUB_LANG': 'es'}, clear=True):
                self.assertEqual(load_settings(path).subtitle_language, 'es')


if __name__ == '__main__':
    unittest.main()
