"""
Tests for environment based configuration.
"""

import os
from unittest import TestCase
from unittest.mock import patch

from generatepdfs.config import DEFAULT_BASE_URL, Settings, get_settings


class SettingsTestCase(TestCase):
    """Test cases for Settings."""

    def test_defaults(self):
        """Test default values when nothing is configured."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        self.assertIsNone(settings.api_token)
        self.assertEqual(settings.base_url, DEFAULT_BASE_URL)
        self.assertEqual(settings.timeout, 30.0)

    def test_reads_prefixed_environment(self):
        """Test that GENERATEPDFS_ variables are picked up."""
        env = {
            'GENERATEPDFS_API_TOKEN': 'env-token',
            'GENERATEPDFS_BASE_URL': 'https://pdf.example.com',
            'GENERATEPDFS_TIMEOUT': '5',
        }
        with patch.dict(os.environ, env, clear=True):
            settings = get_settings()

        self.assertEqual(settings.api_token, 'env-token')
        self.assertEqual(settings.base_url, 'https://pdf.example.com')
        self.assertEqual(settings.timeout, 5.0)
