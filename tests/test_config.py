#!/usr/bin/env python3
"""
Tests for configuration loading
"""

import importlib
import os
import sys
import unittest
from unittest.mock import patch

# Add the project root to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import config


class TestConfig(unittest.TestCase):
    """Test cases for configuration loading"""

    def tearDown(self):
        importlib.reload(config)

    def test_config_values(self):
        """Test that config values have expected types"""
        if config.FUSIONBRAIN_API_KEY is not None:
            self.assertIsInstance(config.FUSIONBRAIN_API_KEY, str)

        self.assertTrue(config.FUSIONBRAIN_API_URL.startswith("http"))
        self.assertIsInstance(config.FUSIONBRAIN_REQUEST_TIMEOUT, float)
        self.assertIsInstance(config.GENERATION_POLL_ATTEMPTS, int)
        self.assertIsInstance(config.GENERATION_POLL_DELAY_MS, int)
        self.assertIsInstance(config.LOG_TO_FILE, bool)

    def test_environment_overrides(self):
        """Test that environment variables override defaults"""
        env = {
            "FUSIONBRAIN_API_KEY": "env-key",
            "FUSIONBRAIN_SECRET_KEY": "env-secret",
            "GENERATION_POLL_ATTEMPTS": "7",
            "GENERATION_POLL_DELAY_MS": "250",
            "IMAGE_FILE_PREFIX": "fox",
            "LOG_TO_FILE": "TRUE",
        }
        with patch.dict(os.environ, env):
            importlib.reload(config)

            self.assertEqual(config.FUSIONBRAIN_API_KEY, "env-key")
            self.assertEqual(config.FUSIONBRAIN_SECRET_KEY, "env-secret")
            self.assertEqual(config.GENERATION_POLL_ATTEMPTS, 7)
            self.assertEqual(config.GENERATION_POLL_DELAY_MS, 250)
            self.assertEqual(config.IMAGE_FILE_PREFIX, "fox")
            self.assertTrue(config.LOG_TO_FILE)

    def test_defaults(self):
        """Test defaults when nothing is set"""
        names = [
            "FUSIONBRAIN_API_URL",
            "GENERATION_POLL_ATTEMPTS",
            "GENERATION_POLL_DELAY_MS",
            "IMAGE_OUTPUT_DIR",
            "IMAGE_FILE_PREFIX",
        ]
        cleaned = {k: v for k, v in os.environ.items() if k not in names}
        with patch.dict(os.environ, cleaned, clear=True), \
                patch("dotenv.load_dotenv"):
            importlib.reload(config)

            self.assertEqual(config.FUSIONBRAIN_API_URL, "https://api-key.fusionbrain.ai/")
            self.assertEqual(config.GENERATION_POLL_ATTEMPTS, 20)
            self.assertEqual(config.GENERATION_POLL_DELAY_MS, 5000)
            self.assertEqual(config.IMAGE_OUTPUT_DIR, "output")
            self.assertEqual(config.IMAGE_FILE_PREFIX, "kandinsky")


if __name__ == '__main__':
    unittest.main()
