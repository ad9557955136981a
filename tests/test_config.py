import logging
import os
import unittest
from unittest import mock

import numpy as np
from pydantic import ValidationError

from reactsource import Settings
from reactsource.log import LOGGER_NAME, get_logger


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        self.assertTrue(settings.validate_inputs)
        self.assertEqual(settings.numpy_dtype, np.dtype("float64"))
        self.assertEqual(settings.log_level, "WARNING")

    def test_from_env(self):
        env = {
            "REACTSOURCE_VALIDATE_INPUTS": "off",
            "REACTSOURCE_DTYPE": "object",
            "REACTSOURCE_LOG_LEVEL": "debug",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings()
        self.assertFalse(settings.validate_inputs)
        self.assertEqual(settings.numpy_dtype, np.dtype(object))
        self.assertEqual(settings.log_level, "DEBUG")

    def test_explicit_values_win(self):
        with mock.patch.dict(os.environ, {"REACTSOURCE_DTYPE": "float32"}, clear=True):
            settings = Settings(dtype="float64")
        self.assertEqual(settings.dtype, "float64")

    def test_invalid_values(self):
        with mock.patch.dict(os.environ, {"REACTSOURCE_VALIDATE_INPUTS": "maybe"}, clear=True):
            with self.assertRaises(ValidationError):
                Settings()
        with self.assertRaises(ValidationError):
            Settings(dtype="not-a-dtype")
        with self.assertRaises(ValidationError):
            Settings(log_level="LOUD")

    def test_frozen(self):
        settings = Settings()
        with self.assertRaises(ValidationError):
            settings.dtype = "object"


class TestLogger(unittest.TestCase):
    def test_single_handler_and_level(self):
        logger = get_logger("DEBUG")
        again = get_logger("ERROR")

        self.assertIs(logger, again)
        self.assertEqual(logger.name, LOGGER_NAME)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.ERROR)


if __name__ == '__main__':
    unittest.main()
