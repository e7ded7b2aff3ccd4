"""Unit tests for app.core.config.Settings validation and logging setup."""

import logging
import time
import unittest

from pydantic import ValidationError

from app.core.logging import configure_logging
from support import make_settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = make_settings()
        self.assertEqual(settings.API_PREFIX, "/api")
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 24 * 60)
        self.assertEqual(settings.CORS_ORIGINS, ["http://localhost:3000", "https://localhost:3000"])

    def test_cors_origins_from_comma_list(self) -> None:
        settings = make_settings(CORS_ORIGINS="https://a.example, https://b.example")
        self.assertEqual(settings.CORS_ORIGINS, ["https://a.example", "https://b.example"])

    def test_postgres_url_accepted(self) -> None:
        settings = make_settings(DATABASE_URL="postgresql+psycopg2://u:p@localhost/bank")
        self.assertTrue(settings.DATABASE_URL.startswith("postgresql"))

    def test_rejects_unknown_database_scheme(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mysql://localhost/bank")

    def test_rejects_out_of_range_values(self) -> None:
        for overrides in (
            {"JWT_EXPIRE_MINUTES": 0},
            {"BCRYPT_ROUNDS": 3},
            {"PORT": 70000},
            {"LOG_LEVEL": "LOUD"},
            {"JWT_SECRET": "  "},
        ):
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValidationError):
                    make_settings(**overrides)

    def test_https_requires_key_and_cert(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(USE_HTTPS=True)
        settings = make_settings(USE_HTTPS=True, SSL_KEYFILE="key.pem", SSL_CERTFILE="cert.pem")
        self.assertTrue(settings.USE_HTTPS)


class TestConfigureLogging(unittest.TestCase):
    def test_timestamps_rendered_in_utc(self) -> None:
        self.addCleanup(setattr, logging.Formatter, "converter", logging.Formatter.converter)
        configure_logging("INFO")
        self.assertIs(logging.Formatter.converter, time.gmtime)


if __name__ == "__main__":
    unittest.main()
