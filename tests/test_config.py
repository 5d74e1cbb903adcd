import io
import json
import logging
import unittest
from pathlib import Path
from unittest.mock import patch

from car_rental.config import Config, setup_logging


class TestConfig(unittest.TestCase):
    def test_bundled_database_validates(self):
        with patch.object(Config, "TAX_TABLE_FILE", None):
            self.assertTrue(Config.validate())
        self.assertEqual(Config.RENTAL_CURRENCY, "BRL")

    def test_validate_reports_missing_files(self):
        with patch.object(Config, "CARS_DATABASE", Path("/nonexistent/cars.json")):
            with self.assertLogs("car_rental.config", level="WARNING") as logs:
                self.assertFalse(Config.validate())
        self.assertIn("CARS_DATABASE", logs.output[0])


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self.saved_handlers = list(root.handlers)
        self.saved_level = root.level

    def tearDown(self):
        root = logging.getLogger()
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in self.saved_handlers:
            root.addHandler(h)
        root.setLevel(self.saved_level)

    def test_emits_json_lines_with_extras(self):
        stream = io.StringIO()
        with patch("sys.stdout", stream):
            setup_logging("INFO")
        logging.getLogger("car_rental.test").info("booked", extra={"customer_id": "c1", "car_id": "x"})

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        self.assertEqual(record["message"], "booked")
        self.assertEqual(record["level"], "INFO")
        self.assertEqual(record["customer_id"], "c1")
        self.assertEqual(record["car_id"], "x")
        self.assertNotIn("request_id", record)

    def test_replaces_existing_handlers(self):
        with patch("sys.stdout", io.StringIO()):
            setup_logging()
            setup_logging()
        self.assertEqual(len(logging.getLogger().handlers), 1)


if __name__ == "__main__":
    unittest.main()
