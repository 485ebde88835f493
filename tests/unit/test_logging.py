from __future__ import annotations

import logging
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from imgdigest.util.logging import configure_logging


class LoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger("imgdigest")
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
                logger.removeHandler(handler)

    def test_configure_logging_creates_file_handler(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "logs" / "imgdigest.log"
            logger = configure_logging(level="INFO", log_path=log_path)
            logger.info("hello")
            for handler in logger.handlers:
                handler.flush()

            self.assertTrue(log_path.exists())
            self.assertIn("hello", log_path.read_text(encoding="utf-8"))
            self.tearDown()

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        configure_logging()
        logger = configure_logging(level=logging.DEBUG)

        stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        self.assertEqual(len(stream_handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
