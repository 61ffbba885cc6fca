import logging
import unittest
from io import StringIO

from digraph.logs import ErrorHandler, setup_logging


def record(level, msg="message"):
    return logging.LogRecord("root", level, __file__, 1, msg, None, None)


class TestErrorHandler(unittest.TestCase):
    def setUp(self):
        self.out = StringIO()

    def test_warning_does_not_exit(self):
        handler = ErrorHandler(self.out, keep_going=False)
        handler.handle(record(logging.WARNING))
        self.assertEqual(handler.errors, 0)
        handler.finish()

    def test_error_exits(self):
        handler = ErrorHandler(self.out, keep_going=False)
        with self.assertRaises(SystemExit) as cm:
            handler.handle(record(logging.ERROR, "bad edge list"))
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("bad edge list", self.out.getvalue())

    def test_keep_going_counts_errors(self):
        handler = ErrorHandler(self.out, keep_going=True)
        handler.handle(record(logging.ERROR))
        handler.handle(record(logging.ERROR))
        self.assertEqual(handler.errors, 2)
        with self.assertRaises(SystemExit):
            handler.finish()

    def test_fatal_always_exits(self):
        handler = ErrorHandler(self.out, keep_going=True)
        with self.assertRaises(SystemExit):
            handler.handle(record(logging.FATAL))


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        self.root = logging.getLogger()
        self.level = self.root.level

    def tearDown(self):
        self.root.setLevel(self.level)

    def test_verbosity(self):
        for verbosity, level in [(0, logging.WARNING), (1, logging.INFO), (5, logging.DEBUG)]:
            out = StringIO()
            handler = setup_logging(out, verbosity, keep_going=True)
            try:
                self.assertEqual(self.root.level, level)
                logging.warning("careful")
                self.assertEqual(out.getvalue(), "WARNING: careful\n")
            finally:
                self.root.removeHandler(handler)


if __name__ == '__main__':
    unittest.main()
