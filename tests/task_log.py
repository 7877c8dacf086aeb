import io
import unittest
from contextlib import redirect_stderr

from intpoly import logging
from intpoly import opts

class TestLogging(unittest.TestCase):
    def setUp(self):
        self.saved = opts.snapshot()

    def tearDown(self):
        opts.restore(self.saved)

    def test_quiet_by_default(self):
        err = io.StringIO()
        with redirect_stderr(err):
            with logging.task("outer"):
                logging.event("hello")
        assert err.getvalue() == ""

    def test_nested_tasks(self):
        logging.verbose.value = True
        err = io.StringIO()
        with redirect_stderr(err):
            with logging.task("outer", n=1):
                with logging.task("inner"):
                    logging.event("hello")
        lines = err.getvalue().splitlines()
        assert lines[0] == "outer [n=1]..."
        assert lines[1] == "  inner..."
        assert lines[2] == "    hello"
        assert lines[3].startswith("  Finished inner [duration=")
        assert lines[4].startswith("Finished outer [duration=")

