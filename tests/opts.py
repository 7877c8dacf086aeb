import argparse
import unittest

from intpoly import opts
from intpoly.logging import verbose
from intpoly.parse import strict_parse

class TestOptions(unittest.TestCase):
    def setUp(self):
        self.saved = opts.snapshot()

    def tearDown(self):
        opts.restore(self.saved)

    def test_no_implicit_bool(self):
        with self.assertRaises(Exception):
            if strict_parse:
                pass

    def test_setup_and_read(self):
        parser = argparse.ArgumentParser()
        opts.setup(parser)
        opts.read(parser.parse_args(["--strict-parse"]))
        assert strict_parse.value is True
        assert verbose.value is False

    def test_snapshot_restore(self):
        snap = opts.snapshot()
        verbose.value = True
        assert opts.snapshot()["verbose"] is True
        opts.restore(snap)
        assert verbose.value is False
