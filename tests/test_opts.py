import argparse
import contextlib
import io
import unittest

from polyarith import opts
from polyarith import logging
from polyarith.numeric import coefficient_type, lookup_coefficient_type
from polyarith.polynomials import Polynomial
from polyarith.terms import Term

class TestOptions(unittest.TestCase):

    def setUp(self):
        self.saved = opts.snapshot()

    def tearDown(self):
        opts.restore(self.saved)

    def parse(self, *argv):
        parser = argparse.ArgumentParser()
        opts.setup(parser)
        opts.read(parser.parse_args(list(argv)))

    def test_defaults(self):
        self.parse()
        self.assertEqual(coefficient_type.value, "int")
        self.assertEqual(logging.verbose.value, False)
        self.assertIs(lookup_coefficient_type(), int)

    def test_read_flags(self):
        self.parse("--coefficient-type", "fraction", "--verbose", "--variable", "t")
        self.assertEqual(coefficient_type.value, "fraction")
        self.assertEqual(logging.verbose.value, True)
        self.assertEqual(str(Polynomial(2, 3)), "2t^3")

    def test_choices_are_checked(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                self.parse("--coefficient-type", "complex")

    def test_snapshot_restore(self):
        snap = opts.snapshot()
        coefficient_type.value = "float"
        opts.restore(snap)
        self.assertEqual(coefficient_type.value, snap["coefficient-type"])

    def test_options_are_not_booleans(self):
        with self.assertRaises(Exception):
            bool(coefficient_type)

    def test_unknown_type_name(self):
        with self.assertRaises(ValueError):
            lookup_coefficient_type("complex")

class TestLogging(unittest.TestCase):

    def setUp(self):
        self.saved = opts.snapshot()

    def tearDown(self):
        opts.restore(self.saved)

    def test_quiet_by_default(self):
        logging.verbose.value = False
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            with logging.task("work"):
                logging.event("step")
        self.assertEqual(err.getvalue(), "")

    def test_verbose_tasks_are_indented(self):
        logging.verbose.value = True
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            with logging.task("work", n=1):
                logging.event("step")
        lines = err.getvalue().splitlines()
        self.assertEqual(lines[0], "work [n=1]...")
        self.assertEqual(lines[1], "  step")
        assert lines[2].startswith("Finished work")

    def test_report_times(self):
        logging.reset_times()
        with logging.task("timed"):
            pass
        out = io.StringIO()
        logging.report_times(out)
        assert "timed" in out.getvalue()

    def test_cancellation_event(self):
        logging.verbose.value = True
        p = Polynomial(3, 2)
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            p.insert(Term(-3, 2))
        self.assertEqual(err.getvalue(), "cancelled [exponent=2]\n")
        assert p.is_zero()
