import contextlib
import io
import os
import shutil
import tempfile
import unittest

from polyarith import opts
from polyarith.common import read_file
from polyarith.main import run

class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.saved = opts.snapshot()
        self.dir = tempfile.mkdtemp()
        self.output = os.path.join(self.dir, "out.txt")

    def tearDown(self):
        opts.restore(self.saved)
        shutil.rmtree(self.dir)

    def run_with_input(self, text, *args):
        path = os.path.join(self.dir, "in.txt")
        with open(path, "w") as f:
            f.write(text)
        run(list(args) + ["-o", self.output, path])
        return read_file(self.output)

    def test_print(self):
        out = self.run_with_input("3 2 2 1 5 0 0\n1 1 0\n")
        self.assertEqual(out, "3x^2 + 2x + 5\nx\n")

    def test_add(self):
        out = self.run_with_input("3 2 2 1 5 0 0\n1 1 0\n", "--op", "add")
        self.assertEqual(out, "3x^2 + 3x + 5\n")

    def test_subtract_to_zero(self):
        out = self.run_with_input("1 1 0 1 1 0", "--op", "subtract")
        self.assertEqual(out, "0\n")

    def test_multiply_expressions(self):
        out = self.run_with_input("x + 1\n\nx - 1\n", "--format", "expr", "--op", "multiply")
        self.assertEqual(out, "x^2 - 1\n")

    def test_evaluate(self):
        out = self.run_with_input("3 2 2 1 5 0 0", "--at", "2", "--at", "0")
        self.assertEqual(out, "3x^2 + 2x + 5\np(2) = 21\np(0) = 5\n")

    def test_show_term_count(self):
        out = self.run_with_input("3 2 2 1 5 0 0", "--show-term-count")
        self.assertEqual(out, "Number Terms: 3\n3x^2 + 2x + 5\n")

    def test_fractions(self):
        out = self.run_with_input("1/2x + 1/2\n", "--format", "expr", "--coefficient-type", "fraction", "--at", "1")
        self.assertEqual(out, "1/2x + 1/2\np(1) = 1\n")

    def test_malformed_input(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            with self.assertRaises(SystemExit) as cm:
                self.run_with_input("3 2 2")
        self.assertEqual(cm.exception.code, 1)
        assert err.getvalue().startswith("Error: ")
        assert not os.path.exists(self.output)

    def test_nothing_to_combine(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                self.run_with_input("", "--op", "add")
