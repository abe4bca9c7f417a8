import os
import tempfile
import unittest

from polyarith.common import No, AtomicWriteableFile, read_file

class TestCommonUtils(unittest.TestCase):

    def test_no(self):
        n = No("bad")
        assert not n
        self.assertEqual(str(n), "no: bad")
        self.assertEqual(repr(n), "No('bad')")

    def test_atomic_writeable_file(self):
        fd, path = tempfile.mkstemp(text=True)
        with os.fdopen(fd, "w") as f:
            f.write("contents0")

        # (1) normal writing works
        with AtomicWriteableFile(path) as f:
            f.write("contents1")
        assert read_file(path) == "contents1"

        # (2) if an error happens, no writing happens
        class CustomExc(Exception):
            pass
        try:
            with AtomicWriteableFile(path) as f:
                f.write("con")
                raise CustomExc()
        except CustomExc:
            pass
        assert read_file(path) == "contents1"

        os.remove(path)
