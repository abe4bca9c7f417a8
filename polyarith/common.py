"""Utility functions and classes not found in the standard libraries.

Important functions and classes:
 - No: a falsy value that explains why a check failed
 - open_maybe_stdin / open_maybe_stdout: treat "-" as a standard stream
 - AtomicWriteableFile: a file that only appears once it is fully written
"""

from contextlib import contextmanager
import os
import shutil
import sys
import tempfile

class No(object):
    """A falsy object with a message.

    This is useful if you want to return False with an associated reason."""
    def __init__(self, msg):
        self.msg = msg
    def __bool__(self):
        return False
    def __str__(self):
        return "no: {}".format(self.msg)
    def __repr__(self):
        return "No({!r})".format(self.msg)

@contextmanager
def AtomicWriteableFile(dst, mode="w"):
    """A writeable file handle that does not overwrite until it is closed.

    Usage:

        with AtomicWriteableFile(path) as f:
            ... f.write(...) ...

    If the block raises, nothing is written to `dst`.
    """
    tmp_fd, tmp_path = tempfile.mkstemp(text=True)
    try:
        with os.fdopen(tmp_fd, mode) as f:
            yield f
            f.flush()
            os.fsync(tmp_fd)
    except BaseException:
        os.unlink(tmp_path)
        raise
    shutil.move(src=tmp_path, dst=dst)

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    The caller is responsible for closing the returned handle:

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)

def open_maybe_stdout(f : str, mode="w"):
    """Open file f, or open standard output if f is "-".

    Regular files are opened as an AtomicWriteableFile.  The caller is
    responsible for closing the returned handle:

        with open_maybe_stdout(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdout.fileno()), mode)
    return AtomicWriteableFile(f, mode)

def read_file(filename):
    """Returns the file contents as a single string."""
    with open(filename, "r") as f:
        return f.read()
