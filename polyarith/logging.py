"""Indented, timed log messages for polyarith.

Messages are only printed (to standard error, so they never mix with the
polynomials the CLI writes) when the `verbose` option is set.  polyarith
logs these tasks:
 - "reading input" and "<op>" in main.run
 - "reading polynomial" for each polynomial taken from a coefficient/exponent
   stream, with the line it starts on
 - "parsing polynomial" for each algebraic expression, with its length
 - "multiplying" for each polynomial product, with both term counts
and one event, "cancelled", each time an insert makes a term's coefficient
sum to zero and removes it (with the term's exponent).

Important functions:
 - task: a context manager to wrap a self-contained piece of work
 - event: print a log message, indented based on the active tasks
 - report_times: summarize how long each kind of task took
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys

from polyarith.opts import Option

verbose = Option("verbose", bool, False, description="Print progress messages to stderr")

_times = defaultdict(float)
_task_stack = []

def log(string):
    if verbose.value:
        print(string, file=sys.stderr)

def _format_kwargs(kwargs):
    if not kwargs:
        return ""
    return " [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]"

def task_begin(name, **kwargs):
    start = datetime.datetime.now()
    _task_stack.append((name, start))
    if not verbose.value:
        return
    indent = "  " * (len(_task_stack) - 1)
    log("{indent}{name}{maybe_kwargs}...".format(
        indent = indent,
        name   = name,
        maybe_kwargs = _format_kwargs(kwargs)))

def task_end():
    end = datetime.datetime.now()
    key = tuple(name for name, start in _task_stack)
    name, start = _task_stack.pop()
    duration = (end-start).total_seconds()
    _times[key] += duration
    if not verbose.value:
        return
    indent = "  " * len(_task_stack)
    log("{indent}Finished {name} [duration={duration:.3}s]".format(indent=indent, name=name, duration=duration))

@contextmanager
def task(name, **kwargs):
    try:
        yield task_begin(name, **kwargs)
    finally:
        task_end()

def event(name, **kwargs):
    if not verbose.value:
        return
    indent = "  " * len(_task_stack)
    log("{indent}{name}{maybe_kwargs}".format(indent=indent, name=name, maybe_kwargs=_format_kwargs(kwargs)))

def report_times(out=None):
    """Write the accumulated task durations, slowest first."""
    if out is None:
        out = sys.stderr
    for k in sorted(_times.keys(), key=_times.get, reverse=True):
        out.write("{:16.3}".format(_times[k]))
        out.write(" ")
        out.write(", ".join(k))
        out.write("\n")

def reset_times():
    _times.clear()
