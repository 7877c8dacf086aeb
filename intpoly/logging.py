"""Indented, timed log messages for intpoly.

Nothing is printed unless the `verbose` option is set.

Important functions:
 - task: a context manager that wraps a unit of work (parsing one input,
   combining two polynomials, ...) and reports how long it took
 - event: print a one-off message, indented under the active tasks
"""

from contextlib import contextmanager
import datetime
import sys

from intpoly.opts import Option

verbose = Option("verbose", bool, False, description="Print progress messages to stderr")

_task_stack = []

def log(string):
    if verbose.value:
        print(string, file=sys.stderr)

def _format_kwargs(kwargs):
    if not kwargs:
        return ""
    return " [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]"

def task_begin(name, **kwargs):
    _task_stack.append((name, datetime.datetime.now()))
    if not verbose.value:
        return
    indent = "  " * (len(_task_stack) - 1)
    log("{}{}{}...".format(indent, name, _format_kwargs(kwargs)))

def task_end():
    end = datetime.datetime.now()
    name, start = _task_stack.pop()
    duration = (end - start).total_seconds()
    if not verbose.value:
        return
    indent = "  " * len(_task_stack)
    log("{}Finished {} [duration={:.3}s]".format(indent, name, duration))

@contextmanager
def task(name, **kwargs):
    try:
        yield task_begin(name, **kwargs)
    finally:
        task_end()

def event(name):
    if not verbose.value:
        return
    indent = "  " * len(_task_stack)
    log("{}{}".format(indent, name))
