"""Utility functions and classes not found in the standard libraries.

Important functions and classes:
 - @typechecked: decorator to perform runtime typechecking
 - ADT: base class for small immutable value types
 - FrozenDict: a hashable immutable dictionary
"""

# builtins
from functools import wraps
import inspect

# 3rd party
from dictionaries import FrozenDict as _FrozenDict

def check_type(value, ty, value_name="value"):
    """
    Verify that `value` is an instance of `ty`.  A `ty` of None does no
    checking (for example, when a type comes from a Python annotation and the
    formal variable does not have one).  `value_name` is printed in the
    diagnostic message.
    """
    if ty is not None:
        assert isinstance(value, ty), "{} has type {}, not {}".format(value_name, type(value).__name__, ty.__name__)

def typechecked(f):
    """
    Use the @typechecked decorator on a function to check its annotated
    arguments and return value with `check_type` on every call.
    """
    argspec = inspect.getfullargspec(f)
    annotations = f.__annotations__
    @wraps(f)
    def g(*args, **kwargs):
        for argname, argval in zip(argspec.args, args):
            check_type(argval, annotations.get(argname), argname)
        for argname, argval in kwargs.items():
            check_type(argval, annotations.get(argname), argname)
        ret = f(*args, **kwargs)
        check_type(ret, annotations.get("return"), "return")
        return ret
    return g

class ADT(object):
    """A small immutable value type.

    Subclasses define `children()`, the tuple of fields that make up the
    value.  Equality, hashing and repr are all derived from it, so two
    instances with equal children are interchangeable.
    """

    __slots__ = ()

    def children(self):
        return ()
    def __repr__(self):
        return "{}({})".format(type(self).__name__, ", ".join(repr(child) for child in self.children()))
    def __hash__(self):
        return hash((type(self).__name__,) + self.children())
    def __eq__(self, other):
        if self is other: return True
        return type(self) is type(other) and self.children() == other.children()
    def __ne__(self, other):
        return not self.__eq__(other)
    def __setattr__(self, name, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))
    def __delattr__(self, name):
        raise AttributeError("{} is immutable".format(type(self).__name__))

class FrozenDict(_FrozenDict):
    """Immutable, hashable dictionary with a repr that evaluates back to it."""

    def __repr__(self):
        return "FrozenDict({!r})".format(list(self.items()))
