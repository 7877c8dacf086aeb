"""Module-local configuration options.

Modules that have a tunable behavior (how chatty the log is, how forgiving
the parser is) declare an Option next to the code that reads it.  The
command-line front end calls `setup` to register every Option defined so
far with an argparse parser, then `read` to copy the parsed values back.
"""

# Every Option that has been created, in creation order.
_OPTS = []

# Values that override defaults for options not yet imported.  `restore`
# fills this in.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str, int)
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        self.metavar = metavar
        _OPTS.append(self)

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`. " +
            "If you intended to check whether this object is None, use `_ is None`.")

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

def _argname(o):
    if o.type is bool:
        return ("no-" + o.name) if o.default else o.name
    return o.name

def setup(parser):
    """Add a command-line flag to `parser` for every known Option."""
    for o in _OPTS:
        n = _argname(o)
        if o.type is bool:
            parser.add_argument("--" + n, action="store_true", default=False, help=o.description)
        else:
            parser.add_argument("--" + n, metavar=o.metavar, default=o.default,
                help=(o.description + " (default={})".format(repr(o.default))) if o.description else "default={}".format(repr(o.default)))

def read(args):
    """Copy values parsed by argparse into the Options."""
    for o in _OPTS:
        o.value = getattr(args, _argname(o).replace("-", "_"))
        if o.type is bool and o.default:
            o.value = not o.value
        if o.type is int:
            o.value = int(o.value)

def snapshot():
    """Produce a snapshot of current option values."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES

    for o in _OPTS:
        o.value = snap.get(o.name, o.value)

    _DEFAULT_VALUE_OVERRIDES = dict(snap)
