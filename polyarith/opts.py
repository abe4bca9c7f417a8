"""Module-local configuration options.

Each polyarith module that has a setting declares an Option for it next to
the code that reads it:
 - logging.verbose           (--verbose): print task/event messages to stderr
 - numeric.coefficient_type  (--coefficient-type): int, float, fraction or
                             decimal; the type numbers are read as
 - polynomials.variable      (--variable): the variable name used when
                             formatting and parsing polynomials
 - main.show_term_count      (--show-term-count): print "Number Terms: n"
                             before each polynomial the CLI writes

`main.run` calls `setup` to register every Option declared so far in its
"Internal parameters" argument group, and then `read` to copy the parsed
values back into the Options.  Library code only ever looks at
`option.value`.  Tests use `snapshot` and `restore` to put the values back
after changing them.
"""

# All Option objects that have ever been created.
_OPTS = []

# Values to use instead of the declared defaults.  `restore` fills this in so
# that modules imported later still see the restored values.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None, choices=None):
        assert type in (bool, str, int)
        assert choices is None or default in choices
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.choices = tuple(choices) if choices is not None else None
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        self.metavar = metavar
        _OPTS.append(self)

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`. " +
            "If you intended to check whether this object is None, use `_ is None`.")

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.default)

def _argname(o):
    if o.type is bool:
        return ("no-" + o.name) if o.default else o.name
    return o.name

def setup(parser):
    """Add a command-line flag to `parser` for every declared Option."""
    for o in _OPTS:
        n = _argname(o)
        if o.type is bool:
            parser.add_argument("--" + n, action="store_true", default=False, help=o.description)
        else:
            help = "default={}".format(repr(o.default))
            if o.description:
                help = "{} ({})".format(o.description, help)
            parser.add_argument("--" + n,
                metavar=o.metavar,
                default=o.default,
                type=o.type,
                choices=o.choices,
                help=help)

def read(args):
    """Store the values parsed by an argparse parser prepared with `setup`."""
    for o in _OPTS:
        o.value = getattr(args, _argname(o).replace("-", "_"))
        if o.type is bool and o.default:
            o.value = not o.value

def snapshot():
    """Produce a snapshot of current option values."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES

    for o in _OPTS:
        o.value = snap.get(o.name, o.value)

    _DEFAULT_VALUE_OVERRIDES = dict(snap)
