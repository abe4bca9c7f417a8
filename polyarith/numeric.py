"""Coefficient types.

Polynomials work with any number-like coefficient type supporting `+`, `-`,
`*`, `==`, `<` and `abs`.  Arithmetic never needs to know which type is in
use; only reading numbers from text does.  This module names the types that
the parsers know how to build.
"""

from collections import OrderedDict
from decimal import Decimal, InvalidOperation
from fractions import Fraction

from polyarith.opts import Option

COEFFICIENT_TYPES = OrderedDict([
    ("int",      int),
    ("float",    float),
    ("fraction", Fraction),
    ("decimal",  Decimal)])

coefficient_type = Option("coefficient-type", str, "int",
    description="Numeric type for coefficients read from text",
    metavar="TYPE",
    choices=list(COEFFICIENT_TYPES))

def lookup_coefficient_type(name=None):
    """Return the Python type registered under `name`.

    With no name, use the `coefficient-type` option.  A type object is
    returned unchanged, so callers can pass either form.
    """
    if name is None:
        name = coefficient_type.value
    if isinstance(name, type):
        return name
    try:
        return COEFFICIENT_TYPES[name]
    except KeyError:
        raise ValueError("unknown coefficient type {!r} (expected one of {})".format(
            name, ", ".join(COEFFICIENT_TYPES)))

def parse_coefficient(text : str, ty=None):
    """Convert a numeric literal to a coefficient of type `ty`.

    Raises ValueError if the literal does not denote a value of that type;
    for instance "2.5" is not an int.
    """
    ty = lookup_coefficient_type(ty)
    try:
        return ty(text)
    except (ValueError, ZeroDivisionError, InvalidOperation):
        raise ValueError("{!r} is not a valid {} coefficient".format(text, ty.__name__))

def parse_exponent(text : str):
    """Convert a literal to an exponent: a non-negative int."""
    try:
        e = int(text)
    except ValueError:
        raise ValueError("{!r} is not a valid exponent".format(text))
    if e < 0:
        raise ValueError("exponent {} is negative".format(e))
    return e
