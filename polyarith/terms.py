"""Class for representing a single term c*x^e of a polynomial."""

class Term(object):
    """A coefficient paired with a non-negative integer exponent.

    Terms are values: nothing modifies a Term after it is built.  Use
    `with_coefficient` and `with_exponent` to get modified copies.
    """
    __slots__ = ("_coefficient", "_exponent")

    def __init__(self, coefficient=0, exponent=0):
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise ValueError("exponent must be an int, not {}".format(type(exponent).__name__))
        if exponent < 0:
            raise ValueError("exponent must be non-negative, got {}".format(exponent))
        self._coefficient = coefficient
        self._exponent = exponent

    @property
    def coefficient(self):
        return self._coefficient

    @property
    def exponent(self):
        return self._exponent

    def with_coefficient(self, coefficient):
        return Term(coefficient, self._exponent)

    def with_exponent(self, exponent):
        return Term(self._coefficient, exponent)

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self._coefficient == other._coefficient and self._exponent == other._exponent

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        return hash((self._coefficient, self._exponent))

    def __neg__(self):
        return Term(-self._coefficient, self._exponent)

    def __mul__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return Term(self._coefficient * other._coefficient, self._exponent + other._exponent)

    def __str__(self):
        return format_term(self._coefficient, self._exponent, leading=True)

    def __repr__(self):
        return "Term({!r}, {!r})".format(self._coefficient, self._exponent)

def format_term(coefficient, exponent, leading, variable="x"):
    """Render one term of a polynomial.

    Leading terms get a bare "-" when negative; later terms are prefixed with
    " + " or " - ".  A magnitude of 1 is left out unless the exponent is 0.
    """
    if coefficient < 0:
        s = "-" if leading else " - "
    else:
        s = "" if leading else " + "
    magnitude = abs(coefficient)
    if magnitude != 1 or exponent == 0:
        s += str(magnitude)
    if exponent > 0:
        s += variable
        if exponent > 1:
            s += "^{}".format(exponent)
    return s
