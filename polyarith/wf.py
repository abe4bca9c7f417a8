"""Well-formedness tests for polynomials.

A polynomial is well-formed when its terms are in canonical form and its
cached summary fields agree with the term list.
"""

from polyarith.common import No
from polyarith.terms import Term

class PolynomialIsNotWf(No):
    """An explanation for why a polynomial is not well-formed.

    This object is falsy so that it can be used elegantly in conditionals:

        if polynomial_wf(p):
            <p is definitely in canonical form>
    """
    def __init__(self, polynomial, index, reason):
        super().__init__("at term {}: {}".format(index, reason) if index is not None else reason)
        self.polynomial = polynomial
        self.index = index
        self.reason = reason
    def __repr__(self):
        return "PolynomialIsNotWf({!r}, {!r}, {!r})".format(
            self.polynomial,
            self.index,
            self.reason)

def polynomial_wf(p):
    """Check that `p` is in canonical form.

    Returns True or an instance of PolynomialIsNotWf.
    """
    terms = p._terms
    for i, t in enumerate(terms):
        if not isinstance(t, Term):
            return PolynomialIsNotWf(p, i, "{!r} is not a Term".format(t))
        if t.coefficient == 0:
            return PolynomialIsNotWf(p, i, "zero coefficient")
        if i > 0 and terms[i-1].exponent <= t.exponent:
            return PolynomialIsNotWf(p, i, "exponent {} does not decrease from {}".format(t.exponent, terms[i-1].exponent))
    if p._term_count != len(terms):
        return PolynomialIsNotWf(p, None, "term_count is {} but there are {} terms".format(p._term_count, len(terms)))
    expected_degree = terms[0].exponent if terms else 0
    if p._highest_degree != expected_degree:
        return PolynomialIsNotWf(p, None, "highest_degree is {} but should be {}".format(p._highest_degree, expected_degree))
    return True
