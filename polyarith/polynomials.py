"""Class for representing polynomials of one variable.

A Polynomial keeps its terms in canonical form: sorted by strictly
decreasing exponent, at most one term per exponent, and no term with a zero
coefficient.  The zero polynomial has no terms at all.  Every mutation goes
through `Polynomial.insert`, which also keeps the cached `term_count` and
`highest_degree` in sync with the term list.
"""

import numbers
import sys

from polyarith.logging import task, event
from polyarith.opts import Option
from polyarith.terms import Term, format_term

variable = Option("variable", str, "x",
    description="Name of the variable used when printing and parsing polynomials",
    metavar="NAME")

def _operand_terms(other):
    """The terms of an arithmetic operand, or None for unsupported types.

    Polynomials, Terms, and plain numbers (as constant terms) are accepted.
    The result is a snapshot, so it is safe to use even if `other` is the
    polynomial being modified.
    """
    if isinstance(other, Polynomial):
        return tuple(other._terms)
    if isinstance(other, Term):
        return (other,)
    if isinstance(other, numbers.Number):
        return (Term(other, 0),)
    return None

def _power(x, n):
    """x**n computed by n repeated multiplications."""
    result = 1
    for _ in range(n):
        result *= x
    return result

class Polynomial(object):
    __slots__ = ("_terms", "_term_count", "_highest_degree")

    def __init__(self, coefficient=0, degree=0):
        self._terms = []
        self._term_count = 0
        self._highest_degree = 0
        self.insert(Term(coefficient, degree))

    @classmethod
    def from_term(cls, term):
        return cls(term.coefficient, term.exponent)

    @classmethod
    def from_terms(cls, terms):
        """Build a polynomial by inserting each term in turn."""
        p = cls()
        for t in terms:
            p.insert(t)
        return p

    # Accessors ################################################################

    @property
    def term_count(self):
        return self._term_count

    @property
    def highest_degree(self):
        return self._highest_degree

    @property
    def terms(self):
        return tuple(self._terms)

    def __iter__(self):
        return iter(tuple(self._terms))

    def __len__(self):
        return self._term_count

    def __bool__(self):
        return self._term_count > 0

    def is_zero(self):
        return not self._terms

    def coefficient(self, exponent):
        """The coefficient of x^exponent (0 if there is no such term)."""
        for t in self._terms:
            if t.exponent == exponent:
                return t.coefficient
            if t.exponent < exponent:
                break
        return 0

    # Copying and assignment ###################################################

    def copy(self):
        p = Polynomial()
        p.assign(self)
        return p

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def assign(self, other):
        """Replace this polynomial's state with a copy of `other`'s."""
        if other is not self:
            self._terms = list(other._terms)
            self._term_count = other._term_count
            self._highest_degree = other._highest_degree
        return self

    def take(self, other):
        """Move `other`'s terms into this polynomial.

        Afterwards `other` is the zero polynomial and shares nothing with
        this one.
        """
        if other is not self:
            self._terms = other._terms
            self._term_count = other._term_count
            self._highest_degree = other._highest_degree
            other._terms = []
            other._term_count = 0
            other._highest_degree = 0
        return self

    def clear(self):
        self._terms = []
        self._term_count = 0
        self._highest_degree = 0
        return self

    # Canonical insertion ######################################################

    def insert(self, term):
        """Merge `term` into this polynomial, keeping it in canonical form.

        The term list is scanned once from the highest exponent down:
         - a term with the same exponent absorbs the new coefficient, and is
           removed if the sum is zero;
         - otherwise the new term goes in front of the first term with a
           smaller exponent, or at the end if there is none.
        Inserting a zero coefficient does nothing.
        """
        if term.coefficient == 0:
            return self

        terms = self._terms
        if not terms:
            terms.append(term)
            self._term_count = 1
            self._highest_degree = term.exponent
            return self

        for i, existing in enumerate(terms):
            if existing.exponent == term.exponent:
                total = existing.coefficient + term.coefficient
                if total == 0:
                    del terms[i]
                    self._term_count -= 1
                    event("cancelled", exponent=term.exponent)
                    if not terms:
                        self._highest_degree = 0
                    elif i == 0:
                        self._highest_degree = terms[0].exponent
                else:
                    terms[i] = existing.with_coefficient(total)
                return self
            if existing.exponent < term.exponent:
                terms.insert(i, term)
                self._term_count += 1
                if i == 0:
                    self._highest_degree = term.exponent
                return self

        terms.append(term)
        self._term_count += 1
        return self

    # Arithmetic ###############################################################

    def __iadd__(self, other):
        terms = _operand_terms(other)
        if terms is None:
            return NotImplemented
        for t in terms:
            self.insert(t)
        return self

    def __isub__(self, other):
        terms = _operand_terms(other)
        if terms is None:
            return NotImplemented
        for t in terms:
            self.insert(-t)
        return self

    def __imul__(self, other):
        terms = _operand_terms(other)
        if terms is None:
            return NotImplemented
        product = Polynomial()
        with task("multiplying", left=self._term_count, right=len(terms)):
            for t in self._terms:
                for u in terms:
                    product.insert(t * u)
        return self.assign(product)

    def __add__(self, other):
        return self.copy().__iadd__(other)

    def __sub__(self, other):
        return self.copy().__isub__(other)

    def __mul__(self, other):
        return self.copy().__imul__(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __rsub__(self, other):
        return (-self).__iadd__(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return Polynomial().__isub__(self)

    def __pos__(self):
        return self.copy()

    def __pow__(self, n):
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        if n < 0:
            raise ValueError("cannot raise a polynomial to a negative power")
        result = Polynomial(1, 0)
        for _ in range(n):
            result *= self
        return result

    # Evaluation ###############################################################

    def evaluate(self, x):
        """Compute the value of this polynomial at x.

        Each power of x is computed by repeated multiplication.
        """
        total = x * 0
        for t in self._terms:
            total += t.coefficient * _power(x, t.exponent)
        return total

    __call__ = evaluate

    # Comparison ###############################################################

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(self._terms) != len(other._terms):
            return False
        return all(a == b for a, b in zip(self._terms, other._terms))

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    # Polynomials are mutable.
    __hash__ = None

    # Text #####################################################################

    def format(self, variable_name=None):
        """Render this polynomial in algebraic notation, e.g. "3x^2 + 2x + 5"."""
        if variable_name is None:
            variable_name = variable.value
        if not self._terms:
            return "0"
        return "".join(
            format_term(t.coefficient, t.exponent, leading=(i == 0), variable=variable_name)
            for i, t in enumerate(self._terms))

    def __str__(self):
        return self.format()

    def __repr__(self):
        if not self._terms:
            return "Polynomial()"
        return "Polynomial.from_terms([{}])".format(", ".join(repr(t) for t in self._terms))

    def read(self, stream, coefficient_type=None):
        """Insert the coefficient/exponent pairs read from `stream`.

        `stream` is a text stream, a string, or a `PolynomialReader`.
        Reading stops after a coefficient equal to zero.  See
        `polyarith.streams` for the input format and its errors.
        """
        from polyarith.streams import PolynomialReader
        if not isinstance(stream, PolynomialReader):
            stream = PolynomialReader(stream, coefficient_type=coefficient_type)
        for t in stream.read_terms():
            self.insert(t)
        return self

    def print(self, out=None):
        """Write the number of terms and then the polynomial to `out`."""
        if out is None:
            out = sys.stdout
        out.write("Number Terms: {}\n".format(self._term_count))
        out.write(self.format())
        out.write("\n")
