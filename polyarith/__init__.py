"""Single-variable polynomial arithmetic.

Important modules:
 - polyarith.terms: Term
 - polyarith.polynomials: Polynomial
 - polyarith.parse: algebraic notation ("3x^2 + 2x + 5")
 - polyarith.streams: coefficient/exponent token streams ("3 2 2 1 5 0 0")
"""

from polyarith.terms import Term
from polyarith.polynomials import Polynomial
