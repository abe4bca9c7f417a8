"""Parser for polynomials written in algebraic notation.

This is the inverse of `Polynomial.format`: it accepts text such as
"3x^2 - x + 5" or "-1/2*x^3 + 2.5".  All monomials must use the same
variable.

The important functions are:
 - tokenize:         str -> token stream
 - parse_polynomial: str -> Polynomial
"""

# 3rd party
from ply import lex, yacc

# ours
from polyarith.logging import task
from polyarith.numeric import lookup_coefficient_type, parse_coefficient
from polyarith.polynomials import Polynomial, variable
from polyarith.terms import Term

class MalformedPolynomialError(ValueError):
    """Raised when text does not describe a polynomial."""
    pass

# Lexer ########################################################################

tokens = (
    "NUM",
    "FLOAT",
    "WORD",
    "OP_PLUS",
    "OP_MINUS",
    "OP_TIMES",
    "OP_SLASH",
    "OP_CARET")

def make_lexer():

    def t_FLOAT(t):
        r"(\d+\.\d*|\.\d+)([eE][-+]?\d+)?|\d+[eE][-+]?\d+"
        return t

    def t_NUM(t):
        r"\d+"
        return t

    def t_WORD(t):
        r"[a-zA-Z_]\w*"
        return t

    t_OP_PLUS  = r"\+"
    t_OP_MINUS = r"-"
    t_OP_TIMES = r"\*"
    t_OP_SLASH = r"/"
    t_OP_CARET = r"\^"

    def t_newline(t):
        r"\n+"
        t.lexer.lineno += len(t.value)

    t_ignore = " \t\r"

    def t_error(t):
        raise MalformedPolynomialError("on line {}: illegal character {!r}".format(t.lexer.lineno, t.value[0]))

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.lineno = 1
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Parser #######################################################################

# The parser produces a list of (negated, coefficient text, variable, exponent)
# tuples.  Coefficient text is None for a bare monomial and variable is None
# for a constant.  Numbers are converted afterwards, once the coefficient type
# is known.

def make_parser():
    start = "polynomial"

    def p_polynomial(p):
        """polynomial : signed_term
                      | polynomial OP_PLUS term
                      | polynomial OP_MINUS term"""
        if len(p) == 2:
            p[0] = [p[1]]
        else:
            _, coefficient, name, exponent = p[3]
            p[1].append((p[2] == "-", coefficient, name, exponent))
            p[0] = p[1]

    def p_signed_term(p):
        """signed_term : term
                       | OP_MINUS term"""
        if len(p) == 2:
            p[0] = p[1]
        else:
            _, coefficient, name, exponent = p[2]
            p[0] = (True, coefficient, name, exponent)

    def p_term(p):
        """term : coefficient
                | coefficient monomial
                | coefficient OP_TIMES monomial
                | monomial"""
        if len(p) == 2:
            if isinstance(p[1], tuple):
                name, exponent = p[1]
                p[0] = (False, None, name, exponent)
            else:
                p[0] = (False, p[1], None, 0)
        else:
            name, exponent = p[len(p) - 1]
            p[0] = (False, p[1], name, exponent)

    def p_monomial(p):
        """monomial : WORD
                    | WORD OP_CARET NUM"""
        if len(p) == 2:
            p[0] = (p[1], 1)
        else:
            p[0] = (p[1], int(p[3]))

    def p_coefficient(p):
        """coefficient : NUM
                       | FLOAT
                       | NUM OP_SLASH NUM"""
        p[0] = "".join(p[1:])

    def p_error(p):
        if p is None:
            raise MalformedPolynomialError("unexpected end of input")
        raise MalformedPolynomialError("syntax error on line {} at {!r}".format(p.lineno, p.value))

    return yacc.yacc(debug=False, write_tables=False)

_parser = make_parser()

def parse_polynomial(s, coefficient_type=None, variable_name=None):
    """Parse a string in algebraic notation as a Polynomial.

    Repeated exponents are merged, so "x + x" parses as 2x.  Raises
    MalformedPolynomialError if the text is not a polynomial in
    `variable_name` (default: the `variable` option).
    """
    ty = lookup_coefficient_type(coefficient_type)
    if variable_name is None:
        variable_name = variable.value
    lexer = _lexer.clone()
    lexer.lineno = 1
    with task("parsing polynomial", length=len(s)):
        parsed = _parser.parse(s, lexer=lexer)
        result = Polynomial()
        for negated, coefficient, name, exponent in parsed:
            if name is not None and name != variable_name:
                raise MalformedPolynomialError("expected a polynomial in {}, found variable {!r}".format(variable_name, name))
            try:
                c = parse_coefficient(coefficient or "1", ty)
            except ValueError as e:
                raise MalformedPolynomialError(str(e))
            result.insert(Term(-c if negated else c, exponent))
    return result
