"""Reading polynomials from a stream of coefficient/exponent pairs.

The input is a sequence of whitespace-separated numbers

    c1 e1 c2 e2 ... cn en 0

where each ci is a coefficient and each ei a non-negative integer exponent.
A coefficient equal to zero ends the polynomial.  Several polynomials may
follow one another in the same stream, e.g. "3 2 2 1 5 0 0  1 1 0".  A `#`
starts a comment that runs to the end of the line.

The important pieces are:
 - PolynomialReader: reads successive polynomials from a text stream
 - read_polynomial:  stream or str -> Polynomial
 - tokenize_stream:  str -> token stream
"""

# builtin
import io

# 3rd party
from ply import lex

# ours
from polyarith.logging import task
from polyarith.numeric import lookup_coefficient_type, parse_coefficient, parse_exponent
from polyarith.parse import MalformedPolynomialError
from polyarith.polynomials import Polynomial
from polyarith.terms import Term

# Lexer ########################################################################

tokens = ("NUMBER",)

def make_lexer():

    def t_NUMBER(t):
        r"[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?(/\d+)?"
        return t

    def t_COMMENT(t):
        r"\#[^\n]*"
        pass

    def t_newline(t):
        r"\n+"
        t.lexer.lineno += len(t.value)

    t_ignore = " \t\r"

    def t_error(t):
        raise MalformedPolynomialError("on line {}: illegal character {!r}".format(t.lexer.lineno, t.value[0]))

    return lex.lex()

_lexer = make_lexer()
def tokenize_stream(s):
    lexer = _lexer.clone()
    lexer.lineno = 1
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Reader #######################################################################

def _convert(tok, f, *args):
    try:
        return f(tok.value, *args)
    except ValueError as e:
        raise MalformedPolynomialError("on line {}: {}".format(tok.lineno, e))

class PolynomialReader(object):
    """Reads polynomials one after another from a text stream.

    The stream is consumed one token at a time, so after `read` returns the
    stream is positioned just past the terminating 0 (and the single
    whitespace character that ended it).  A fresh reader, or another call to
    `Polynomial.read` on the same stream, picks up from there.
    """

    def __init__(self, stream, coefficient_type=None):
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        self.stream = stream
        self.coefficient_type = lookup_coefficient_type(coefficient_type)
        self._lexer = _lexer.clone()
        self._lineno = 1
        self._peeked = None

    def _scan_word(self):
        """Read the next whitespace-delimited word from the stream, or None at EOF."""
        chars = []
        while True:
            c = self.stream.read(1)
            if not c:
                break
            if c == "#":
                while c and c != "\n":
                    c = self.stream.read(1)
            if c == "\n":
                self._lineno += 1
            if not c or c.isspace():
                if chars:
                    break
                continue
            chars.append(c)
        return "".join(chars) if chars else None

    def _scan(self):
        lineno = self._lineno
        word = self._scan_word()
        if word is None:
            return None
        self._lexer.lineno = lineno
        self._lexer.input(word)
        toks = list(iter(self._lexer.token, None))
        if len(toks) != 1 or toks[0].value != word:
            raise MalformedPolynomialError("on line {}: {!r} is not a number".format(lineno, word))
        return toks[0]

    def _next_token(self):
        if self._peeked is not None:
            tok, self._peeked = self._peeked, None
            return tok
        return self._scan()

    @property
    def lineno(self):
        return self._lineno

    def at_eof(self):
        """True if no tokens remain in the stream."""
        if self._peeked is None:
            self._peeked = self._scan()
        return self._peeked is None

    def read_terms(self):
        """Read coefficient/exponent pairs up to and including the terminating 0.

        Returns the list of terms read, in input order.  Raises
        MalformedPolynomialError on bad numbers, a missing exponent, or end of
        input before the terminator.
        """
        terms = []
        while True:
            tok = self._next_token()
            if tok is None:
                raise MalformedPolynomialError(
                    "on line {}: unexpected end of input (expected a coefficient or the terminating 0)".format(self.lineno))
            coefficient = _convert(tok, parse_coefficient, self.coefficient_type)
            if coefficient == 0:
                return terms
            tok = self._next_token()
            if tok is None:
                raise MalformedPolynomialError(
                    "on line {}: missing exponent after coefficient {}".format(self.lineno, coefficient))
            terms.append(Term(coefficient, _convert(tok, parse_exponent)))

    def read(self):
        """Read the next polynomial."""
        with task("reading polynomial", line=self.lineno):
            return Polynomial().read(self)

    def read_all(self):
        """Yield polynomials until the stream is exhausted."""
        while not self.at_eof():
            yield self.read()

def read_polynomial(source, coefficient_type=None):
    """Read one polynomial from a text stream or a string."""
    return PolynomialReader(source, coefficient_type=coefficient_type).read()
