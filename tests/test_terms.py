import unittest

from polyarith.terms import Term, format_term

class TestTerms(unittest.TestCase):

    def test_defaults(self):
        t = Term()
        self.assertEqual(t.coefficient, 0)
        self.assertEqual(t.exponent, 0)

    def test_equality(self):
        assert Term(3, 2) == Term(3, 2)
        assert Term(3, 2) != Term(3, 1)
        assert Term(3, 2) != Term(4, 2)
        assert Term(3, 2) != (3, 2)
        self.assertEqual(hash(Term(3, 2)), hash(Term(3, 2)))

    def test_bad_exponents(self):
        with self.assertRaises(ValueError):
            Term(1, -1)
        with self.assertRaises(ValueError):
            Term(1, 1.5)
        with self.assertRaises(ValueError):
            Term(1, True)

    def test_copies(self):
        t = Term(3, 2)
        self.assertEqual(t.with_coefficient(5), Term(5, 2))
        self.assertEqual(t.with_exponent(7), Term(3, 7))
        self.assertEqual(t, Term(3, 2))

    def test_arithmetic(self):
        self.assertEqual(-Term(3, 2), Term(-3, 2))
        self.assertEqual(Term(2, 1) * Term(3, 1), Term(6, 2))

    def test_str(self):
        self.assertEqual(str(Term(3, 2)), "3x^2")
        self.assertEqual(str(Term(-1, 1)), "-x")
        self.assertEqual(str(Term(1, 0)), "1")
        self.assertEqual(str(Term(-7, 0)), "-7")

    def test_repr(self):
        t = Term(3, 2)
        self.assertEqual(eval(repr(t)), t)

    def test_format_non_leading(self):
        self.assertEqual(format_term(2, 1, leading=False), " + 2x")
        self.assertEqual(format_term(-1, 4, leading=False, variable="t"), " - t^4")
        self.assertEqual(format_term(1, 0, leading=False), " + 1")
