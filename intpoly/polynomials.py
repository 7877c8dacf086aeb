"""Polynomials of one variable with integer coefficients and exponents.

A Polynomial is a tuple of Terms kept in canonical form:
 - no two terms share an exponent
 - no term has coefficient zero
 - terms are sorted by strictly descending exponent

The empty tuple is the zero polynomial.  Every way of building a Polynomial
(from arrays, from text, or as the result of arithmetic) collects its terms
with `insert_term` and then calls `order_terms` once, so two polynomials are
equal exactly when their term tuples are.
"""

from intpoly.common import FrozenDict
from intpoly.term import Term
from intpoly import parse as _parse

def insert_term(acc, term):
    """Add `term` into `acc`, a dict mapping exponent to coefficient.

    This is the only place where terms with equal exponents get merged and
    where zero coefficients get dropped.
    """
    if term.coefficient == 0:
        return
    c = acc.get(term.exponent, 0) + term.coefficient
    if c == 0:
        del acc[term.exponent]
    else:
        acc[term.exponent] = c

def order_terms(acc):
    """Materialize the terms of `acc` in descending exponent order."""
    return tuple(Term(acc[e], e) for e in sorted(acc, reverse=True))

def _accumulate(terms, acc=None):
    if acc is None:
        acc = {}
    for t in terms:
        insert_term(acc, t)
    return acc

class Polynomial(object):
    __slots__ = ("terms",)

    def __init__(self, terms=()):
        object.__setattr__(self, "terms", order_terms(_accumulate(terms)))

    @classmethod
    def _from_canonical(cls, terms):
        # Caller guarantees that `terms` is already canonical.
        p = cls.__new__(cls)
        object.__setattr__(p, "terms", tuple(terms))
        return p

    @classmethod
    def from_arrays(cls, coefficients, exponents):
        """Build a polynomial from parallel coefficient/exponent sequences.

        The pairs may come in any order, repeat exponents, or have zero
        coefficients.
        """
        coefficients = list(coefficients)
        exponents = list(exponents)
        assert len(coefficients) == len(exponents), "got {} coefficients but {} exponents".format(len(coefficients), len(exponents))
        return cls(Term(c, e) for c, e in zip(coefficients, exponents))

    @classmethod
    def parse(cls, s, strict=None):
        """Read a polynomial written the way `str` renders one.

        See `intpoly.parse` for the syntax and what happens to text that
        does not fit it.
        """
        return cls(_parse.parse_terms(s, strict=strict))

    def __setattr__(self, name, value):
        raise AttributeError("Polynomial is immutable")

    def __delattr__(self, name):
        raise AttributeError("Polynomial is immutable")

    def copy(self):
        return Polynomial._from_canonical(t.copy() for t in self.terms)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    # Queries

    def is_zero(self):
        return not self.terms

    def coefficients(self):
        """Map from exponent to (non-zero) coefficient."""
        return FrozenDict({ t.exponent : t.coefficient for t in self.terms })

    def __len__(self):
        return len(self.terms)

    def __iter__(self):
        return iter(self.terms)

    def evaluate(self, x) -> float:
        total = 0.0
        for t in self.terms:
            total += t.evaluate(x)
        return total

    # Arithmetic

    def add(self, other):
        acc = {t.exponent: t.coefficient for t in other.terms}
        return Polynomial._from_canonical(order_terms(_accumulate(self.terms, acc)))

    def negate(self):
        # Negation cannot merge exponents or produce zeros, and it keeps
        # the order.
        return Polynomial._from_canonical(t.negate() for t in self.terms)

    def subtract(self, other):
        return self.add(other.negate())

    def multiply(self, other):
        acc = {}
        for t1 in self.terms:
            for t2 in other.terms:
                insert_term(acc, t1.multiply(t2))
        return Polynomial._from_canonical(order_terms(acc))

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self):
        return self.negate()

    # Comparison

    def equals(self, other):
        if len(self.terms) != len(other.terms):
            return False
        for t1, t2 in zip(self.terms, other.terms):
            if not t1.equals(t2):
                return False
        return True

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        return hash(self.terms)

    # Text

    def __str__(self):
        if not self.terms:
            return "0x^1"
        s = "".join(str(t) for t in self.terms)
        if s.startswith("+"):
            s = s[1:]
        return s

    def __repr__(self):
        return "Polynomial.parse({!r})".format(str(self))

Polynomial.ZERO = Polynomial()
Polynomial.ONE  = Polynomial([Term.ONE])
