"""Random polynomials for tests.

Values are kept small (-5..5, at most five terms) so that products and
powers stay well inside float precision.
"""

import random

from intpoly.polynomials import Polynomial

class PolynomialGenerator(object):
    def __init__(self, rng=None, bound=5, max_terms=5):
        self.rng = rng if rng is not None else random.Random()
        self.bound = bound
        self.max_terms = max_terms

    def small_int(self):
        return self.rng.randint(-self.bound, self.bound)

    def positive_int(self):
        return self.rng.randint(1, self.bound)

    def negative_int(self):
        return -self.positive_int()

    def x(self):
        """A float in [-bound, -1] or [1, bound]; never near zero."""
        x = self.rng.uniform(1, self.bound)
        return x if self.rng.random() < 0.5 else -x

    def pairs(self, n=None):
        if n is None:
            n = self.max_terms
        return [self.small_int() for i in range(n)], [self.small_int() for i in range(n)]

    def polynomial(self):
        coeffs, exps = self.pairs()
        return Polynomial.from_arrays(coeffs, exps)
