"""Monomials c*x^e with integer coefficient and integer exponent."""

import math
import numbers

from intpoly.common import ADT, check_type

class DomainError(ArithmeticError):
    """Raised when evaluation would raise zero to a non-positive power."""
    pass

class Term(ADT):
    """A single term `coefficient * x^exponent`.

    Terms are immutable.  A Term with coefficient 0 is a perfectly fine
    value, but it never appears inside a Polynomial.
    """

    __slots__ = ("coefficient", "exponent")

    def __init__(self, coefficient : int, exponent : int):
        object.__setattr__(self, "coefficient", coefficient)
        object.__setattr__(self, "exponent", exponent)

    def children(self):
        return (self.coefficient, self.exponent)

    def copy(self):
        return Term(self.coefficient, self.exponent)

    def multiply(self, other):
        return Term(self.coefficient * other.coefficient, self.exponent + other.exponent)

    def negate(self):
        return Term(-self.coefficient, self.exponent)

    def equals(self, other):
        return self.coefficient == other.coefficient and self.exponent == other.exponent

    def evaluate(self, x) -> float:
        check_type(x, numbers.Real, "x")
        x = float(x)
        # 0^0 is rejected along with negative powers of zero
        if x == 0 and self.exponent < 1:
            raise DomainError("Cannot raise zero to exponent {}".format(self.exponent))
        try:
            return self.coefficient * x ** self.exponent
        except OverflowError:
            return self._overflow(x)

    def _overflow(self, x):
        """The signed infinity that float arithmetic would have produced."""
        if self.coefficient == 0:
            return math.nan
        negative = (self.coefficient < 0) != (x < 0 and self.exponent % 2 == 1)
        return -math.inf if negative else math.inf

    def __mul__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self):
        return self.negate()

    def __str__(self):
        sign = "+" if self.coefficient > 0 else ""
        return "{}{}x^{}".format(sign, self.coefficient, self.exponent)

Term.ONE = Term(1, 0)
