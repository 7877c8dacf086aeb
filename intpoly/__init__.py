"""Single-variable polynomials with integer coefficients and exponents."""

from intpoly.term import Term, DomainError
from intpoly.parse import PolynomialSyntaxError
from intpoly.polynomials import Polynomial
