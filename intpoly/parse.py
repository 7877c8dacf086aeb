"""Reader for the textual polynomial syntax.

A polynomial is written as a run of terms with no separators other than the
sign carried by each coefficient:

    3x^2+2x^1
    -3x^-1-4x^-2
    +5x^0

Each term is `[+][-]DIGITS x ^ [-]DIGITS`.  Whitespace is not skipped.

The important functions are:
 - tokenize:    str -> stream of ply tokens
 - parse_terms: str -> [Term]

By default reading stops quietly at the first spot where a complete term
cannot be read, and whatever follows is ignored.  Pass strict=True (or set
the `strict-parse` option) to get a PolynomialSyntaxError instead.
"""

# 3rd party
from ply import lex

# ours
from intpoly.common import typechecked
from intpoly.opts import Option
from intpoly.term import Term
from intpoly import logging

strict_parse = Option("strict-parse", bool, False,
    description="Reject polynomial text that has anything after the last complete term")

class PolynomialSyntaxError(ValueError):
    def __init__(self, text, pos, message):
        super().__init__("at position {} of {!r}: {}".format(pos, text, message))
        self.text = text
        self.pos = pos

# Lexer ########################################################################

tokens = ("NUM", "VAR", "OP_PLUS", "OP_MINUS", "OP_CARET", "OTHER")

def make_lexer():

    # ply tries function rules in the order they are defined, so the
    # catch-all OTHER rule has to come last.

    def t_NUM(t):
        r"[0-9]+"
        t.value = int(t.value)
        return t

    def t_VAR(t):
        r"x"
        return t

    def t_OP_PLUS(t):
        r"\+"
        return t

    def t_OP_MINUS(t):
        r"-"
        return t

    def t_OP_CARET(t):
        r"\^"
        return t

    def t_OTHER(t):
        r"(.|\n)"
        return t

    def t_error(t):
        raise PolynomialSyntaxError(t.lexer.lexdata, t.lexpos, "illegal character {!r}".format(t.value[0]))

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Reader #######################################################################

class _TermReader(object):
    def __init__(self, toks):
        self.toks = toks
        self.pos = 0

    def peek(self, offset=0):
        i = self.pos + offset
        return self.toks[i] if i < len(self.toks) else None

    def _is(self, offset, type):
        tok = self.peek(offset)
        return tok is not None and tok.type == type

    def _signed_num(self, offset):
        """Read `[-]NUM` at offset; returns (value, width) or None."""
        if self._is(offset, "OP_MINUS") and self._is(offset + 1, "NUM"):
            return (-self.peek(offset + 1).value, 2)
        if self._is(offset, "NUM"):
            return (self.peek(offset).value, 1)
        return None

    def read_term(self):
        """Consume one term, or return None and consume nothing."""
        offset = 1 if self._is(0, "OP_PLUS") else 0
        coeff = self._signed_num(offset)
        if coeff is None:
            return None
        offset += coeff[1]
        if not (self._is(offset, "VAR") and self._is(offset + 1, "OP_CARET")):
            return None
        offset += 2
        exp = self._signed_num(offset)
        if exp is None:
            return None
        self.pos += offset + exp[1]
        return Term(coeff[0], exp[0])

    def remaining_text_pos(self, text):
        tok = self.peek()
        return len(text) if tok is None else tok.lexpos

@typechecked
def parse_terms(s : str, strict=None) -> list:
    """Read every term from the start of `s`.

    The terms are returned as written: duplicates and zero coefficients are
    left for the caller to canonicalize.
    """
    if strict is None:
        strict = strict_parse.value
    reader = _TermReader(list(tokenize(s)))
    terms = []
    while True:
        t = reader.read_term()
        if t is None:
            break
        terms.append(t)
    if reader.peek() is not None:
        pos = reader.remaining_text_pos(s)
        if strict:
            raise PolynomialSyntaxError(s, pos, "expected a term like 3x^2")
        logging.event("ignoring {!r} after {} term(s)".format(s[pos:], len(terms)))
    return terms
