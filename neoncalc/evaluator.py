"""
Safe evaluator for flat calculator expressions.

Features:
- Dedicated tokenizer + recursive-descent parser (no eval(), no ast).
- Supports: + - * / with the usual precedence, unary +/-, decimal literals
  with an optional exponent, and the words Infinity / NaN that a previous
  result may leave in the expression.
- IEEE double semantics: division by zero yields Infinity or NaN instead of
  raising.

Grammar:
    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary)*
    unary      := ("+" | "-") unary | number
"""
import logging
import math
import operator as op
import re
from typing import List, NamedTuple

logger = logging.getLogger(__name__)

# Keypad symbols and their arithmetic spelling
_symbol_map = {
    "×": "*",
    "÷": "/",
}

_TOKEN_RE = re.compile(
    r"\s*(?:(?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity|NaN)|(?P<op>[-+*/]))"
)


class EvalError(Exception):
    pass


class Token(NamedTuple):
    kind: str
    text: str
    position: int


def _divide(left: float, right: float) -> float:
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


# Allowed binary operators mapping, grouped by precedence level
_additive_ops = {
    "+": op.add,
    "-": op.sub,
}
_multiplicative_ops = {
    "*": op.mul,
    "/": _divide,
}

# Allowed unary operators mapping
_unary_ops = {
    "+": op.pos,
    "-": op.neg,
}


def sanitize(expression: str) -> str:
    """Replace keypad operator symbols with their arithmetic spelling."""
    for symbol, replacement in _symbol_map.items():
        expression = expression.replace(symbol, replacement)
    return expression


def tokenize(text: str) -> List[Token]:
    tokens = []
    position = 0
    while position < len(text):
        if text[position:].isspace():
            break
        match = _TOKEN_RE.match(text, position)
        if match is None:
            offset = len(text) - len(text[position:].lstrip())
            raise EvalError(f"Unexpected character {text[offset]!r} at position {offset}")
        kind = match.lastgroup
        tokens.append(Token(kind, match.group(kind), match.start(kind)))
        position = match.end()
    return tokens


class _Parser:
    """Recursive-descent evaluation over a token list."""

    def __init__(self, tokens: List[Token]) -> None:
        self.tokens = tokens
        self.index = 0

    def _peek(self):
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def parse(self) -> float:
        if not self.tokens:
            raise EvalError("Empty expression.")
        value = self._expression()
        leftover = self._peek()
        if leftover is not None:
            raise EvalError(f"Unexpected {leftover.text!r} at position {leftover.position}")
        return value

    def _expression(self) -> float:
        value = self._term()
        token = self._peek()
        while token is not None and token.kind == "op" and token.text in _additive_ops:
            self._advance()
            value = _additive_ops[token.text](value, self._term())
            token = self._peek()
        return value

    def _term(self) -> float:
        value = self._unary()
        token = self._peek()
        while token is not None and token.kind == "op" and token.text in _multiplicative_ops:
            self._advance()
            value = _multiplicative_ops[token.text](value, self._unary())
            token = self._peek()
        return value

    def _unary(self) -> float:
        token = self._peek()
        if token is None:
            raise EvalError("Expression ends with an operator.")
        if token.kind == "op":
            if token.text not in _unary_ops:
                raise EvalError(f"Operator {token.text!r} at position {token.position} is missing its left operand")
            self._advance()
            return _unary_ops[token.text](self._unary())
        self._advance()
        return float(token.text)


def evaluate(expression: str) -> float:
    """Evaluate a keypad expression such as ``7+3×2`` as a float."""
    result = _Parser(tokenize(sanitize(expression))).parse()
    logger.debug(f"Evaluated {expression!r} -> {result!r}")
    return result
