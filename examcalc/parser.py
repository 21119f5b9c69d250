"""Expression parser for calculator.

Turns normalized text into the tree defined in ``examcalc.nodes``. Standard
infix precedence, lowest first:

    + -            left associative
    * /            left associative
    implicit       ``2pi``, ``2(1+1)``, ``(4-1)2``
    n/n fraction   ``1/2pi`` is ``(1/2)*pi``
    unary + -
    ^              right associative, exponent may carry a sign (``2^-1``)

so ``-2^2`` is ``-(2^2)``, ``2^3^2`` is ``2^(3^2)`` and ``8pi/2pi`` is
``(8*pi)/(2*pi)``.
"""

from __future__ import annotations

import logging
import re
from typing import List, NamedTuple, Optional

from .errors import ExpressionSyntaxError
from .nodes import BinaryOp, Call, Constant, Node, Parenthesis, Symbol, UnaryOp

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(
    r"(?P<space>\s+)"
    r"|(?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"|(?P<name>[A-Za-z_][A-Za-z_0-9]*)"
    r"|(?P<op>\*\*|[-+*/^(),])"
)


class Token(NamedTuple):
    kind: str
    text: str
    position: int


def tokenize(text: str) -> List[Token]:
    tokens = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise ExpressionSyntaxError(f"unexpected character {text[pos]!r}", pos)
        kind = match.lastgroup
        if kind == "op" and match.group() == "**":
            raise ExpressionSyntaxError("unexpected operator '**' (use '^')", pos)
        if kind != "space":
            tokens.append(Token(kind, match.group(), pos))
        pos = match.end()
    return tokens


class Parser:
    """Recursive descent parser over the calculator grammar."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = tokenize(text)
        self.pos = 0

    def peek(self) -> Optional[Token]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def peek_text(self) -> Optional[str]:
        tok = self.peek()
        return tok.text if tok is not None else None

    def consume(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise ExpressionSyntaxError("unexpected end of expression", len(self.text))
        self.pos += 1
        return tok

    def expect(self, text: str) -> Token:
        tok = self.peek()
        if tok is None or tok.text != text:
            where = tok.position if tok is not None else len(self.text)
            raise ExpressionSyntaxError(f"expected {text!r}", where)
        return self.consume()

    def parse(self) -> Node:
        if not self.tokens:
            raise ExpressionSyntaxError("expression is empty")
        node = self.expression()
        tok = self.peek()
        if tok is not None:
            raise ExpressionSyntaxError(f"unexpected {tok.text!r}", tok.position)
        return node

    def expression(self) -> Node:
        node = self.term()
        while self.peek_text() in ("+", "-"):
            op = self.consume().text
            node = BinaryOp(op, node, self.term())
        return node

    def term(self) -> Node:
        node = self.implicit()
        while self.peek_text() in ("*", "/"):
            op = self.consume().text
            node = BinaryOp(op, node, self.implicit())
        return node

    def implicit(self) -> Node:
        # Juxtaposition binds tighter than explicit * and /, so "8pi/2pi" is
        # (8*pi)/(2*pi). A number may only follow a symbol, call or group.
        node = self.fraction()
        last = node
        while True:
            tok = self.peek()
            if tok is None:
                return node
            starts_operand = tok.kind == "name" or tok.text == "("
            if tok.kind == "number":
                starts_operand = isinstance(last, (Symbol, Call, Parenthesis))
            if not starts_operand:
                return node
            last = self.fraction()
            node = BinaryOp("*", node, last)

    def fraction(self) -> Node:
        # "number / number" directly followed by a symbol or group is read as
        # one fraction, so "1/2pi" is (1/2)*pi.
        node = self.unary()
        last = node
        while self.peek_text() == "/" and _is_signed_constant(last) and self._fraction_ahead():
            self.consume()
            last = self.unary()
            node = BinaryOp("/", node, last)
        return node

    def _fraction_ahead(self) -> bool:
        ahead = self.tokens[self.pos + 1:self.pos + 3]
        return (
            len(ahead) == 2
            and ahead[0].kind == "number"
            and (ahead[1].kind == "name" or ahead[1].text == "(")
        )

    def unary(self) -> Node:
        if self.peek_text() in ("+", "-"):
            op = self.consume().text
            return UnaryOp(op, self.unary())
        return self.power()

    def power(self) -> Node:
        node = self.primary()
        if self.peek_text() == "^":
            self.consume()
            node = BinaryOp("^", node, self.unary())
        return node

    def primary(self) -> Node:
        tok = self.consume()

        if tok.kind == "number":
            return Constant(float(tok.text))

        if tok.kind == "name":
            if self.peek_text() == "(":
                self.consume()
                return Call(tok.text, self.arguments())
            return Symbol(tok.text)

        if tok.text == "(":
            inner = self.expression()
            self.expect(")")
            return Parenthesis(inner)

        raise ExpressionSyntaxError(f"unexpected {tok.text!r}", tok.position)

    def arguments(self) -> tuple:
        # Opening paren already consumed. "f()" is a zero-argument call and is
        # left to the arity check.
        if self.peek_text() == ")":
            self.consume()
            return ()
        args = [self.expression()]
        while self.peek_text() == ",":
            self.consume()
            args.append(self.expression())
        self.expect(")")
        return tuple(args)


def _is_signed_constant(node: Node) -> bool:
    if isinstance(node, UnaryOp):
        return _is_signed_constant(node.operand)
    return isinstance(node, Constant)


def parse(text: str) -> Node:
    """Parse normalized text, raising ExpressionSyntaxError on malformed input."""
    try:
        return Parser(text).parse()
    except RecursionError:
        logger.debug("Expression nested too deeply: %d chars", len(text))
        raise ExpressionSyntaxError("expression is nested too deeply") from None
