from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenKind(IntEnum):
    EOF = 0
    Integer = 1
    Plus = 2
    Minus = 3
    Star = 4
    Slash = 5
    LParen = 6
    RParen = 7

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]


DISPLAY_NAMES = {
    TokenKind.EOF: "ENDOFFILE",
    TokenKind.Integer: "INTEGER",
    TokenKind.Plus: "PLUS",
    TokenKind.Minus: "MINUS",
    TokenKind.Star: "MUL",
    TokenKind.Slash: "DIV",
    TokenKind.LParen: "LPAREN",
    TokenKind.RParen: "RPAREN",
}

PUNCTUATORS = {
    "+": TokenKind.Plus,
    "-": TokenKind.Minus,
    "*": TokenKind.Star,
    "/": TokenKind.Slash,
    "(": TokenKind.LParen,
    ")": TokenKind.RParen,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Optional[int] = None
    location: int = 0
    length: int = 0
    expression: str = ""

    def __repr__(self) -> str:
        if self.kind == TokenKind.Integer:
            return f"Token({self.kind.display_name}, {self.value})"
        if self.kind == TokenKind.EOF:
            return f"Token({self.kind.display_name})"
        return f"Token({self.kind.display_name}, {self.expression!r})"


def new_token(kind: TokenKind, text: str, start: int, end: int) -> Token:
    return Token(kind, None, start, end - start, text[start:end])


def new_number(text: str, start: int, end: int) -> Token:
    expression = text[start:end]
    value = int(expression.lstrip("0") or "0")
    return Token(TokenKind.Integer, value, start, end - start, expression)


def equal(token: Token, kind: TokenKind) -> bool:
    return token.kind == kind
