import logging
import string
from typing import Iterator, Optional

from intcalc.errors import LexicalError
from intcalc.token import PUNCTUATORS, Token, TokenKind, new_number, new_token
from intcalc.utils import maxsize

logger = logging.getLogger(__name__)


class Tokenizer:
    """Lazy tokenizer over a single line of input.

    Each call to ``next_token`` skips whitespace and returns the next token,
    moving the cursor forward. Once the input is exhausted every further call
    returns an ``EOF`` token. A tokenizer is never rewound; build a new one for
    each line.
    """

    text: str
    position: int
    current_char: Optional[str]

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0
        self.current_char = text[0] if text else None

    def advance(self) -> None:
        self.position += 1
        if self.position >= len(self.text):
            self.current_char = None
        else:
            self.current_char = self.text[self.position]

    def skip_whitespace(self) -> None:
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def integer(self) -> Token:
        start = self.position
        while self.current_char is not None and self.current_char in string.digits:
            self.advance()
        digits = self.text[start : self.position].lstrip("0")
        if len(digits) > len(str(maxsize)) or (
            len(digits) == len(str(maxsize)) and digits > str(maxsize)
        ):
            raise LexicalError(self.text, start, "integer literal out of range")
        return new_number(self.text, start, self.position)

    def next_token(self) -> Token:
        self.skip_whitespace()
        if self.current_char is None:
            token = Token(TokenKind.EOF, None, len(self.text), 0, "")
        elif self.current_char in string.digits:
            token = self.integer()
        elif self.current_char in PUNCTUATORS:
            start = self.position
            kind = PUNCTUATORS[self.current_char]
            self.advance()
            token = new_token(kind, self.text, start, self.position)
        else:
            raise LexicalError(self.text, self.position)
        logger.debug("%r", token)
        return token


def tokenize(text: str) -> Iterator[Token]:
    tokenizer = Tokenizer(text)
    while True:
        token = tokenizer.next_token()
        yield token
        if token.kind == TokenKind.EOF:
            return
