import logging

from intcalc.errors import CalcError, CalcSyntaxError, EvaluationError, NestingError
from intcalc.result import Evaluation
from intcalc.token import Token, TokenKind, equal
from intcalc.tokenize import Tokenizer
from intcalc.utils import truncate_divide, wrap_word

logger = logging.getLogger(__name__)

MAX_DEPTH = 200


class Parse:
    """Recursive-descent evaluator for integer arithmetic.

    expression : term ((PLUS | MINUS) term)*
    term       : factor ((MUL | DIV) factor)*
    factor     : INTEGER | LPAREN expression RPAREN

    Values are computed while the grammar is recognised; no tree is built.
    """

    tokenizer: Tokenizer
    current_token: Token

    def __init__(self, tokenizer: Tokenizer, strict: bool = True) -> None:
        self.tokenizer = tokenizer
        self.strict = strict
        self.depth = 0
        self.current_token = tokenizer.next_token()

    def eat(self, kind: TokenKind) -> Token:
        token = self.current_token
        if not equal(token, kind):
            raise CalcSyntaxError(self.tokenizer.text, kind, token)
        self.current_token = self.tokenizer.next_token()
        return token

    def parse(self) -> int:
        result = self.expression()
        if self.strict:
            self.eat(TokenKind.EOF)
        return result

    def expression(self) -> int:
        result = self.term()
        while True:
            token = self.current_token
            if equal(token, TokenKind.Plus):
                self.eat(TokenKind.Plus)
                result = wrap_word(result + self.term())
                continue
            if equal(token, TokenKind.Minus):
                self.eat(TokenKind.Minus)
                result = wrap_word(result - self.term())
                continue
            return result

    def term(self) -> int:
        result = self.factor()
        while True:
            token = self.current_token
            if equal(token, TokenKind.Star):
                self.eat(TokenKind.Star)
                result = wrap_word(result * self.factor())
                continue
            if equal(token, TokenKind.Slash):
                self.eat(TokenKind.Slash)
                start = self.current_token.location
                divisor = self.factor()
                if divisor == 0:
                    text = self.tokenizer.text
                    divisor_text = text[start : self.current_token.location].rstrip()
                    raise EvaluationError(text, token, result, divisor_text)
                result = truncate_divide(result, divisor)
                continue
            return result

    def factor(self) -> int:
        token = self.current_token
        if equal(token, TokenKind.LParen):
            if self.depth >= MAX_DEPTH:
                raise NestingError(self.tokenizer.text, token, MAX_DEPTH)
            self.eat(TokenKind.LParen)
            self.depth += 1
            result = self.expression()
            self.depth -= 1
            self.eat(TokenKind.RParen)
            return result
        self.eat(TokenKind.Integer)
        return token.value


def evaluate_or_raise(expression: str, *, strict: bool = True) -> int:
    value = Parse(Tokenizer(expression), strict=strict).parse()
    logger.debug("%s = %d", expression.strip(), value)
    return value


def evaluate(expression: str, *, strict: bool = True) -> Evaluation:
    try:
        value = evaluate_or_raise(expression, strict=strict)
    except CalcError as e:
        return Evaluation.failure(expression, e)
    return Evaluation.success(expression, value)
