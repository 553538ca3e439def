maxsize = 9223372036854775807
minsize = -maxsize - 1

WORD_BITS = 64


def wrap_word(value: int) -> int:
    value &= (1 << WORD_BITS) - 1
    if value > maxsize:
        value -= 1 << WORD_BITS
    return value


def truncate_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return wrap_word(quotient)
