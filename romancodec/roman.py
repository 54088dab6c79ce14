"""
Conversion functions for roman numbers
"""

import logging
import re

from .exceptions import InvalidArgument, MalformedNumeral


logger = logging.getLogger(__name__)


ROMAN_NUMERALS = (
    ('M', 1000), ('CM', 900), ('D', 500), ('CD', 400), ('C', 100),
    ('XC', 90), ('L', 50), ('XL', 40), ('X', 10), ('IX', 9), ('V', 5),
    ('IV', 4), ('I', 1)
)
ROMAN_DIGITS = {numeral: value for numeral, value in ROMAN_NUMERALS if len(numeral) == 1}
MAX_ROMAN = 3999

ROMAN_PATTERN = r"(?=[MDCLXVI])M{0,3}(?:CM|CD|D?C{0,3})(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3})"
ROMAN_PATTERN_SIMPLE = r"[MDCLXVI]+"

roman_re = re.compile(ROMAN_PATTERN)


def is_roman(s):
    """Returns True if `s` is a canonical roman number between 1 and 3999.

    >>> is_roman('MCMXCIV')
    True
    >>> is_roman('IIII')
    False
    """
    return bool(s) and roman_re.fullmatch(s) is not None


class NumeralCodec:
    """Converts roman numbers to integers and back.

    Decoding is lenient by default: any string made of the seven roman digits
    is turned into an integer, even when it isn't written in canonical form
    (`IIII` gives 4, `VX` gives 5). Pass `strict=True` to reject those.

    >>> codec = NumeralCodec()
    >>> codec.decode('MLXVI')
    1066
    >>> codec.encode(346)
    'CCCXLVI'
    """
    __slots__ = ('numerals', 'digits', 'strict')

    def __init__(self, strict=False):
        self.numerals = ROMAN_NUMERALS
        self.digits = ROMAN_DIGITS
        self.strict = strict

    def __repr__(self):
        return '%s(strict=%r)' % (self.__class__.__name__, self.strict)

    def decode(self, s):
        if not s:
            return 0
        digits = self.digits
        for c in s:
            if c not in digits:
                logger.debug("rejecting %r: unknown character %r", s, c)
                raise MalformedNumeral(s, 'contains a character that is not a roman digit: %r' % c)
        if self.strict and not is_roman(s):
            logger.debug("rejecting %r: not in canonical form", s)
            raise MalformedNumeral(s)
        # Walk backwards, a digit smaller than the one on its right is subtractive
        right = digits[s[-1]]
        total = right
        for c in reversed(s[:-1]):
            value = digits[c]
            if value < right:
                total -= value
            else:
                total += value
            right = value
        return total

    def encode(self, i):
        if isinstance(i, bool) or not isinstance(i, int):
            logger.debug("rejecting %r: not an integer", i)
            raise InvalidArgument(i, "is not an integer")
        if i < 0:
            logger.debug("rejecting %r: negative", i)
            raise InvalidArgument(i, "is negative, roman numbers start at 1")
        if i > MAX_ROMAN:
            logger.debug("rejecting %r: above %s", i, MAX_ROMAN)
            raise InvalidArgument(i, "is too large, the maximum is %i" % MAX_ROMAN)
        r = []
        for numeral, value in self.numerals:
            if i == 0:
                break
            count, i = divmod(i, value)
            if count:
                r.append(numeral * count)
        return ''.join(r)


default_codec = NumeralCodec()

decode = roman_to_decimal = default_codec.decode
encode = decimal_to_roman = default_codec.encode
