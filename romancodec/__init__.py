from .exceptions import InvalidArgument, MalformedNumeral, RomanNumeralError
from .roman import (
    MAX_ROMAN, ROMAN_DIGITS, ROMAN_NUMERALS, ROMAN_PATTERN, ROMAN_PATTERN_SIMPLE,
    NumeralCodec, decimal_to_roman, decode, encode, is_roman, roman_to_decimal,
)


__version__ = '1.0.0'
