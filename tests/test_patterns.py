import re

from romancodec import (
    ROMAN_DIGITS, ROMAN_NUMERALS, ROMAN_PATTERN, ROMAN_PATTERN_SIMPLE, encode, is_roman,
)


def test_table_is_ordered_and_unique():
    values = [value for _, value in ROMAN_NUMERALS]
    assert len(ROMAN_NUMERALS) == 13
    assert values == sorted(values, reverse=True)
    assert len(set(values)) == len(values)
    assert len({numeral for numeral, _ in ROMAN_NUMERALS}) == 13


def test_digits():
    assert ROMAN_DIGITS == {'I': 1, 'V': 5, 'X': 10, 'L': 50, 'C': 100, 'D': 500, 'M': 1000}


def test_is_roman():
    assert all(is_roman(encode(i)) for i in range(1, 4000))
    assert not is_roman('')
    assert not is_roman(None)
    for s in ('IIII', 'VX', 'IC', 'MMMM', 'LL', 'iv', 'XIIA'):
        assert not is_roman(s), s


def test_patterns_can_be_embedded():
    article_re = re.compile(r"\bTitre (%s)\b" % ROMAN_PATTERN)
    assert article_re.search("voir le Titre XIV du code").group(1) == 'XIV'
    assert article_re.search("voir le Titre  du code") is None
    words = re.findall(r"\b%s\b" % ROMAN_PATTERN_SIMPLE, "Louis XIV et Henri IV")
    assert words == ['XIV', 'IV']
