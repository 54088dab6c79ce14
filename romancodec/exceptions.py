"""
Exceptions raised by the roman numeral codec
"""


class RomanNumeralError(ValueError):
    pass


class InvalidArgument(RomanNumeralError):
    """Raised when `encode` is given something that isn't a representable integer.
    """

    def __init__(self, value, reason):
        self.value = value
        super().__init__('%r %s' % (value, reason))


class MalformedNumeral(RomanNumeralError):

    def __init__(self, numeral, reason='is not a valid roman number'):
        self.numeral = numeral
        super().__init__('"%s" %s' % (numeral, reason))
