# vectorix/errors.py

class VectorError(Exception):
    """
    Base class for every error raised by vectorix.
    """


class InvalidArgument(VectorError, ValueError):
    """
    An argument is outside the range an operation accepts (e.g. a negative dimension).
    """


class DimensionMismatch(VectorError, ValueError):
    """
    The operands of a binary operation have different dimensions.
    """


class KeyMismatch(VectorError, ValueError):
    """
    The operands have the same dimension but different component index sets.
    """


class DivisionByZero(VectorError, ZeroDivisionError):
    """
    A scalar divisor or a vector length is exactly zero.
    """
