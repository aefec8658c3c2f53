"""Character classification and case conversion on integer character codes."""

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
]

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def is_alpha(c: int) -> bool:
    """Return True if ``c`` is the code of an ASCII letter."""
    return _UPPER_A <= c <= _UPPER_Z or _LOWER_A <= c <= _LOWER_Z


def is_digit(c: int) -> bool:
    """Return True if ``c`` is the code of an ASCII decimal digit."""
    return _DIGIT_0 <= c <= _DIGIT_9


def is_alnum(c: int) -> bool:
    """Return True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int) -> bool:
    """Return True if ``c`` lies in the 7-bit ASCII range."""
    return 0 <= c <= 127


def is_print(c: int) -> bool:
    """Return True if ``c`` is a printable ASCII character, space included."""
    return 32 <= c < 127


def to_upper(c: int) -> int:
    """Map a lowercase ASCII letter code to uppercase; leave others alone."""
    if _LOWER_A <= c <= _LOWER_Z:
        return c - _CASE_OFFSET
    return c


def to_lower(c: int) -> int:
    """Map an uppercase ASCII letter code to lowercase; leave others alone."""
    if _UPPER_A <= c <= _UPPER_Z:
        return c + _CASE_OFFSET
    return c