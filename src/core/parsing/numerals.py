"""
Numerals — строгий парсинг беззнаковых целых фиксированной ширины

Захваты паттернов используют \\d, который в Python матчит любые Unicode
цифры. int() их тоже принимает, поэтому здесь проверяется, что numeral
состоит только из ASCII цифр нужного основания и влезает в ширину поля.
"""

import string
from typing import Final, Optional


# =============================================================================
# ШИРИНЫ ПОЛЕЙ
# =============================================================================

U8_BITS: Final[int] = 8
U16_BITS: Final[int] = 16
U32_BITS: Final[int] = 32
U64_BITS: Final[int] = 64

U8_MAX: Final[int] = (1 << U8_BITS) - 1
U16_MAX: Final[int] = (1 << U16_BITS) - 1
U32_MAX: Final[int] = (1 << U32_BITS) - 1
U64_MAX: Final[int] = (1 << U64_BITS) - 1

_ALLOWED_DIGITS: Final[dict[int, frozenset[str]]] = {
    10: frozenset(string.digits),
    16: frozenset(string.hexdigits),
}


def parse_uint(numeral: str, base: int, bits: int) -> Optional[int]:
    """
    Парсинг беззнакового целого заданного основания и ширины.

    Args:
        numeral: Текст numeral (без знака, пробелов и префиксов)
        base: Основание (10 или 16)
        bits: Ширина поля в битах

    Returns:
        Значение или None, если numeral пустой, содержит недопустимые
        символы или не влезает в bits

    Raises:
        ValueError: Если основание не поддерживается

    Examples:
        >>> parse_uint("2014", 10, 16)
        2014
        >>> parse_uint("ffff", 16, 16)
        65535
        >>> parse_uint("10000", 16, 16) is None
        True
    """
    allowed = _ALLOWED_DIGITS.get(base)
    if allowed is None:
        raise ValueError(f"Unsupported base: {base}")

    if not numeral or any(ch not in allowed for ch in numeral):
        return None

    value = int(numeral, base)
    if value >> bits:
        return None
    return value
