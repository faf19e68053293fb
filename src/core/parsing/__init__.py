"""
Parsing primitives для feed-сообщений

Реестр паттернов, строгий парсинг numerals, таксономия ошибок и
классификатор типа сообщения. Не зависит от доменных моделей.
"""

from src.core.parsing.classifier import (
    MessageType,
    Side,
    classify,
    extract_side,
    extract_type,
    relevant_roles,
)
from src.core.parsing.errors import ExtractionFailure, FieldExtractionError
from src.core.parsing.numerals import (
    U8_BITS,
    U8_MAX,
    U16_BITS,
    U16_MAX,
    U32_BITS,
    U32_MAX,
    U64_BITS,
    U64_MAX,
    parse_uint,
)
from src.core.parsing.patterns import (
    PATTERNS,
    UUID_GROUP_WIDTHS,
    FeedField,
    OrderRole,
    get_pattern,
    search,
)

__all__ = [
    # Pattern Registry
    "PATTERNS",
    "UUID_GROUP_WIDTHS",
    "FeedField",
    "OrderRole",
    "get_pattern",
    "search",
    # Numerals
    "U8_BITS",
    "U8_MAX",
    "U16_BITS",
    "U16_MAX",
    "U32_BITS",
    "U32_MAX",
    "U64_BITS",
    "U64_MAX",
    "parse_uint",
    # Errors
    "ExtractionFailure",
    "FieldExtractionError",
    # Classifier
    "MessageType",
    "Side",
    "classify",
    "extract_side",
    "extract_type",
    "relevant_roles",
]
