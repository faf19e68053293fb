"""
Timestamp — Компактное значение времени feed-сообщения

Immutable Pydantic модель фиксированной ширины:
- year (16 бит), month/day/hour/minute/second (8 бит), microsecond (32 бита)

Строится из поля "time" сообщения (YYYY-MM-DDTHH:MM:SS.ffffff) или явно
по полям. Календарная валидация НЕ выполняется (month=13 допустим как
значение): модель — ключ сортировки, а не дата.

Порядок: лексикографический по (year, month, day, hour, minute, second,
microsecond), что совпадает с хронологическим для корректных дат.
"""

import logging
from datetime import datetime, timezone
from typing import Final, Optional

from pydantic import BaseModel, Field

from src.core.parsing import (
    U8_BITS,
    U8_MAX,
    U16_BITS,
    U16_MAX,
    U32_BITS,
    U32_MAX,
    ExtractionFailure,
    FeedField,
    FieldExtractionError,
    parse_uint,
    search,
)

logger = logging.getLogger(__name__)


# Порядок совпадает с группами паттерна time
_FIELD_WIDTHS: Final[tuple[tuple[str, int], ...]] = (
    ("year", U16_BITS),
    ("month", U8_BITS),
    ("day", U8_BITS),
    ("hour", U8_BITS),
    ("minute", U8_BITS),
    ("second", U8_BITS),
    ("microsecond", U32_BITS),
)


# =============================================================================
# TIMESTAMP MODEL
# =============================================================================


class Timestamp(BaseModel):
    """
    Время события feed с точностью до микросекунды (UTC).

    Immutable модель (frozen=True), hashable, с полным порядком.
    """

    year: int = Field(..., ge=0, le=U16_MAX, description="Год")
    month: int = Field(..., ge=0, le=U8_MAX, description="Месяц (без календарной проверки)")
    day: int = Field(..., ge=0, le=U8_MAX, description="День")
    hour: int = Field(..., ge=0, le=U8_MAX, description="Час")
    minute: int = Field(..., ge=0, le=U8_MAX, description="Минута")
    second: int = Field(..., ge=0, le=U8_MAX, description="Секунда")
    microsecond: int = Field(..., ge=0, le=U32_MAX, description="Микросекунды")

    model_config = {"frozen": True}

    def sort_key(self) -> tuple[int, int, int, int, int, int, int]:
        return (
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.microsecond,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def to_str(self) -> str:
        """
        Каноническое текстовое представление.

        Формат: YYYY-MM-DDTHH:MM:SS.ffffffZ (zero-padded, суффикс Z = UTC)
        """
        return (
            f"{self.year:04}-{self.month:02}-{self.day:02}"
            f"T{self.hour:02}:{self.minute:02}:{self.second:02}"
            f".{self.microsecond:06}Z"
        )

    def __str__(self) -> str:
        return self.to_str()

    def to_datetime(self) -> datetime:
        """
        Конверсия в aware datetime (UTC).

        Raises:
            ValueError: Если поля не образуют корректную календарную дату
        """
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.microsecond,
            tzinfo=timezone.utc,
        )

    @classmethod
    def from_text(cls, text: str) -> Optional["Timestamp"]:
        """Эквивалент parse_timestamp(text)."""
        return parse_timestamp(text)


# =============================================================================
# EXTRACTION
# =============================================================================


def _extract(text: str) -> tuple[Optional[Timestamp], Optional[ExtractionFailure]]:
    match = search(FeedField.TIME, text)
    if match is None:
        return None, ExtractionFailure.NO_MATCH

    fields: dict[str, int] = {}
    for (name, bits), numeral in zip(_FIELD_WIDTHS, match.groups()):
        value = parse_uint(numeral, 10, bits)
        if value is None:
            logger.debug("Malformed %s numeral %r in time field", name, numeral)
            return None, ExtractionFailure.MALFORMED_NUMERAL
        fields[name] = value

    return Timestamp(**fields), None


def parse_timestamp(text: str) -> Optional[Timestamp]:
    """
    Извлечение Timestamp из текста сообщения.

    Args:
        text: Полный текст сообщения (валидная строка от транспорта)

    Returns:
        Timestamp или None, если поле "time" не найдено либо numeral
        не парсится в ширину поля
    """
    timestamp, failure = _extract(text)
    if failure is not None:
        logger.debug("Timestamp extraction failed: %s", failure.value)
    return timestamp


def require_timestamp(text: str) -> Timestamp:
    """
    Строгий вариант parse_timestamp.

    Raises:
        FieldExtractionError: С причиной NO_MATCH или MALFORMED_NUMERAL
    """
    timestamp, failure = _extract(text)
    if timestamp is None:
        raise FieldExtractionError(FeedField.TIME, failure or ExtractionFailure.NO_MATCH)
    return timestamp


def format_timestamp(timestamp: Timestamp) -> str:
    """Каноническое представление YYYY-MM-DDTHH:MM:SS.ffffffZ."""
    return timestamp.to_str()
