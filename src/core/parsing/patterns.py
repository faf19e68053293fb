"""
Pattern Registry — фиксированный набор скомпилированных паттернов feed-полей

Каждый паттерн привязан к именованному полю JSON-сообщения биржи и ищет его
как подстроку (re.search), без разбора документа целиком:
- type            — код типа сообщения
- time            — timestamp вида YYYY-MM-DDTHH:MM:SS.ffffff
- side            — сторона заявки
- order_id        — идентификатор заявки (plain)
- maker_order_id  — идентификатор maker заявки
- taker_order_id  — идентификатор taker заявки

Реестр строится один раз при импорте модуля и далее только читается.
Ошибка компиляции паттерна — фатальна (импорт модуля падает).
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional


# =============================================================================
# ENUMS
# =============================================================================


class FeedField(str, Enum):
    """Именованные поля feed-сообщения, для которых есть паттерн"""

    TYPE = "type"
    TIME = "time"
    SIDE = "side"
    ORDER_ID = "order_id"
    MAKER_ORDER_ID = "maker_order_id"
    TAKER_ORDER_ID = "taker_order_id"


class OrderRole(str, Enum):
    """
    Роль идентификатора заявки.

    Значение роли совпадает с именем JSON-поля, которое она выбирает.
    """

    PLAIN = "order_id"
    MAKER = "maker_order_id"
    TAKER = "taker_order_id"

    @property
    def field(self) -> FeedField:
        return FeedField(self.value)


# =============================================================================
# PATTERN LITERALS
# =============================================================================

# Ключ в кавычках, затем двоеточие; пробелы вокруг двоеточия допускаются
_KEY_TEMPLATE: Final[str] = r'"{name}"\s*:\s*'

# UUID в кавычках: 8-4-4-4-12 hex (нижний регистр, как в feed)
UUID_GROUP_WIDTHS: Final[tuple[int, ...]] = (8, 4, 4, 4, 12)
_UUID_VALUE: Final[str] = (
    '"' + "-".join(f"([a-f\\d]{{{width}}})" for width in UUID_GROUP_WIDTHS) + '"'
)

_WORD_VALUE: Final[str] = r'"(\w+)"'

_TIME_VALUE: Final[str] = r'"(\d{4})-(\d\d)-(\d\d)T(\d\d):(\d\d):(\d\d)\.(\d{6})'


def _key(field: FeedField) -> str:
    return _KEY_TEMPLATE.format(name=re.escape(field.value))


_PATTERN_SOURCES: Final[Mapping[FeedField, str]] = {
    FeedField.TYPE: _key(FeedField.TYPE) + _WORD_VALUE,
    FeedField.TIME: _key(FeedField.TIME) + _TIME_VALUE,
    FeedField.SIDE: _key(FeedField.SIDE) + _WORD_VALUE,
    FeedField.ORDER_ID: _key(FeedField.ORDER_ID) + _UUID_VALUE,
    FeedField.MAKER_ORDER_ID: _key(FeedField.MAKER_ORDER_ID) + _UUID_VALUE,
    FeedField.TAKER_ORDER_ID: _key(FeedField.TAKER_ORDER_ID) + _UUID_VALUE,
}


# =============================================================================
# REGISTRY
# =============================================================================


def _compile_registry() -> Mapping[FeedField, "re.Pattern[str]"]:
    compiled = {field: re.compile(source) for field, source in _PATTERN_SOURCES.items()}
    return MappingProxyType(compiled)


# Read-only после импорта
PATTERNS: Final[Mapping[FeedField, "re.Pattern[str]"]] = _compile_registry()


def get_pattern(field: FeedField) -> "re.Pattern[str]":
    """
    Скомпилированный паттерн для поля.

    Args:
        field: Поле feed-сообщения (FeedField или его строковое имя)

    Raises:
        ValueError: Если имя поля неизвестно
    """
    return PATTERNS[FeedField(field)]


def search(field: FeedField, text: str) -> Optional["re.Match[str]"]:
    """
    Поиск первого вхождения поля в тексте.

    Returns:
        re.Match или None, если поле не найдено
    """
    return get_pattern(field).search(text)
