"""
OrderId — 128-битный идентификатор заявки

Immutable Pydantic модель из двух 64-битных компонент (high, low),
декодированная из UUID-подобного текста 8-4-4-4-12 hex.

Упаковка групп (фиксированная, big-endian):
    high = (g1 << 32) | (g2 << 16) | g3     # 32 + 16 + 16 бит
    low  = (g4 << 48) | g5                  # 16 + 48 бит

Это ровно старшая и младшая половины 128-битного значения UUID, поэтому
порядок OrderId совпадает с порядком UUID как целого, а разные
идентификаторы никогда не совпадают.

Роль (PLAIN/MAKER/TAKER) выбирает поле сообщения и в значении не хранится.
"""

import logging
import uuid
from typing import Final, Optional

from pydantic import BaseModel, Field

from src.core.parsing import (
    U64_BITS,
    U64_MAX,
    UUID_GROUP_WIDTHS,
    ExtractionFailure,
    FieldExtractionError,
    OrderRole,
    parse_uint,
    search,
)

logger = logging.getLogger(__name__)


# Ширины групп в битах (4 бита на hex цифру)
_GROUP_BITS: Final[tuple[int, ...]] = tuple(width * 4 for width in UUID_GROUP_WIDTHS)

# Сдвиги групп внутри компонент
_HIGH_SHIFTS: Final[tuple[int, int, int]] = (32, 16, 0)
_LOW_SHIFTS: Final[tuple[int, int]] = (48, 0)


# =============================================================================
# ORDER ID MODEL
# =============================================================================


class OrderId(BaseModel):
    """
    Идентификатор заявки как ключ сравнения/сортировки.

    Immutable модель (frozen=True), hashable. Порядок: (high, low).
    """

    high: int = Field(..., ge=0, le=U64_MAX, description="Старшие 64 бита (группы 1-3)")
    low: int = Field(..., ge=0, le=U64_MAX, description="Младшие 64 бита (группы 4-5)")

    model_config = {"frozen": True}

    @classmethod
    def from_groups(cls, g1: int, g2: int, g3: int, g4: int, g5: int) -> "OrderId":
        """
        Упаковка пяти групп UUID в две компоненты.

        Raises:
            pydantic.ValidationError: Если группа шире своей позиции
        """
        high = 0
        for group, shift in zip((g1, g2, g3), _HIGH_SHIFTS):
            high |= group << shift
        low = 0
        for group, shift in zip((g4, g5), _LOW_SHIFTS):
            low |= group << shift
        return cls(high=high, low=low)

    @classmethod
    def from_text(cls, text: str, role: OrderRole = OrderRole.PLAIN) -> Optional["OrderId"]:
        """Эквивалент parse_identifier(text, role)."""
        return parse_identifier(text, role)

    @property
    def as_int(self) -> int:
        """128-битное значение"""
        return (self.high << U64_BITS) | self.low

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(int=self.as_int)

    def __str__(self) -> str:
        return str(self.to_uuid())

    def sort_key(self) -> tuple[int, int]:
        return (self.high, self.low)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OrderId):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OrderId):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OrderId):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OrderId):
            return NotImplemented
        return self.sort_key() >= other.sort_key()


# =============================================================================
# EXTRACTION
# =============================================================================


def _extract(text: str, role: OrderRole) -> tuple[Optional[OrderId], Optional[ExtractionFailure]]:
    match = search(role.field, text)
    if match is None:
        return None, ExtractionFailure.NO_MATCH

    groups: list[int] = []
    for numeral, bits in zip(match.groups(), _GROUP_BITS):
        value = parse_uint(numeral, 16, bits)
        if value is None:
            logger.debug("Malformed hex group %r in %s", numeral, role.value)
            return None, ExtractionFailure.MALFORMED_NUMERAL
        groups.append(value)

    return OrderId.from_groups(*groups), None


def parse_identifier(text: str, role: OrderRole) -> Optional[OrderId]:
    """
    Извлечение идентификатора заявки заданной роли.

    Args:
        text: Полный текст сообщения
        role: Роль (PLAIN → order_id, MAKER → maker_order_id,
            TAKER → taker_order_id); допускается строковое имя поля

    Returns:
        OrderId или None, если поле не найдено либо hex группа не парсится

    Raises:
        ValueError: Если role не является известной ролью
    """
    role = OrderRole(role)
    order_id, failure = _extract(text, role)
    if failure is not None:
        logger.debug("Identifier extraction failed for %s: %s", role.value, failure.value)
    return order_id


def require_identifier(text: str, role: OrderRole) -> OrderId:
    """
    Строгий вариант parse_identifier.

    Raises:
        FieldExtractionError: С причиной NO_MATCH или MALFORMED_NUMERAL
        ValueError: Если role не является известной ролью
    """
    role = OrderRole(role)
    order_id, failure = _extract(text, role)
    if order_id is None:
        raise FieldExtractionError(role.field, failure or ExtractionFailure.NO_MATCH)
    return order_id
