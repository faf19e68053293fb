"""
FeedEvent — Агрегат извлечённых полей одного feed-сообщения

Собирает тип, время, сторону и релевантные для типа идентификаторы заявок.
Отсутствующие поля остаются None; фатальность решает потребитель.
"""

from typing import Optional

from pydantic import BaseModel, Field

from src.core.domain.order_id import OrderId, parse_identifier
from src.core.domain.timestamp import Timestamp, parse_timestamp
from src.core.parsing import (
    MessageType,
    OrderRole,
    extract_side,
    extract_type,
    relevant_roles,
)


class FeedEvent(BaseModel):
    """
    Извлечённые поля feed-сообщения.

    Immutable модель (frozen=True), hashable. Идентификаторы хранятся
    кортежем пар (роль, OrderId) в порядке relevant_roles.
    """

    type_code: str = Field(..., min_length=1, description="Код типа сообщения")
    time: Optional[Timestamp] = Field(None, description="Время события (nullable)")
    side: Optional[str] = Field(None, description="Сторона заявки (nullable)")
    order_ids: tuple[tuple[OrderRole, OrderId], ...] = Field(
        default=(), description="Найденные идентификаторы по ролям"
    )

    model_config = {"frozen": True}

    @property
    def message_type(self) -> Optional[MessageType]:
        """Тип из словаря или None для неизвестного кода"""
        try:
            return MessageType(self.type_code)
        except ValueError:
            return None

    @property
    def roles(self) -> tuple[OrderRole, ...]:
        return tuple(role for role, _ in self.order_ids)

    def order_id(self, role: OrderRole) -> Optional[OrderId]:
        role = OrderRole(role)
        for known, order_id in self.order_ids:
            if known is role:
                return order_id
        return None


def extract_event(text: str) -> Optional[FeedEvent]:
    """
    Извлечение всех полей сообщения за один вызов.

    Идентификаторы ищутся только для ролей, релевантных типу
    (см. relevant_roles).

    Returns:
        FeedEvent или None, если в сообщении нет поля "type"
    """
    type_code = extract_type(text)
    if type_code is None:
        return None

    order_ids: list[tuple[OrderRole, OrderId]] = []
    for role in relevant_roles(type_code):
        order_id = parse_identifier(text, role)
        if order_id is not None:
            order_ids.append((role, order_id))

    return FeedEvent(
        type_code=type_code,
        time=parse_timestamp(text),
        side=extract_side(text),
        order_ids=tuple(order_ids),
    )
