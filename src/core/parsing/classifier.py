"""
Message Classifier — определение типа feed-сообщения

Тип извлекается из поля "type" поиском подстроки (первое вхождение).
Вызывающий код по типу решает, какой идентификатор заявки релевантен:
- match → maker_order_id и taker_order_id
- received / open / done / change / activate → order_id
- остальные (heartbeat, subscriptions, ...) → идентификаторов нет
"""

import logging
from enum import Enum
from typing import Optional

from src.core.parsing.patterns import FeedField, OrderRole, search

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class MessageType(str, Enum):
    """Словарь типов сообщений feed"""

    SUBSCRIBE = "subscribe"
    SUBSCRIPTIONS = "subscriptions"
    HEARTBEAT = "heartbeat"
    RECEIVED = "received"
    OPEN = "open"
    DONE = "done"
    MATCH = "match"
    CHANGE = "change"
    ACTIVATE = "activate"
    ERROR = "error"
    TICKER = "ticker"
    SNAPSHOT = "snapshot"
    L2UPDATE = "l2update"


class Side(str, Enum):
    """Сторона заявки"""

    BUY = "buy"
    SELL = "sell"


_ROLES_BY_TYPE: dict[MessageType, tuple[OrderRole, ...]] = {
    MessageType.MATCH: (OrderRole.MAKER, OrderRole.TAKER),
    MessageType.RECEIVED: (OrderRole.PLAIN,),
    MessageType.OPEN: (OrderRole.PLAIN,),
    MessageType.DONE: (OrderRole.PLAIN,),
    MessageType.CHANGE: (OrderRole.PLAIN,),
    MessageType.ACTIVATE: (OrderRole.PLAIN,),
}


# =============================================================================
# EXTRACTION
# =============================================================================


def _extract_word(field: FeedField, text: str) -> Optional[str]:
    match = search(field, text)
    if match is None:
        logger.debug("Field '%s' not found in message", field.value)
        return None
    return match.group(1)


def extract_type(text: str) -> Optional[str]:
    """
    Код типа сообщения.

    Args:
        text: Полный текст сообщения

    Returns:
        Значение первого поля "type" или None, если поля нет

    Examples:
        >>> extract_type('{"type": "received", "sequence": 10}')
        'received'
    """
    return _extract_word(FeedField.TYPE, text)


def extract_side(text: str) -> Optional[str]:
    """Сторона заявки ("buy"/"sell") или None, если поля нет."""
    return _extract_word(FeedField.SIDE, text)


def classify(text: str) -> Optional[MessageType]:
    """
    Тип сообщения как MessageType.

    Returns:
        None если поле отсутствует или тип не входит в словарь
    """
    type_code = extract_type(text)
    if type_code is None:
        return None
    try:
        return MessageType(type_code)
    except ValueError:
        logger.debug("Unknown message type '%s'", type_code)
        return None


def relevant_roles(type_code: Optional[str]) -> tuple[OrderRole, ...]:
    """
    Роли идентификаторов, которые несёт сообщение данного типа.

    Args:
        type_code: Код типа (результат extract_type), может быть None

    Returns:
        Кортеж ролей; пустой для типов без идентификаторов и неизвестных типов
    """
    if type_code is None:
        return ()
    try:
        message_type = MessageType(type_code)
    except ValueError:
        return ()
    return _ROLES_BY_TYPE.get(message_type, ())
