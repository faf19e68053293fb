"""
Domain models and value objects.

Компактные значения, извлекаемые из feed-сообщений: Timestamp, OrderId,
и агрегат FeedEvent.
"""

from src.core.domain.feed_event import FeedEvent, extract_event
from src.core.domain.order_id import OrderId, parse_identifier, require_identifier
from src.core.domain.timestamp import (
    Timestamp,
    format_timestamp,
    parse_timestamp,
    require_timestamp,
)

__all__ = [
    # Timestamp
    "Timestamp",
    "parse_timestamp",
    "require_timestamp",
    "format_timestamp",
    # OrderId
    "OrderId",
    "parse_identifier",
    "require_identifier",
    # FeedEvent
    "FeedEvent",
    "extract_event",
]
