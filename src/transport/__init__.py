"""Transport boundary — конфигурация подключения и текст фреймов.

Сетевое подключение, TLS и отправка сообщений выполняются внешним
транспортом; здесь только то, что он получает от нас и отдаёт нам.
"""

from .config import (
    DEFAULT_PRODUCT_ID,
    DEFAULT_WEBSOCKET_URL,
    FeedConfig,
    feed_config_from_dict,
    load_feed_config,
)
from .frames import Opcode, frame_text

__all__ = [
    "DEFAULT_PRODUCT_ID",
    "DEFAULT_WEBSOCKET_URL",
    "FeedConfig",
    "feed_config_from_dict",
    "load_feed_config",
    "Opcode",
    "frame_text",
]
