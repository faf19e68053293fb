"""
Frame text view — граница между транспортом и слоем извлечения полей

Транспорт передаёт сюда payload websocket фрейма. Текст отдаётся дальше
только для TEXT фреймов и только если payload — валидный UTF-8.
"""

import logging
from enum import IntEnum
from typing import Optional

logger = logging.getLogger(__name__)


class Opcode(IntEnum):
    """Opcode websocket фрейма (RFC 6455)"""

    CONTINUATION = 0x0
    TEXT = 0x1
    BINARY = 0x2
    CLOSE = 0x8
    PING = 0x9
    PONG = 0xA


def frame_text(opcode: int, data: bytes) -> Optional[str]:
    """
    Текст фрейма для слоя извлечения полей.

    Args:
        opcode: Opcode фрейма
        data: Payload фрейма

    Returns:
        Декодированный текст или None для не-TEXT фреймов и невалидного UTF-8
    """
    if opcode != Opcode.TEXT:
        return None
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning("Dropping text frame with invalid UTF-8 payload: %s", e)
        return None
