"""
FeedConfig — Конфигурация подключения к trade-feed

Immutable Pydantic модель параметров, которые транспортный слой использует
при подключении, и построение управляющих сообщений:
- heartbeat: {"type":"heartbeat","on":true}
- subscribe: {"type":"subscribe","product_id":"BTC-USD"}

Транспорт отправляет их сразу после подключения в порядке
control_messages(). Сетевой части здесь нет.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

from pydantic import BaseModel, Field

from src.core.contracts import validate_control_message, validate_feed_config


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_WEBSOCKET_URL: Final[str] = "wss://ws-feed.gdax.com"
DEFAULT_PRODUCT_ID: Final[str] = "BTC-USD"


def _compact_json(message: Dict[str, Any]) -> str:
    # Компактный JSON без пробелов, порядок ключей сохраняется
    return json.dumps(message, separators=(",", ":"))


# =============================================================================
# FEED CONFIG MODEL
# =============================================================================


class FeedConfig(BaseModel):
    """
    Параметры подключения к feed.

    Immutable модель (frozen=True).
    """

    websocket_url: str = Field(
        DEFAULT_WEBSOCKET_URL, pattern=r"^wss?://\S+$", description="Endpoint websocket feed"
    )
    product_id: str = Field(
        DEFAULT_PRODUCT_ID,
        pattern=r"^[A-Z0-9]+-[A-Z0-9]+$",
        description="Торговая пара для подписки",
    )
    heartbeat: bool = Field(True, description="Включать heartbeat после подключения")

    model_config = {"frozen": True}

    def subscribe_message(self) -> str:
        """
        Сообщение подписки на продукт.

        Raises:
            jsonschema.ValidationError: Если сообщение нарушает контракт
        """
        message = {"type": "subscribe", "product_id": self.product_id}
        validate_control_message(message)
        return _compact_json(message)

    def heartbeat_message(self) -> str:
        """Сообщение включения/выключения heartbeat канала."""
        message = {"type": "heartbeat", "on": self.heartbeat}
        validate_control_message(message)
        return _compact_json(message)

    def control_messages(self) -> list[str]:
        """
        Управляющие сообщения в порядке отправки.

        Returns:
            [heartbeat, subscribe] если heartbeat включён, иначе [subscribe]
        """
        messages = []
        if self.heartbeat:
            messages.append(self.heartbeat_message())
        messages.append(self.subscribe_message())
        return messages


# =============================================================================
# LOADING
# =============================================================================


def feed_config_from_dict(data: Dict[str, Any]) -> FeedConfig:
    """
    Построение FeedConfig из dict.

    Сначала JSON Schema контракт, затем Pydantic модель.

    Raises:
        jsonschema.ValidationError: Если данные нарушают контракт feed_config
        pydantic.ValidationError: Если данные нарушают ограничения модели
    """
    validate_feed_config(data)
    return FeedConfig.model_validate(data)


def load_feed_config(path: str | Path) -> FeedConfig:
    """
    Загрузка FeedConfig из JSON файла.

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если данные нарушают контракт feed_config
        pydantic.ValidationError: Если данные нарушают ограничения модели
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return feed_config_from_dict(data)
