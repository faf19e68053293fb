"""
Contract Validation Module

Модуль для валидации JSON контрактов транспортной границы (конфигурация
подключения и управляющие сообщения).
"""

from .validators import (
    CONTROL_MESSAGE_SCHEMA,
    DEFAULT_SCHEMA_DIR,
    FEED_CONFIG_SCHEMA,
    ContractValidator,
    SchemaLoader,
    get_validator,
    validate_control_message,
    validate_feed_config,
)

__all__ = [
    # Constants
    "DEFAULT_SCHEMA_DIR",
    "FEED_CONFIG_SCHEMA",
    "CONTROL_MESSAGE_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "get_validator",
    "validate_feed_config",
    "validate_control_message",
]
