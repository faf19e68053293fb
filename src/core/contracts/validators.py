"""
JSON Schema контракты транспортной границы feed

Сами feed-сообщения схемой НЕ проверяются (их поля извлекаются паттернами,
см. src.core.parsing). Контракты покрывают только то, что мы формируем или
читаем сами:
- feed_config.json (параметры подключения, читаются из файла)
- control_message.json (subscribe / heartbeat перед отправкой)

Схемы лежат в contracts/schema/ корня проекта (Draft 2020-12). Каждая схема
читается и проходит meta-валидацию один раз; валидаторы для стандартного
каталога кэшируются на уровне модуля.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# Корень проекта: 4 уровня вверх от этого файла
DEFAULT_SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

FEED_CONFIG_SCHEMA: Final[str] = "feed_config"
CONTROL_MESSAGE_SCHEMA: Final[str] = "control_message"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение и кэширование схем одного каталога."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def schema_path(self, schema_name: str) -> Path:
        return self._schema_dir / f"{schema_name}.json"

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        schema = self._schemas.get(schema_name)
        if schema is not None:
            return schema

        path = self.schema_path(schema_name)
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")
        schema = json.loads(path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Проверка данных против одной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or SchemaLoader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """Валидатор схемы из стандартного каталога (один экземпляр на схему)."""
    return ContractValidator(schema_name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_feed_config(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные нарушают контракт feed_config
    """
    get_validator(FEED_CONFIG_SCHEMA).validate(data)


def validate_control_message(data: Dict[str, Any]) -> None:
    """
    Проверка управляющего сообщения перед сериализацией.

    subscribe обязан содержать product_id, heartbeat содержит флаг on;
    смешивать поля двух типов нельзя.

    Raises:
        ValidationError: Если данные нарушают контракт control_message
    """
    get_validator(CONTROL_MESSAGE_SCHEMA).validate(data)
