"""
Таксономия ошибок извлечения полей.

parse_*/extract_* функции сворачивают обе причины в None.
Строгие варианты (require_*) поднимают FieldExtractionError.
"""

from enum import Enum

from src.core.parsing.patterns import FeedField


class ExtractionFailure(str, Enum):
    """Причина неудачного извлечения поля"""

    NO_MATCH = "no_match"  # Паттерн поля не найден в тексте
    MALFORMED_NUMERAL = "malformed_numeral"  # Захват не парсится как число нужной ширины


class FieldExtractionError(ValueError):
    """
    Обязательное поле не удалось извлечь из сообщения.

    Решение о фатальности отсутствия поля принимает вызывающий код,
    поэтому это исключение поднимают только require_* функции.
    """

    def __init__(self, field: FeedField, reason: ExtractionFailure):
        self.field = FeedField(field)
        self.reason = ExtractionFailure(reason)
        super().__init__(f"Cannot extract '{self.field.value}': {self.reason.value}")

    def __reduce__(self):
        # args содержат только сообщение; восстанавливаем из (field, reason)
        return (type(self), (self.field, self.reason))
