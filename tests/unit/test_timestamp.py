"""
Тесты для Timestamp

Проверяет:
1. Извлечение из сообщения и канонический формат
2. Round-trip format → parse без потерь
3. Полный порядок (совпадает с хронологическим)
4. Отсутствие календарной валидации и ограничения ширины полей
5. Причины неудачи (NO_MATCH / MALFORMED_NUMERAL) и строгий вариант
"""

import copy
import logging
import pickle
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from src.core.domain import (
    Timestamp,
    format_timestamp,
    parse_timestamp,
    require_timestamp,
)
from src.core.parsing import ExtractionFailure, FeedField, FieldExtractionError


SCENARIO = (
    '{"type":"received","time":"2014-11-07T08:19:27.028459Z",'
    '"order_id":"d50ec984-77a8-460a-b958-66f114b0de9b"}'
)

RECEIVED_PACKET = """
{
    "type": "received",
    "time": "2014-11-07T08:19:27.028459Z",
    "product_id": "BTC-USD",
    "sequence": 10,
    "order_id": "d50ec984-77a8-460a-b958-66f114b0de9b",
    "size": "1.34",
    "price": "502.1",
    "side": "buy",
    "order_type": "limit"
}"""


def _message(time_text: str) -> str:
    return f'{{"type": "open", "time": "{time_text}", "sequence": 1}}'


# =============================================================================
# PARSING
# =============================================================================


class TestParseTimestamp:
    """Тесты для parse_timestamp"""

    def test_scenario_fields(self) -> None:
        ts = parse_timestamp(SCENARIO)
        assert ts is not None
        assert ts.sort_key() == (2014, 11, 7, 8, 19, 27, 28459)

    def test_scenario_format(self) -> None:
        assert format_timestamp(parse_timestamp(SCENARIO)) == "2014-11-07T08:19:27.028459Z"

    def test_pretty_printed_packet(self) -> None:
        ts = parse_timestamp(RECEIVED_PACKET)
        assert ts.to_str() == "2014-11-07T08:19:27.028459Z"
        assert str(ts) == "2014-11-07T08:19:27.028459Z"

    def test_from_text_classmethod(self) -> None:
        assert Timestamp.from_text(SCENARIO) == parse_timestamp(SCENARIO)

    def test_missing_time_field(self) -> None:
        assert parse_timestamp('{"type": "heartbeat", "sequence": 90}') is None

    def test_non_digit_in_year(self) -> None:
        """Буква в году — отсутствие результата, не исключение"""
        assert parse_timestamp(_message("20X4-11-07T08:19:27.028459Z")) is None

    def test_non_ascii_digits_in_year(self) -> None:
        """Unicode цифры матчат \\d, но numeral считается некорректным"""
        assert parse_timestamp(_message("２０１４-11-07T08:19:27.028459Z")) is None

    def test_first_time_field_wins(self) -> None:
        text = '{"time": "2014-11-07T08:19:27.000001Z", "x": {"time": "2015-01-01T00:00:00.000000Z"}}'
        assert parse_timestamp(text).year == 2014

    def test_trailing_z_optional(self) -> None:
        assert parse_timestamp(_message("2014-11-07T08:19:27.028459")).microsecond == 28459

    def test_input_not_mutated(self) -> None:
        text = SCENARIO
        parse_timestamp(text)
        assert text == SCENARIO

    def test_failure_is_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.timestamp"):
            parse_timestamp("{}")
        assert "no_match" in caplog.text


class TestRequireTimestamp:
    """Тесты строгого варианта"""

    def test_success(self):
        assert require_timestamp(SCENARIO) == parse_timestamp(SCENARIO)

    def test_no_match(self):
        with pytest.raises(FieldExtractionError) as exc_info:
            require_timestamp('{"type": "open"}')
        assert exc_info.value.field is FeedField.TIME
        assert exc_info.value.reason is ExtractionFailure.NO_MATCH

    def test_malformed_numeral(self):
        with pytest.raises(FieldExtractionError) as exc_info:
            require_timestamp(_message("2014-١١-07T08:19:27.028459Z"))
        assert exc_info.value.reason is ExtractionFailure.MALFORMED_NUMERAL

    def test_error_survives_pickle_and_copy(self):
        with pytest.raises(FieldExtractionError) as exc_info:
            require_timestamp('{"type": "open"}')
        error = exc_info.value
        for restored in (pickle.loads(pickle.dumps(error)), copy.copy(error)):
            assert type(restored) is FieldExtractionError
            assert restored.field is FeedField.TIME
            assert restored.reason is ExtractionFailure.NO_MATCH
            assert str(restored) == str(error)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            require_timestamp("")


# =============================================================================
# ROUND-TRIP & FORMAT
# =============================================================================


class TestFormat:
    """Тесты канонического формата"""

    def test_zero_padding(self):
        ts = Timestamp(year=7, month=1, day=2, hour=3, minute=4, second=5, microsecond=6)
        assert ts.to_str() == "0007-01-02T03:04:05.000006Z"

    @pytest.mark.parametrize(
        "fields",
        [
            (2014, 11, 7, 8, 19, 27, 28459),
            (1970, 1, 1, 0, 0, 0, 0),
            (9999, 12, 31, 23, 59, 59, 999999),
            (2024, 2, 29, 12, 0, 0, 500000),
        ],
    )
    def test_roundtrip(self, fields):
        """Инвариант: format → parse возвращает те же поля"""
        names = ("year", "month", "day", "hour", "minute", "second", "microsecond")
        original = Timestamp(**dict(zip(names, fields)))
        restored = parse_timestamp(_message(format_timestamp(original)))
        assert restored == original
        assert restored.sort_key() == fields

    def test_to_datetime(self):
        ts = parse_timestamp(SCENARIO)
        assert ts.to_datetime() == datetime(2014, 11, 7, 8, 19, 27, 28459, tzinfo=timezone.utc)


# =============================================================================
# ORDERING
# =============================================================================


class TestOrdering:
    """Тесты полного порядка"""

    def test_chronological_order(self):
        t1 = parse_timestamp(_message("2014-11-07T08:19:27.028459Z"))
        t2 = parse_timestamp(_message("2014-11-07T08:19:27.028460Z"))
        assert t1 < t2
        assert t2 > t1
        assert t1 <= t2
        assert t2 >= t1
        assert t1 != t2

    def test_year_dominates(self):
        t1 = parse_timestamp(_message("2014-12-31T23:59:59.999999Z"))
        t2 = parse_timestamp(_message("2015-01-01T00:00:00.000000Z"))
        assert t1 < t2

    def test_sorting(self):
        texts = [
            "2015-01-01T00:00:00.000000Z",
            "2014-11-07T08:19:27.028459Z",
            "2014-11-07T08:19:28.000000Z",
            "2014-11-07T08:19:27.028458Z",
        ]
        stamps = [parse_timestamp(_message(t)) for t in texts]
        assert [s.to_str() for s in sorted(stamps)] == sorted(texts)

    def test_equal_values(self):
        t1 = parse_timestamp(SCENARIO)
        t2 = parse_timestamp(RECEIVED_PACKET)
        assert t1 == t2
        assert t1 <= t2 and t1 >= t2
        assert hash(t1) == hash(t2)

    def test_compare_with_other_type(self):
        with pytest.raises(TypeError):
            parse_timestamp(SCENARIO) < "2014-11-07"  # noqa: B015


# =============================================================================
# FIELD CONSTRAINTS
# =============================================================================


class TestConstraints:
    """Тесты ограничений ширины и отсутствия календарной проверки"""

    def test_no_calendar_validation(self):
        ts = parse_timestamp(_message("2014-13-40T25:61:61.000000Z"))
        assert ts is not None
        assert (ts.month, ts.day, ts.hour, ts.minute, ts.second) == (13, 40, 25, 61, 61)

    def test_invalid_calendar_date_to_datetime(self):
        ts = Timestamp(year=2014, month=13, day=1, hour=0, minute=0, second=0, microsecond=0)
        with pytest.raises(ValueError):
            ts.to_datetime()

    def test_year_width(self):
        with pytest.raises(ValidationError):
            Timestamp(year=65536, month=1, day=1, hour=0, minute=0, second=0, microsecond=0)

    def test_month_width(self):
        with pytest.raises(ValidationError):
            Timestamp(year=2014, month=256, day=1, hour=0, minute=0, second=0, microsecond=0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            Timestamp(year=2014, month=1, day=1, hour=0, minute=0, second=-1, microsecond=0)

    def test_immutable(self):
        ts = parse_timestamp(SCENARIO)
        with pytest.raises(ValidationError):
            ts.year = 2015
