"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора отчёта:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и pattern
- Интеграция с Pydantic моделью CoincidenceSummary
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.aggregation import CoincidenceAggregator
from src.core.contracts import (
    CoincidenceReportValidator,
    SchemaLoader,
    validate_coincidence_report,
)
from src.core.math import Interval, PeriodicGenerator, Rational


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_report():
    """Валидный coincidence_report для тестирования."""
    return {
        "interval_lower": "0/1",
        "interval_upper": "5/1",
        "generator_names": ["first", "second"],
        "total_count": 8,
        "distinct_count": 4,
        "duplicate_count": 4,
        "approximation_consistent": True,
        "distinct_instants": ["1/1", "2/1", "3/1", "4/1"],
        "duplicates": ["1/1", "2/1", "3/1", "4/1"],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_schema(self) -> None:
        schema = SchemaLoader().load_schema("coincidence_report")
        assert schema["title"] == "coincidence_report"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("coincidence_report") is loader.load_schema(
            "coincidence_report"
        )

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# REPORT VALIDATION
# =============================================================================


class TestCoincidenceReport:
    """Тесты валидации отчёта"""

    def test_valid(self, valid_report) -> None:
        validate_coincidence_report(valid_report)

    def test_null_interval_allowed(self, valid_report) -> None:
        valid_report["interval_lower"] = None
        valid_report["interval_upper"] = None
        validate_coincidence_report(valid_report)

    def test_full_day_count_allowed(self, valid_report) -> None:
        valid_report["full_day_count"] = 8
        validate_coincidence_report(valid_report)

    def test_missing_required(self, valid_report) -> None:
        del valid_report["total_count"]
        with pytest.raises(ValidationError, match="total_count"):
            validate_coincidence_report(valid_report)

    def test_negative_count(self, valid_report) -> None:
        valid_report["distinct_count"] = -1
        with pytest.raises(ValidationError):
            validate_coincidence_report(valid_report)

    @pytest.mark.parametrize("bad", ["1/0", "0.5", "1/-2", "one"])
    def test_bad_rational_string(self, valid_report, bad: str) -> None:
        valid_report["duplicates"] = [bad]
        assert not CoincidenceReportValidator().is_valid(valid_report)

    def test_additional_property(self, valid_report) -> None:
        valid_report["unexpected"] = 1
        errors = list(CoincidenceReportValidator().iter_errors(valid_report))
        assert errors

    def test_custom_loader(self, tmp_path: Path, valid_report) -> None:
        """Схема из подменённого каталога вместо пакетной"""
        (tmp_path / "coincidence_report.json").write_text(
            json.dumps({"type": "object", "required": ["missing_field"]}),
            encoding="utf-8",
        )
        validator = CoincidenceReportValidator(loader=SchemaLoader(tmp_path))
        assert validator.schema_name == "coincidence_report"
        assert not validator.is_valid(valid_report)

    def test_summary_dump_is_valid(self) -> None:
        aggregator = CoincidenceAggregator(Interval.of(0, 5))
        for name in ("first", "second"):
            aggregator.add_generator(
                PeriodicGenerator(Rational(0), Rational(1), Interval.of(0, 5), name=name)
            )
        aggregator.compute()
        data = aggregator.summary().model_dump(mode="json")
        validate_coincidence_report(data)
        assert data["duplicates"] == ["1/1", "2/1", "3/1", "4/1"]
