"""
Coincidence Report Contract

Валидация сериализованной сводки расчёта (CoincidenceSummary.model_dump
плюс необязательный full_day_count) против JSON Schema:
- моменты и границы интервала — строки "n/d" с положительным знаменателем
- счётчики — неотрицательные целые
- лишние поля запрещены

Схема: schema/coincidence_report.json (Draft 2020-12).
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

REPORT_SCHEMA_NAME = "coincidence_report"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение схем отчёта из каталога пакета.

    Каталог по умолчанию — schema/ рядом с модулем; его можно подменить
    (например, tmp-каталогом в тестах). Каждая схема читается один раз
    и проходит meta-валидацию Draft 2020-12.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без .json.

        Raises:
            FileNotFoundError: Если файла нет в каталоге
            ValueError: Если файл не проходит meta-валидацию
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка dict против одной схемы из каталога пакета."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises ValidationError на первом нарушении."""
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class CoincidenceReportValidator(ContractValidator):
    """
    Валидатор сводки расчёта совпадений.

    Используется CLI перед выводом --json: отчёт, не прошедший схему,
    не печатается.
    """

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(REPORT_SCHEMA_NAME, loader)


def validate_coincidence_report(data: Dict[str, Any]) -> None:
    """
    Проверка сериализованной сводки.

    Raises:
        ValidationError: Если сводка не соответствует coincidence_report.json
    """
    CoincidenceReportValidator().validate(data)
