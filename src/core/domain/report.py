"""
CoincidenceSummary — Итоговая сводка расчёта совпадений

Immutable Pydantic модель, представляющая результат одного прохода
агрегатора. Совместима с JSON Schema (contracts/schema/coincidence_report.json).
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CoincidenceSummary(BaseModel):
    """
    Сводка расчёта: счётчики, результат кросс-валидации, дубликаты.

    Моменты сериализуются строками вида "n/d" в канонической форме.
    """

    interval_lower: Optional[str] = Field(
        None, description="Нижняя граница общего интервала (nullable)"
    )
    interval_upper: Optional[str] = Field(
        None, description="Верхняя граница общего интервала (nullable)"
    )
    generator_names: list[str] = Field(
        default_factory=list, description="Имена генераторов в порядке добавления"
    )
    total_count: int = Field(..., ge=0, description="Число всех моментов (с дубликатами)")
    distinct_count: int = Field(..., ge=0, description="Число различных моментов")
    duplicate_count: int = Field(
        ..., ge=0, description="Число значений, встретившихся минимум дважды"
    )
    approximation_consistent: bool = Field(
        ..., description="Совпадает ли float-дедупликация с точной"
    )
    distinct_instants: list[str] = Field(
        default_factory=list, description="Различные моменты по возрастанию"
    )
    duplicates: list[str] = Field(
        default_factory=list, description="Повторяющиеся моменты в порядке второго появления"
    )

    model_config = {"frozen": True}

    @field_validator("distinct_count")
    @classmethod
    def validate_distinct_not_above_total(cls, v: int, info) -> int:
        """Проверка, что различных моментов не больше, чем всех"""
        if "total_count" in info.data:
            total = info.data["total_count"]
            if v > total:
                raise ValueError(f"distinct_count {v} must be <= total_count {total}")
        return v
