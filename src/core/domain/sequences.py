"""
IntSequence / IntMatrix — Value Objects

Immutable Pydantic модели для целочисленных последовательностей и матриц.
Операции ArrayProcessor принимают их наравне с сырыми list/tuple:
модель валидирует вход один раз на границе (например, при разборе JSON
через model_validate_json), а операции разворачивают её в values.
"""

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# INT SEQUENCE
# =============================================================================


class IntSequence(BaseModel):
    """
    Упорядоченная последовательность целых чисел фиксированной длины.

    Immutable модель (frozen=True). Пустая последовательность допустима:
    пустой вход отвергают сами операции, а не модель
    (merge_sorted_arrays принимает пустые входы).
    """

    values: tuple[int, ...] = Field(..., description="Элементы последовательности")

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.values)

    def to_list(self) -> list[int]:
        """Новый изменяемый список (для in_place операций)."""
        return list(self.values)


# =============================================================================
# INT MATRIX
# =============================================================================


class IntMatrix(BaseModel):
    """
    Прямоугольная целочисленная матрица.

    Инварианты (проверяются при создании):
    - Хотя бы одна строка
    - Все строки одинаковой длины (no jagged rows)
    """

    rows: tuple[tuple[int, ...], ...] = Field(
        ..., min_length=1, description="Строки матрицы [row][column]"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("rows")
    @classmethod
    def validate_rectangular(
        cls, v: tuple[tuple[int, ...], ...]
    ) -> tuple[tuple[int, ...], ...]:
        """Все строки должны иметь длину первой строки."""
        n_cols = len(v[0])
        for index, row in enumerate(v):
            if len(row) != n_cols:
                raise ValueError(
                    f"row {index} has {len(row)} columns, expected {n_cols} (jagged matrix)"
                )
        return v

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_cols(self) -> int:
        return len(self.rows[0])

    def to_lists(self) -> list[list[int]]:
        """Изменяемая копия строк."""
        return [list(row) for row in self.rows]
