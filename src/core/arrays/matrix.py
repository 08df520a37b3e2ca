"""
Matrix Multiplication — Validation Gate & Dense Product

Модуль обеспечивает умножение целочисленных матриц:
- Валидация размерностей ДО аллокации результата
- Плотное произведение row-by-column (без учёта разреженности)

Матрица — прямоугольная последовательность строк:
    rows = len(matrix), cols = len(matrix[0])

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. None вместо матрицы (или строки) → NullReferenceError
2. Ноль строк, рваные (jagged) строки или cols(left) != rows(right) → InvalidArgumentError
3. Результат имеет форму rows(left) x cols(right)
4. Переполнения нет: int в Python имеет произвольную точность

ФОРМУЛА:
    result[r][c] = Σ_k left[r][k] * right[k][c]
"""

import logging
from collections.abc import Sequence
from typing import Optional, Union

from src.core.arrays.errors import InvalidArgumentError, NullReferenceError
from src.core.domain.sequences import IntMatrix

logger = logging.getLogger(__name__)

MatrixLike = Union[IntMatrix, Sequence[Sequence[int]]]


# =============================================================================
# РАЗМЕРНОСТИ
# =============================================================================


def _as_rows(matrix: MatrixLike) -> Sequence[Sequence[int]]:
    if isinstance(matrix, IntMatrix):
        return matrix.rows
    return matrix


def matrix_dimensions_are_illegal(matrix: Sequence[Sequence[int]]) -> bool:
    """
    Проверка, что матрица НЕ пригодна для умножения.

    Args:
        matrix: Последовательность строк

    Returns:
        True если строк ноль или длины строк различаются (jagged)
    """
    if len(matrix) == 0:
        return True

    n_cols = len(matrix[0])
    for row in matrix:
        if len(row) != n_cols:
            return True

    return False


def multiply_cell(
    left: Sequence[Sequence[int]],
    right: Sequence[Sequence[int]],
    row: int,
    col: int,
) -> int:
    """
    Скалярное произведение строки row левой матрицы на столбец col правой.

    Args:
        left: Левая матрица
        right: Правая матрица
        row: Индекс строки в left
        col: Индекс столбца в right

    Returns:
        Σ_k left[row][k] * right[k][col]
    """
    cell = 0
    for k in range(len(right)):
        cell += left[row][k] * right[k][col]
    return cell


# =============================================================================
# VALIDATION GATE
# =============================================================================


def validate_for_matrix_multiplication(
    left: Optional[MatrixLike],
    right: Optional[MatrixLike],
) -> None:
    """
    Валидация пары матриц перед умножением.

    Порядок проверок:
    1. Отсутствие матрицы или любой её строки → NullReferenceError
    2. Ноль строк / jagged строки в любой матрице → InvalidArgumentError
    3. cols(left) != rows(right) → InvalidArgumentError

    При успехе ничего не возвращает и не имеет побочных эффектов.

    Raises:
        NullReferenceError: Если left или right (или их строка) равны None
        InvalidArgumentError: Если размерности непригодны для умножения
    """
    if left is None or right is None:
        logger.debug("matrix multiplication rejected: missing matrix argument")
        raise NullReferenceError("Matrices must not be None")

    left_rows = _as_rows(left)
    right_rows = _as_rows(right)

    if any(row is None for row in left_rows) or any(row is None for row in right_rows):
        logger.debug("matrix multiplication rejected: missing matrix row")
        raise NullReferenceError("Matrix rows must not be None")

    if (
        matrix_dimensions_are_illegal(left_rows)
        or matrix_dimensions_are_illegal(right_rows)
        or len(left_rows[0]) != len(right_rows)
    ):
        logger.debug(
            "matrix multiplication rejected: left has %d rows, right has %d rows",
            len(left_rows),
            len(right_rows),
        )
        raise InvalidArgumentError("Matrices are of illegal dimensions")


# =============================================================================
# DENSE PRODUCT
# =============================================================================


def matrix_multiplication(
    left: Optional[MatrixLike],
    right: Optional[MatrixLike],
) -> list[list[int]]:
    """
    Плотное произведение матриц left x right.

    Сначала выполняется validate_for_matrix_multiplication (ошибки
    пропагируют без изменений), затем аллоцируется результат.

    Returns:
        Новая матрица формы rows(left) x cols(right)

    Examples:
        >>> matrix_multiplication([[1, 2], [3, 4]], [[5], [6]])
        [[17], [39]]
    """
    validate_for_matrix_multiplication(left, right)

    left_rows = _as_rows(left)
    right_rows = _as_rows(right)
    n_rows = len(left_rows)
    n_cols = len(right_rows[0])

    result = [[0] * n_cols for _ in range(n_rows)]
    for row in range(n_rows):
        for col in range(n_cols):
            result[row][col] = multiply_cell(left_rows, right_rows, row, col)

    return result
