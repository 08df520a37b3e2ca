"""
ArrayProcessor — Integer Array Transformation Primitives

Двенадцать независимых операций над целочисленными последовательностями:
- Предикатные запросы: none_match, some_match, all_match
- Структурные преобразования: copy_values, replace, rearrange, filter,
  insert_values, distinct
- Поиск: find_second_max
- Слияние отсортированных: merge_sorted_arrays
- Матрицы: validate_for_matrix_multiplication, matrix_multiplication

КОНТРАКТ МУТАЦИИ:
Все операции чистые (возвращают новый список, вход не меняется).
Единственное исключение, явный флаг in_place=True у replace и
find_second_max, при котором мутируется список вызывающего, и (для replace)
возвращается тот же объект.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Валидация всегда предшествует мутации и аллокации результата
2. Пустой основной вход → InvalidArgumentError (кроме merge_sorted_arrays)
3. Внешние predicate/transform вызываются синхронно, по одному разу на элемент
"""

import logging
from collections.abc import Callable, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Final, Optional, Union

from src.core.arrays import matrix as matrix_ops
from src.core.arrays.errors import InvalidArgumentError
from src.core.arrays.helpers import (
    ascending_sort,
    max_of,
    subrange_copy,
    to_int_list,
)
from src.core.arrays.matrix import MatrixLike
from src.core.domain.sequences import IntSequence

logger = logging.getLogger(__name__)

SequenceLike = Union[IntSequence, Sequence[int]]

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# none_match: элемент "совпадает", если делится на этот делитель без остатка
NONE_MATCH_DIVISOR: Final[int] = 10

# filter: сохраняются элементы e > max - FILTER_WINDOW
FILTER_WINDOW: Final[int] = 10


@dataclass(frozen=True)
class ArrayProcessorConfig:
    """Конфигурация ArrayProcessor."""

    none_match_divisor: int = NONE_MATCH_DIVISOR
    filter_window: int = FILTER_WINDOW

    def __post_init__(self):
        if self.none_match_divisor <= 0:
            raise ValueError(
                f"none_match_divisor must be positive, got {self.none_match_divisor}"
            )
        if self.filter_window <= 0:
            raise ValueError(f"filter_window must be positive, got {self.filter_window}")


# =============================================================================
# ВАЛИДАЦИЯ ВХОДОВ
# =============================================================================


def _as_values(values: SequenceLike) -> Sequence[int]:
    if isinstance(values, IntSequence):
        return values.values
    return values


def _require_non_empty(values: Sequence, operation: str) -> None:
    if len(values) == 0:
        logger.debug("%s rejected: empty input", operation)
        raise InvalidArgumentError(f"{operation}: input sequence must not be empty")


def _require_mutable(values: Sequence[int], operation: str) -> None:
    if not isinstance(values, MutableSequence):
        logger.debug("%s rejected: in_place on %s", operation, type(values).__name__)
        raise InvalidArgumentError(
            f"{operation}: in_place requires a mutable sequence, "
            f"got {type(values).__name__}"
        )


def _first_index(values: Sequence[int], target: int) -> int:
    """Индекс первого вхождения target или -1."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return -1


# =============================================================================
# ARRAY PROCESSOR
# =============================================================================


class ArrayProcessor:
    """
    Набор примитивов над целочисленными массивами.

    Stateless, кроме неизменяемой конфигурации; один экземпляр можно
    переиспользовать для любого количества вызовов.
    """

    def __init__(self, config: Optional[ArrayProcessorConfig] = None):
        """
        Args:
            config: Конфигурация (default: ArrayProcessorConfig())
        """
        self.config = config or ArrayProcessorConfig()

    # -------------------------------------------------------------------------
    # Предикатные запросы
    # -------------------------------------------------------------------------

    def none_match(self, values: SequenceLike) -> bool:
        """
        True если ни один элемент не делится на none_match_divisor (default 10).

        Останавливается на первом делящемся элементе.

        Raises:
            InvalidArgumentError: Если values пустая
        """
        values = _as_values(values)
        _require_non_empty(values, "none_match")

        divisor = self.config.none_match_divisor
        for value in values:
            if value % divisor == 0:
                return False
        return True

    def some_match(self, values: SequenceLike, predicate: Callable[[int], bool]) -> bool:
        """
        True если predicate выполняется хотя бы для одного элемента.

        Останавливается на первом успехе.

        Raises:
            InvalidArgumentError: Если values пустая
        """
        values = _as_values(values)
        _require_non_empty(values, "some_match")

        for value in values:
            if predicate(value):
                return True
        return False

    def all_match(
        self,
        texts: Sequence[str],
        transform: Callable[[str], int],
        predicate: Callable[[int], bool],
    ) -> bool:
        """
        True если predicate(transform(s)) выполняется для каждого s.

        ВАЖНО: короткого замыкания нет. transform и predicate вызываются
        ровно len(texts) раз, по порядку, даже после первого несовпадения.

        Args:
            texts: Непустая последовательность строк (без None)
            transform: Преобразование str → int
            predicate: Проверка int → bool

        Raises:
            InvalidArgumentError: Если texts пустая
        """
        _require_non_empty(texts, "all_match")

        matched = True
        for text in texts:
            if not predicate(transform(text)):
                matched = False
        return matched

    # -------------------------------------------------------------------------
    # Копирование и вставка
    # -------------------------------------------------------------------------

    def copy_values(
        self, values: SequenceLike, start_inclusive: int, end_exclusive: int
    ) -> list[int]:
        """
        Копия элементов values[start_inclusive:end_exclusive].

        start_inclusive == end_exclusive даёт пустой список (не ошибка).

        Raises:
            InvalidArgumentError: Если values пустая, start < 0,
                end > len(values) или end < start
        """
        values = _as_values(values)
        length = len(values)
        if (
            length == 0
            or start_inclusive < 0
            or end_exclusive > length
            or end_exclusive < start_inclusive
        ):
            logger.debug(
                "copy_values rejected: length=%d start=%d end=%d",
                length,
                start_inclusive,
                end_exclusive,
            )
            raise InvalidArgumentError(
                f"Input length is {length}, start index {start_inclusive}, "
                f"end index {end_exclusive}"
            )

        return subrange_copy(values, start_inclusive, end_exclusive)

    def insert_values(
        self, values: SequenceLike, start_inclusive: int, inserted: SequenceLike
    ) -> list[int]:
        """
        Вставка блока inserted в позицию start_inclusive.

        Результат: values[:start] + inserted + values[start:], длина
        len(values) + len(inserted). Пустой inserted даёт копию values.

        Raises:
            InvalidArgumentError: Если values пустая, start < 0 или start >= len(values)

        Examples:
            >>> ArrayProcessor().insert_values([1, 2, 3, 4], 1, [9, 9])
            [1, 9, 9, 2, 3, 4]
        """
        values = _as_values(values)
        length = len(values)
        if length == 0 or start_inclusive < 0 or start_inclusive >= length:
            logger.debug(
                "insert_values rejected: length=%d start=%d", length, start_inclusive
            )
            raise InvalidArgumentError(
                f"Input length is {length}, and start index is {start_inclusive}"
            )

        inserted = _as_values(inserted)
        shift = len(inserted)
        result = [0] * (length + shift)

        # Префикс без изменений
        for index in range(start_inclusive):
            result[index] = values[index]

        # Вставляемый блок
        for offset in range(shift):
            result[start_inclusive + offset] = inserted[offset]

        # Хвост, сдвинутый на len(inserted)
        for index in range(start_inclusive, length):
            result[index + shift] = values[index]

        return result

    def merge_sorted_arrays(self, left: SequenceLike, right: SequenceLike) -> list[int]:
        """
        Слияние двух отсортированных по возрастанию последовательностей.

        Линейный two-pointer merge, сортировка не выполняется. При равенстве
        первым берётся элемент left (стабильность). Пустые входы допустимы.
        Отсортированность входов: ответственность вызывающего (не проверяется).

        Examples:
            >>> ArrayProcessor().merge_sorted_arrays([1, 3, 5], [2, 3, 4])
            [1, 2, 3, 3, 4, 5]
        """
        left = _as_values(left)
        right = _as_values(right)
        left_length = len(left)
        right_length = len(right)
        result = [0] * (left_length + right_length)

        i = j = k = 0
        while i < left_length and j < right_length:
            if right[j] < left[i]:
                result[k] = right[j]
                j += 1
            else:
                result[k] = left[i]
                i += 1
            k += 1

        while i < left_length:
            result[k] = left[i]
            i += 1
            k += 1

        while j < right_length:
            result[k] = right[j]
            j += 1
            k += 1

        return result

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def replace(self, values: SequenceLike, in_place: bool = False) -> list[int]:
        """
        Чётные элементы удваиваются, нечётные меняют знак.

        Чётность по x % 2 == 0, поэтому отрицательные чётные тоже удваиваются,
        а отрицательные нечётные становятся положительными.

        Args:
            values: Непустая последовательность
            in_place: True: мутировать values и вернуть тот же объект;
                False: вернуть новый список, values не меняется

        Raises:
            InvalidArgumentError: Если values пустая или in_place=True
                для неизменяемой последовательности
        """
        values = _as_values(values)
        _require_non_empty(values, "replace")
        if in_place:
            _require_mutable(values, "replace")
            target = values
        else:
            target = to_int_list(values)

        for index, value in enumerate(target):
            target[index] = value * 2 if value % 2 == 0 else -value

        return target

    def find_second_max(self, values: SequenceLike, in_place: bool = False) -> int:
        """
        Второй по величине элемент (строго меньше максимума).

        Если все элементы равны (в т.ч. единственный элемент): fallback
        на минимум, который равен максимуму.

        Args:
            values: Непустая последовательность
            in_place: True: отсортировать values на месте (side effect);
                False: сортируется scratch-копия

        Raises:
            InvalidArgumentError: Если values пустая или in_place=True
                для неизменяемой последовательности

        Examples:
            >>> ArrayProcessor().find_second_max([4, 9, 9, 1])
            4
        """
        values = _as_values(values)
        _require_non_empty(values, "find_second_max")
        if in_place:
            _require_mutable(values, "find_second_max")
            ordered = ascending_sort(values)
        else:
            ordered = ascending_sort(to_int_list(values))

        maximum = ordered[-1]
        for index in range(len(ordered) - 2, -1, -1):
            if ordered[index] != maximum:
                return ordered[index]

        return ordered[0]

    def rearrange(self, values: SequenceLike) -> list[int]:
        """
        Сначала отрицательные, затем неотрицательные элементы.

        Вход сканируется справа налево. Неотрицательный элемент добавляется
        в конец результата, отрицательный вставляется перед первым вхождением
        pivot (последнего элемента входа). Если pivot ещё не в результате
        (последний элемент сам отрицательный), позиция вставки 0.

        Examples:
            >>> ArrayProcessor().rearrange([3, -5, 4, -7, 2, 9])
            [-7, -5, 9, 2, 4, 3]

        Raises:
            InvalidArgumentError: Если values пустая
        """
        values = _as_values(values)
        _require_non_empty(values, "rearrange")

        pivot = values[-1]
        result: list[int] = []

        for index in range(len(values) - 1, -1, -1):
            value = values[index]
            if value >= 0:
                result.append(value)
            else:
                position = max(_first_index(result, pivot), 0)
                result.insert(position, value)

        return result

    def filter(self, values: SequenceLike) -> list[int]:
        """
        Элементы e > max(values) - filter_window, в исходном порядке.

        Результат плотный (без пустых ячеек).

        Raises:
            InvalidArgumentError: Если values пустая

        Examples:
            >>> ArrayProcessor().filter([1, 50, 45, 42])
            [50, 45, 42]
        """
        values = _as_values(values)
        _require_non_empty(values, "filter")

        threshold = max_of(values) - self.config.filter_window
        return [value for value in values if value > threshold]

    def distinct(self, values: SequenceLike) -> list[int]:
        """
        Каждое значение ровно один раз, в порядке первого вхождения.

        Raises:
            InvalidArgumentError: Если values пустая
        """
        values = _as_values(values)
        _require_non_empty(values, "distinct")

        seen: set[int] = set()
        result: list[int] = []
        for value in values:
            if value not in seen:
                seen.add(value)
                result.append(value)
        return result

    # -------------------------------------------------------------------------
    # Матрицы
    # -------------------------------------------------------------------------

    def validate_for_matrix_multiplication(
        self, left: Optional[MatrixLike], right: Optional[MatrixLike]
    ) -> None:
        """
        Validation gate перед умножением (см. src.core.arrays.matrix).

        Raises:
            NullReferenceError: Если left или right отсутствуют
            InvalidArgumentError: Ноль строк, jagged строки или cols(left) != rows(right)
        """
        matrix_ops.validate_for_matrix_multiplication(left, right)

    def matrix_multiplication(
        self, left: Optional[MatrixLike], right: Optional[MatrixLike]
    ) -> list[list[int]]:
        """
        Плотное произведение матриц формы rows(left) x cols(right).

        Raises:
            NullReferenceError: Если left или right отсутствуют
            InvalidArgumentError: Если размерности непригодны для умножения
        """
        return matrix_ops.matrix_multiplication(left, right)
