"""
Array Helpers — Shared Leaf Primitives

Листовые функции, на которых построены публичные операции ArrayProcessor:
- Сортировка по возрастанию (in-place, обменная)
- Копирование с подгонкой длины (bounded copy) с дозаполнением нулями
- Копирование поддиапазона (subrange copy)
- Материализация произвольного iterable в новый list[int]
- Максимум через сортировку scratch-копии

ИНВАРИАНТЫ:
1. Только ascending_sort мутирует свой аргумент, все остальные возвращают новый list
2. Копии никогда не разделяют память с исходной последовательностью
3. Недостающие элементы всегда дозаполняются нулями
"""

from collections.abc import Iterable, Sequence
from typing import Final

# Значение для дозаполнения при копировании с увеличением длины
FILL_VALUE: Final[int] = 0


# =============================================================================
# СОРТИРОВКА
# =============================================================================


def ascending_sort(values: list[int]) -> list[int]:
    """
    Сортировка по возрастанию на месте.

    Обменная сортировка O(n^2): для каждой позиции i меньший элемент
    из хвоста переставляется вперёд. Стабильность не гарантируется.

    Args:
        values: Изменяемый список (будет переупорядочен)

    Returns:
        Тот же самый объект списка (aliased, не копия)

    Examples:
        >>> ascending_sort([3, -1, 2])
        [-1, 2, 3]
    """
    length = len(values)

    for i in range(length):
        for j in range(i + 1, length):
            if values[i] > values[j]:
                values[i], values[j] = values[j], values[i]

    return values


def max_of(values: Sequence[int]) -> int:
    """
    Максимальный элемент через сортировку scratch-копии.

    Исходная последовательность не изменяется.

    Raises:
        IndexError: Если values пустая (вызывающий обязан проверить заранее)
    """
    scratch = ascending_sort(to_int_list(values))
    return scratch[-1]


# =============================================================================
# КОПИРОВАНИЕ
# =============================================================================


def bounded_copy(values: Sequence[int], new_length: int) -> list[int]:
    """
    Копия с подгонкой длины.

    Копируется min(len(values), new_length) элементов с начала,
    остаток дозаполняется FILL_VALUE.

    Args:
        values: Исходная последовательность
        new_length: Длина результата (>= 0)

    Returns:
        Новый список длины new_length

    Raises:
        ValueError: Если new_length < 0

    Examples:
        >>> bounded_copy([1, 2, 3], 2)
        [1, 2]
        >>> bounded_copy([1, 2], 4)
        [1, 2, 0, 0]
    """
    if new_length < 0:
        raise ValueError(f"new_length must be non-negative, got {new_length}")

    copied = min(len(values), new_length)
    result = [FILL_VALUE] * new_length
    result[:copied] = values[:copied]
    return result


def subrange_copy(values: Sequence[int], start: int, end: int) -> list[int]:
    """
    Копия поддиапазона [start, end).

    Копируется min(len(values) - start, end - start) элементов начиная со start.
    Если end выходит за конец values, хвост дозаполняется FILL_VALUE.

    Args:
        values: Исходная последовательность
        start: Первый копируемый индекс (0 <= start <= len(values))
        end: Индекс, до которого копировать (end >= start)

    Returns:
        Новый список длины end - start

    Raises:
        ValueError: Если start вне [0, len(values)] или end < start

    Examples:
        >>> subrange_copy([1, 2, 3, 4], 1, 3)
        [2, 3]
        >>> subrange_copy([1, 2, 3], 2, 5)
        [3, 0, 0]
    """
    if start < 0 or start > len(values):
        raise ValueError(f"start must be in [0, {len(values)}], got {start}")
    if end < start:
        raise ValueError(f"end must be >= start ({start}), got {end}")

    new_length = end - start
    copied = min(len(values) - start, new_length)
    result = [FILL_VALUE] * new_length
    result[:copied] = values[start:start + copied]
    return result


def to_int_list(items: Iterable[int]) -> list[int]:
    """Материализация iterable в новый list[int]."""
    return list(items)
