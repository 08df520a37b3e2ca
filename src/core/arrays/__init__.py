"""
Array primitives для integer sequences и матриц

Предикатные запросы, структурные преобразования, слияние отсортированных
последовательностей и плотное умножение матриц с валидацией размерностей.
"""

from src.core.arrays.errors import (
    ArrayProcessingError,
    InvalidArgumentError,
    NullReferenceError,
)

from src.core.arrays.helpers import (
    FILL_VALUE,
    ascending_sort,
    bounded_copy,
    max_of,
    subrange_copy,
    to_int_list,
)

from src.core.arrays.matrix import (
    matrix_dimensions_are_illegal,
    matrix_multiplication,
    multiply_cell,
    validate_for_matrix_multiplication,
)

from src.core.arrays.processor import (
    FILTER_WINDOW,
    NONE_MATCH_DIVISOR,
    ArrayProcessor,
    ArrayProcessorConfig,
)

__all__ = [
    # Errors
    "ArrayProcessingError",
    "InvalidArgumentError",
    "NullReferenceError",
    # Helpers
    "FILL_VALUE",
    "ascending_sort",
    "bounded_copy",
    "max_of",
    "subrange_copy",
    "to_int_list",
    # Matrix
    "matrix_dimensions_are_illegal",
    "matrix_multiplication",
    "multiply_cell",
    "validate_for_matrix_multiplication",
    # Processor
    "FILTER_WINDOW",
    "NONE_MATCH_DIVISOR",
    "ArrayProcessor",
    "ArrayProcessorConfig",
]
