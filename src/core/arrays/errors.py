"""
Array Processing Errors

Два вида отказов библиотеки:
- InvalidArgumentError: нарушено предусловие (пустой вход, индекс вне границ,
  несовместимые размерности матриц)
- NullReferenceError: отсутствует аргумент-матрица (None)

Оба исключения выбрасываются ДО любой мутации или аллокации результата.
"""


class ArrayProcessingError(Exception):
    """Базовый класс для всех ошибок ArrayProcessor."""

    pass


class InvalidArgumentError(ArrayProcessingError, ValueError):
    """
    Нарушено предусловие операции.

    Сообщение описывает нарушенную границу (длина, индексы, размерности).
    Никогда не перехватывается внутри библиотеки.
    """

    pass


class NullReferenceError(ArrayProcessingError, TypeError):
    """Аргумент-матрица отсутствует (None)."""

    pass
