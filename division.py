"""Familia de la división, módulo, división entera, inverso y promedio."""

from __future__ import annotations

import math

from calculator_errors import DivisionByZero, EmptyInput
from numeric_input import DEFAULT_DECIMALS, to_number
from operations import (
    Operator,
    arrays,
    chained,
    pairwise,
    require_sequence,
    require_valid,
    with_precision,
)


def divide(dividend, divisor) -> float:
    return pairwise(Operator.DIVIDE, dividend, divisor)


def divide_multiple(initial, *divisors) -> float:
    return chained(Operator.DIVIDE, initial, *divisors)


def divide_arrays(dividends, divisors) -> list[float]:
    return arrays(Operator.DIVIDE, dividends, divisors)


def divide_precision(dividend, divisor, decimals: int = DEFAULT_DECIMALS) -> float:
    return with_precision(Operator.DIVIDE, dividend, divisor, decimals)


def modulo(dividend, divisor) -> float:
    """Resto truncado: conserva el signo del dividendo, como ``math.fmod``."""
    require_valid(dividend, "El dividendo")
    require_valid(divisor, "El divisor")

    x = to_number(dividend)
    y = to_number(divisor)

    if y == 0:
        raise DivisionByZero("División por cero no permitida")

    return math.fmod(x, y)


def integer_divide(dividend, divisor) -> float:
    """Cociente truncado hacia cero."""
    return float(math.trunc(divide(dividend, divisor)))


def reciprocal(value) -> float:
    return divide(1, value)


def average(values) -> float:
    """Promedio aritmético de una secuencia no vacía.

    Raises:
        TypeMismatch: ``values`` no es una lista ni una tupla.
        EmptyInput: la secuencia está vacía.
        InvalidOperand: algún elemento no es un número válido.
    """
    require_sequence(values, message="El parámetro debe ser un array")

    if not values:
        raise EmptyInput("El array no puede estar vacío")

    for value in values:
        require_valid(value, "El valor")

    total = chained(Operator.ADD, 0, *values)
    return divide(total, len(values))
