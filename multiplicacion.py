"""Familia de la multiplicación, potencia y factorial."""

from __future__ import annotations

import math

from calculator_errors import (
    OVERFLOW_MESSAGE,
    NegativeFactorial,
    NonIntegerFactorial,
    ResultOverflow,
)
from numeric_input import DEFAULT_DECIMALS, format_number, to_number
from operations import (
    Operator,
    arrays,
    chained,
    check_finite,
    pairwise,
    require_valid,
    with_precision,
)


def multiply(a, b) -> float:
    return pairwise(Operator.MULTIPLY, a, b)


def multiply_multiple(initial, *factors) -> float:
    return chained(Operator.MULTIPLY, initial, *factors)


def multiply_arrays(seq_a, seq_b) -> list[float]:
    return arrays(Operator.MULTIPLY, seq_a, seq_b)


def multiply_precision(a, b, decimals: int = DEFAULT_DECIMALS) -> float:
    return with_precision(Operator.MULTIPLY, a, b, decimals)


def power(base, exponent) -> float:
    """Eleva ``base`` a ``exponent``.

    Raises:
        InvalidOperand: base o exponente no válidos.
        ResultOverflow: el resultado no es finito o no está definido
            (p. ej. base negativa con exponente fraccionario).
    """
    require_valid(base, "La base")
    require_valid(exponent, "El exponente")

    b = to_number(base)
    e = to_number(exponent)

    if e == 0:
        return 1.0
    if e == 1:
        return b
    if b == 0:
        return 0.0
    if b == 1:
        return 1.0

    try:
        result = math.pow(b, e)
    except (OverflowError, ValueError) as exc:
        raise ResultOverflow(OVERFLOW_MESSAGE) from exc

    return check_finite(result)


def factorial(n) -> float:
    """Factorial iterativo en doble precisión; desborda a partir de 171!."""
    require_valid(n, "El valor")
    number = to_number(n)

    if number < 0:
        raise NegativeFactorial("El factorial no está definido para números negativos")
    if not number.is_integer():
        raise NonIntegerFactorial("El factorial solo está definido para números enteros")

    result = 1.0
    for i in range(2, int(number) + 1):
        result *= i
        if math.isinf(result):
            raise ResultOverflow(
                f"El factorial de {format_number(number)} excede los límites numéricos"
            )

    return result
