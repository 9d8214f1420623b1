"""Familia de la suma."""

from __future__ import annotations

from numeric_input import DEFAULT_DECIMALS
from operations import Operator, arrays, chained, pairwise, require_sequence, with_precision


def add(a, b) -> float:
    return pairwise(Operator.ADD, a, b)


def add_multiple(initial, *rest) -> float:
    return chained(Operator.ADD, initial, *rest)


def add_arrays(seq_a, seq_b) -> list[float]:
    return arrays(Operator.ADD, seq_a, seq_b)


def add_precision(a, b, decimals: int = DEFAULT_DECIMALS) -> float:
    return with_precision(Operator.ADD, a, b, decimals)


def add_array(values) -> float:
    """Suma todos los elementos de una secuencia; 0 si está vacía."""
    require_sequence(values, message="El parámetro debe ser un array")
    if not values:
        return 0.0
    return add_multiple(*values)
