"""Familia de la resta."""

from __future__ import annotations

from numeric_input import DEFAULT_DECIMALS
from operations import Operator, arrays, chained, pairwise, with_precision


def subtract(minuend, subtrahend) -> float:
    return pairwise(Operator.SUBTRACT, minuend, subtrahend)


def subtract_multiple(initial, *subtrahends) -> float:
    return chained(Operator.SUBTRACT, initial, *subtrahends)


def subtract_arrays(minuends, subtrahends) -> list[float]:
    return arrays(Operator.SUBTRACT, minuends, subtrahends)


def subtract_precision(minuend, subtrahend, decimals: int = DEFAULT_DECIMALS) -> float:
    return with_precision(Operator.SUBTRACT, minuend, subtrahend, decimals)


def absolute_difference(a, b) -> float:
    return abs(subtract(a, b))
