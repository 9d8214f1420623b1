"""Núcleo común de las cuatro familias de operaciones binarias.

Suma, resta, multiplicación y división comparten la misma validación,
conversión y verificación de desbordamiento; solo cambia el operador,
representado por ``Operator``. Los módulos ``suma``, ``resta``,
``multiplicacion`` y ``division`` exponen estas funciones con nombre propio.
"""

from __future__ import annotations

import math
import operator
from enum import Enum

from calculator_errors import (
    OVERFLOW_MESSAGE,
    DivisionByZero,
    InvalidOperand,
    LengthMismatch,
    ResultOverflow,
    TypeMismatch,
)
from numeric_input import DEFAULT_DECIMALS, is_valid_number, round_to, to_number


class Operator(Enum):
    """Operador binario con los nombres de sus operandos para los mensajes."""

    ADD = ("primer parámetro", "segundo parámetro", "parámetro")
    SUBTRACT = ("minuendo", "sustraendo", "sustraendo")
    MULTIPLY = ("primer factor", "segundo factor", "factor")
    DIVIDE = ("dividendo", "divisor", "divisor")

    def __init__(self, first_role: str, second_role: str, chain_noun: str):
        self.first_role = first_role
        self.second_role = second_role
        self.chain_noun = chain_noun

    def apply(self, x: float, y: float) -> float:
        return _FUNCTIONS[self](x, y)


_FUNCTIONS = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
}


# ── Verificaciones compartidas ──────────────────────────────────

def check_finite(result: float) -> float:
    if not math.isfinite(result):
        raise ResultOverflow(OVERFLOW_MESSAGE)
    return result


def require_valid(value, description: str):
    """Lanza InvalidOperand si ``value`` no es un número válido."""
    if not is_valid_number(value):
        raise InvalidOperand(f'{description} "{value}" no es un número válido')


def require_sequence(*values, message: str = "Ambos parámetros deben ser arrays"):
    for value in values:
        if not isinstance(value, (list, tuple)):
            raise TypeMismatch(message)


# ── Formas de cada operación ────────────────────────────────────

def pairwise(op: Operator, a, b) -> float:
    """Aplica ``op`` a dos operandos validados."""
    require_valid(a, f"El {op.first_role}")
    require_valid(b, f"El {op.second_role}")

    x = to_number(a)
    y = to_number(b)

    if op is Operator.DIVIDE and y == 0:
        raise DivisionByZero("División por cero no permitida")

    return check_finite(op.apply(x, y))


def chained(op: Operator, initial, *rest) -> float:
    """Aplica ``op`` de izquierda a derecha sobre ``initial`` y ``rest``.

    Todos los operandos se validan antes de calcular nada; las posiciones
    en los mensajes empiezan en 1 y cuentan solo los operandos de ``rest``.
    """
    require_valid(initial, "El valor inicial")

    for position, value in enumerate(rest, start=1):
        require_valid(value, f"El {op.chain_noun} en la posición {position}")
        if op is Operator.DIVIDE and to_number(value) == 0:
            raise DivisionByZero(f"División por cero en la posición {position}")

    accumulator = to_number(initial)
    for value in rest:
        accumulator = check_finite(op.apply(accumulator, to_number(value)))

    return accumulator


def arrays(op: Operator, seq_a, seq_b) -> list[float]:
    """Aplica ``op`` elemento a elemento sobre dos secuencias."""
    require_sequence(seq_a, seq_b)

    if len(seq_a) != len(seq_b):
        raise LengthMismatch("Los arrays deben tener la misma longitud")

    return [pairwise(op, a, b) for a, b in zip(seq_a, seq_b)]


def with_precision(op: Operator, a, b, decimals: int = DEFAULT_DECIMALS) -> float:
    return round_to(pairwise(op, a, b), decimals)
