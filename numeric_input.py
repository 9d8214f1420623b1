"""Coerción y validación de operandos numéricos.

Todas las operaciones aceptan números, textos numéricos (con espacios
alrededor y comas como separador de miles) y enteros grandes. Este módulo
centraliza la validación y la conversión al valor de trabajo (``float``).

Contrato:
    - is_valid_number(value) -> bool
    - to_number(value) -> float   (no valida; llamar antes a is_valid_number)
    - round_to(value, decimals) -> float
"""

from __future__ import annotations

import math
import re

from mpmath import mp

from calculator_errors import InvalidOperand


DEFAULT_DECIMALS = 2
THOUSANDS_SEPARATOR = ","

_DECIMAL_TEXT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


# ── Validación y conversión ─────────────────────────────────────

def to_number(value) -> float:
    """Convierte ``value`` al valor de trabajo.

    Los enteros se estrechan a ``float``; los textos se recortan y se les
    quitan los separadores de miles; solo se aceptan decimales ASCII con
    signo y exponente opcionales (no ``"1_000"`` ni ``"inf"``). Cualquier otro
    valor pasa por ``float()`` directamente.

    Raises:
        ValueError, TypeError, OverflowError: el valor no es convertible.
    """
    if isinstance(value, int):
        return float(value)
    if isinstance(value, str):
        value = value.strip().replace(THOUSANDS_SEPARATOR, "")
        if not _DECIMAL_TEXT.fullmatch(value):
            raise ValueError(f"Texto no numérico: {value!r}")
    return float(value)


def is_valid_number(value) -> bool:
    """Indica si ``value`` representa un número real finito."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False

    try:
        number = to_number(value)
    except (TypeError, ValueError, OverflowError):
        return False

    return math.isfinite(number)


# ── Redondeo ────────────────────────────────────────────────────

def _rounding_dps(decimals: int) -> int:
    # 53 bits de mantisa más los bits de 5**decimals, con holgura.
    return max(40, 20 + abs(decimals))


def round_to(value: float, decimals: int = DEFAULT_DECIMALS) -> float:
    """Redondea a ``decimals`` decimales, mitades lejos de cero.

    El escalado por ``10**decimals`` se hace con mpmath a precisión
    suficiente para que sea exacto; solo el resultado final se estrecha al
    ``float`` más cercano.
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidOperand(
            f'El número de decimales "{decimals}" debe ser un entero'
        )

    with mp.workdps(_rounding_dps(decimals)):
        scale = mp.mpf(10) ** abs(decimals)
        exact = mp.mpf(value)
        scaled = exact * scale if decimals >= 0 else exact / scale

        rounded = mp.floor(abs(scaled) + mp.mpf("0.5"))
        if scaled < 0:
            rounded = -rounded

        result = rounded / scale if decimals >= 0 else rounded * scale
        return float(result)


# ── Formato para consola ────────────────────────────────────────

def format_number(value) -> str:
    """Texto legible de un resultado: enteros sin ``.0``, resto con 15 cifras."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if value == float("inf"):
            return "∞"
        if value == float("-inf"):
            return "-∞"
        if value == int(value) and abs(value) < 1e15:
            return str(int(value))
        return f"{value:.15g}"

    return str(value)
