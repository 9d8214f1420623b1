"""
Fachada de la calculadora modular.

Este módulo provee la clase Calculator, que reúne las familias de
operaciones (suma, resta, multiplicación y división) detrás de una
interfaz uniforme y lleva un historial de las operaciones completadas.

Contrato de interfaz:
    - add/subtract/multiply/divide(*values) -> float
    - power(base, exponent), factorial(n), average(values) -> float
    - get_history(limit=10) -> list[OperationRecord]
    - clear_history(), set_precision(decimals)

Solo las operaciones que terminan sin error quedan en el historial; los
errores se propagan sin cambios.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

import division
import multiplicacion
import resta
import suma
from calculator_errors import CalculatorError, InvalidOperand
from numeric_input import DEFAULT_DECIMALS, format_number


logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 10


class OperationKind(Enum):
    ADD = "suma"
    SUBTRACT = "resta"
    MULTIPLY = "multiplicación"
    DIVIDE = "división"
    POWER = "potencia"
    FACTORIAL = "factorial"
    AVERAGE = "promedio"

    @property
    def label(self) -> str:
        return self.value


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OperationRecord:
    """Una operación completada, con los operandos tal como se recibieron."""

    operation: OperationKind
    operands: tuple
    result: float
    timestamp: datetime = field(default_factory=_utcnow)

    def as_dict(self) -> dict:
        return {
            "operation": self.operation.label,
            "operands": list(self.operands),
            "result": self.result,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        operands = ", ".join(str(operand) for operand in self.operands)
        return f"{self.operation.label}: {operands} = {format_number(self.result)}"


# (operación de dos operandos, operación en cadena, variante con precisión)
_FAMILIES = {
    OperationKind.ADD: (suma.add, suma.add_multiple, suma.add_precision),
    OperationKind.SUBTRACT: (
        resta.subtract,
        resta.subtract_multiple,
        resta.subtract_precision,
    ),
    OperationKind.MULTIPLY: (
        multiplicacion.multiply,
        multiplicacion.multiply_multiple,
        multiplicacion.multiply_precision,
    ),
    OperationKind.DIVIDE: (
        division.divide,
        division.divide_multiple,
        division.divide_precision,
    ),
}


class Calculator:
    """Ejecuta operaciones validadas y registra las que terminan bien."""

    def __init__(self, precision: int = DEFAULT_DECIMALS):
        self._history: list[OperationRecord] = []
        self._lock = threading.Lock()
        self._precision = DEFAULT_DECIMALS
        self.set_precision(precision)

    # ── Propiedad: precisión por defecto ─────────────────────────

    @property
    def precision(self) -> int:
        return self._precision

    def set_precision(self, decimals: int):
        """Cambia los decimales usados por las variantes con precisión."""
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise ValueError("La precisión debe ser un entero no negativo")
        self._precision = decimals

    # ── Registro ─────────────────────────────────────────────────

    def _run(self, kind: OperationKind, operands, compute):
        try:
            result = compute()
        except CalculatorError as exc:
            logger.error("Error en %s: %s", kind.label, exc)
            raise

        record = OperationRecord(kind, tuple(operands), result)
        with self._lock:
            self._history.append(record)
        logger.debug("Operación registrada: %s", record)
        return result

    def _binary(self, kind: OperationKind, values: tuple) -> float:
        pairwise, chained, _ = _FAMILIES[kind]

        def compute():
            if not values:
                raise InvalidOperand(
                    f"La {kind.label} requiere al menos un operando: falta el valor inicial"
                )
            if len(values) == 2:
                return pairwise(*values)
            return chained(*values)

        return self._run(kind, values, compute)

    def _with_precision(self, kind: OperationKind, a, b, decimals) -> float:
        rounded = _FAMILIES[kind][2]
        if decimals is None:
            decimals = self._precision
        return self._run(kind, (a, b), lambda: rounded(a, b, decimals))

    # ── Operaciones básicas ──────────────────────────────────────

    def add(self, *values) -> float:
        return self._binary(OperationKind.ADD, values)

    def subtract(self, *values) -> float:
        return self._binary(OperationKind.SUBTRACT, values)

    def multiply(self, *values) -> float:
        return self._binary(OperationKind.MULTIPLY, values)

    def divide(self, *values) -> float:
        return self._binary(OperationKind.DIVIDE, values)

    # ── Variantes con precisión ──────────────────────────────────

    def add_precision(self, a, b, decimals: int | None = None) -> float:
        return self._with_precision(OperationKind.ADD, a, b, decimals)

    def subtract_precision(self, a, b, decimals: int | None = None) -> float:
        return self._with_precision(OperationKind.SUBTRACT, a, b, decimals)

    def multiply_precision(self, a, b, decimals: int | None = None) -> float:
        return self._with_precision(OperationKind.MULTIPLY, a, b, decimals)

    def divide_precision(self, a, b, decimals: int | None = None) -> float:
        return self._with_precision(OperationKind.DIVIDE, a, b, decimals)

    # ── Operaciones especiales ───────────────────────────────────

    def power(self, base, exponent) -> float:
        return self._run(
            OperationKind.POWER,
            (base, exponent),
            lambda: multiplicacion.power(base, exponent),
        )

    def factorial(self, n) -> float:
        return self._run(OperationKind.FACTORIAL, (n,), lambda: multiplicacion.factorial(n))

    def average(self, values) -> float:
        operands = values if isinstance(values, (list, tuple)) else (values,)
        return self._run(OperationKind.AVERAGE, operands, lambda: division.average(values))

    # ── Historial ────────────────────────────────────────────────

    def get_history(self, limit: int = DEFAULT_HISTORY_LIMIT) -> list[OperationRecord]:
        """Devuelve las ``limit`` operaciones más recientes, de la más antigua a la más nueva."""
        if limit < 0:
            raise ValueError("El límite no puede ser negativo")
        with self._lock:
            if limit == 0:
                return []
            return self._history[-limit:]

    def clear_history(self):
        with self._lock:
            self._history.clear()

    def history_summary(self) -> Counter:
        """Cantidad de operaciones registradas por tipo."""
        with self._lock:
            return Counter(record.operation.label for record in self._history)


calculator = Calculator()
