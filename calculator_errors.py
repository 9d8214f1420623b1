"""Errores de la calculadora modular.

Cada error hereda de ``CalculatorError`` y además de la excepción
estándar que un llamador capturaría de forma natural (``ValueError``,
``ZeroDivisionError``, ``OverflowError`` o ``TypeError``).
"""


class CalculatorError(Exception):
    """Base de todos los errores de las operaciones."""


class InvalidOperand(CalculatorError, ValueError):
    """Un operando falta, está vacío o no es un número finito."""


class DivisionByZero(CalculatorError, ZeroDivisionError):
    """Un divisor se convierte exactamente en 0."""


class ResultOverflow(CalculatorError, OverflowError):
    """El resultado no es finito (desbordamiento u operación indefinida)."""


class NegativeFactorial(CalculatorError, ValueError):
    pass


class NonIntegerFactorial(CalculatorError, ValueError):
    pass


class TypeMismatch(CalculatorError, TypeError):
    """Se esperaba una secuencia ordenada (lista o tupla)."""


class LengthMismatch(CalculatorError, ValueError):
    """Dos secuencias que deben tener la misma longitud no la tienen."""


class EmptyInput(CalculatorError, ValueError):
    """La operación requiere al menos un elemento."""


OVERFLOW_MESSAGE = "El resultado excede los límites numéricos permitidos"
