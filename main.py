"""Demostración de la calculadora modular en consola."""

import logging

import division
import multiplicacion
import resta
import suma
from calculator import calculator
from calculator_errors import CalculatorError
from numeric_input import format_number


DEMO_HISTORY_LIMIT = 5
SUMMARY_HISTORY_LIMIT = 1000
LOG_LEVEL = logging.CRITICAL


def _run(description: str, operation):
    try:
        result = operation()
    except CalculatorError as exc:
        print(f"✗ {description} - Error: {exc}")
        return

    if isinstance(result, list):
        shown = "[" + ", ".join(format_number(value) for value in result) + "]"
    else:
        shown = format_number(result)
    print(f"✓ {description} = {shown}")


def _section(title: str):
    print(f"\n{title}")
    print("═" * len(title) + "\n")


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    print("DEMO - CALCULADORA MODULAR")

    _section("OPERACIONES BÁSICAS")
    _run("10 + 20", lambda: calculator.add(10, 20))
    _run("100 - 45", lambda: calculator.subtract(100, 45))
    _run("15 × 6", lambda: calculator.multiply(15, 6))
    _run("144 ÷ 12", lambda: calculator.divide(144, 12))

    _section("OPERACIONES CON MÚLTIPLES NÚMEROS")
    _run("Suma múltiple: 1 + 2 + 3 + 4 + 5", lambda: calculator.add(1, 2, 3, 4, 5))
    _run("Resta en cadena: 100 - 10 - 15 - 5", lambda: calculator.subtract(100, 10, 15, 5))
    _run("Producto múltiple: 2 × 3 × 4", lambda: calculator.multiply(2, 3, 4))
    _run("División en cadena: 1000 ÷ 10 ÷ 5", lambda: calculator.divide(1000, 10, 5))

    _section("OPERACIONES ESPECIALES")
    _run("Potencia: 2^10", lambda: calculator.power(2, 10))
    _run("Factorial: 6!", lambda: calculator.factorial(6))
    _run("Promedio: [85, 90, 78, 92, 88]", lambda: calculator.average([85, 90, 78, 92, 88]))

    _section("OPERACIONES CON DECIMALES")
    _run("0.1 + 0.2", lambda: calculator.add(0.1, 0.2))
    _run("Suma con precisión: 0.1 + 0.2 (2 decimales)", lambda: suma.add_precision(0.1, 0.2, 2))
    _run("3.14159 × 2", lambda: calculator.multiply(3.14159, 2))
    _run(
        "División con precisión: 10 ÷ 3 (4 decimales)",
        lambda: division.divide_precision(10, 3, 4),
    )

    _section("OPERACIONES CON TEXTOS Y NÚMEROS GRANDES")
    _run('Suma con textos: "1000" + "2000"', lambda: calculator.add("1000", "2000"))
    _run('Números con comas: "1,234" × "2"', lambda: calculator.multiply("1,234", "2"))
    _run("Números grandes: 999999999 + 1", lambda: calculator.add(999999999, 1))

    _section("MANEJO DE ERRORES")
    _run("División por cero: 10 ÷ 0", lambda: calculator.divide(10, 0))
    _run('Entrada inválida: "abc" + 5', lambda: calculator.add("abc", 5))
    _run("Factorial negativo: (-5)!", lambda: calculator.factorial(-5))
    _run("Promedio de array vacío", lambda: calculator.average([]))

    _section("FUNCIONES ADICIONALES DE LOS MÓDULOS")
    _run("Diferencia absoluta: |5 - 10|", lambda: resta.absolute_difference(5, 10))
    _run("División entera: 17 ÷ 5", lambda: division.integer_divide(17, 5))
    _run("Módulo: 17 % 5", lambda: division.modulo(17, 5))
    _run("Inverso: 1/4", lambda: division.reciprocal(4))

    _section("OPERACIONES CON ARRAYS")
    first = [10, 20, 30]
    second = [2, 4, 5]
    _run("Suma de array: [10, 20, 30]", lambda: suma.add_array(first))
    _run(
        "Multiplicar arrays: [10, 20, 30] × [2, 4, 5]",
        lambda: multiplicacion.multiply_arrays(first, second),
    )
    _run(
        "Dividir arrays: [10, 20, 30] ÷ [2, 4, 5]",
        lambda: division.divide_arrays(first, second),
    )

    _section("HISTORIAL DE OPERACIONES")
    print(f"Últimas {DEMO_HISTORY_LIMIT} operaciones:")
    for index, record in enumerate(calculator.get_history(DEMO_HISTORY_LIMIT), start=1):
        print(f"{index}. {record}")

    _section("ESTADÍSTICAS DE LA SESIÓN")
    total = len(calculator.get_history(SUMMARY_HISTORY_LIMIT))
    print(f"Total de operaciones realizadas: {total}")
    print("Desglose por tipo:")
    for label, count in calculator.history_summary().items():
        print(f"  - {label}: {count}")


if __name__ == "__main__":
    main()
