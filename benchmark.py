"""Benchmark de rendimiento de las operaciones de la calculadora."""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass

import division
import multiplicacion
import resta
import suma
from calculator import Calculator
from calculator_errors import CalculatorError


BASIC_ITERATIONS = 100_000
COMPLEX_ITERATIONS = 10_000
HEAVY_ITERATIONS = 1_000
WARMUP_ITERATIONS = 100


@dataclass
class Measurement:
    iterations: int
    total_ms: float

    @property
    def ms_per_operation(self) -> float:
        return self.total_ms / self.iterations

    @property
    def operations_per_second(self) -> int:
        if self.total_ms == 0:
            return 0
        return round(1000 / self.ms_per_operation)


class Benchmark:
    """Mide una serie de funciones y reporta sus tiempos."""

    def __init__(self, name: str):
        self.name = name
        self.measurements: list[Measurement] = []

    def run(self, fn, iterations: int = COMPLEX_ITERATIONS) -> float:
        for _ in range(WARMUP_ITERATIONS):
            fn()

        start = time.perf_counter_ns()
        for _ in range(iterations):
            fn()
        elapsed_ms = (time.perf_counter_ns() - start) / 1_000_000

        measurement = Measurement(iterations, elapsed_ms)
        self.measurements.append(measurement)
        return measurement.ms_per_operation

    def report(self):
        print(f"\n{self.name}")
        print("═" * 50)
        for m in self.measurements:
            print(f"Iteraciones: {m.iterations:,}")
            print(f"Tiempo total: {m.total_ms:.2f} ms")
            print(f"Tiempo por operación: {m.ms_per_operation:.6f} ms")
            print(f"Operaciones por segundo: {m.operations_per_second:,}")


def _ignore_errors(fn):
    def wrapped():
        try:
            fn()
        except CalculatorError:
            pass

    return wrapped


def run_benchmarks(basic: int = BASIC_ITERATIONS, complex_: int = COMPLEX_ITERATIONS,
                   heavy: int = HEAVY_ITERATIONS) -> list[Benchmark]:
    calc = Calculator()
    benchmarks = []

    bench = Benchmark("SUMA")
    bench.run(lambda: calc.add(123, 456), basic)
    bench.run(lambda: calc.add(0.1, 0.2), basic)
    bench.run(lambda: suma.add_multiple(1, 2, 3, 4, 5, 6, 7, 8, 9, 10), complex_)
    bench.run(lambda: suma.add_array([1, 2, 3, 4, 5, 6, 7, 8, 9, 10]), complex_)
    benchmarks.append(bench)
    calc.clear_history()

    bench = Benchmark("RESTA")
    bench.run(lambda: calc.subtract(1000, 234), basic)
    bench.run(lambda: resta.subtract_multiple(1000, 100, 50, 25, 10), complex_)
    bench.run(lambda: resta.absolute_difference(-100, 200), basic)
    benchmarks.append(bench)
    calc.clear_history()

    bench = Benchmark("MULTIPLICACIÓN")
    bench.run(lambda: calc.multiply(123, 456), basic)
    bench.run(lambda: multiplicacion.multiply_multiple(2, 3, 4, 5), complex_)
    bench.run(lambda: calc.power(2, 10), complex_)
    bench.run(lambda: calc.factorial(10), heavy)
    benchmarks.append(bench)
    calc.clear_history()

    bench = Benchmark("DIVISIÓN")
    bench.run(lambda: calc.divide(1000, 7), basic)
    bench.run(lambda: division.divide_multiple(1000, 2, 5, 10), complex_)
    bench.run(lambda: division.modulo(1000, 7), basic)
    bench.run(lambda: calc.average([10, 20, 30, 40, 50]), complex_)
    benchmarks.append(bench)
    calc.clear_history()

    first = list(range(1, 101))
    second = [value * 2 for value in first]
    bench = Benchmark("OPERACIONES CON ARRAYS (100 elementos)")
    bench.run(lambda: suma.add_array(first), heavy)
    bench.run(lambda: multiplicacion.multiply_arrays(first[:10], second[:10]), heavy)
    bench.run(lambda: division.average(first), heavy)
    benchmarks.append(bench)

    bench = Benchmark("VALIDACIÓN DE ENTRADA")
    bench.run(_ignore_errors(lambda: calc.add("123", "456")), complex_)
    bench.run(_ignore_errors(lambda: calc.add("abc", "def")), complex_)
    benchmarks.append(bench)
    calc.clear_history()

    bench = Benchmark("SUMA: Directa vs Múltiple (2 números)")
    bench.run(lambda: suma.add(10, 20), basic)
    bench.run(lambda: suma.add_multiple(10, 20), basic)
    benchmarks.append(bench)

    return benchmarks


def _read_int(flag: str, default: int) -> int:
    if flag not in sys.argv:
        return default
    idx = sys.argv.index(flag)
    try:
        return int(sys.argv[idx + 1])
    except (ValueError, IndexError):
        raise SystemExit(f"Invalid value for {flag}")


def main():
    # El benchmark de validación provoca errores a propósito.
    logging.basicConfig(level=logging.CRITICAL)

    basic = _read_int("--basic", BASIC_ITERATIONS)
    complex_ = _read_int("--complex", COMPLEX_ITERATIONS)
    heavy = _read_int("--heavy", HEAVY_ITERATIONS)

    print("BENCHMARK DE RENDIMIENTO - CALCULADORA")
    print(f"- Operaciones básicas: {basic:,} iteraciones")
    print(f"- Operaciones complejas: {complex_:,} iteraciones")
    print(f"- Operaciones muy complejas: {heavy:,} iteraciones")

    started = time.perf_counter()
    benchmarks = run_benchmarks(basic, complex_, heavy)
    for bench in benchmarks:
        bench.report()

    core = [m for bench in benchmarks[:4] for m in bench.measurements]
    mean_ops = sum(m.operations_per_second for m in core) / len(core)
    print("\nRESUMEN DE RENDIMIENTO")
    print("═" * 50)
    print(f"Promedio de operaciones por segundo: {round(mean_ops):,}")
    print(f"\nTiempo total de ejecución: {time.perf_counter() - started:.2f} segundos")


if __name__ == "__main__":
    # Uso rápido:
    #   python benchmark.py
    #   python benchmark.py --basic 1000 --complex 100 --heavy 10
    main()
