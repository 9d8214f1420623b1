from calculator import Calculator, OperationKind
from calculator_errors import (
    DivisionByZero,
    EmptyInput,
    InvalidOperand,
    LengthMismatch,
    NegativeFactorial,
    NonIntegerFactorial,
    ResultOverflow,
    TypeMismatch,
)
import division
import logging
import multiplicacion
import resta
import suma


def _raises(fn, error) -> bool:
	try:
		fn()
	except error:
		return True
	return False


def _history_checks(checks: list[tuple[str, bool]]) -> None:
	calc = Calculator()
	calc.clear_history()
	checks.append(("cleared history is empty", calc.get_history(100) == []))

	calc.add(1, 2)
	history = calc.get_history(100)
	checks.append((
		"one add(1, 2) leaves exactly one record with result 3",
		len(history) == 1 and history[0].result == 3 and history[0].operation is OperationKind.ADD,
	))

	checks.append(("failed divide raises DivisionByZero", _raises(lambda: calc.divide(10, 0), DivisionByZero)))
	checks.append(("failed divide is not recorded", len(calc.get_history(100)) == 1))

	for value in range(12):
		calc.add(value, 1)
	window = calc.get_history()
	checks.append(("default window holds 10 records", len(window) == 10))
	checks.append(("window is oldest first", [r.operands[0] for r in window] == list(range(2, 12))))

	calc.set_precision(3)
	checks.append(("precision default applies", calc.divide_precision(10, 3) == 3.333))
	checks.append(("explicit precision overrides", calc.divide_precision(10, 3, 1) == 3.3))


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	checks.append(("add(1, 2) == 3", suma.add(1, 2) == 3))
	checks.append(('add("10", "20") == 30', suma.add("10", "20") == 30))
	checks.append(('add(" 1,000 ", 1) == 1001', suma.add(" 1,000 ", 1) == 1001))
	checks.append(("add(0.1, 0.2) is the binary sum", suma.add(0.1, 0.2) == 0.1 + 0.2))
	checks.append(("add_precision(0.1, 0.2, 2) == 0.3", suma.add_precision(0.1, 0.2, 2) == 0.3))
	checks.append(("add_multiple(x) returns x", suma.add_multiple("42") == 42))
	checks.append(("subtract chain", resta.subtract_multiple(100, 10, 15, 5) == 70))
	checks.append(("divide(10, 0) raises DivisionByZero", _raises(lambda: division.divide(10, 0), DivisionByZero)))
	checks.append((
		"divide chain zero reports position",
		_raises(lambda: division.divide_multiple(100, 2, 0), DivisionByZero),
	))
	checks.append(("factorial(-5) raises NegativeFactorial", _raises(lambda: multiplicacion.factorial(-5), NegativeFactorial)))
	checks.append(("factorial(2.5) raises NonIntegerFactorial", _raises(lambda: multiplicacion.factorial(2.5), NonIntegerFactorial)))
	checks.append(("factorial(0) == 1", multiplicacion.factorial(0) == 1))
	checks.append(("factorial(5) == 120", multiplicacion.factorial(5) == 120))
	checks.append(("factorial(171) overflows", _raises(lambda: multiplicacion.factorial(171), ResultOverflow)))
	checks.append(("power overflow", _raises(lambda: multiplicacion.power(10, 400), ResultOverflow)))
	checks.append(("average([]) raises EmptyInput", _raises(lambda: division.average([]), EmptyInput)))
	checks.append(("average([10, 20, 30, 40]) == 25", division.average([10, 20, 30, 40]) == 25))
	checks.append(("average of text raises TypeMismatch", _raises(lambda: division.average("123"), TypeMismatch)))
	checks.append(("arrays of unequal length", _raises(lambda: suma.add_arrays([1], [1, 2]), LengthMismatch)))
	checks.append(('"abc" + 5 raises InvalidOperand', _raises(lambda: suma.add("abc", 5), InvalidOperand)))

	expected_actual.append(("modulo(-17, 5)", "-2.0", str(division.modulo(-17, 5))))
	expected_actual.append(("integer_divide(-17, 5)", "-3.0", str(division.integer_divide(-17, 5))))
	expected_actual.append(("reciprocal(4)", "0.25", str(division.reciprocal(4))))
	expected_actual.append(("divide_arrays", "[5.0, 5.0, 6.0]", str(division.divide_arrays([10, 20, 30], [2, 4, 5]))))

	_history_checks(checks)

	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	mismatches = []
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		if expected != actual:
			mismatches.append(label)
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed or mismatches:
		print("\nFAILED CHECKS:")
		for name in failed + mismatches:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


def main() -> None:
	# Las comprobaciones provocan errores a propósito.
	logging.basicConfig(level=logging.CRITICAL)
	run_regressions()


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	main()
