import math

import pytest

import division
import multiplicacion
import resta
import suma
from calculator_errors import (
    CalculatorError,
    DivisionByZero,
    EmptyInput,
    InvalidOperand,
    LengthMismatch,
    NegativeFactorial,
    NonIntegerFactorial,
    ResultOverflow,
    TypeMismatch,
)
from operations import Operator, chained, pairwise


def test_add_basic():
    assert suma.add(1, 2) == 3
    assert suma.add("10", "20") == 30
    assert suma.add(-5, -3) == -8
    assert suma.add(10 ** 3, "1,000") == 2000


def test_add_binary_floating_point():
    assert suma.add(0.1, 0.2) == 0.30000000000000004
    assert suma.add(0.1, 0.2) != 0.3
    assert suma.add_precision(0.1, 0.2, 2) == 0.3
    assert suma.add_precision(0.1, 0.2) == 0.3


def test_text_with_underscores_or_non_ascii_digits_is_rejected():
    with pytest.raises(InvalidOperand, match='primer parámetro "1_000"'):
        suma.add("1_000", 1)
    with pytest.raises(InvalidOperand):
        division.divide(10, "\u0662")
    with pytest.raises(InvalidOperand, match="posición 1"):
        resta.subtract_multiple(5, "1_0")


def test_invalid_operand_names_role_and_value():
    with pytest.raises(InvalidOperand, match='primer parámetro "abc"'):
        suma.add("abc", 5)
    with pytest.raises(InvalidOperand, match='sustraendo "x"'):
        resta.subtract(1, "x")
    with pytest.raises(InvalidOperand, match='segundo factor "None"'):
        multiplicacion.multiply(2, None)
    with pytest.raises(InvalidOperand, match='dividendo ""'):
        division.divide("", 2)


def test_errors_are_builtin_subclasses():
    with pytest.raises(ValueError):
        suma.add("abc", 1)
    with pytest.raises(ZeroDivisionError):
        division.divide(1, 0)
    with pytest.raises(OverflowError):
        multiplicacion.multiply(1e308, 10)
    with pytest.raises(TypeError):
        suma.add_arrays(1, [1])
    with pytest.raises(CalculatorError):
        division.average([])


def test_overflow():
    with pytest.raises(ResultOverflow):
        suma.add(1.7e308, 1.7e308)
    with pytest.raises(ResultOverflow):
        resta.subtract(-1.7e308, 1.7e308)
    with pytest.raises(ResultOverflow):
        division.divide(1e308, 1e-10)


def test_divide_by_zero():
    with pytest.raises(DivisionByZero):
        division.divide(10, 0)
    with pytest.raises(DivisionByZero):
        division.divide(10, "0")
    with pytest.raises(DivisionByZero):
        division.divide(10, -0.0)


def test_chained_without_rest_returns_coerced_initial():
    assert suma.add_multiple(" 1,500 ") == 1500
    assert resta.subtract_multiple(7) == 7
    assert multiplicacion.multiply_multiple("3") == 3
    assert division.divide_multiple(9) == 9


def test_chained_folds_left_to_right():
    assert suma.add_multiple(1, 2, 3, 4, 5) == 15
    assert resta.subtract_multiple(100, 10, 15, 5) == 70
    assert multiplicacion.multiply_multiple(2, 3, 4) == 24
    assert division.divide_multiple(1000, 10, 5) == 20


def test_chained_reports_position_of_first_invalid():
    with pytest.raises(InvalidOperand, match='valor inicial "x"'):
        suma.add_multiple("x", 1)
    with pytest.raises(InvalidOperand, match='posición 2 "bad"'):
        resta.subtract_multiple(10, 1, "bad", "worse")


def test_chained_validates_before_any_arithmetic():
    # el desbordamiento del primer paso no se alcanza: el operando inválido gana
    with pytest.raises(InvalidOperand):
        multiplicacion.multiply_multiple(1e308, 10, "nope")


def test_chained_overflow_checked_every_step():
    with pytest.raises(ResultOverflow):
        multiplicacion.multiply_multiple(1e300, 1e300, 0)


def test_divide_chain_zero_position():
    with pytest.raises(DivisionByZero, match="posición 3"):
        division.divide_multiple(100, 2, 5, 0)


def test_arrays():
    assert suma.add_arrays([1, 2, 3], [4, 5, 6]) == [5, 7, 9]
    assert resta.subtract_arrays((10, 20), ["1", "2"]) == [9, 18]
    assert multiplicacion.multiply_arrays([10, 20, 30], [2, 4, 5]) == [20, 80, 150]
    assert division.divide_arrays([10, 20, 30], [2, 4, 5]) == [5, 5, 6]
    assert suma.add_arrays([], []) == []


def test_arrays_errors():
    with pytest.raises(TypeMismatch):
        suma.add_arrays("123", [1, 2, 3])
    with pytest.raises(LengthMismatch):
        resta.subtract_arrays([1, 2], [1])
    with pytest.raises(DivisionByZero):
        division.divide_arrays([1, 2], [1, 0])


def test_precision_variants():
    assert resta.subtract_precision(0.3, 0.1) == 0.2
    assert multiplicacion.multiply_precision(3.14159, 2, 3) == 6.283
    assert division.divide_precision(10, 3, 4) == 3.3333
    assert division.divide_precision(-10, 3) == -3.33


def test_add_array():
    assert suma.add_array([10, 20, 30]) == 60
    assert suma.add_array([]) == 0
    with pytest.raises(TypeMismatch):
        suma.add_array(5)


def test_absolute_difference():
    assert resta.absolute_difference(5, 10) == 5
    assert resta.absolute_difference(-100, 200) == 300


def test_power():
    assert multiplicacion.power(2, 10) == 1024
    assert multiplicacion.power(5, 0) == 1
    assert multiplicacion.power(0, 0) == 1
    assert multiplicacion.power(7.5, 1) == 7.5
    assert multiplicacion.power(0, -1) == 0
    assert multiplicacion.power(1, 1e6) == 1
    assert multiplicacion.power(4, 0.5) == 2
    assert multiplicacion.power("2", "-2") == 0.25


def test_power_errors():
    with pytest.raises(InvalidOperand, match="base"):
        multiplicacion.power("x", 2)
    with pytest.raises(InvalidOperand, match="exponente"):
        multiplicacion.power(2, None)
    with pytest.raises(ResultOverflow):
        multiplicacion.power(10, 400)
    with pytest.raises(ResultOverflow):
        multiplicacion.power(-8, 1 / 3)


def test_factorial():
    assert multiplicacion.factorial(0) == 1
    assert multiplicacion.factorial(1) == 1
    assert multiplicacion.factorial(5) == 120
    assert multiplicacion.factorial("6") == 720
    assert multiplicacion.factorial(20) == math.factorial(20)
    assert math.isfinite(multiplicacion.factorial(170))


def test_factorial_errors():
    with pytest.raises(NegativeFactorial):
        multiplicacion.factorial(-5)
    with pytest.raises(NonIntegerFactorial):
        multiplicacion.factorial(2.5)
    with pytest.raises(InvalidOperand):
        multiplicacion.factorial("five")
    with pytest.raises(ResultOverflow, match="171"):
        multiplicacion.factorial(171)


def test_modulo_truncates():
    assert division.modulo(17, 5) == 2
    assert division.modulo(-17, 5) == -2
    assert division.modulo(17, -5) == 2
    assert division.modulo(5.5, 2) == 1.5
    with pytest.raises(DivisionByZero):
        division.modulo(1, 0)
    with pytest.raises(InvalidOperand):
        division.modulo("a", 1)


def test_integer_divide_truncates_toward_zero():
    assert division.integer_divide(17, 5) == 3
    assert division.integer_divide(-17, 5) == -3
    with pytest.raises(DivisionByZero):
        division.integer_divide(1, 0)


def test_reciprocal():
    assert division.reciprocal(4) == 0.25
    assert division.reciprocal("-0.5") == -2
    with pytest.raises(DivisionByZero):
        division.reciprocal(0)


def test_average():
    assert division.average([10, 20, 30, 40]) == 25
    assert division.average((85, 90, 78, 92, 88)) == 86.6
    assert division.average(["1,000", 3000]) == 2000


def test_average_errors():
    with pytest.raises(EmptyInput):
        division.average([])
    with pytest.raises(TypeMismatch):
        division.average("10,20")
    with pytest.raises(InvalidOperand, match='"oops"'):
        division.average([1, "oops", 3])


def test_operator_core_matches_named_functions():
    assert pairwise(Operator.SUBTRACT, 5, 3) == resta.subtract(5, 3)
    assert chained(Operator.MULTIPLY, 2, 3, 4) == multiplicacion.multiply_multiple(2, 3, 4)
    assert Operator.DIVIDE.second_role == "divisor"
