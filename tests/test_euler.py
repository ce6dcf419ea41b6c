import pytest

from odesteps.base import exact_solution
from odesteps.euler import EulersMethod, ModifiedEulersMethod


def _run(method, x0=0.0, y0=1.0, target=1.0, h=0.1, verbose=False, compare=False):
    method.verbose = verbose
    method.compare_exact = compare
    method.step_delay = 0
    method.set_parameters(x0, y0, target, h)
    method.solve()
    return method


def test_names():
    assert EulersMethod().name == "Euler's Method"
    assert ModifiedEulersMethod().name == "Modified Euler's Method"


def test_euler_single_step_value():
    assert _run(EulersMethod(), target=0.1).result == pytest.approx(1.1)


def test_modified_euler_single_step_value():
    assert _run(ModifiedEulersMethod(), target=0.1).result == pytest.approx(1.11)


@pytest.mark.parametrize("cls", [EulersMethod, ModifiedEulersMethod])
def test_zero_slope_keeps_initial_value(cls):
    method = _run(cls(lambda x, y: 0.0), y0=3.5)
    assert set(method.y_values) == {3.5}


@pytest.mark.parametrize("cls", [EulersMethod, ModifiedEulersMethod])
def test_point_count_and_spacing(cls):
    method = _run(cls())
    xs = method.x_values
    assert len(xs) == method.steps + 1 == len(method.y_values)
    assert xs[-1] == pytest.approx(1.0)
    for a, b in zip(xs, xs[1:]):
        assert b - a == pytest.approx(0.1)


@pytest.mark.parametrize("cls", [EulersMethod, ModifiedEulersMethod])
def test_values_are_rounded_to_four_places(cls):
    for y in _run(cls()).y_values[1:]:
        assert round(y, 4) == pytest.approx(y, abs=1e-12)


def test_euler_underestimates_convex_solution():
    method = _run(EulersMethod())
    for x, y in zip(method.x_values[1:], method.y_values[1:]):
        assert y < exact_solution(x)


def test_modified_euler_is_more_accurate():
    euler = _run(EulersMethod())
    heun = _run(ModifiedEulersMethod())
    assert heun.calculate_error() < euler.calculate_error()


def test_modified_euler_exact_for_linear_slope():
    method = _run(ModifiedEulersMethod(lambda x, y: 2 * x))
    for x, y in zip(method.x_values, method.y_values):
        assert y == pytest.approx(x * x + 1.0, abs=1e-4)


def test_euler_backwards_target_does_nothing():
    method = _run(EulersMethod(), target=-1.0)
    assert method.x_values == [0.0]
    assert method.result == 1.0


def test_modified_euler_verbose_output(capsys):
    method = _run(ModifiedEulersMethod(), target=0.2, verbose=True)
    out = capsys.readouterr().out
    assert "=== Modified Euler's Method (Heun's Method) ===" in out
    assert out.count("Predictor (Euler): y* = ") == method.steps
    assert "Exact solution" not in out
    assert out.rstrip().endswith(f"y = {method.result:.4f}")


def test_quiet_solve_prints_nothing(capsys):
    method = _run(EulersMethod())
    assert capsys.readouterr().out == ""
    assert len(method.y_values) == method.steps + 1