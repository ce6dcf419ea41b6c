import csv

import pytest

from odesteps.base import (
    NumericalMethod,
    differential_function,
    exact_solution,
    round4,
)
from odesteps.euler import EulersMethod


class _Flat(NumericalMethod):
    """Keeps y constant; records one point per step."""

    def solve(self):
        x, y, h = self._require_parameters()
        for _ in range(self.steps):
            x += h
            self._record(x, y)

    @property
    def name(self):
        return "Flat"


def _solved(compare_exact=False):
    method = _Flat()
    method.verbose = False
    method.compare_exact = compare_exact
    method.set_parameters(0.0, 1.0, 1.0, 0.25)
    method.solve()
    return method


def test_round4_half_away_from_zero():
    assert round4(0.03125) == 0.0313
    assert round4(-0.03125) == -0.0313


def test_round4_is_idempotent():
    for value in (1.23456789, -7.65432, 0.0, 123.0):
        once = round4(value)
        assert round4(once) == once
        assert abs(once - value) <= 0.00005 + 1e-12


def test_round4_passes_non_finite_values():
    assert round4(float("inf")) == float("inf")


def test_differential_function_is_sum():
    assert differential_function(2.5, -1.25) == differential_function(-1.25, 2.5)
    assert differential_function(2.5, -1.25) == 2.5 + -1.25


def test_exact_solution_matches_initial_condition():
    assert exact_solution(0.0) == pytest.approx(1.0)


def test_exact_solution_satisfies_equation():
    eps = 1e-6
    for x in (0.0, 0.5, 1.3):
        derivative = (exact_solution(x + eps) - exact_solution(x - eps)) / (2 * eps)
        assert derivative == pytest.approx(differential_function(x, exact_solution(x)), rel=1e-6)


def test_base_is_abstract():
    with pytest.raises(TypeError):
        NumericalMethod()


def test_result_before_parameters_raises():
    method = EulersMethod()
    assert method.y_values == []
    with pytest.raises(RuntimeError, match="not been solved"):
        _ = method.result
    assert method.x_values == []


def test_calculate_error_before_parameters_raises():
    method = EulersMethod()
    with pytest.raises(RuntimeError, match="not been solved"):
        method.calculate_error()


def test_solve_without_parameters_raises():
    method = EulersMethod()
    with pytest.raises(RuntimeError):
        method.solve()


def test_zero_step_size_rejected():
    method = EulersMethod()
    with pytest.raises(ValueError):
        method.set_parameters(0.0, 1.0, 1.0, 0.0)


def test_set_parameters_records_start_and_step_count():
    method = EulersMethod()
    method.set_parameters(0.0, 1.0, 1.0, 0.25)
    assert method.x_values == [0.0]
    assert method.y_values == [1.0]
    assert method.result == 1.0
    assert method.steps == 4


def test_step_count_rounds_to_nearest():
    method = EulersMethod()
    method.set_parameters(0.0, 1.0, 1.0, 0.1)
    assert method.steps == 10


def test_defaults():
    method = EulersMethod()
    assert method.verbose is True
    assert method.compare_exact is False
    assert method.diff_function is differential_function


def test_value_lists_are_copies():
    method = EulersMethod()
    method.verbose = False
    method.set_parameters(0.0, 1.0, 1.0, 0.25)
    method.solve()
    method.x_values.append(99.0)
    assert 99.0 not in method.x_values
    assert len(method.x_values) == len(method.y_values) == method.steps + 1


def test_calculate_error_is_max_deviation():
    method = _solved()
    expected = max(abs(exact_solution(x) - 1.0) for x in method.x_values)
    assert method.calculate_error() == pytest.approx(expected)
    assert method.calculate_error() >= 0.0


def test_save_to_csv_plain(tmp_path):
    method = EulersMethod()
    method.verbose = False
    method.set_parameters(0.0, 1.0, 1.0, 0.25)
    method.solve()
    path = tmp_path / "out.csv"
    method.save_to_csv(str(path))
    rows = list(csv.reader(path.read_text().splitlines()))
    assert rows[0] == ["Step", "x", "y"]
    assert rows[1] == ["0", "0.0000", "1.0000"]
    assert len(rows) == len(method.x_values) + 1
    assert [int(r[0]) for r in rows[1:]] == list(range(len(method.x_values)))


def test_save_to_csv_with_exact(tmp_path):
    method = EulersMethod()
    method.verbose = False
    method.compare_exact = True
    method.set_parameters(0.0, 1.0, 1.0, 0.25)
    method.solve()
    path = tmp_path / "out.csv"
    method.save_to_csv(str(path))
    rows = list(csv.reader(path.read_text().splitlines()))
    assert rows[0] == ["Step", "x", "y", "exact", "error"]
    assert rows[1][4] == "0.0000"
    for row in rows[1:]:
        assert float(row[4]) == pytest.approx(abs(float(row[3]) - float(row[2])), abs=2e-4)


def test_save_to_csv_verbose_message(tmp_path, capsys):
    method = EulersMethod()
    method.verbose = False
    method.set_parameters(0.0, 1.0, 1.0, 0.25)
    method.solve()
    capsys.readouterr()
    method.verbose = True
    path = tmp_path / "out.csv"
    method.save_to_csv(str(path))
    assert f"Results saved to {path}" in capsys.readouterr().out
    assert path.exists()


def test_save_to_csv_bad_path_raises(tmp_path):
    method = EulersMethod()
    method.verbose = False
    method.set_parameters(0.0, 1.0, 1.0, 0.25)
    method.solve()
    target = tmp_path / "missing" / "out.csv"
    with pytest.raises(OSError):
        method.save_to_csv(str(target))
    assert not target.exists()