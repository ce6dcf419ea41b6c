"""Four-step Adams-Bashforth method, started with Runge-Kutta 4."""

from __future__ import annotations

from collections import deque

from .base import NumericalMethod, round4
from .runge_kutta import RungeKutta4


class AdamsBashforth(NumericalMethod):
    """Explicit multi-step method using the slopes at the last four points."""

    def solve(self) -> None:
        x0, y0, h = self._require_parameters()

        starter = RungeKutta4(self.diff_function)
        starter.verbose = False
        starter.set_parameters(x0, y0, x0 + 3 * h, h)
        starter.solve()

        self._xs = starter.x_values
        self._ys = starter.y_values
        x = self._xs[-1]
        y = self._ys[-1]

        if self.verbose:
            self._report_header("Adams-Bashforth Method")
            print("Using RK4 for first 4 steps")
            for index, (px, py) in enumerate(zip(self._xs, self._ys)):
                print(f"Initial point {index}: x = {px:.4f}, y = {py:.4f}")

        slopes = deque(
            (self.diff_function(px, py) for px, py in zip(self._xs[-4:], self._ys[-4:])),
            maxlen=4,
        )

        for step in range(4, self.steps + 1):
            if self.verbose:
                print(f"\nStep {step}:")

            f0, f1, f2, f3 = slopes
            y = round4(self._ys[-1] + h * (55.0 * f3 - 59.0 * f2 + 37.0 * f1 - 9.0 * f0) / 24.0)
            x += h
            self._record(x, y)
            slopes.append(self.diff_function(x, y))

            if self.verbose:
                print(f"New y = {y:.4f} at x = {x:.4f}")
                self._report_exact(x, y)
                self._pause()

        if self.verbose:
            self._report_final(y)

    @property
    def name(self) -> str:
        return "Adams-Bashforth Method"