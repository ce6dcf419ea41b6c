"""Second and fourth order Runge-Kutta methods."""

from __future__ import annotations

from .base import NumericalMethod, round4


class RungeKutta2(NumericalMethod):
    """Two-stage Runge-Kutta method averaging the slopes at both ends of a step."""

    def solve(self) -> None:
        x, y, h = self._require_parameters()
        if self.verbose:
            self._report_header("2nd Order Runge-Kutta Method")

        for step in range(1, self.steps + 1):
            if self.verbose:
                print(f"\nStep {step}:")
                print(f"At x = {x:.4f}, y = {y:.4f}")

            k1 = h * self.diff_function(x, y)
            k2 = h * self.diff_function(x + h, y + k1)
            delta_k = round4(0.5 * (k1 + k2))
            k1, k2 = round4(k1), round4(k2)

            x += h
            y = round4(y + delta_k)
            self._record(x, y)

            if self.verbose:
                print(f"k1 = {k1:.4f}")
                print(f"k2 = {k2:.4f}")
                print(f"delta k = {delta_k:.4f}")
                print(f"New y = {y:.4f} at x = {x:.4f}")
                self._report_exact(x, y)
                self._pause()

        if self.verbose:
            self._report_final(y)

    @property
    def name(self) -> str:
        return "2nd Order Runge-Kutta Method"


class RungeKutta4(NumericalMethod):
    """Classical four-stage Runge-Kutta method."""

    def solve(self) -> None:
        x, y, h = self._require_parameters()
        if self.verbose:
            self._report_header("4th Order Runge-Kutta Method")

        for step in range(1, self.steps + 1):
            if self.verbose:
                print(f"\nStep {step}:")
                print(f"At x = {x:.4f}, y = {y:.4f}")

            k1 = h * self.diff_function(x, y)
            k2 = h * self.diff_function(x + 0.5 * h, y + 0.5 * k1)
            k3 = h * self.diff_function(x + 0.5 * h, y + 0.5 * k2)
            k4 = h * self.diff_function(x + h, y + k3)
            delta_k = round4((k1 + 2.0 * k2 + 2.0 * k3 + k4) / 6.0)
            k1, k2, k3, k4 = (round4(k) for k in (k1, k2, k3, k4))

            x += h
            y = round4(y + delta_k)
            self._record(x, y)

            if self.verbose:
                print(f"k1 = {k1:.4f}")
                print(f"k2 = {k2:.4f}")
                print(f"k3 = {k3:.4f}")
                print(f"k4 = {k4:.4f}")
                print(f"delta k = {delta_k:.4f}")
                print(f"New y = {y:.4f} at x = {x:.4f}")
                self._report_exact(x, y)
                self._pause()

        if self.verbose:
            self._report_final(y)

    @property
    def name(self) -> str:
        return "4th Order Runge-Kutta Method"