"""Euler's method and the modified Euler (Heun) method."""

from __future__ import annotations

from .base import NumericalMethod, round4


class EulersMethod(NumericalMethod):
    """Explicit Euler: y_{n+1} = y_n + h f(x_n, y_n)."""

    def solve(self) -> None:
        x, y, h = self._require_parameters()
        if self.verbose:
            self._report_header("Euler's Method")

        for step in range(1, self.steps + 1):
            slope = self.diff_function(x, y)
            x += h
            y = round4(y + h * slope)
            self._record(x, y)

            if self.verbose:
                print(f"\nStep {step}:")
                print(f"x = {x:.4f}, y = {y:.4f}")
                self._report_exact(x, y)
                self._pause()

        if self.verbose:
            self._report_final(y)

    @property
    def name(self) -> str:
        return "Euler's Method"


class ModifiedEulersMethod(NumericalMethod):
    """Heun's predictor-corrector method."""

    def solve(self) -> None:
        x, y, h = self._require_parameters()
        if self.verbose:
            self._report_header("Modified Euler's Method (Heun's Method)")

        for step in range(1, self.steps + 1):
            k1 = self.diff_function(x, y)
            x_next = x + h
            predictor = y + h * k1
            k2 = self.diff_function(x_next, predictor)
            corrector = y + h * 0.5 * (k1 + k2)

            predictor = round4(predictor)
            x = x_next
            y = round4(corrector)
            self._record(x, y)

            if self.verbose:
                print(f"\nStep {step}:")
                print(f"x = {x:.4f}")
                print(f"Predictor (Euler): y* = {predictor:.4f}")
                print(f"Corrector (Modified): y = {y:.4f}")
                self._report_exact(x, y)
                self._pause()

        if self.verbose:
            self._report_final(y)

    @property
    def name(self) -> str:
        return "Modified Euler's Method"