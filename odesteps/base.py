"""Shared machinery for fixed-step solvers of dy/dx = f(x, y)."""

from __future__ import annotations

import math
import time
from abc import ABC, abstractmethod
from typing import Callable

DiffFunc = Callable[[float, float], float]

NOT_SOLVED = "Method has not been solved yet"


def differential_function(x: float, y: float) -> float:
    """Default right-hand side: dy/dx = x + y."""
    return x + y


def exact_solution(x: float) -> float:
    """Exact solution of dy/dx = x + y with y(0) = 1: y = 2e^x - x - 1."""
    return 2 * math.exp(x) - x - 1


def round4(value: float) -> float:
    """Round to 4 decimal places, with halves rounded away from zero."""
    scaled = value * 10000.0
    if not math.isfinite(scaled):
        return value
    magnitude = abs(scaled)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, scaled) / 10000.0


class NumericalMethod(ABC):
    """A step-by-step solver that records every (x, y) point it visits."""

    def __init__(self, diff_func: DiffFunc = differential_function) -> None:
        self.diff_function = diff_func
        self.verbose = True
        self.compare_exact = False
        self.step_delay = 0.1
        self.x0: float | None = None
        self.y0: float | None = None
        self.x_target: float | None = None
        self.step_size: float | None = None
        self.steps = 0
        self._xs: list[float] = []
        self._ys: list[float] = []

    def set_parameters(self, x0: float, y0: float, x_target: float, step_size: float) -> None:
        """Set the initial point, target x and step size, and record the start."""
        if step_size == 0:
            raise ValueError("Step size must be non-zero")
        self.x0 = x0
        self.y0 = y0
        self.x_target = x_target
        self.step_size = step_size
        self.steps = int((x_target - x0) / step_size + 0.5)
        self._xs.append(x0)
        self._ys.append(y0)

    @property
    def result(self) -> float:
        """The last computed y value."""
        if not self._ys:
            raise RuntimeError(NOT_SOLVED)
        return self._ys[-1]

    @property
    def x_values(self) -> list[float]:
        return list(self._xs)

    @property
    def y_values(self) -> list[float]:
        return list(self._ys)

    def save_to_csv(self, filename: str) -> None:
        """Write the recorded points to a CSV file with 4 decimal places."""
        header = "Step,x,y"
        if self.compare_exact:
            header += ",exact,error"
        with open(filename, "w", encoding="utf-8", newline="") as file:
            file.write(header + "\n")
            for index, (x, y) in enumerate(zip(self._xs, self._ys)):
                fields = [str(index), f"{x:.4f}", f"{y:.4f}"]
                if self.compare_exact:
                    exact = exact_solution(x)
                    fields += [f"{exact:.4f}", f"{abs(exact - y):.4f}"]
                file.write(",".join(fields) + "\n")
        if self.verbose:
            print(f"Results saved to {filename}")

    def calculate_error(self) -> float:
        """Largest absolute difference from the exact solution over all points."""
        if not self._xs or not self._ys:
            raise RuntimeError(NOT_SOLVED)
        return max(
            (abs(exact_solution(x) - y) for x, y in zip(self._xs, self._ys)),
            default=0.0,
        )

    @abstractmethod
    def solve(self) -> None:
        """Advance from x0 to the target, recording each point."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the method."""

    def _require_parameters(self) -> tuple[float, float, float]:
        if self.x0 is None or self.y0 is None or self.step_size is None:
            raise RuntimeError("Parameters have not been set")
        return self.x0, self.y0, self.step_size

    def _report_header(self, title: str) -> None:
        print(f"\n=== {title} ===")
        print(f"Initial values: x0 = {self.x0:.4f}, y0 = {self.y0:.4f}")
        print(f"Step size: h = {self.step_size:.4f}")
        print(f"Target x: {self.x_target:.4f}")

    def _report_exact(self, x: float, y: float) -> None:
        if not self.compare_exact:
            return
        exact = round4(exact_solution(x))
        print(f"Exact solution: {exact:.4f}")
        print(f"Error: {abs(exact - y):.4f}")

    def _pause(self) -> None:
        if self.step_delay > 0:
            time.sleep(self.step_delay)

    def _report_final(self, y: float) -> None:
        print(f"\nFinal result at x = {self.x_target:.4f}: y = {y:.4f}")
        self._report_exact(self.x_target, y)

    def _record(self, x: float, y: float) -> None:
        self._xs.append(x)
        self._ys.append(y)