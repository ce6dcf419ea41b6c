"""Interactive command-line front end for the ODE solvers."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import TextIO

from .adams_bashforth import AdamsBashforth
from .base import NumericalMethod
from .euler import EulersMethod, ModifiedEulersMethod
from .runge_kutta import RungeKutta2, RungeKutta4
from .utility import clear_screen, compare_all_methods

_SINGLE_METHODS: dict[int, tuple[type[NumericalMethod], str]] = {
    1: (EulersMethod, "euler_results.csv"),
    2: (ModifiedEulersMethod, "modified_euler_results.csv"),
    3: (RungeKutta2, "rk2_results.csv"),
    4: (RungeKutta4, "rk4_results.csv"),
    5: (AdamsBashforth, "adams_bashforth_results.csv"),
}

_ALL_METHODS: tuple[type[NumericalMethod], ...] = (
    EulersMethod,
    ModifiedEulersMethod,
    RungeKutta2,
    RungeKutta4,
    AdamsBashforth,
)

_RULE = "==============================================="


class _Prompter:
    """Reads whitespace-separated answers, prompting before each one."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def _token(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("Unexpected end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def number(self, prompt: str) -> float:
        print(prompt, end="", flush=True)
        token = self._token()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"Invalid number: {token!r}") from None

    def integer(self, prompt: str) -> int:
        print(prompt, end="", flush=True)
        token = self._token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"Invalid integer: {token!r}") from None

    def flag(self, prompt: str) -> bool:
        print(prompt, end="", flush=True)
        return self._token() == "1"

    def finish(self, prompt: str) -> None:
        print(prompt, end="", flush=True)
        self._stream.readline()


def _print_banner() -> None:
    print(_RULE)
    print("  Numerical Differential Equation Solver v2.0  ")
    print(_RULE)
    print("\nThis program implements various numerical methods for solving differential equations.")
    print("The default equation is: dy/dx = x + y")
    print("To solve a different equation, modify the differential_function in the source code.")


def _solve_quietly(
    methods: list[NumericalMethod],
    params: tuple[float, float, float, float],
    compare_exact: bool,
) -> None:
    for method in methods:
        method.set_parameters(*params)
        method.compare_exact = compare_exact
        method.verbose = False
        method.solve()


def _run(
    option: int,
    params: tuple[float, float, float, float],
    compare_exact: bool,
    save_results: bool,
    run_comparison: bool,
) -> None:
    if option in _SINGLE_METHODS:
        method_class, filename = _SINGLE_METHODS[option]
        method = method_class()
        method.set_parameters(*params)
        method.compare_exact = compare_exact
        method.solve()
        if save_results:
            method.save_to_csv(filename)
        if run_comparison:
            others = [method_class()]
            _solve_quietly(others, params, compare_exact)
            compare_all_methods(others)
    elif option == 6:
        methods = [cls() for cls in _ALL_METHODS]
        for method in methods:
            _solve_quietly([method], params, compare_exact)
            if save_results:
                method.save_to_csv(f"{method.name}_results.csv")
        compare_all_methods(methods)
    else:
        print("\nInvalid option! Please choose a number between 1 and 6.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive solver; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="odesteps",
        description="Solve dy/dx = f(x, y) step by step with classic numerical methods.",
    )
    parser.add_argument(
        "--no-clear", action="store_true", help="do not clear the screen on start"
    )
    args = parser.parse_args(argv)

    if not args.no_clear:
        clear_screen()
    _print_banner()

    prompter = _Prompter(sys.stdin)
    try:
        print("\nEnter initial conditions and parameters:")
        x0 = prompter.number("Initial x (x0) = ")
        y0 = prompter.number("Initial y (y0) = ")
        x_target = prompter.number("Target x = ")
        step_size = prompter.number("Step size (h) = ")

        print("\nAdditional options:")
        compare_exact = prompter.flag("Compare with exact solution? (1 for yes, 0 for no): ")
        save_results = prompter.flag("Save results to CSV files? (1 for yes, 0 for no): ")
        run_comparison = prompter.flag("Run comparison of all methods? (1 for yes, 0 for no): ")

        print("\nWhich method do you want to perform?")
        print("1. Euler's Method")
        print("2. Modified Euler's Method (Heun's Method)")
        print("3. 2nd Order Runge-Kutta Method")
        print("4. 4th Order Runge-Kutta Method")
        print("5. Adams-Bashforth Method")
        print("6. All Methods (for comparison)")
        option = prompter.integer("Enter your choice (1-6): ")
    except (ValueError, EOFError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        _run(
            option,
            (x0, y0, x_target, step_size),
            compare_exact,
            save_results,
            run_comparison,
        )
    except Exception as exc:  # noqa: BLE001 - report any solver failure
        print(f"Error: {exc}", file=sys.stderr)

    prompter.finish("\nPress Enter to exit...")
    return 0


if __name__ == "__main__":
    sys.exit(main())