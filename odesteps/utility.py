"""Helpers for the interactive front end: comparison table, screen and prompts."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Sequence, TextIO

from .base import NumericalMethod, exact_solution, round4

_NAME_WIDTH = 30
_VALUE_WIDTH = 25


def compare_all_methods(
    methods: Sequence[NumericalMethod], out: TextIO | None = None
) -> list[tuple[str, float, float, float]]:
    """Print a table comparing each solved method with the exact solution.

    The exact value is taken at the last x of the first method. Returns the
    rows as (name, result, exact, error) tuples, all rounded to 4 places.
    """
    if not methods:
        raise ValueError("No methods to compare")
    stream = out if out is not None else sys.stdout

    xs = methods[0].x_values
    if not xs:
        raise RuntimeError("Method has not been solved yet")
    exact = round4(exact_solution(xs[-1]))

    print("\n=== Comparison of All Methods ===", file=stream)
    print(
        f"{'Method':<{_NAME_WIDTH}}"
        f"{'Result':<{_VALUE_WIDTH}}"
        f"{'Exact Solution':<{_VALUE_WIDTH}}"
        f"{'Absolute Error':<{_VALUE_WIDTH}}",
        file=stream,
    )
    print("-" * (_NAME_WIDTH + 3 * _VALUE_WIDTH), file=stream)

    rows = []
    for method in methods:
        result = round4(method.result)
        error = round4(abs(exact - result))
        rows.append((method.name, result, exact, error))
        print(
            f"{method.name:<{_NAME_WIDTH}}"
            f"{result:<{_VALUE_WIDTH}.4f}"
            f"{exact:<{_VALUE_WIDTH}.4f}"
            f"{error:<{_VALUE_WIDTH}.4f}",
            file=stream,
        )
    return rows


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


def prompt_to_continue(stream: TextIO | None = None) -> None:
    """Ask the user to press Enter and wait for a line of input."""
    source = stream if stream is not None else sys.stdin
    print("\nPress Enter to continue...", end="", flush=True)
    source.readline()