"""Euler, Heun, Runge-Kutta and Adams-Bashforth solvers for dy/dx = f(x, y), with an interactive command."""

__version__ = "2.0.0"