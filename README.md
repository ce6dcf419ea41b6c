# odesteps

Numerical solvers for first-order ordinary differential equations of the
form `dy/dx = f(x, y)`. Each step can be shown on screen as it is worked
out. The solvers round each step to four decimal places, as a hand
calculation would. Halves are rounded away from zero.

Five methods are available:

- Euler's method (`odesteps.euler.EulersMethod`)
- Modified Euler's method, also called Heun's method
  (`odesteps.euler.ModifiedEulersMethod`)
- 2nd order Runge-Kutta (`odesteps.runge_kutta.RungeKutta2`)
- 4th order Runge-Kutta (`odesteps.runge_kutta.RungeKutta4`)
- 4-step Adams-Bashforth (`odesteps.adams_bashforth.AdamsBashforth`). It
  computes its first points with 4th order Runge-Kutta.

The default equation is `odesteps.base.differential_function`, which is
`dy/dx = x + y`. Its exact solution for `y(0) = 1` is
`odesteps.base.exact_solution`, which is `y = 2e^x - x - 1`.

## Installation

```
pip install .
```

## Interactive use

```
odesteps
```

The command clears the screen and prints a banner. Pass `--no-clear` to
keep the screen as it is. It then asks for these values in order:

1. the initial point `x0` and `y0`
2. the target `x`
3. the step size `h`
4. whether to compare with the exact solution (`1` or `0`)
5. whether to save results to CSV files (`1` or `0`)
6. whether to print a comparison table (`1` or `0`)

Last, it asks which method to run:

- A choice from 1 to 5 runs one method and shows every step.
- With saving on, a choice from 1 to 5 writes `euler_results.csv`,
  `modified_euler_results.csv`, `rk2_results.csv`, `rk4_results.csv` or
  `adams_bashforth_results.csv`.
- A choice of 6 runs every method without the step output and prints a
  comparison table.
- With saving on, a choice of 6 writes one `<method name>_results.csv`
  file for each method.

The command always solves the default equation `dy/dx = x + y`. To solve
any other equation, use the library.

## Library use

```python
from odesteps.runge_kutta import RungeKutta4

solver = RungeKutta4()
solver.verbose = False
solver.set_parameters(0.0, 1.0, 0.2, 0.1)
solver.solve()

print(solver.name)              # 4th Order Runge-Kutta Method
print(solver.x_values)          # recorded x values, starting at 0.0
print(solver.y_values)          # recorded y values, starting at 1.0
print(solver.result)            # approximate y at the last x
print(solver.calculate_error())
solver.save_to_csv("rk4_results.csv")
```

`name`, `result`, `x_values` and `y_values` are properties. `x_values` and
`y_values` return copies of the recorded points.

`set_parameters` does the following:

- It works out the number of steps as `(x_target - x0) / h`, rounded to
  the nearest integer.
- It raises `ValueError` for a step size of zero.
- It records the starting point. Use a new solver for each run.

Calling `solve` before `set_parameters` raises `RuntimeError`. So do
`result` and `calculate_error` when nothing has been recorded.

Each solver has these attributes:

- `verbose`: when true, `solve` prints each step and the final result.
  It is on by default.
- `compare_exact`: when true, the printed output includes the exact
  solution and the error. `save_to_csv` then also writes `exact` and
  `error` columns. It is off by default.
- `step_delay`: the number of seconds to pause after each printed step.
  The default is `0.1`.

You can pass any callable `f(x, y)` to a solver's constructor to solve a
different equation:

```python
from odesteps.euler import EulersMethod

solver = EulersMethod(lambda x, y: x * y)
```

`calculate_error`, the exact-solution comparison and the comparison table
always measure against `exact_solution`. That solution belongs to
`dy/dx = x + y` with `y(0) = 1`. For any other equation, ignore the error
figures.

`odesteps.utility.compare_all_methods(methods, out=None)` compares solved
methods with the exact solution:

- It prints a table of each method's result, the exact value at the first
  method's last `x`, and the absolute error.
- It returns the rows as `(name, result, exact, error)` tuples.
- It writes to `out`, or to standard output when `out` is not given.