#!usr/bin/env python3

# Examples of root finding on the scalar equation catalog.
# Last updated: 19 October 2026.

from nlsolve import (Method, ScalarEquationId, ScalarRootSolver,
                     SolverError, scalar_equation, solver_options)

# Solve x³ - x + 4 = 0 on [-3, -1] with each method in turn, printing
# progress as we go.
equation = scalar_equation(ScalarEquationId.EQ_2)
print(f"Solving {equation} = 0:\n")

for method in Method:
    solver = ScalarRootSolver(equation, method)
    try:
        with solver_options(verbose=True):
            res = solver.solve(-3.0, -1.0, 1e-4)
    except SolverError as e:
        print(f"{method.name} failed: {e.message}\n")
        continue

    print(f"{method.name}: x = {res.display_root}, f(x) = "
          f"{res.display_fx}, iterations = {res.iterations}\n")

# Fixed-point iteration is only reliable close to the root.
try:
    ScalarRootSolver(scalar_equation(0), Method.FIXED_POINT).solve(
        0.0, 2.0, 1e-4)
except SolverError as e:
    print(f"Fixed point on [0, 2]: {e.message}")
