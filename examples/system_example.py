#!usr/bin/env python3

# Example of the solution of a system of two equations, with the JSON
# request form used by external callers.
# Last updated: 19 October 2026.

import json

from nlsolve import BivariateNewtonSolver, equation_system, solve_system

# Intersection of the circle x² + y² = 4 and parabola y = 3x².
res = BivariateNewtonSolver(1.0, 1.0, 1e-6, equation_system(0),
                            verbose=True).solve()
print(f"\nResult (x, y) = ({res.x:.6f}, {res.y:.6f}) after "
      f"{res.iterations} iterations.")

for step in res.steps:
    print(f"    {step.iteration}: det(J) = {step.det:+.6f}, "
          f"|Δ| = {step.abs_diff:.3E}")

# Same system requested as JSON.
payload = solve_system('{"eq_id": 2, "interval": [0, 0], '
                       '"estimate": 1e-6}')
print(json.dumps({k: v for k, v in payload['result'].items()
                  if k != 'steps'}, indent=2))
