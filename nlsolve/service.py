"""
Service (:mod:`nlsolve.service`)
================================

.. currentmodule:: nlsolve.service

Request handling for the solvers: validates a request (a mapping, or
JSON text / file), selects the catalog equation and method, runs a
fresh solver and returns a plain `dict` payload.  Failures never
propagate; they are returned as ``{'error': message}``.

.. autosummary::
    :toctree:

    EquationRequest
    SystemRequest
    solve_equation
    solve_equation_file
    solve_system
    solve_system_file
"""
from __future__ import annotations

from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Any, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from nlsolve.equations import equation_system, scalar_equation
from nlsolve.numeric.solve import (BivariateNewtonSolver,
                                   InvalidSelectorError, ScalarRootSolver,
                                   SolverError, select_method)

# Last updated: 19 October 2026.

_Request = Union[Mapping[str, Any], str, bytes]
_ModelT = TypeVar('_ModelT', bound=BaseModel)


# ======================================================================

class _RequestModel(BaseModel):
    model_config = ConfigDict(extra='ignore', allow_inf_nan=False,
                              frozen=True)


class EquationRequest(_RequestModel):
    """
    Scalar equation request.  For the secant method `interval` holds the
    two starting points.
    """
    eq_id: int
    interval: tuple[float, float]
    estimate: float = Field(gt=0)
    method_id: int


class SystemRequest(_RequestModel):
    """
    System request.  `interval` holds the starting point `(x0, y0)` and
    `estimate` the tolerance on the update length.
    """
    eq_id: int
    interval: tuple[float, float]
    estimate: float = Field(gt=0)


# ----------------------------------------------------------------------

def _error(message: str) -> dict[str, str]:
    return {'error': message}


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = '.'.join(str(v) for v in err.get('loc', ())) or 'request'
        parts.append(f"{loc}: {err.get('msg')}")
    return "Failed to parse request - " + "; ".join(parts)


def _parse(model: type[_ModelT], request: _Request) -> _ModelT:
    if isinstance(request, (str, bytes)):
        return model.model_validate_json(request)
    return model.model_validate(request)


def _is_empty(request) -> bool:
    if isinstance(request, (str, bytes)):
        return not request.strip()
    return not request


# ======================================================================

def solve_equation(request: _Request) -> dict[str, Any]:
    """
    Solve a catalog scalar equation.

    Parameters
    ----------
    request : Mapping or str or bytes
        Request fields (see `EquationRequest`) as a mapping or JSON,
        e.g. ``{"eq_id": 1, "interval": [-3, -1], "estimate": 1e-4,
        "method_id": 0}``.

    Returns
    -------
    payload : dict
        ``{'result': {...}}`` on success, where the result holds the
        request values (`left`, `right`, `estimate`, `eq_id`,
        `method_id`), the reported `root` and `function_value`,
        `error_value`, `iterations`, `steps` and ``error = ''``.
        Otherwise ``{'error': message}``.

    Examples
    --------
    >>> payload = solve_equation('{"eq_id": 1, "interval": [-3, -1], '
    ...                          '"estimate": 0.0001, "method_id": 0}')
    >>> payload['result']['root']
    -1.7963
    >>> solve_equation({'eq_id': 9, 'interval': [0, 1], 'estimate': 0.1,
    ...                 'method_id': 0})
    {'error': 'Invalid equation id: 9.'}
    """
    if _is_empty(request):
        return _error("Empty request")

    try:
        req = _parse(EquationRequest, request)
    except ValidationError as exc:
        return _error(_validation_message(exc))

    left, right = req.interval
    try:
        equation = scalar_equation(req.eq_id)
        method = select_method(req.method_id)
        result = ScalarRootSolver(equation, method).solve(left, right,
                                                          req.estimate)
    except InvalidSelectorError as exc:
        return _error(str(exc))
    except SolverError as exc:
        return _error(exc.message)

    return {'result': {'left': left, 'right': right,
                       'estimate': req.estimate, 'eq_id': req.eq_id,
                       **result.as_dict(), 'error': ''}}


def solve_system(request: _Request) -> dict[str, Any]:
    """
    Solve a catalog system of two equations.

    Parameters
    ----------
    request : Mapping or str or bytes
        Request fields (see `SystemRequest`) as a mapping or JSON, e.g.
        ``{"eq_id": 0, "interval": [1, 1], "estimate": 1e-4}``.

    Returns
    -------
    payload : dict
        ``{'result': {...}}`` on success, holding `eq_id`, the starting
        point `x0`, `y0`, the converged `x`, `y`, `function_values`,
        `iterations`, `error_value`, `steps` and ``error = ''``.
        Otherwise ``{'error': message}``.
    """
    if _is_empty(request):
        return _error("Empty request")

    try:
        req = _parse(SystemRequest, request)
    except ValidationError as exc:
        return _error(_validation_message(exc))

    x0, y0 = req.interval
    try:
        system = equation_system(req.eq_id)
        result = BivariateNewtonSolver(x0, y0, req.estimate,
                                       system).solve()
    except InvalidSelectorError as exc:
        return _error(str(exc))
    except SolverError as exc:
        return _error(exc.message)

    return {'result': {'eq_id': req.eq_id, 'x0': x0, 'y0': y0,
                       'estimate': req.estimate, **result.as_dict(),
                       'error': ''}}


# ----------------------------------------------------------------------

def solve_equation_file(path: str | PathLike) -> dict[str, Any]:
    """As for `solve_equation`, reading the JSON request from `path`."""
    return solve_equation(Path(path).read_text(encoding='utf-8'))


def solve_system_file(path: str | PathLike) -> dict[str, Any]:
    """As for `solve_system`, reading the JSON request from `path`."""
    return solve_system(Path(path).read_text(encoding='utf-8'))
