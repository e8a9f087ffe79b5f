
# Last updated: 19 October 2026.


# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when a solver fails to converge or find a
    solution.  Additional information (optional) is included to allow
    the reason for the failure to be determined.

    Notes
    -----
    - `SolverError` may also have additional attributes not listed here
      depending on the specific solver being used.  Where iteration had
      already started, the partial trace is attached as `steps`.
    - Each derived class sets a default `flag` identifying the kind of
      failure.
    """
    default_flag: int = None

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result.  If not given, the class `default_flag` is used.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag = flag if flag is not None else self.default_flag
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str

    @property
    def message(self) -> str:
        """The main failure notice only, without additional details."""
        return super().__str__()


class SignError(SolverError):
    """Bracketing method used on an interval without a sign change."""
    default_flag = 1


class ConvergenceError(SolverError):
    """Fixed-point iteration map is not a contraction at either end."""
    default_flag = 2


class NarrowIntervalError(SolverError):
    """Fixed-point step distance grew; the interval should be reduced."""
    default_flag = 3


class ZeroDerivativeError(SolverError):
    """Newton-Raphson reached a point with zero first derivative."""
    default_flag = 4


class DegenerateSecantError(SolverError):
    """Secant points give equal function values (zero denominator)."""
    default_flag = 5


class SingularJacobianError(SolverError):
    """System Jacobian determinant is zero."""
    default_flag = 6


class NonConvergenceError(SolverError):
    """Iteration limit reached, or the iterate is no longer finite."""
    default_flag = 7


# ----------------------------------------------------------------------

class InvalidSelectorError(ValueError):
    """
    An equation, system or method id is outside the supported
    enumeration.  Raised before any solver is constructed.
    """
