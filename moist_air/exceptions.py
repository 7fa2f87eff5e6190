class PsychrometricError(Exception):
    """Base class of all errors raised by the psychrometric engine."""
    pass


class InputRangeError(PsychrometricError, ValueError):
    """An input lies outside the domain where the ASHRAE correlations are
    defined (temperature below absolute zero or outside the saturation
    correlation range, non-positive pressure, relative humidity outside
    [0, 1], super-saturated vapor pressure, ...).

    Always raised before any iterative search is started.
    """
    pass


class ConvergenceError(PsychrometricError):
    """An iterative solver used up its iteration budget without meeting the
    tolerance of the unit system.

    Attributes
    ----------
    estimate:
        Last (best) estimate of the searched temperature.
    residual:
        Residual of the solved equation at `estimate`.
    iterations:
        Number of iterations that were performed.
    """
    def __init__(
        self,
        message: str,
        estimate: float,
        residual: float,
        iterations: int
    ) -> None:
        super().__init__(message)
        self.estimate = estimate
        self.residual = residual
        self.iterations = iterations
