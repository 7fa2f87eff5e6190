"""
Element-wise evaluation of the scalar engine functions over numpy arrays.

Example
-------
>>> import numpy as np
>>> from moist_air import create_context, wet_bulb_temperature
>>> from moist_air.batch import evaluate
>>> si = create_context('SI')
>>> T_wb = evaluate(
...     wet_bulb_temperature, si,
...     np.array([20.0, 25.0, 30.0]), 0.0075, 101325.0
... )
"""
from typing import Callable

import numpy as np
import numpy.typing as npt

from .exceptions import PsychrometricError
from .logging import ModuleLogger
from .units import UnitSystemContext

logger = ModuleLogger.get_logger(__name__)


def evaluate(
    func: Callable[..., float],
    context: UnitSystemContext,
    *args: npt.ArrayLike,
    on_error: str = 'raise'
) -> np.ndarray:
    """Calls `func(context, *scalars)` for every element of the broadcast
    arguments and returns the results in an array of the broadcast shape.

    Parameters
    ----------
    func:
        Scalar engine function taking a `UnitSystemContext` as its first
        argument, e.g. `wet_bulb_temperature`.
    context:
        Unit system context passed unchanged to each call.
    *args:
        Remaining positional arguments of `func` as scalars or arrays; they
        are broadcast against each other following numpy's rules.
    on_error: {'raise', 'nan'}
        With 'raise' the first `PsychrometricError` is propagated. With 'nan'
        the elements for which `func` raised a `PsychrometricError` are set
        to NaN.
    """
    if on_error not in ('raise', 'nan'):
        raise ValueError(f"`on_error` must be 'raise' or 'nan', not {on_error!r}.")
    arrays = np.broadcast_arrays(*(np.asarray(arg, dtype=float) for arg in args))
    shape = arrays[0].shape if arrays else ()
    out = np.empty(shape, dtype=float)
    failures = 0
    for index in np.ndindex(*shape):
        scalars = [float(a[index]) for a in arrays]
        try:
            out[index] = func(context, *scalars)
        except PsychrometricError:
            if on_error == 'raise':
                raise
            out[index] = np.nan
            failures += 1
    if failures:
        logger.warning(
            f"{func.__name__}: {failures} of {out.size} elements could not "
            f"be evaluated and were set to NaN."
        )
    return out
