import numpy as np
from numpy.typing import NDArray


class _SubType:
    Float = NDArray[np.float64]
    Int = NDArray[np.int64]
    Bool = NDArray[np.bool_]


class _SubAxis(_SubType):
    General = _SubType
    Time = _SubType


class Array(_SubAxis):
    """
    Typing for numpy arrays.

    Every combination is a representation in one of these ways:

    Array.Type
    Array.1stAxis.Type
    Array.1stAxis.2ndAxis.Type

    Possible Types:
    Float, Int, Bool

    Possible 1st Axis - axis has length:
    Time: Number of time points in a trajectory
    Run: Number of stochastic runs in an ensemble
    Quantile: Number of requested quantiles
    General: Any length

    Possible 2nd Axis:
    Time: as above
    General: as above
    """

    Time = _SubAxis
    Run = _SubAxis
    Quantile = _SubAxis
