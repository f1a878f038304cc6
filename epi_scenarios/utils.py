from datetime import datetime, timezone
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

DType = TypeVar("DType", bound=np.generic)

MS_PER_DAY = 1000 * 60 * 60 * 24


def array_fully_equal(a1: NDArray[DType], a2: NDArray[DType]):
    return np.array_equal(a1, a2, equal_nan=True)


def to_milliseconds(value) -> float:
    """Convert a timestamp to epoch milliseconds.

    Args:
        value (datetime | float | int): A datetime, or a number already in epoch ms.
            Naive datetimes are taken to be UTC.

    Returns:
        float: milliseconds since the epoch
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp() * 1000
    return float(value)
