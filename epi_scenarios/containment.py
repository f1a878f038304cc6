from bisect import bisect_right
from datetime import datetime
from typing import Callable, Sequence, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator

from epi_scenarios.utils import to_milliseconds

Timestamp = Union[datetime, float]


class TimePoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    t: float  # epoch ms
    y: float  # containment strength

    @field_validator("t", mode="before")
    @classmethod
    def _convert_timestamp(cls, value):
        return to_milliseconds(value)


TimeSeries = Sequence[TimePoint]

_time_series_adapter = TypeAdapter(list[TimePoint])


def interpolate(containment: TimeSeries) -> Callable[[Timestamp], float]:
    """
    Turns a containment time series into a continuous function of time.

    Between two samples the value is linearly interpolated, so exactly at the
    first sample it is that sample's value. Before the first sample, and at
    or past the last one, the function returns 0.

    The series must be sorted ascending in time with no repeated timestamps;
    it is checked here but never re-sorted.

    Args:
        containment (TimeSeries): Samples as edited by the user, possibly empty.
            Plain `{"t": ..., "y": ...}` mappings are accepted too.

    Returns:
        Callable[[Timestamp], float]: containment strength at a given time
    """
    # If the user hasn't touched containment, this series is empty
    if len(containment) == 0:
        return lambda t: 0.0

    containment = _time_series_adapter.validate_python(list(containment))
    times = tuple(point.t for point in containment)
    values = tuple(point.y for point in containment)
    for previous, current in zip(times, times[1:]):
        if not previous < current:
            raise ValueError(
                f"Containment times must be strictly ascending, found {current} after {previous}"
            )

    def containment_at(t: Timestamp) -> float:
        time = to_milliseconds(t)
        # first index with time < times[index]
        index = bisect_right(times, time)

        # extrapolation on either side of the series
        if index == 0 or index == len(times):
            return 0.0

        slope = (values[index] - values[index - 1]) / (times[index] - times[index - 1])
        return values[index - 1] + slope * (time - times[index - 1])

    return containment_at
