import numpy as np
import pytest

from epi_scenarios import (
    SimulationState,
    ensemble_quantiles,
    export_simulation,
    run,
    trajectory_to_dataframe,
)
from epi_scenarios.state import FIELD_NAMES


def _trajectory(values):
    return [SimulationState(time=i, infectious=v) for i, v in enumerate(values)]


def test_trajectory_to_dataframe():
    df = trajectory_to_dataframe(_trajectory([1, 2, 3]))
    assert list(df.columns) == list(FIELD_NAMES)
    assert df.shape == (3, 9)
    assert df["infectious"].tolist() == [1, 2, 3]
    assert df["time"].tolist() == [0, 1, 2]


def test_ensemble_quantiles():
    trajectories = [
        _trajectory([1, 10, 100]),
        _trajectory([2, 20, 200, 2000]),
        _trajectory([3, 30, 300]),
    ]
    bands = ensemble_quantiles(trajectories, "infectious", quantiles=(0, 0.5, 1))
    assert bands.shape == (3, 3)
    assert np.array_equal(bands[1], [2, 20, 200])
    assert np.array_equal(bands[0], [1, 10, 100])
    assert np.array_equal(bands[2], [3, 30, 300])


def test_ensemble_quantiles_unknown_compartment():
    with pytest.raises(ValueError, match="Unknown compartment"):
        ensemble_quantiles([_trajectory([1])], "time")


def test_ensemble_quantiles_empty():
    with pytest.raises(ValueError, match="No trajectories"):
        ensemble_quantiles([], "infectious")


@pytest.mark.asyncio
async def test_export_simulation(params, severity, age_distribution):
    result = await run(params, severity, age_distribution, [])
    lines = export_simulation(result).splitlines()
    assert lines[0].split("\t") == list(FIELD_NAMES)
    assert lines[1].split("\t") == ["1970-01-01", "990", "0", "10", "0", "0", "0", "0", "0"]
    assert len(lines) == 1 + len(result.deterministic_trajectory)
