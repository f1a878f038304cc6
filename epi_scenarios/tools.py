from typing import Sequence

import numpy as np
import pandas as pd

from epi_scenarios.run import SimulationResult
from epi_scenarios.state import (
    COMPARTMENTS,
    FIELD_NAMES,
    Trajectory,
    trajectory_to_array,
)
from epi_scenarios.types import Array


def trajectory_to_dataframe(trajectory: Trajectory) -> pd.DataFrame:
    return pd.DataFrame(trajectory_to_array(trajectory), columns=list(FIELD_NAMES))


def ensemble_quantiles(
    trajectories: Sequence[Trajectory],
    compartment: str,
    quantiles: Sequence[float] = (0.05, 0.5, 0.95),
) -> Array.Quantile.Time.Float:
    """
    Quantiles of one compartment across an ensemble, for uncertainty bands.

    Trajectories are compared step by step, up to the length of the shortest.

    Args:
        trajectories (Sequence[Trajectory]): The stochastic trajectories
        compartment (str): One of COMPARTMENTS
        quantiles (Sequence[float], optional): Defaults to (0.05, 0.5, 0.95).

    Returns:
        Array.Quantile.Time.Float: One row per requested quantile
    """
    if compartment not in COMPARTMENTS:
        raise ValueError(f"Unknown compartment {compartment}")
    if not trajectories:
        raise ValueError("No trajectories to summarise")
    n_steps = min(len(t) for t in trajectories)
    values: Array.Run.Time.Float = np.array(
        [[getattr(s, compartment) for s in t[:n_steps]] for t in trajectories],
        dtype=float,
    )
    return np.quantile(values, quantiles, axis=0)


def export_simulation(result: SimulationResult) -> str:
    """
    Tab separated text of the deterministic trajectory, one row per step,
    with the time column as an ISO date.
    """
    df = trajectory_to_dataframe(result.deterministic_trajectory)
    df["time"] = pd.to_datetime(df["time"], unit="ms", utc=True).dt.strftime(
        "%Y-%m-%d"
    )
    df[list(COMPARTMENTS)] = df[list(COMPARTMENTS)].round().astype(int)
    return df.to_csv(sep="\t", index=False)
