from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from epi_scenarios.utils import to_milliseconds


class BaseImmutableParams(BaseModel):
    model_config = ConfigDict(frozen=True)


class PopulationParams(BaseImmutableParams):
    population_served: float = 100_000  # number of people in the modelled region
    country: str = "Switzerland"  # key into the age distribution table
    suspected_cases_today: str = "10"  # infectious cases at t_min, as entered
    imports_per_day: float = 0.1  # cases imported from outside the region per day


class EpidemiologicalParams(BaseImmutableParams):
    r0: float = 2.2  # basic reproduction number
    incubation_time: float = 5  # days from exposure to infectiousness
    infectious_period: float = 3  # days
    length_hospital_stay: float = 4  # days
    length_icu_stay: float = 14  # days
    seasonal_forcing: float = 0.2  # amplitude of the seasonal modulation of r0
    peak_month: float = 0  # month of peak transmission, 0 = January


class SimulationParams(BaseImmutableParams):
    t_min: float  # epoch ms
    t_max: float  # epoch ms
    number_stochastic_runs: int = 0
    seed: Optional[int] = None
    time_delta_days: float = 0.25  # step length

    @field_validator("t_min", "t_max", mode="before")
    @classmethod
    def _convert_timestamp(cls, value):
        return to_milliseconds(value)


class Params(BaseImmutableParams):
    population: PopulationParams = PopulationParams()
    epidemiological: EpidemiologicalParams = EpidemiologicalParams()
    simulation: SimulationParams


class SeverityRow(BaseImmutableParams):
    """
    One age bucket of the severity table. All values are percentages.
    """

    age_group: str
    confirmed: float  # share of infections that are confirmed
    severe: float  # share of confirmed cases needing hospital care
    critical: float  # share of hospitalised cases needing intensive care
    fatal: float  # share of critical cases that die


AgeDistribution = dict[str, float]
