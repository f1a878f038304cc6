import calendar
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Sequence

from epi_scenarios.utils import MS_PER_DAY

from .params import AgeDistribution, Params, SeverityRow

ContainmentFunction = Callable[[float], float]


def _fractional_month(time: float) -> float:
    """Month of the year at `time` (epoch ms) as a float in [0, 12)"""
    date = datetime.fromtimestamp(time / 1000, tz=timezone.utc)
    days_in_year = 366 if calendar.isleap(date.year) else 365
    day_of_year = date.timetuple().tm_yday - 1 + (
        date.hour * 3600 + date.minute * 60 + date.second
    ) / (24 * 3600)
    return 12 * day_of_year / days_in_year


@dataclass(frozen=True)
class ModelParams:
    """
    Population averaged parameters consumed by the step function.

    Rates are per day, `time_delta` is the step length in milliseconds.
    """

    population_served: float
    number_stochastic_runs: int
    imports_per_day: float
    incubation_time: float
    time_delta_days: float
    time_delta: float
    recovery_rate: float
    hospitalized_rate: float
    discharge_rate: float
    critical_rate: float
    stabilization_rate: float
    death_rate: float
    average_infection_rate: float
    seasonal_forcing: float
    peak_month: float
    containment: ContainmentFunction
    age_frequencies: dict[str, float]

    def infection_rate(self, time: float) -> float:
        """
        Transmission rate per day at `time`, with seasonal modulation and
        reduced by the containment strength in effect.
        """
        seasonal = 1 + self.seasonal_forcing * math.cos(
            2 * math.pi * (_fractional_month(time) - self.peak_month) / 12
        )
        return self.average_infection_rate * seasonal * (1 - self.containment(time))


def population_average_parameters(
    params: Params,
    severity: Sequence[SeverityRow],
    age_distribution: AgeDistribution,
    containment: ContainmentFunction,
) -> ModelParams:
    """
    Collapses the age stratified severity table into population averages.

    Args:
        params (Params): Scenario parameters
        severity (Sequence[SeverityRow]): Severity by age group, in percent
        age_distribution (AgeDistribution): Head count per age group for the region
        containment (ContainmentFunction): Containment strength as a function of epoch ms

    Returns:
        ModelParams: The parameters for the step function
    """
    total = sum(age_distribution.get(row.age_group, 0) for row in severity)

    age_frequencies: dict[str, float] = {}
    hospitalized_fraction = 0.0
    critical_fraction = 0.0
    fatal_fraction = 0.0
    for row in severity:
        frequency = age_distribution.get(row.age_group, 0) / total if total else 0.0
        age_frequencies[row.age_group] = frequency
        hospitalized = (row.severe / 100) * (row.confirmed / 100)
        hospitalized_fraction += frequency * hospitalized
        critical_fraction += frequency * hospitalized * (row.critical / 100)
        fatal_fraction += (
            frequency * hospitalized * (row.critical / 100) * (row.fatal / 100)
        )

    # share of hospitalised that turn critical, and of critical that die
    critical_of_hospitalized = (
        critical_fraction / hospitalized_fraction if hospitalized_fraction else 0.0
    )
    fatal_of_critical = fatal_fraction / critical_fraction if critical_fraction else 0.0

    epi = params.epidemiological
    return ModelParams(
        population_served=params.population.population_served,
        number_stochastic_runs=params.simulation.number_stochastic_runs,
        imports_per_day=params.population.imports_per_day,
        incubation_time=epi.incubation_time,
        time_delta_days=params.simulation.time_delta_days,
        time_delta=params.simulation.time_delta_days * MS_PER_DAY,
        recovery_rate=(1 - hospitalized_fraction) / epi.infectious_period,
        hospitalized_rate=hospitalized_fraction / epi.infectious_period,
        discharge_rate=(1 - critical_of_hospitalized) / epi.length_hospital_stay,
        critical_rate=critical_of_hospitalized / epi.length_hospital_stay,
        stabilization_rate=(1 - fatal_of_critical) / epi.length_icu_stay,
        death_rate=fatal_of_critical / epi.length_icu_stay,
        average_infection_rate=epi.r0 / epi.infectious_period,
        seasonal_forcing=epi.seasonal_forcing,
        peak_month=epi.peak_month,
        containment=containment,
        age_frequencies=age_frequencies,
    )
