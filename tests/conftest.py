import pytest

from epi_scenarios import (
    EpidemiologicalParams,
    Params,
    PopulationParams,
    SeverityRow,
    SimulationParams,
)

TIME_DELTA = 0.25 * 24 * 60 * 60 * 1000


@pytest.fixture
def severity() -> list[SeverityRow]:
    return [
        SeverityRow(age_group="0-49", confirmed=100, severe=10, critical=50, fatal=20),
        SeverityRow(age_group="50+", confirmed=100, severe=30, critical=50, fatal=40),
    ]


@pytest.fixture
def age_distribution() -> dict[str, float]:
    return {"0-49": 300, "50+": 100}


@pytest.fixture
def params() -> Params:
    return Params(
        population=PopulationParams(
            population_served=1000, suspected_cases_today="10", imports_per_day=0
        ),
        epidemiological=EpidemiologicalParams(
            r0=2.4,
            incubation_time=5,
            infectious_period=3,
            length_hospital_stay=4,
            length_icu_stay=14,
            seasonal_forcing=0,
        ),
        simulation=SimulationParams(t_min=0, t_max=2 * TIME_DELTA),
    )
