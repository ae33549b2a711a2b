import numpy as np
import pytest

from warehouse_sim.resources.core import (
    AGV,
    Human,
    Machine,
    Material,
    MissingResourceError,
    ResourceKind,
    lookup,
)
from warehouse_sim.resources.costing import CostPolicy, resource_cost


@pytest.fixture
def agv() -> AGV:
    return AGV(
        name="AGV",
        available=4,
        cost_per_hour=5.0,
        speed_m_per_s=1.5,
        distance_m=200.0,
        load_time_min=0.5,
        unload_time_min=0.5,
        energy_kwh_per_km=0.8,
    )


def test_resource_kinds():
    assert Machine("M", 1, 10.0).kind == ResourceKind.MACHINE
    assert Human("H", 1, 20.0).kind == ResourceKind.HUMAN
    assert Material("S", 10, 2.5).kind == ResourceKind.MATERIAL


def test_negative_availability_rejected():
    with pytest.raises(ValueError):
        Machine("M", -1, 10.0)


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        Human("", 1, 20.0)


def test_zero_availability_allowed():
    assert Material("S", 0, 1.0).available == 0


def test_machine_costs():
    machine = Machine("CuttingMachine", 2, 15.0, power_kw=5.0, energy_cost_per_kwh=0.2)
    assert machine.hourly_cost(2.0) == pytest.approx(60.0)
    # 2 machines * 5 kW * 2 h * 0.2
    assert machine.energy_cost(2.0) == pytest.approx(4.0)


def test_human_wage_is_hourly_rate():
    operator = Human("Operator", 2, 20.0)
    assert operator.cost_per_hour == 20.0
    assert operator.hourly_cost(1.5) == pytest.approx(60.0)


def test_material_priced_per_unit():
    steel = Material("SteelPlate", 1000, 2.5)
    assert steel.cost_for_units(200) == pytest.approx(500.0)
    assert steel.cost_per_hour == 0.0


def test_agv_cycle_time(agv: AGV):
    # 200 m at 1.5 m/s = 133.3 s = 2.22 min, plus 1 min handling
    assert agv.cycle_time_min() == pytest.approx(200 / 1.5 / 60 + 1.0)


def test_agv_energy(agv: AGV):
    assert agv.energy_per_cycle_kwh() == pytest.approx(0.16)
    assert agv.trip_energy_cost(200, 0.2) == pytest.approx(6.4)


def test_agv_requires_positive_speed():
    with pytest.raises(ValueError):
        AGV("AGV", 1, 5.0, speed_m_per_s=0.0, distance_m=100.0)


def test_lookup_missing_resource():
    with pytest.raises(MissingResourceError) as exc_info:
        lookup({}, "Ghost")
    assert exc_info.value.resource_name == "Ghost"
    assert "Ghost" in str(exc_info.value)


def test_missing_resource_is_key_error():
    assert issubclass(MissingResourceError, KeyError)


class TestResourceCost:

    def test_machine_energy_excluded_by_default(self):
        machine = Machine("M", 2, 15.0, power_kw=5.0, energy_cost_per_kwh=0.2)
        assert resource_cost(machine, 1.0, 10, CostPolicy()) == pytest.approx(30.0)

    def test_machine_energy_included_when_enabled(self):
        machine = Machine("M", 2, 15.0, power_kw=5.0, energy_cost_per_kwh=0.2)
        policy = CostPolicy(include_machine_energy=True)
        assert resource_cost(machine, 1.0, 10, policy) == pytest.approx(32.0)

    def test_material_ignores_hours(self):
        paint = Material("PaintLiters", 500, 3.0)
        assert resource_cost(paint, 100.0, 200, CostPolicy()) == pytest.approx(600.0)

    def test_agv_hourly_plus_trip_energy(self, agv: AGV):
        cost = resource_cost(agv, 1.0, 200, CostPolicy())
        assert cost == pytest.approx(20.0 + 6.4)

    def test_agv_trip_policy(self, agv: AGV):
        policy = CostPolicy(agv_trips_per_unit=0.5, agv_energy_price_per_kwh=0.4)
        # 100 trips * 0.16 kWh * 0.4
        assert resource_cost(agv, 0.0, 200, policy) == pytest.approx(6.4)

    def test_vectorized(self):
        operator = Human("Operator", 2, 20.0)
        costs = resource_cost(operator, np.array([0.0, 1.0, 2.0]), 0, CostPolicy())
        np.testing.assert_allclose(costs, [0.0, 40.0, 80.0])

    def test_policy_from_config(self):
        config = {
            "simulation_parameters": {
                "costing": {
                    "include_machine_energy": True,
                    "agv_energy_price_per_kwh": 0.3,
                }
            }
        }
        policy = CostPolicy.from_config(config)
        assert policy.include_machine_energy is True
        assert policy.agv_energy_price_per_kwh == 0.3
        assert policy.agv_trips_per_unit == 1.0

    def test_policy_defaults_from_empty_config(self):
        assert CostPolicy.from_config({}) == CostPolicy()
