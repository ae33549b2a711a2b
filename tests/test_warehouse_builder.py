"""Tests for config loading and WarehouseBuilder on the bundled example warehouse."""

import json

import pytest

from warehouse_sim.config.loader import load_simulation_config, load_warehouse_definition
from warehouse_sim.production.operation import TimingMode
from warehouse_sim.resources.core import AGV, Machine, Material, ResourceKind
from warehouse_sim.resources.costing import CostPolicy
from warehouse_sim.simulation.builder import WarehouseBuilder


@pytest.fixture
def warehouse():
    return WarehouseBuilder().build()


def test_load_bundled_configs():
    definition = load_warehouse_definition()
    assert definition["name"] == "MainWarehouse"
    config = load_simulation_config()
    assert config["simulation_parameters"]["default_batch_units"] == 200


def test_loader_rejects_non_dict(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([1, 2, 3]))
    with pytest.raises(TypeError):
        load_warehouse_definition(str(path))


def test_builder_resources(warehouse):
    assert len(warehouse.resources) == 8
    assert isinstance(warehouse.get_resource("CuttingMachine"), Machine)
    assert isinstance(warehouse.get_resource("SteelPlate"), Material)

    agv = warehouse.get_resource("AGV")
    assert isinstance(agv, AGV)
    assert agv.kind == ResourceKind.AGV
    assert agv.distance_m == 200.0


def test_builder_processes(warehouse):
    names = [p.name for p in warehouse.processes]
    assert names == ["Cutting", "Welding", "Painting", "Assembly"]

    painting = warehouse.get_process("Painting").operations[0]
    assert painting.mode == TimingMode.PER_BATCH
    assert painting.units_per_resource == 4
    assert painting.duration_batch_min == 30.0


def test_example_batch(warehouse):
    report = warehouse.simulate_batch(200)

    times = {p.name: p.time_min for p in report.processes}
    assert times["Cutting"] == pytest.approx(200.0)
    assert times["Welding"] == pytest.approx(300.0)
    assert times["Painting"] == pytest.approx(1500.0)
    assert times["Assembly"] == pytest.approx(100.0)
    assert report.total_time_min == pytest.approx(2100.0)

    costs = {p.name: p.cost for p in report.processes}
    assert costs["Cutting"] == pytest.approx(100.0 + 400.0 / 3 + 500.0)
    assert costs["Welding"] == pytest.approx(400.0)
    assert costs["Painting"] == pytest.approx(2225.0)
    assert costs["Assembly"] == pytest.approx(90.0 + 100.0 / 3 + 6.4)
    assert report.total_cost == pytest.approx(sum(costs.values()))


def test_policy_passed_through():
    policy = CostPolicy(include_machine_energy=True)
    warehouse = WarehouseBuilder(policy=policy).build()
    assert warehouse.policy is policy


def test_unknown_kind_rejected():
    definition = {"resources": [{"kind": "robot", "name": "R2", "available": 1}]}
    with pytest.raises(ValueError, match="robot"):
        WarehouseBuilder(definition).build()


def test_unknown_mode_rejected():
    definition = {
        "resources": [{"kind": "human", "name": "Op", "available": 1, "wage_per_hour": 10}],
        "processes": [
            {
                "name": "P",
                "operations": [
                    {"name": "X", "resource_needs": {"Op": 1}, "mode": "per_shift"}
                ],
            }
        ],
    }
    with pytest.raises(ValueError, match="per_shift"):
        WarehouseBuilder(definition).build()


def test_custom_definition_from_file(tmp_path):
    definition = {
        "name": "Tiny",
        "resources": [
            {"kind": "human", "name": "Op", "available": 1, "wage_per_hour": 30}
        ],
        "processes": [
            {
                "name": "Pack",
                "operations": [
                    {"name": "Pack", "resource_needs": {"Op": 1}, "duration_per_unit_min": 6}
                ],
            }
        ],
    }
    path = tmp_path / "tiny.json"
    path.write_text(json.dumps(definition))

    warehouse = WarehouseBuilder(load_warehouse_definition(str(path))).build()
    report = warehouse.simulate_batch(10)
    assert warehouse.name == "Tiny"
    assert report.total_time_min == pytest.approx(60.0)
    assert report.total_cost == pytest.approx(30.0)
