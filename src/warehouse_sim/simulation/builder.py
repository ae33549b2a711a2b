import logging
from typing import Any

from warehouse_sim.config.loader import load_warehouse_definition
from warehouse_sim.production.operation import Operation, TimingMode
from warehouse_sim.resources.core import (
    AGV,
    Human,
    Machine,
    Material,
    Resource,
    ResourceKind,
)
from warehouse_sim.resources.costing import CostPolicy
from warehouse_sim.simulation.warehouse import Process, Warehouse

logger = logging.getLogger(__name__)


class WarehouseBuilder:
    """Builds a Warehouse from a definition dict (see warehouse_definition.json)."""

    def __init__(
        self,
        definition: dict[str, Any] | None = None,
        policy: CostPolicy | None = None,
    ) -> None:
        self.definition = (
            definition if definition is not None else load_warehouse_definition()
        )
        self.policy = policy
        self.warehouse = Warehouse(
            self.definition.get("name", "Warehouse"), policy=policy
        )

    def build(self) -> Warehouse:
        logger.info("WarehouseBuilder: building %s...", self.warehouse.name)
        self._build_resources()
        self._build_processes()
        logger.info(
            "WarehouseBuilder: %d resources, %d processes",
            len(self.warehouse.resources),
            len(self.warehouse.processes),
        )
        return self.warehouse

    def _build_resources(self) -> None:
        for row in self.definition.get("resources", []):
            self.warehouse.add_resource(self._make_resource(row))

    def _build_processes(self) -> None:
        for proc_row in self.definition.get("processes", []):
            process = Process(proc_row["name"])
            for op_row in proc_row.get("operations", []):
                process.add_operation(self._make_operation(op_row))
            self.warehouse.add_process(process)

    @staticmethod
    def _make_resource(row: dict[str, Any]) -> Resource:
        try:
            kind = ResourceKind(row["kind"])
        except ValueError:
            raise ValueError(
                f"Unknown resource kind {row['kind']!r} for {row.get('name')}"
            ) from None

        name = row["name"]
        available = int(row["available"])

        match kind:
            case ResourceKind.MACHINE:
                return Machine(
                    name=name,
                    available=available,
                    cost_per_hour=float(row["cost_per_hour"]),
                    power_kw=float(row.get("power_kw", 0.0)),
                    energy_cost_per_kwh=float(row.get("energy_cost_per_kwh", 0.0)),
                )
            case ResourceKind.HUMAN:
                return Human(
                    name=name,
                    available=available,
                    wage_per_hour=float(row["wage_per_hour"]),
                )
            case ResourceKind.MATERIAL:
                return Material(
                    name=name,
                    available=available,
                    unit_cost=float(row["unit_cost"]),
                )
            case ResourceKind.AGV:
                return AGV(
                    name=name,
                    available=available,
                    cost_per_hour=float(row["cost_per_hour"]),
                    speed_m_per_s=float(row["speed_m_per_s"]),
                    distance_m=float(row["distance_m"]),
                    load_time_min=float(row.get("load_time_min", 0.0)),
                    unload_time_min=float(row.get("unload_time_min", 0.0)),
                    energy_kwh_per_km=float(row.get("energy_kwh_per_km", 0.0)),
                )
        raise ValueError(f"Unhandled resource kind {kind}")

    @staticmethod
    def _make_operation(row: dict[str, Any]) -> Operation:
        try:
            mode = TimingMode(row.get("mode", TimingMode.PER_UNIT.value))
        except ValueError:
            raise ValueError(
                f"Unknown timing mode {row.get('mode')!r} for {row.get('name')}"
            ) from None

        return Operation(
            name=row["name"],
            resource_needs={k: int(v) for k, v in row["resource_needs"].items()},
            duration_per_unit_min=float(row.get("duration_per_unit_min", 0.0)),
            duration_batch_min=float(row.get("duration_batch_min", 0.0)),
            mode=mode,
            units_per_resource=float(row.get("units_per_resource", 1.0)),
        )
