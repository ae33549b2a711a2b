"""
Cost accrual per resource kind.

Hourly resources (Machine, Human, AGV) charge their whole fleet for the
elapsed hours of an operation, regardless of how many units the operation
actually ties up. Materials charge per unit produced. AGVs add an energy
surcharge per trip on top of their hourly rate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from warehouse_sim.resources.core import Resource, ResourceKind

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

DEFAULT_AGV_ENERGY_PRICE = 0.2  # currency per kWh


@dataclass(frozen=True)
class CostPolicy:
    """Switches that are not carried by individual resources."""

    include_machine_energy: bool = False
    agv_energy_price_per_kwh: float = DEFAULT_AGV_ENERGY_PRICE
    agv_trips_per_unit: float = 1.0

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "CostPolicy":
        costing = config.get("simulation_parameters", {}).get("costing", {})
        return cls(
            include_machine_energy=bool(
                costing.get("include_machine_energy", False)
            ),
            agv_energy_price_per_kwh=float(
                costing.get("agv_energy_price_per_kwh", DEFAULT_AGV_ENERGY_PRICE)
            ),
            agv_trips_per_unit=float(costing.get("agv_trips_per_unit", 1.0)),
        )


def resource_cost(
    resource: Resource, hours: ArrayLike, units: ArrayLike, policy: CostPolicy
) -> float | NDArray[np.float64]:
    """Cost contributed by one resource to an operation lasting `hours`."""
    match resource.kind:
        case ResourceKind.MACHINE:
            cost = resource.hourly_cost(hours)
            if policy.include_machine_energy:
                cost += resource.energy_cost(hours)
            return cost
        case ResourceKind.HUMAN:
            return resource.hourly_cost(hours)
        case ResourceKind.MATERIAL:
            return resource.cost_for_units(units)
        case ResourceKind.AGV:
            trips = units * policy.agv_trips_per_unit
            return resource.hourly_cost(hours) + resource.trip_energy_cost(
                trips, policy.agv_energy_price_per_kwh
            )
    raise ValueError(f"Unknown resource kind: {resource.kind}")
