"""
Operation Evaluator: time and cost of one production step.

An operation's throughput is gated by its scarcest resource. Each needed
resource offers floor(available / qty_needed) concurrent task lanes, and each
lane turns out `units_per_resource` units per cycle; the minimum across the
need-map is the parallel capacity of the whole operation.

Capacity that rounds down to zero is not an error. It surfaces as an infinite
time and cost, which callers compare against math.inf.
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

from warehouse_sim.resources.core import ResourcePool, lookup
from warehouse_sim.resources.costing import CostPolicy, resource_cost

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)


class TimingMode(enum.Enum):
    PER_UNIT = "per_unit"  # Each lane takes duration_per_unit_min per unit
    PER_BATCH = "per_batch"  # Full cycle of duration_batch_min per batch


@dataclass(frozen=True)
class OperationResult:
    name: str
    units: int
    parallel_capacity: float
    time_min: float
    cost: float


@dataclass(frozen=True)
class Operation:
    """
    A named production step and the resources one task of it ties up.
    Stateless; the same operation can be evaluated for any batch size.
    """

    name: str
    # Map of Resource name -> Quantity required per task
    resource_needs: Mapping[str, int] = field(default_factory=dict)
    duration_per_unit_min: float = 0.0
    duration_batch_min: float = 0.0
    mode: TimingMode = TimingMode.PER_UNIT
    units_per_resource: float = 1.0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Operation name cannot be empty")
        if self.units_per_resource <= 0:
            raise ValueError(
                f"Operation {self.name}: units_per_resource must be positive"
            )
        for resource_name, qty in self.resource_needs.items():
            if qty < 1:
                raise ValueError(
                    f"Operation {self.name}: need for {resource_name} must be >= 1"
                )
        # Read-only copy so validated needs cannot change after construction
        object.__setattr__(
            self, "resource_needs", MappingProxyType(dict(self.resource_needs))
        )

    def parallel_capacity(self, pool: ResourcePool) -> float:
        """Units producible concurrently per cycle; inf when nothing is needed."""
        parallel = math.inf
        for resource_name, qty in self.resource_needs.items():
            resource = lookup(pool, resource_name)
            concurrent_tasks = resource.available // qty
            parallel = min(parallel, concurrent_tasks * self.units_per_resource)
        return parallel

    def time_curve(self, units: ArrayLike, pool: ResourcePool) -> NDArray[np.float64]:
        """Elapsed minutes for each batch size in `units`."""
        units_arr = _as_units(units)
        return self._time_for(units_arr, self.parallel_capacity(pool))

    def cost_curve(
        self, units: ArrayLike, pool: ResourcePool, policy: CostPolicy | None = None
    ) -> NDArray[np.float64]:
        """Accrued cost for each batch size in `units`."""
        if policy is None:
            policy = CostPolicy()
        units_arr = _as_units(units)
        hours = self._time_for(units_arr, self.parallel_capacity(pool)) / 60.0

        # inf * 0 would give NaN for idle fleets, so price finite hours only
        blocked = np.isinf(hours)
        finite_hours = np.where(blocked, 0.0, hours)

        total = np.zeros_like(units_arr)
        for resource_name in self.resource_needs:
            total = total + resource_cost(
                pool[resource_name], finite_hours, units_arr, policy
            )
        return np.where(blocked, np.inf, total)

    def time_min(self, units: int, pool: ResourcePool) -> float:
        return float(self.time_curve(units, pool))

    def cost(
        self, units: int, pool: ResourcePool, policy: CostPolicy | None = None
    ) -> float:
        return float(self.cost_curve(units, pool, policy))

    def evaluate(
        self, units: int, pool: ResourcePool, policy: CostPolicy | None = None
    ) -> OperationResult:
        parallel = self.parallel_capacity(pool)
        result = OperationResult(
            name=self.name,
            units=units,
            parallel_capacity=parallel,
            time_min=self.time_min(units, pool),
            cost=self.cost(units, pool, policy),
        )
        logger.debug(
            "Operation %s: units=%d, parallel=%.2f, time=%.2f min, cost=%.2f",
            self.name,
            units,
            parallel,
            result.time_min,
            result.cost,
        )
        return result

    def _time_for(
        self, units_arr: NDArray[np.float64], parallel: float
    ) -> NDArray[np.float64]:
        if parallel <= 0:
            return np.full_like(units_arr, np.inf)

        if self.mode is TimingMode.PER_UNIT:
            # units / (parallel / duration), rearranged so zero durations stay finite
            return units_arr * self.duration_per_unit_min / parallel

        if math.isinf(parallel):
            # Unconstrained: the whole batch fits one cycle
            batches = (units_arr > 0).astype(np.float64)
        else:
            batches = np.ceil(units_arr / parallel)
        return batches * self.duration_batch_min


def _as_units(units: ArrayLike) -> NDArray[np.float64]:
    units_arr = np.asarray(units, dtype=np.float64)
    if np.any(units_arr < 0):
        raise ValueError("Unit counts cannot be negative")
    if np.any(units_arr != np.floor(units_arr)):
        raise ValueError("Unit counts must be whole numbers")
    return units_arr
