import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

import numpy as np

from warehouse_sim.production.operation import Operation, OperationResult
from warehouse_sim.resources.core import Resource, ResourcePool
from warehouse_sim.resources.costing import CostPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    name: str
    time_min: float
    cost: float
    operations: list[OperationResult] = field(default_factory=list)


@dataclass(frozen=True)
class BatchReport:
    """Per-process and total figures for one simulated batch."""

    units: int
    processes: list[ProcessResult]
    total_time_min: float
    total_cost: float

    @property
    def feasible(self) -> bool:
        """False when some operation lacks the resources to run at all."""
        return math.isfinite(self.total_time_min)

    def get_process(self, name: str) -> ProcessResult | None:
        for process in self.processes:
            if process.name == name:
                return process
        return None


@dataclass(frozen=True)
class SweepResult:
    units: np.ndarray
    total_time_min: np.ndarray
    total_cost: np.ndarray


class Process:
    """An ordered run of operations; only groups and sums them."""

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("Process name cannot be empty")
        self.name = name
        self.operations: list[Operation] = []

    def add_operation(self, operation: Operation) -> None:
        self.operations.append(operation)

    def evaluate(
        self, units: int, pool: ResourcePool, policy: CostPolicy
    ) -> ProcessResult:
        # Every operation sees the full nominal pool; nothing is reserved
        results = [op.evaluate(units, pool, policy) for op in self.operations]
        return ProcessResult(
            name=self.name,
            time_min=sum(r.time_min for r in results),
            cost=sum(r.cost for r in results),
            operations=results,
        )

    def time_curve(self, units: np.ndarray, pool: ResourcePool) -> np.ndarray:
        total = np.zeros(len(units), dtype=np.float64)
        for op in self.operations:
            total = total + op.time_curve(units, pool)
        return total

    def cost_curve(
        self, units: np.ndarray, pool: ResourcePool, policy: CostPolicy
    ) -> np.ndarray:
        total = np.zeros(len(units), dtype=np.float64)
        for op in self.operations:
            total = total + op.cost_curve(units, pool, policy)
        return total


class Warehouse:
    """
    Owns the resource pool and the ordered processes a batch flows through.
    """

    def __init__(self, name: str, policy: CostPolicy | None = None) -> None:
        self.name = name
        self.policy = policy if policy is not None else CostPolicy()
        self.resources: dict[str, Resource] = {}
        self.processes: list[Process] = []

    def add_resource(self, resource: Resource) -> None:
        if resource.name in self.resources:
            raise ValueError(f"Resource {resource.name} already exists")
        self.resources[resource.name] = resource

    def add_process(self, process: Process) -> None:
        self.processes.append(process)

    def get_resource(self, name: str) -> Resource | None:
        return self.resources.get(name)

    def get_process(self, name: str) -> Process | None:
        for process in self.processes:
            if process.name == name:
                return process
        return None

    @property
    def pool(self) -> ResourcePool:
        """Read-only view of the resources for the duration of a run."""
        return MappingProxyType(self.resources)

    def simulate_batch(self, units: int) -> BatchReport:
        """
        Runs `units` through every process in order and totals time and cost.

        Raises MissingResourceError if any operation names a resource the
        pool does not hold. Infeasible operations show up as infinite totals.
        """
        if units < 0:
            raise ValueError(f"Batch size cannot be negative ({units})")
        if units != math.floor(units):
            raise ValueError(f"Batch size must be a whole number ({units})")

        pool = self.pool
        total_time = 0.0
        total_cost = 0.0
        results: list[ProcessResult] = []

        for process in self.processes:
            result = process.evaluate(units, pool, self.policy)
            total_time += result.time_min
            total_cost += result.cost
            results.append(result)
            logger.info(
                "Process %s: Time %.1f min, Cost %.2f",
                result.name,
                result.time_min,
                result.cost,
            )

        logger.info(
            "Batch of %d units: Time %.1f min, Cost %.2f",
            units,
            total_time,
            total_cost,
        )
        if not math.isfinite(total_time):
            logger.warning(
                "Batch of %d units cannot be produced with the current resources",
                units,
            )

        return BatchReport(
            units=units,
            processes=results,
            total_time_min=total_time,
            total_cost=total_cost,
        )

    def sweep(self, units: Sequence[int]) -> SweepResult:
        """Total time and cost over several batch sizes at once."""
        units_arr = np.asarray(units, dtype=np.float64)
        if units_arr.ndim != 1:
            raise ValueError("Sweep expects a flat sequence of batch sizes")
        if np.any(units_arr < 0):
            raise ValueError("Batch sizes cannot be negative")
        if np.any(units_arr != np.floor(units_arr)):
            raise ValueError("Batch sizes must be whole numbers")

        pool = self.pool
        total_time = np.zeros(len(units_arr), dtype=np.float64)
        total_cost = np.zeros(len(units_arr), dtype=np.float64)
        for process in self.processes:
            total_time = total_time + process.time_curve(units_arr, pool)
            total_cost = total_cost + process.cost_curve(
                units_arr, pool, self.policy
            )

        return SweepResult(
            units=units_arr.astype(np.int64),
            total_time_min=total_time,
            total_cost=total_cost,
        )
