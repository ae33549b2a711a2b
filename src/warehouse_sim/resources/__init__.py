"""Resource pool model: typed resources and their cost formulas."""

from warehouse_sim.resources.core import (
    AGV,
    Human,
    Machine,
    Material,
    MissingResourceError,
    Resource,
    ResourceKind,
    ResourcePool,
)
from warehouse_sim.resources.costing import CostPolicy, resource_cost

__all__ = [
    "AGV",
    "CostPolicy",
    "Human",
    "Machine",
    "Material",
    "MissingResourceError",
    "Resource",
    "ResourceKind",
    "ResourcePool",
    "resource_cost",
]
