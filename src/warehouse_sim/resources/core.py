import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Union


class ResourceKind(enum.Enum):
    MACHINE = "machine"
    HUMAN = "human"
    MATERIAL = "material"  # Stock, not throughput
    AGV = "agv"


class MissingResourceError(KeyError):
    """Raised when an operation needs a resource the pool does not hold."""

    def __init__(self, resource_name: str) -> None:
        super().__init__(resource_name)
        self.resource_name = resource_name

    def __str__(self) -> str:
        return f"Missing resource: {self.resource_name}"


def _validate(name: str, available: int) -> None:
    if not name:
        raise ValueError("Resource name cannot be empty")
    if available < 0:
        raise ValueError(f"Resource {name} has negative availability ({available})")


@dataclass(frozen=True)
class Machine:
    """
    Rented or owned equipment. Charged per hour for the whole fleet;
    energy draw is priced separately.
    """

    name: str
    available: int
    cost_per_hour: float
    power_kw: float = 0.0
    energy_cost_per_kwh: float = 0.0
    kind: ResourceKind = field(default=ResourceKind.MACHINE, init=False)

    def __post_init__(self) -> None:
        _validate(self.name, self.available)

    def hourly_cost(self, hours: float) -> float:
        return self.available * self.cost_per_hour * hours

    def energy_cost(self, hours: float) -> float:
        return self.available * self.power_kw * hours * self.energy_cost_per_kwh


@dataclass(frozen=True)
class Human:
    name: str
    available: int
    wage_per_hour: float
    kind: ResourceKind = field(default=ResourceKind.HUMAN, init=False)

    def __post_init__(self) -> None:
        _validate(self.name, self.available)

    @property
    def cost_per_hour(self) -> float:
        # Wage doubles as the base hourly rate
        return self.wage_per_hour

    def hourly_cost(self, hours: float) -> float:
        return self.available * self.wage_per_hour * hours


@dataclass(frozen=True)
class Material:
    """
    Consumable stock. `available` counts units on hand and does not
    represent concurrent capacity. Priced per unit consumed, never per hour.
    """

    name: str
    available: int
    unit_cost: float
    kind: ResourceKind = field(default=ResourceKind.MATERIAL, init=False)

    def __post_init__(self) -> None:
        _validate(self.name, self.available)

    @property
    def cost_per_hour(self) -> float:
        return 0.0

    def cost_for_units(self, units: float) -> float:
        return units * self.unit_cost


@dataclass(frozen=True)
class AGV:
    """
    Automated guided vehicle fleet shuttling units over a fixed round trip.
    """

    name: str
    available: int
    cost_per_hour: float
    speed_m_per_s: float
    distance_m: float
    load_time_min: float = 0.0
    unload_time_min: float = 0.0
    energy_kwh_per_km: float = 0.0
    kind: ResourceKind = field(default=ResourceKind.AGV, init=False)

    def __post_init__(self) -> None:
        _validate(self.name, self.available)
        if self.speed_m_per_s <= 0:
            raise ValueError(f"AGV {self.name} must have a positive speed")

    def hourly_cost(self, hours: float) -> float:
        return self.available * self.cost_per_hour * hours

    def cycle_time_min(self) -> float:
        """Minutes for one loaded round trip, including load and unload."""
        travel_min = (self.distance_m / self.speed_m_per_s) / 60.0
        return travel_min + self.load_time_min + self.unload_time_min

    def energy_per_cycle_kwh(self) -> float:
        return (self.distance_m / 1000.0) * self.energy_kwh_per_km

    def trip_energy_cost(self, trips: float, energy_price_per_kwh: float) -> float:
        return trips * self.energy_per_cycle_kwh() * energy_price_per_kwh


Resource = Union[Machine, Human, Material, AGV]
ResourcePool = Mapping[str, Resource]


def lookup(pool: ResourcePool, name: str) -> Resource:
    try:
        return pool[name]
    except KeyError:
        raise MissingResourceError(name) from None
