"""Core dataclasses: locomotive, rolling stock, consist, load and terrain."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

# (x, y) chart samples, ascending in x
Series = List[Tuple[int, int]]


class InvalidSpec(ValueError):
    """Raised when a spec violates one of its invariants."""


class Hilliness(Enum):
    NO_SLOPES = "No Slopes"
    ONE_SLOPE = "One Slope"
    MULTIPLE_SLOPES = "Multiple Slopes"

    @property
    def label(self) -> str:
        return self.value


class FrictionMode(Enum):
    STATIC = 27
    KINETIC = 17

    @property
    def coefficient(self) -> int:
        """Rolling resistance in kg-force per tonne."""
        return self.value


def _require_positive(owner: str, **values) -> None:
    for name, value in values.items():
        if value <= 0:
            raise InvalidSpec(f"{owner}.{name} must be > 0 (got {value})")


@dataclass(frozen=True)
class Locomotive:
    power: int  # kW
    mass: int  # t
    max_speed: int  # km/h
    max_tractive_effort: int  # kN
    name: str = "New Train"
    year: int = 1900

    def __post_init__(self):
        _require_positive(
            "Locomotive",
            power=self.power,
            mass=self.mass,
            max_speed=self.max_speed,
            max_tractive_effort=self.max_tractive_effort,
        )
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidSpec("Locomotive.name must be a non-blank string")

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class RollingStock:
    mass_empty: int  # t
    mass_full: int  # t
    max_speed: int  # km/h
    length: float = 0.5  # tiles
    name: str = "New Waggon"

    def __post_init__(self):
        _require_positive(
            "RollingStock",
            mass_empty=self.mass_empty,
            mass_full=self.mass_full,
            max_speed=self.max_speed,
            length=self.length,
        )
        if self.mass_full < self.mass_empty:
            raise InvalidSpec(
                f"RollingStock.mass_full ({self.mass_full}) "
                f"must be >= mass_empty ({self.mass_empty})"
            )
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidSpec("RollingStock.name must be a non-blank string")

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Consist:
    """One or more coupled locomotives of the same type."""

    locomotive: Locomotive
    count: int = 1

    def __post_init__(self):
        if self.count < 1:
            raise InvalidSpec(f"Consist.count must be >= 1 (got {self.count})")

    @property
    def power(self) -> int:
        return self.locomotive.power * self.count

    @property
    def mass(self) -> int:
        return self.locomotive.mass * self.count

    @property
    def max_tractive_effort(self) -> int:
        return self.locomotive.max_tractive_effort * self.count


@dataclass(frozen=True)
class Load:
    rolling_stock: RollingStock
    cargo_factor: int = 15  # percent of empty → full

    def __post_init__(self):
        if not 0 <= self.cargo_factor <= 100:
            raise InvalidSpec(
                f"Load.cargo_factor must be within 0..100 (got {self.cargo_factor})"
            )

    @property
    def waggon_mass(self) -> int:
        """Laden mass of one waggon, floored to whole tonnes."""
        stock = self.rolling_stock
        return stock.mass_empty + (stock.mass_full - stock.mass_empty) * self.cargo_factor // 100


@dataclass(frozen=True)
class Terrain:
    hilliness: Hilliness = Hilliness.NO_SLOPES
    slope_percentage: int = 0
    tiles_between_slopes: int = 0  # only read for MULTIPLE_SLOPES

    def __post_init__(self):
        if self.slope_percentage < 0:
            raise InvalidSpec("Terrain.slope_percentage must be >= 0")
        if self.tiles_between_slopes < 0:
            raise InvalidSpec("Terrain.tiles_between_slopes must be >= 0")
