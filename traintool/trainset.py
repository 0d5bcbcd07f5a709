"""
trainset.py – named collection of locomotives and waggons, plus JSON load/save.

File layout::

    {"Name": "...",
     "Trains":  [{"Name", "Year", "Mass", "Power", "MaxSpeed", "MaxTractiveEffort"}],
     "Waggons": [{"Name", "MassEmpty", "FullMass", "MaxSpeed", "Length"}]}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .models import InvalidSpec, Locomotive, RollingStock

logger = logging.getLogger("traintool.trainset")

DEFAULT_NAME = "New Train Set"


class UnknownEntry(KeyError):
    """No train or waggon with the requested name."""


# ────────────────────────────────────────────────────────────────────────────
class TrainRecord(BaseModel):
    """One entry of the "Trains" list."""

    model_config = ConfigDict(validate_by_name=True)

    name: str = Field(alias="Name", min_length=1)
    year: int = Field(1900, alias="Year")
    mass: int = Field(..., alias="Mass", gt=0)
    power: int = Field(..., alias="Power", gt=0)
    max_speed: int = Field(..., alias="MaxSpeed", gt=0)
    max_tractive_effort: int = Field(..., alias="MaxTractiveEffort", gt=0)

    @field_validator("name", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    def to_spec(self) -> Locomotive:
        return Locomotive(
            power=self.power,
            mass=self.mass,
            max_speed=self.max_speed,
            max_tractive_effort=self.max_tractive_effort,
            name=self.name,
            year=self.year,
        )

    @classmethod
    def from_spec(cls, loco: Locomotive) -> "TrainRecord":
        return cls(
            name=loco.name,
            year=loco.year,
            mass=loco.mass,
            power=loco.power,
            max_speed=loco.max_speed,
            max_tractive_effort=loco.max_tractive_effort,
        )


class WaggonRecord(BaseModel):
    """One entry of the "Waggons" list."""

    model_config = ConfigDict(validate_by_name=True)

    name: str = Field(alias="Name", min_length=1)
    mass_empty: int = Field(..., alias="MassEmpty", gt=0)
    mass_full: int = Field(..., alias="FullMass", gt=0)
    max_speed: int = Field(..., alias="MaxSpeed", gt=0)
    length: float = Field(0.5, alias="Length", gt=0)

    @field_validator("name", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    def to_spec(self) -> RollingStock:
        return RollingStock(
            mass_empty=self.mass_empty,
            mass_full=self.mass_full,
            max_speed=self.max_speed,
            length=self.length,
            name=self.name,
        )

    @classmethod
    def from_spec(cls, stock: RollingStock) -> "WaggonRecord":
        return cls(
            name=stock.name,
            mass_empty=stock.mass_empty,
            mass_full=stock.mass_full,
            max_speed=stock.max_speed,
            length=stock.length,
        )


# ────────────────────────────────────────────────────────────────────────────
def _move(items: list, index: int, offset: int) -> None:
    target = index + offset
    if not 0 <= index < len(items) or not 0 <= target < len(items):
        raise IndexError(f"cannot move entry {index} to {target} (size {len(items)})")
    items.insert(target, items.pop(index))


@dataclass
class TrainSet:
    name: str = DEFAULT_NAME
    trains: List[Locomotive] = field(default_factory=list)
    waggons: List[RollingStock] = field(default_factory=list)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidSpec("TrainSet.name must be a non-blank string")

    # -- listings ------------------------------------------------------------
    def available_trains(self) -> List[Locomotive]:
        return sorted(self.trains, key=lambda t: t.year)

    def available_waggons(self) -> List[RollingStock]:
        return sorted(self.waggons, key=lambda w: w.name)

    def train(self, name: str) -> Locomotive:
        for loco in self.trains:
            if loco.name == name:
                return loco
        raise UnknownEntry(f"No train named {name!r} in {self.name!r}")

    def waggon(self, name: str) -> RollingStock:
        for stock in self.waggons:
            if stock.name == name:
                return stock
        raise UnknownEntry(f"No waggon named {name!r} in {self.name!r}")

    # -- editing -------------------------------------------------------------
    def add_train(self, train: Locomotive) -> None:
        self.trains.append(train)

    def add_waggon(self, waggon: RollingStock) -> None:
        self.waggons.append(waggon)

    def remove_train_at(self, index: int) -> Locomotive:
        return self.trains.pop(index)

    def remove_waggon_at(self, index: int) -> RollingStock:
        return self.waggons.pop(index)

    def move_train_up_at(self, index: int) -> None:
        _move(self.trains, index, -1)

    def move_train_down_at(self, index: int) -> None:
        _move(self.trains, index, +1)

    def move_waggon_up_at(self, index: int) -> None:
        _move(self.waggons, index, -1)

    def move_waggon_down_at(self, index: int) -> None:
        _move(self.waggons, index, +1)

    def __str__(self):
        return self.name


# ────────────────────────────────────────────────────────────────────────────
def _parse(records, model, kind: str):
    if not isinstance(records, list):
        raise InvalidSpec(f"{kind}s must be a list (got {type(records).__name__})")
    specs = []
    for i, raw in enumerate(records):
        if not isinstance(raw, dict):
            raise InvalidSpec(f"{kind} #{i}: expected an object (got {type(raw).__name__})")
        try:
            specs.append(model(**raw).to_spec())
        except (ValidationError, InvalidSpec) as err:
            raise InvalidSpec(f"{kind} #{i} ({raw.get('Name', '?')}): {err}") from err
    return specs


def load_trainset(path: Path | str) -> TrainSet:
    """Read a train set file.  Any invalid record rejects the whole file."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(path)

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as err:
            raise InvalidSpec(f"{path} is not valid JSON: {err}") from err

    if not isinstance(data, dict):
        raise InvalidSpec(f"{path}: expected a train set object (got {type(data).__name__})")

    trainset = TrainSet(
        name=data.get("Name") or DEFAULT_NAME,
        trains=_parse(data.get("Trains", []), TrainRecord, "Train"),
        waggons=_parse(data.get("Waggons", []), WaggonRecord, "Waggon"),
    )
    logger.info(
        "Loaded train set %r (%d trains, %d waggons) from %s",
        trainset.name, len(trainset.trains), len(trainset.waggons), path,
    )
    return trainset


def save_trainset(trainset: TrainSet, path: Path | str) -> Path:
    path = Path(path)
    data = {
        "Name": trainset.name,
        "Trains": [TrainRecord.from_spec(t).model_dump(by_alias=True) for t in trainset.trains],
        "Waggons": [WaggonRecord.from_spec(w).model_dump(by_alias=True) for w in trainset.waggons],
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    logger.info("Train set %r written to %s", trainset.name, path)
    return path
