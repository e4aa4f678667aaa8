# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Captured location state.

A LocationRecord holds exactly what ``CosmicLocation.rehydrate`` needs.
Material is not stored: it is re-derived from (type, seed, params,
temperature). ``to_dict``/``from_dict`` map records to JSON-safe dicts
with enums by name and vectors as lists.
"""
import dataclasses
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any

from cosmogen.domain.constants import CosmicConstants
from cosmogen.domain.derivation import StructureParams, params_type_for
from cosmogen.domain.orbits import Orbit
from cosmogen.domain.structure import CosmicStructureType
from cosmogen.domain.vectors import ORIGIN, Vector3


@dataclass(frozen=True)
class LocationRecord:
    id: str
    seed: int
    structure_type: CosmicStructureType
    parent_id: str | None
    absolute_position: tuple[Vector3, ...]
    name: str | None
    velocity: Vector3 = ORIGIN
    orbit: Orbit | None = None
    position: Vector3 = ORIGIN
    # Ambient temperature (K) the material was derived with
    temperature: float = CosmicConstants.COSMIC_BACKGROUND_TEMPERATURE
    params: StructureParams | None = None

    def to_dict(self) -> dict:
        return record_to_dict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "LocationRecord":
        return record_from_dict(data)


def _encode(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.name
    if dataclasses.is_dataclass(value):
        return {f.name: _encode(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, (tuple, list)):
        return [_encode(v) for v in value]
    return value


def _decode(hint: Any, value: Any) -> Any:
    if value is None:
        return None
    origin = typing.get_origin(hint)
    if origin in (typing.Union, types.UnionType):
        options = [a for a in typing.get_args(hint) if a is not type(None)]
        if len(options) == 1:
            return _decode(options[0], value)
        return value
    if origin is tuple:
        args = typing.get_args(hint)
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_decode(args[0], v) for v in value)
        return tuple(_decode(a, v) for a, v in zip(args, value))
    if isinstance(hint, type) and issubclass(hint, Enum):
        return hint[value]
    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        return _decode_dataclass(hint, value)
    if hint is float:
        return float(value)
    return value


def _decode_dataclass(cls: type, data: dict) -> Any:
    hints = typing.get_type_hints(cls)
    kwargs = {
        f.name: _decode(hints[f.name], data[f.name])
        for f in dataclasses.fields(cls)
        if f.name in data
    }
    return cls(**kwargs)


def record_to_dict(record: LocationRecord) -> dict:
    """JSON-safe dict of a record."""
    return _encode(record)


def record_from_dict(data: dict) -> LocationRecord:
    """
    Rebuild a record from ``record_to_dict`` output.

    Raises:
        KeyError: If the structure type or an enum member is unknown.
    """
    structure_type = CosmicStructureType[data["structure_type"]]
    params = data.get("params")
    return LocationRecord(
        id=data["id"],
        seed=int(data["seed"]),
        structure_type=structure_type,
        parent_id=data.get("parent_id"),
        absolute_position=_decode(tuple[Vector3, ...], data.get("absolute_position") or [ORIGIN]),
        name=data.get("name"),
        velocity=_decode(Vector3, data.get("velocity") or ORIGIN),
        orbit=_decode(Orbit, data.get("orbit")),
        position=_decode(Vector3, data.get("position") or ORIGIN),
        temperature=float(data.get("temperature", CosmicConstants.COSMIC_BACKGROUND_TEMPERATURE)),
        params=_decode(params_type_for(structure_type), params) if params is not None else None,
    )
