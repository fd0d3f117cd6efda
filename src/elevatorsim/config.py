from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from jproperties import Properties, PropertyError
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .simulation import DEFAULT_ARRIVAL_PROBABILITY
from .structures import ArrivalMode, BoardingPolicy, StructureVariant

logger = logging.getLogger(__name__)

# Used for keys missing from a property file, and in full when the file
# cannot be read or holds a malformed value.
PARSE_DEFAULTS: Dict[str, str] = {
    "structures": "list",
    "floors": "10",
    "elevators": "1",
    "elevatorCapacity": "10",
    "duration": "500",
}

# Replacements for non-positive counts once a configuration is loaded.
FALLBACK_FLOORS = 32
FALLBACK_ELEVATORS = 1
FALLBACK_CAPACITY = 10
FALLBACK_DURATION = 500

class SimulationConfiguration(BaseModel):
    """Immutable run configuration; zero counts mean "not configured"."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    structures: StructureVariant = StructureVariant.ARRAY
    num_floors: int = Field(0, alias="floors")
    num_elevators: int = Field(0, alias="elevators")
    elevator_capacity: int = Field(0, alias="elevatorCapacity")
    duration: int = 0
    boarding: BoardingPolicy = BoardingPolicy.DESTINATION
    arrivals: ArrivalMode = ArrivalMode.UNIFORM
    arrival_probability: float = Field(
        DEFAULT_ARRIVAL_PROBABILITY, alias="arrivalProbability", ge=0.0, le=1.0
    )
    seed: Optional[int] = None
    # Variant text as configured, echoed back verbatim.
    structures_text: Optional[str] = Field(None, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _keep_structures_text(cls, data: object) -> object:
        if isinstance(data, dict) and "structures" in data and data.get("structures_text") is None:
            raw = data["structures"]
            data = {**data, "structures_text": str(getattr(raw, "value", raw)).strip()}
        return data

    @field_validator("structures", mode="before")
    @classmethod
    def _parse_structures(cls, value: object) -> StructureVariant:
        return StructureVariant.parse(value)  # type: ignore[arg-type]

    @field_validator("boarding", "arrivals", mode="before")
    @classmethod
    def _normalize_choice(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("seed", mode="before")
    @classmethod
    def _blank_seed(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def with_fallbacks(self) -> "SimulationConfiguration":
        """Return a copy with every non-positive count replaced."""
        return self.model_copy(
            update={
                "num_floors": self.num_floors if self.num_floors > 0 else FALLBACK_FLOORS,
                "num_elevators": self.num_elevators if self.num_elevators > 0 else FALLBACK_ELEVATORS,
                "elevator_capacity": (
                    self.elevator_capacity if self.elevator_capacity > 0 else FALLBACK_CAPACITY
                ),
                "duration": self.duration if self.duration > 0 else FALLBACK_DURATION,
            }
        )

    def describe(self) -> List[str]:
        return [
            f"structures : {self.structures_text or self.structures.value}",
            f"Num Floors : {self.num_floors}",
            f"Num Elevators : {self.num_elevators}",
            f"Num elevatorCapacity :{self.elevator_capacity}",
            f"Num duration : {self.duration}",
        ]


def default_configuration() -> SimulationConfiguration:
    return SimulationConfiguration.model_validate(PARSE_DEFAULTS)


def load_properties(path: Union[str, Path]) -> Dict[str, str]:
    """Read a Java-style ``.properties`` file into a plain dict."""
    properties = Properties()
    with open(path, "rb") as handle:
        properties.load(handle, "utf-8")
    return {key: value.data for key, value in properties.items()}


def read_property_file(path: Union[str, Path]) -> SimulationConfiguration:
    """Load a property file, substituting defaults instead of failing."""
    try:
        properties = load_properties(path)
        return SimulationConfiguration.model_validate({**PARSE_DEFAULTS, **properties})
    except (OSError, UnicodeDecodeError, PropertyError, ValidationError) as exc:
        logger.warning("Could not read configuration from %s, using defaults: %s", path, exc)
        return default_configuration()


def load_configuration(path: Optional[Union[str, Path]] = None) -> SimulationConfiguration:
    """Read ``path`` when given, then apply the non-positive fallbacks."""
    config = read_property_file(path) if path is not None else SimulationConfiguration()
    return config.with_fallbacks()
