"""Configuration objects and enumerations for the field demonstration."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

Triple = Tuple[float, float, float]


class FieldType(Enum):
    """Which halves of the demonstration to run."""

    ELECTROSTATIC = auto()
    MAGNETOSTATIC = auto()
    COUPLED = auto()

    def label(self) -> str:
        if self is FieldType.ELECTROSTATIC:
            return "Electrostatic"
        if self is FieldType.MAGNETOSTATIC:
            return "Magnetostatic"
        return "Coupled"

    @property
    def includes_electric(self) -> bool:
        return self is not FieldType.MAGNETOSTATIC

    @property
    def includes_magnetic(self) -> bool:
        return self is not FieldType.ELECTROSTATIC

    @classmethod
    def from_name(cls, name: str) -> FieldType:
        """Parse a case-insensitive member name such as ``"coupled"``."""

        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(member.name.lower() for member in cls)
            raise ValueError(f"Unknown field type {name!r} (expected one of: {choices})") from None


@dataclass
class DemoConfig:
    """Literal inputs of the console demonstration."""

    field_type: FieldType = FieldType.COUPLED

    electric_a: Triple = (1e5, 2.0, 3.0)
    electric_b: Triple = (4e5, 5.5, 6.6)
    magnetic_a: Triple = (3.0, 4.0, 5.0)
    magnetic_b: Triple = (7.0, 8.0, 9.0)

    charge: float = 1e-6  # C
    charge_distance: float = 0.05  # m
    current: float = 10.0  # A
    wire_distance: float = 0.02  # m

    def set_field_type(self, field_type: FieldType) -> None:
        """Change which fields the demonstration covers."""

        self.field_type = field_type

    def describe(self) -> str:
        """Return a short human-readable summary of the configuration."""

        parts = [self.field_type.label()]
        if self.field_type.includes_electric:
            parts.append(f"Q={self.charge:g} C @ {self.charge_distance:g} m")
        if self.field_type.includes_magnetic:
            parts.append(f"I={self.current:g} A @ {self.wire_distance:g} m")
        return " • ".join(parts)
