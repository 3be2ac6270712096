"""Closed-form electric and magnetic field magnitudes and sampled fields."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import ClassVar, TypeVar

from logging_config import LOGGER_NAME
from vector import Vector3, format_number

logger = logging.getLogger(f"{LOGGER_NAME}.field")

EPSILON_0 = 8.854187817e-12  # Permittivity of free space (C^2/(N·m^2))
MU_0 = 4 * math.pi * 1e-7  # Permeability of free space (T·m/A)

SampleT = TypeVar("SampleT", bound="FieldSample")


def _divide(numerator: float, denominator: float) -> float:
    """Float division with IEEE-754 results for a zero denominator."""

    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def coulomb_field_strength(charge: float, distance: float) -> float:
    """Electric field magnitude (N/C) of a point charge at ``distance``."""

    return _divide(charge, 4 * math.pi * EPSILON_0 * distance * distance)


def ampere_field_strength(current: float, distance: float) -> float:
    """Magnetic field magnitude (T) around an infinite straight wire."""

    return _divide(MU_0 * current, 2 * math.pi * distance)


@dataclass
class FieldSample:
    """A vector sample carrying one derived field strength scalar.

    Addition combines the spatial components only: the result starts with a
    zero ``field_strength`` whatever the operands hold.
    """

    label: ClassVar[str] = "Field"
    unit: ClassVar[str] = ""

    vector: Vector3 = field(default_factory=Vector3)
    field_strength: float = 0.0

    def magnitude(self) -> float:
        return self.vector.magnitude()

    def add(self: SampleT, other: SampleT) -> SampleT:
        """Return a new sample of the same type with summed components."""

        if type(other) is not type(self):
            raise TypeError(
                f"cannot add {type(other).__name__} to {type(self).__name__}"
            )
        return type(self)(self.vector.add(other.vector))

    def format(self) -> str:
        return self.vector.format()

    def describe(self) -> str:
        return f"{self.label} Field: {self.format()}"

    def report_field_strength(self) -> str:
        return f"Calculated {self.label} Field: {format_number(self.field_strength)} {self.unit}"

    def __add__(self: SampleT, other: object) -> SampleT:
        if type(other) is not type(self):
            return NotImplemented
        return self.add(other)

    def __str__(self) -> str:
        return self.describe()


@dataclass
class ElectricFieldSample(FieldSample):
    """Vector sample whose scalar follows Coulomb's law."""

    label: ClassVar[str] = "Electric"
    unit: ClassVar[str] = "N/C"

    def compute_field_strength(self, charge: float, distance: float) -> float:
        """Store and return ``charge / (4π·ε₀·distance²)``."""

        self.field_strength = coulomb_field_strength(charge, distance)
        logger.debug(
            "Electric field for Q=%g C at r=%g m: %g N/C", charge, distance, self.field_strength
        )
        return self.field_strength


@dataclass
class MagneticFieldSample(FieldSample):
    """Vector sample whose scalar follows Ampère's law for a straight wire."""

    label: ClassVar[str] = "Magnetic"
    unit: ClassVar[str] = "T"

    def compute_field_strength(self, current: float, distance: float) -> float:
        """Store and return ``(μ₀·current) / (2π·distance)``."""

        self.field_strength = ampere_field_strength(current, distance)
        logger.debug(
            "Magnetic field for I=%g A at r=%g m: %g T", current, distance, self.field_strength
        )
        return self.field_strength
