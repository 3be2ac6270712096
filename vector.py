"""Three-component vector value type shared by the field samples."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Vector3:
    """An immutable (x, y, z) triple. Units are tracked by the caller."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_components(cls, values: Sequence[float]) -> Vector3:
        """Build a vector from any sequence holding exactly three numbers."""

        if len(values) != 3:
            raise ValueError(f"Vector3 needs 3 components, got {len(values)}")
        x, y, z = values
        return cls(float(x), float(y), float(z))

    @property
    def components(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def magnitude(self) -> float:
        """Return the Euclidean norm sqrt(x² + y² + z²)."""

        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def add(self, other: Vector3) -> Vector3:
        """Return the component-wise sum as a new vector."""

        if not isinstance(other, Vector3):
            raise TypeError(f"cannot add {type(other).__name__} to Vector3")
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def format(self) -> str:
        return f"({format_number(self.x)}, {format_number(self.y)}, {format_number(self.z)})"

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __str__(self) -> str:
        return self.format()


def format_number(value: float) -> str:
    # Six significant digits, the same as printf "%g".
    return f"{value:g}"
