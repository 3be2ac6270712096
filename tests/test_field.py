import math

import pytest

from field import (
    EPSILON_0,
    MU_0,
    ElectricFieldSample,
    MagneticFieldSample,
    ampere_field_strength,
    coulomb_field_strength,
)
from vector import Vector3


@pytest.fixture
def electric_pair():
    return ElectricFieldSample(Vector3(1e5, 2.0, 3.0)), ElectricFieldSample(Vector3(4e5, 5.5, 6.6))


@pytest.fixture
def magnetic_pair():
    return MagneticFieldSample(Vector3(3.0, 4.0, 5.0)), MagneticFieldSample(Vector3(7.0, 8.0, 9.0))


def test_constants():
    assert EPSILON_0 == 8.854187817e-12
    assert MU_0 == pytest.approx(1.2566370614359173e-06)


def test_coulomb_field_strength():
    expected = 1e-6 / (4 * math.pi * 8.854187817e-12 * 0.0025)
    assert coulomb_field_strength(1e-6, 0.05) == pytest.approx(expected)
    assert coulomb_field_strength(1e-6, 0.05) == pytest.approx(3.595e6, rel=1e-3)


def test_ampere_field_strength():
    assert ampere_field_strength(10.0, 0.02) == pytest.approx(1.0e-4)


def test_zero_distance_gives_infinity():
    assert coulomb_field_strength(1e-6, 0.0) == math.inf
    assert coulomb_field_strength(-1e-6, 0.0) == -math.inf
    assert ampere_field_strength(10.0, 0.0) == math.inf


def test_zero_over_zero_gives_nan():
    assert math.isnan(coulomb_field_strength(0.0, 0.0))
    assert math.isnan(ampere_field_strength(0.0, 0.0))


def test_nan_input_propagates():
    assert math.isnan(coulomb_field_strength(math.nan, 1.0))
    assert math.isnan(ampere_field_strength(1.0, math.nan))


def test_sample_starts_with_zero_strength():
    sample = ElectricFieldSample()
    assert sample.vector == Vector3()
    assert sample.field_strength == 0.0


def test_electric_compute_stores_and_returns(electric_pair):
    e1, _ = electric_pair
    value = e1.compute_field_strength(1e-6, 0.05)
    assert value == e1.field_strength
    assert value == pytest.approx(1e-6 / (4 * math.pi * EPSILON_0 * 0.05**2))


def test_magnetic_compute_stores_and_returns(magnetic_pair):
    m1, _ = magnetic_pair
    value = m1.compute_field_strength(10.0, 0.02)
    assert value == m1.field_strength
    assert value == pytest.approx(1.0e-4)


def test_compute_can_be_repeated(magnetic_pair):
    m1, _ = magnetic_pair
    m1.compute_field_strength(10.0, 0.02)
    m1.compute_field_strength(5.0, 0.02)
    assert m1.field_strength == pytest.approx(0.5e-4)


def test_sample_magnitude_uses_vector(magnetic_pair):
    m1, _ = magnetic_pair
    assert m1.magnitude() == pytest.approx(math.sqrt(50.0))


def test_electric_addition_components(electric_pair):
    e1, e2 = electric_pair
    total = e1.add(e2)
    assert isinstance(total, ElectricFieldSample)
    assert total.vector.x == pytest.approx(5e5)
    assert total.vector.y == pytest.approx(7.5)
    assert total.vector.z == pytest.approx(9.6)


def test_magnetic_addition_components(magnetic_pair):
    m1, m2 = magnetic_pair
    total = m1 + m2
    assert isinstance(total, MagneticFieldSample)
    assert total.vector == Vector3(10.0, 12.0, 14.0)


def test_addition_does_not_combine_field_strength(electric_pair, magnetic_pair):
    e1, e2 = electric_pair
    e1.compute_field_strength(1e-6, 0.05)
    e2.compute_field_strength(2e-6, 0.1)
    assert e1.add(e2).field_strength == 0.0

    m1, m2 = magnetic_pair
    m1.compute_field_strength(10.0, 0.02)
    m2.compute_field_strength(3.0, 0.5)
    assert (m1 + m2).field_strength == 0.0


def test_addition_leaves_operands_untouched(electric_pair):
    e1, e2 = electric_pair
    e1.compute_field_strength(1e-6, 0.05)
    strength = e1.field_strength
    e1.add(e2)
    assert e1.vector == Vector3(1e5, 2.0, 3.0)
    assert e1.field_strength == strength


def test_mixed_sample_types_cannot_be_added(electric_pair, magnetic_pair):
    with pytest.raises(TypeError):
        electric_pair[0] + magnetic_pair[0]


def test_named_add_rejects_mixed_types(electric_pair, magnetic_pair):
    with pytest.raises(TypeError):
        electric_pair[0].add(magnetic_pair[0])
    with pytest.raises(TypeError):
        magnetic_pair[0].add(electric_pair[0])


def test_describe(electric_pair, magnetic_pair):
    assert (electric_pair[0] + electric_pair[1]).describe() == "Electric Field: (500000, 7.5, 9.6)"
    assert str(magnetic_pair[0] + magnetic_pair[1]) == "Magnetic Field: (10, 12, 14)"


def test_report_field_strength(electric_pair, magnetic_pair):
    e1, _ = electric_pair
    m1, _ = magnetic_pair
    e1.compute_field_strength(1e-6, 0.05)
    m1.compute_field_strength(10.0, 0.02)
    assert e1.report_field_strength() == "Calculated Electric Field: 3.59502e+06 N/C"
    assert m1.report_field_strength() == "Calculated Magnetic Field: 0.0001 T"
