import dataclasses
import pytest
from common.models import FuelComposition
from common.exceptions import InvalidCompositionError
from conftest import make_fuel

@pytest.mark.parametrize("comp", [
    dict(hydrogen=0, carbon=0, sulfur=0, nitrogen=0, oxygen=0, water=0, ash=0),
    dict(hydrogen=3.2, carbon=54.4, sulfur=2.3, nitrogen=1.0, oxygen=3.1, water=20.0, ash=16.0),
    dict(hydrogen=10, carbon=40, sulfur=5, nitrogen=5, oxygen=10, water=15, ash=15),
    dict(hydrogen=0, carbon=0, sulfur=0, nitrogen=0, oxygen=0, water=100, ash=0),
])
def test_valid_compositions_construct(comp):
    fuel = FuelComposition(**comp)
    assert fuel.total() <= 100.0

@pytest.mark.parametrize("comp", [
    dict(hydrogen=10, carbon=50, sulfur=5, nitrogen=5, oxygen=10, water=15, ash=15),
    dict(hydrogen=0, carbon=100.001, sulfur=0, nitrogen=0, oxygen=0, water=0, ash=0),
    dict(hydrogen=3.2, carbon=54.4, sulfur=2.3, nitrogen=1.0, oxygen=3.1, water=20.0, ash=16.1),
])
def test_sum_over_100_rejected(comp):
    with pytest.raises(InvalidCompositionError):
        FuelComposition(**comp)

def test_nan_component_rejected():
    with pytest.raises(InvalidCompositionError):
        make_fuel(carbon=float("nan"))

def test_invalid_composition_is_value_error():
    with pytest.raises(ValueError, match="must not exceed 100%"):
        make_fuel(carbon=90.0)

def test_immutable_and_value_equality(sample_fuel):
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample_fuel.water = 0.0
    twin = FuelComposition(**sample_fuel.as_dict())
    assert twin == sample_fuel
    assert hash(twin) == hash(sample_fuel)

def test_from_mapping_requires_all_components():
    with pytest.raises(InvalidCompositionError, match="missing=\\['ash'\\]"):
        FuelComposition.from_mapping(dict(hydrogen=1, carbon=1, sulfur=1, nitrogen=1, oxygen=1, water=1))
    with pytest.raises(InvalidCompositionError, match="unknown=\\['chlorine'\\]"):
        FuelComposition.from_mapping(dict(hydrogen=1, carbon=1, sulfur=1, nitrogen=1, oxygen=1,
                                          water=1, ash=1, chlorine=1))

def test_from_mapping_still_checks_sum():
    with pytest.raises(InvalidCompositionError):
        FuelComposition.from_mapping(dict(hydrogen=50, carbon=50, sulfur=1, nitrogen=0,
                                          oxygen=0, water=0, ash=0))

def test_dry_and_combustible_mass_sample(sample_fuel):
    assert sample_fuel.dry_mass() == pytest.approx(64.0)
    assert sample_fuel.combustible_mass() == pytest.approx(57.6)

@pytest.mark.parametrize("water,ash", [(0, 0), (5.5, 12.0), (12, 9), (29, 0), (0, 25)])
def test_mass_formulas(water, ash):
    fuel = make_fuel(water=water, ash=ash)
    assert fuel.dry_mass() == pytest.approx(100 - water - ash)
    assert fuel.combustible_mass() == pytest.approx(
        fuel.dry_mass() - fuel.oxygen - fuel.nitrogen - fuel.sulfur)

@pytest.mark.parametrize("field", ["water", "ash"])
def test_dry_mass_strictly_decreases(field):
    values = [0.0, 2.5, 5.0, 10.0, 19.0]
    dry = [make_fuel(**{field: v}).dry_mass() for v in values]
    assert all(dry[i+1] < dry[i] for i in range(len(dry)-1))

@pytest.mark.parametrize("bad", [float("-inf"), float("inf")])
def test_infinite_component_rejected(bad):
    with pytest.raises(InvalidCompositionError, match="finite"):
        make_fuel(carbon=bad)
