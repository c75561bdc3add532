"""Unit tests for the abstract factory example."""

import pytest

from patterns.creational.abstract_factory import (
    AppleFactory,
    ApplePlant,
    OrangeFactory,
    OrangePlant,
    Plant,
    PlantFactory,
    plant_type_for,
)
from patterns.errors import UnknownPlantTypeError

# pylint: disable=too-few-public-methods


class GrapePlant(Plant):
    """A plant nobody knows how to make."""


def test_orange_factory_makes_orange_plant():
    """The factory created for OrangePlant produces orange plants."""
    plant_factory = PlantFactory.create_factory(OrangePlant)
    plant = plant_factory.make_plant()
    assert isinstance(plant, OrangePlant)


@pytest.mark.parametrize(
    "plant_type, factory_type",
    [(OrangePlant, OrangeFactory), (ApplePlant, AppleFactory)],
)
def test_create_factory_dispatches_on_type(plant_type, factory_type):
    """Each plant type maps to its own concrete factory."""
    assert isinstance(PlantFactory.create_factory(plant_type), factory_type)


def test_each_call_returns_new_plant():
    """Factories build a fresh plant every time."""
    factory = PlantFactory.create_factory(ApplePlant)
    assert factory.make_plant() is not factory.make_plant()


def test_unknown_plant_type_raises():
    """A plant type without a factory raises UnknownPlantTypeError."""
    with pytest.raises(UnknownPlantTypeError, match="GrapePlant") as exc_info:
        PlantFactory.create_factory(GrapePlant)
    assert exc_info.value.plant_type is GrapePlant
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize(
    "name, expected", [("orange", OrangePlant), (" Apple ", ApplePlant)]
)
def test_plant_type_for_is_case_insensitive(name, expected):
    """Plant names resolve regardless of case and surrounding whitespace."""
    assert plant_type_for(name) is expected


def test_plant_type_for_unknown_name():
    """Unknown plant names raise UnknownPlantTypeError naming the input."""
    with pytest.raises(UnknownPlantTypeError, match="'grape'"):
        plant_type_for("grape")


def test_plant_repr():
    """Plants render as their class name."""
    assert repr(OrangePlant()) == "OrangePlant()"
