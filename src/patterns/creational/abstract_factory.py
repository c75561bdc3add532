"""Abstract Factory: choose a concrete plant factory from a plant type.

Callers ask `PlantFactory.create_factory` for a factory by the *type* of plant
they want and then only talk to the abstract `PlantFactory` interface.
"""

import abc
import logging

from patterns.errors import UnknownPlantTypeError

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class Plant(abc.ABC):
    """Marker base class for everything a plant factory can make."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class OrangePlant(Plant):
    """An orange plant."""


class ApplePlant(Plant):
    """An apple plant."""


class PlantFactory(abc.ABC):
    """Contract for a factory of plants."""

    @abc.abstractmethod
    def make_plant(self) -> Plant:
        """Create a new plant."""

    @staticmethod
    def create_factory(plant_type: type[Plant]) -> "PlantFactory":
        """Return the factory responsible for `plant_type`.

        Args:
            plant_type: The concrete plant class the caller wants to produce.

        Returns:
            A factory whose `make_plant()` returns instances of `plant_type`.

        Raises:
            UnknownPlantTypeError: If no factory is registered for `plant_type`.
        """
        try:
            factory_cls = _FACTORIES[plant_type]
        except KeyError as e:
            raise UnknownPlantTypeError(plant_type) from e
        logger.debug("Selected %s for %s", factory_cls.__name__, plant_type.__name__)
        return factory_cls()


class AppleFactory(PlantFactory):
    """Factory producing `ApplePlant` instances."""

    def make_plant(self) -> Plant:
        return ApplePlant()


class OrangeFactory(PlantFactory):
    """Factory producing `OrangePlant` instances."""

    def make_plant(self) -> Plant:
        return OrangePlant()


_FACTORIES: dict[type[Plant], type[PlantFactory]] = {
    OrangePlant: OrangeFactory,
    ApplePlant: AppleFactory,
}

PLANT_TYPES: dict[str, type[Plant]] = {
    "orange": OrangePlant,
    "apple": ApplePlant,
}


def plant_type_for(name: str) -> type[Plant]:
    """Resolve a plant name such as "orange" (case-insensitive) to its type."""
    try:
        return PLANT_TYPES[name.strip().lower()]
    except KeyError as e:
        raise UnknownPlantTypeError(name) from e
