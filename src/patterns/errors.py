"""Error definitions shared by the pattern examples."""

# ============================================================================
#                           General errors
# ============================================================================


class PatternError(Exception):
    """Base class for errors raised by the pattern examples."""


# ============================================================================
#                   Creational pattern errors
# ============================================================================


class UnknownPlantTypeError(PatternError, ValueError):
    """Raised when no plant factory exists for the requested plant type."""

    def __init__(self, plant_type: object) -> None:
        name = plant_type.__name__ if isinstance(plant_type, type) else plant_type
        super().__init__(f"No plant factory for plant type '{name}'.")
        self.plant_type = plant_type


class UnsupportedCountryError(PatternError, LookupError):
    """Raised when a currency is requested for an unknown country."""

    def __init__(self, country: object) -> None:
        super().__init__(f"No currency known for country {country!r}.")
        self.country = country


# ============================================================================
#                   Behavioral pattern errors
# ============================================================================


class UnknownFormatterError(PatternError, LookupError):
    """Raised when a string formatter name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown formatter '{name}'.")
        self.name = name
