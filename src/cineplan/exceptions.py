"""Domain exceptions.

Only caller misuse raises. Seat conflicts and missing lookups are expected
conditions and are reported as ``False`` / ``None`` instead.
"""


class CinemaError(Exception):
    """Base class for all cineplan errors."""


class ConstructionError(CinemaError, ValueError):
    """A movie, room or show was built from invalid arguments."""


class NullReferenceError(CinemaError, TypeError):
    """A required object reference was ``None``."""


class CatalogLookupError(CinemaError, LookupError):
    """A movie or room name is not in the catalog."""

    def __init__(self, kind: str, name: str, known: list[str] | None = None) -> None:
        self.kind = kind
        self.name = name
        self.known = sorted(known or [])
        super().__init__(f"{kind.capitalize()} '{name}' not found. Add it first.")
