"""Map Launcher Models Package"""

from maplauncher.models.schemas import (
    Coordinates,
    DirectionsPoint,
    CoordinateDirections,
    AddressDirections,
    DirectionsRepresentation,
    MapApp,
    TransportMode,
    RepresentationKind,
    FailureReason,
    MapApplicationDescriptor,
    ResolveResult,
)

__all__ = [
    "Coordinates",
    "DirectionsPoint",
    "CoordinateDirections",
    "AddressDirections",
    "DirectionsRepresentation",
    "MapApp",
    "TransportMode",
    "RepresentationKind",
    "FailureReason",
    "MapApplicationDescriptor",
    "ResolveResult",
]
