"""
Map Launcher - Pydantic Schemas
Directions data model, application descriptors and API request/responses
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================

class MapApp(str, Enum):
    """Supported map applications, in menu order."""
    APPLE = "apple"
    HERE = "here"
    GOOGLE = "google"
    YANDEX_NAVI = "yandexNavi"
    YANDEX_MAPS = "yandexMaps"
    CITYMAPPER = "citymapper"
    NAVIGON = "navigon"
    TRANSIT = "transit"
    WAZE = "waze"
    MOOVIT = "moovit"


class TransportMode(str, Enum):
    DRIVE = "drive"
    RIDE = "ride"
    BIKE = "bike"
    WALK = "walk"


class RepresentationKind(str, Enum):
    COORDINATES = "coordinates"
    ADDRESS = "address"


class FailureReason(str, Enum):
    """Why a deep link could not be produced."""
    NO_USABLE_DIRECTIONS = "no_usable_directions"
    UNKNOWN_APPLICATION = "unknown_application"
    UNSUPPORTED_REPRESENTATION = "unsupported_representation"
    APPLICATION_UNAVAILABLE = "application_unavailable"
    MALFORMED_URL = "malformed_url"


# =============================================================================
# Directions Models
# =============================================================================

class Coordinates(BaseModel):
    """
    A geographic coordinate.

    Out-of-range values are accepted; see utils.geo.is_valid_coordinate.
    """
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")


class DirectionsPoint(BaseModel):
    """A travel endpoint: coordinates and/or a free-text address, plus a display name."""
    coordinates: Optional[Coordinates] = None
    address: Optional[str] = None
    name: Optional[str] = None


class CoordinateDirections(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["coordinates"] = "coordinates"
    origin: Coordinates
    destination: Coordinates
    origin_name: Optional[str] = None
    destination_name: Optional[str] = None


class AddressDirections(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["address"] = "address"
    origin: str
    destination: str
    origin_name: Optional[str] = None
    destination_name: Optional[str] = None


DirectionsRepresentation = Annotated[
    Union[CoordinateDirections, AddressDirections],
    Field(discriminator="kind"),
]


# =============================================================================
# Application Descriptor
# =============================================================================

class MapApplicationDescriptor(BaseModel):
    """Static metadata for one supported map application."""
    model_config = ConfigDict(frozen=True)

    key: MapApp
    display_name: str
    uri_scheme_prefix: str
    supports_address_directions: bool = False
    supports_coordinate_directions: bool = True
    transport_mode_parameters: dict[TransportMode, str] = Field(default_factory=dict)
    transport_mode_key: Optional[str] = None

    def supports(self, kind: RepresentationKind) -> bool:
        if kind == RepresentationKind.ADDRESS:
            return self.supports_address_directions
        return self.supports_coordinate_directions


class ResolveResult(BaseModel):
    """Outcome of resolving directions for one application."""
    app: str
    uri: Optional[str] = None
    failure: Optional[FailureReason] = None
    representation: Optional[RepresentationKind] = None

    @property
    def ok(self) -> bool:
        return self.uri is not None


# =============================================================================
# API Models
# =============================================================================

class AppSummary(BaseModel):
    key: MapApp
    display_name: str
    uri_scheme_prefix: str
    supports_address_directions: bool
    supports_coordinate_directions: bool
    transport_modes: list[TransportMode] = []


class ResolveRequest(BaseModel):
    app: str = Field(..., min_length=1, description="Application key, e.g. 'google'")
    origin: DirectionsPoint
    destination: DirectionsPoint
    mode: TransportMode = TransportMode.DRIVE
    reachable_schemes: Optional[list[str]] = Field(
        None,
        description=(
            "Schemes the device can open, bare ('waze') or as prefixes ('waze://'); "
            "omit to treat every app as installed"
        ),
    )


class ResolveResponse(BaseModel):
    app: str
    ok: bool
    uri: Optional[str] = None
    failure: Optional[FailureReason] = None


class CanResolveRequest(BaseModel):
    app: str = Field(..., min_length=1)
    origin: DirectionsPoint
    destination: DirectionsPoint
    reachable_schemes: Optional[list[str]] = None


class CanResolveResponse(BaseModel):
    app: str
    can_resolve: bool


class AvailableAppsRequest(BaseModel):
    origin: Optional[DirectionsPoint] = None
    destination: Optional[DirectionsPoint] = None
    reachable_schemes: Optional[list[str]] = None
