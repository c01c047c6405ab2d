"""
Map Launcher Registry
Fixed table of supported map applications and their capabilities
"""

from typing import Optional, Union

from maplauncher.exceptions import UnknownApplication
from maplauncher.models.schemas import (
    AppSummary,
    MapApp,
    MapApplicationDescriptor,
    TransportMode,
)


_DESCRIPTORS: tuple[MapApplicationDescriptor, ...] = (
    MapApplicationDescriptor(
        key=MapApp.APPLE,
        display_name="Apple Maps",
        uri_scheme_prefix="",
        supports_address_directions=True,
        transport_mode_parameters={
            TransportMode.DRIVE: "d",
            TransportMode.WALK: "w",
            TransportMode.RIDE: "r",
        },
        transport_mode_key="dirflg",
    ),
    MapApplicationDescriptor(
        key=MapApp.HERE,
        display_name="HERE Maps",
        uri_scheme_prefix="here-route://",
        transport_mode_parameters={
            TransportMode.DRIVE: "d",
            TransportMode.WALK: "w",
            TransportMode.BIKE: "b",
            TransportMode.RIDE: "pt",
        },
        transport_mode_key="m",
    ),
    MapApplicationDescriptor(
        key=MapApp.GOOGLE,
        display_name="Google Maps",
        uri_scheme_prefix="comgooglemaps://",
        supports_address_directions=True,
        transport_mode_parameters={
            TransportMode.DRIVE: "driving",
            TransportMode.RIDE: "transit",
            TransportMode.BIKE: "bicycling",
            TransportMode.WALK: "walking",
        },
        transport_mode_key="directionsmode",
    ),
    MapApplicationDescriptor(
        key=MapApp.YANDEX_NAVI,
        display_name="Yandex Navigator",
        uri_scheme_prefix="yandexnavi://",
    ),
    MapApplicationDescriptor(
        key=MapApp.YANDEX_MAPS,
        display_name="Yandex Maps",
        uri_scheme_prefix="yandexmaps://",
        transport_mode_parameters={
            TransportMode.DRIVE: "auto",
            TransportMode.RIDE: "mt",
            TransportMode.WALK: "pd",
        },
        transport_mode_key="rtt",
    ),
    MapApplicationDescriptor(
        key=MapApp.CITYMAPPER,
        display_name="Citymapper",
        uri_scheme_prefix="citymapper://",
    ),
    MapApplicationDescriptor(
        key=MapApp.NAVIGON,
        display_name="Navigon",
        uri_scheme_prefix="navigon://",
    ),
    MapApplicationDescriptor(
        key=MapApp.TRANSIT,
        display_name="The Transit App",
        uri_scheme_prefix="transit://",
    ),
    MapApplicationDescriptor(
        key=MapApp.WAZE,
        display_name="Waze",
        uri_scheme_prefix="waze://",
    ),
    MapApplicationDescriptor(
        key=MapApp.MOOVIT,
        display_name="Moovit",
        uri_scheme_prefix="moovit://",
    ),
)

_BY_KEY: dict[MapApp, MapApplicationDescriptor] = {d.key: d for d in _DESCRIPTORS}


def describe(app_key: Union[MapApp, str]) -> MapApplicationDescriptor:
    """
    Look up the descriptor for an application.

    Args:
        app_key: A MapApp member or its string value (e.g. "yandexNavi")

    Returns:
        The application's descriptor

    Raises:
        UnknownApplication: If the key is not one of the supported apps
    """
    try:
        return _BY_KEY[MapApp(app_key)]
    except ValueError:
        raise UnknownApplication(f"Unknown map application: {app_key!r}") from None


def all_applications() -> list[MapApplicationDescriptor]:
    """All descriptors, in menu order."""
    return list(_DESCRIPTORS)


def application_summaries() -> list[AppSummary]:
    """Descriptor summaries for building a selection menu."""
    return [to_summary(descriptor) for descriptor in _DESCRIPTORS]


def to_summary(descriptor: MapApplicationDescriptor) -> AppSummary:
    return AppSummary(
        key=descriptor.key,
        display_name=descriptor.display_name,
        uri_scheme_prefix=descriptor.uri_scheme_prefix,
        supports_address_directions=descriptor.supports_address_directions,
        supports_coordinate_directions=descriptor.supports_coordinate_directions,
        transport_modes=[mode for mode in TransportMode if mode in descriptor.transport_mode_parameters],
    )


def transport_parameter(
    app_key: Union[MapApp, str],
    mode: TransportMode,
) -> Optional[str]:
    """
    App-specific code for a transport mode.
    Returns None when the app does not recognise the mode.
    """
    return describe(app_key).transport_mode_parameters.get(mode)
