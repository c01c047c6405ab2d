"""
Map Launcher Service
Chooses directions, checks capabilities and produces deep links
"""

import logging
from typing import Optional, Union

from maplauncher.exceptions import (
    ApplicationUnavailable,
    LaunchError,
    MalformedURL,
    NoUsableDirections,
    UnsupportedRepresentation,
)
from maplauncher.models.schemas import (
    AddressDirections,
    CoordinateDirections,
    DirectionsPoint,
    MapApp,
    MapApplicationDescriptor,
    RepresentationKind,
    ResolveResult,
    TransportMode,
)
from maplauncher.registry import all_applications, describe
from maplauncher.services.platform import PlatformBridge
from maplauncher.utils.deep_links import Directions, build_directions_url
from maplauncher.utils.geo import is_valid_coordinate
from maplauncher.utils.query import is_well_formed_uri

logger = logging.getLogger(__name__)

AppKey = Union[MapApp, str]


class MapLauncherService:
    """Resolves travel requests into deep links for installed map apps."""

    def __init__(self, platform: PlatformBridge):
        self.platform = platform

    @staticmethod
    def choose_representation(
        origin: DirectionsPoint,
        destination: DirectionsPoint,
    ) -> Directions:
        """
        Pick coordinate or address directions for a pair of points.

        Coordinates win when both points have them; otherwise both points
        need a non-empty address.

        Raises:
            NoUsableDirections: If neither combination is available
        """
        if origin.coordinates is not None and destination.coordinates is not None:
            return CoordinateDirections(
                origin=origin.coordinates,
                destination=destination.coordinates,
                origin_name=origin.name,
                destination_name=destination.name,
            )
        if origin.address and destination.address:
            return AddressDirections(
                origin=origin.address,
                destination=destination.address,
                origin_name=origin.name,
                destination_name=destination.name,
            )
        raise NoUsableDirections("Both points need coordinates or both need an address")

    def is_reachable(self, app_key: AppKey) -> bool:
        """Whether the app can be opened on this platform. Apple Maps always can."""
        return self._reachable(describe(app_key))

    def _reachable(self, descriptor: MapApplicationDescriptor) -> bool:
        if descriptor.key == MapApp.APPLE:
            return True
        return self.platform.can_open_scheme(descriptor.uri_scheme_prefix)

    def _prepare(
        self,
        app_key: AppKey,
        origin: DirectionsPoint,
        destination: DirectionsPoint,
    ) -> tuple[MapApplicationDescriptor, Directions]:
        directions = self.choose_representation(origin, destination)
        descriptor = describe(app_key)

        kind = RepresentationKind(directions.kind)
        if not descriptor.supports(kind):
            raise UnsupportedRepresentation(
                f"{descriptor.display_name} does not accept {kind.value} directions"
            )
        if isinstance(directions, CoordinateDirections) and not (
            is_valid_coordinate(directions.origin)
            and is_valid_coordinate(directions.destination)
        ):
            raise UnsupportedRepresentation("Directions contain an invalid coordinate")

        if not self._reachable(descriptor):
            raise ApplicationUnavailable(f"{descriptor.display_name} is not installed")

        return descriptor, directions

    def resolve(
        self,
        app_key: AppKey,
        origin: DirectionsPoint,
        destination: DirectionsPoint,
        mode: TransportMode = TransportMode.DRIVE,
    ) -> ResolveResult:
        """
        Build the deep link for one application.

        Args:
            app_key: Target application
            origin: Starting point
            destination: End point
            mode: Requested transport mode

        Returns:
            ResolveResult carrying either the URI or the failure reason
        """
        app = app_key.value if isinstance(app_key, MapApp) else str(app_key)

        try:
            descriptor, directions = self._prepare(app_key, origin, destination)
            uri = build_directions_url(
                directions,
                descriptor,
                mode,
                partner_id=self.platform.host_application_identifier(),
            )
            if not is_well_formed_uri(uri):
                raise MalformedURL(f"Generated link is not a valid URI: {uri!r}")
        except LaunchError as e:
            logger.info(f"Cannot resolve directions for {app}: {e.reason.value} ({e})")
            return ResolveResult(app=app, failure=e.reason)

        logger.debug(f"Resolved {app} ({directions.kind}): {uri}")
        return ResolveResult(
            app=descriptor.key.value,
            uri=uri,
            representation=RepresentationKind(directions.kind),
        )

    def can_resolve(
        self,
        app_key: AppKey,
        origin: DirectionsPoint,
        destination: DirectionsPoint,
    ) -> bool:
        """Same checks as resolve, without building a URL."""
        try:
            self._prepare(app_key, origin, destination)
        except LaunchError:
            return False
        return True

    def available_applications(
        self,
        origin: Optional[DirectionsPoint] = None,
        destination: Optional[DirectionsPoint] = None,
    ) -> list[MapApplicationDescriptor]:
        """
        Reachable applications in menu order.
        When both points are given, only apps able to handle them are kept.
        """
        if origin is not None and destination is not None:
            return [
                descriptor
                for descriptor in all_applications()
                if self.can_resolve(descriptor.key, origin, destination)
            ]
        return [descriptor for descriptor in all_applications() if self._reachable(descriptor)]

    def launch(
        self,
        app_key: AppKey,
        origin: DirectionsPoint,
        destination: DirectionsPoint,
        mode: TransportMode = TransportMode.DRIVE,
    ) -> bool:
        """Resolve and hand the link to the platform. False if nothing was opened."""
        result = self.resolve(app_key, origin, destination, mode)
        if not result.ok:
            return False
        return self.platform.open_uri(result.uri)
