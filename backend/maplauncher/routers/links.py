"""
Map Launcher Links Router
Deep link resolution for map/navigation apps
"""

import logging
from typing import Optional

from fastapi import APIRouter

from maplauncher.config import get_settings
from maplauncher.models.schemas import (
    AppSummary,
    AvailableAppsRequest,
    CanResolveRequest,
    CanResolveResponse,
    ResolveRequest,
    ResolveResponse,
)
from maplauncher.registry import application_summaries, to_summary
from maplauncher.services.launcher import MapLauncherService
from maplauncher.services.platform import StaticPlatform

logger = logging.getLogger(__name__)

router = APIRouter()


def _launcher_for(reachable_schemes: Optional[list[str]]) -> MapLauncherService:
    """Launcher answering reachability checks from the schemes the device reported."""
    settings = get_settings()
    platform = StaticPlatform(
        reachable_schemes=reachable_schemes,
        host_identifier=settings.host_app_name,
    )
    return MapLauncherService(platform)


@router.get("/apps", response_model=list[AppSummary])
async def list_apps():
    """
    List every supported map application in menu order.
    """
    return application_summaries()


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_link(request: ResolveRequest):
    """
    Resolve a deep link for one application.

    Resolution failures are returned in the `failure` field, not as HTTP errors:
    - no_usable_directions: points lack a common coordinate/address pair
    - unknown_application: `app` is not a supported key
    - unsupported_representation: the app cannot take these directions
    - application_unavailable: the app is not in `reachable_schemes`
    - malformed_url: the generated link did not parse
    """
    launcher = _launcher_for(request.reachable_schemes)
    result = launcher.resolve(
        request.app,
        request.origin,
        request.destination,
        request.mode,
    )
    return ResolveResponse(
        app=result.app,
        ok=result.ok,
        uri=result.uri,
        failure=result.failure,
    )


@router.post("/can-resolve", response_model=CanResolveResponse)
async def can_resolve_link(request: CanResolveRequest):
    """Check whether an app could handle the directions, without building a link."""
    launcher = _launcher_for(request.reachable_schemes)
    return CanResolveResponse(
        app=request.app,
        can_resolve=launcher.can_resolve(request.app, request.origin, request.destination),
    )


@router.post("/available", response_model=list[AppSummary])
async def available_apps(request: AvailableAppsRequest):
    """
    Apps the device can open, in menu order.
    When both origin and destination are given, only apps able to handle them are listed.
    """
    launcher = _launcher_for(request.reachable_schemes)
    descriptors = launcher.available_applications(request.origin, request.destination)
    logger.debug(f"{len(descriptors)} map apps available")
    return [to_summary(descriptor) for descriptor in descriptors]
