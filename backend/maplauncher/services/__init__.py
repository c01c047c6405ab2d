"""Map Launcher Services"""

from maplauncher.services.launcher import MapLauncherService
from maplauncher.services.platform import PlatformBridge, StaticPlatform, WebBrowserPlatform

__all__ = ["MapLauncherService", "PlatformBridge", "StaticPlatform", "WebBrowserPlatform"]
