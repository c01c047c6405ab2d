"""
Map Launcher Exceptions
Failures raised while resolving a deep link
"""

from maplauncher.models.schemas import FailureReason


class LaunchError(Exception):
    """Base class for expected resolution failures."""

    reason: FailureReason

    def __init__(self, message: str = ""):
        super().__init__(message or self.reason.value)


class NoUsableDirections(LaunchError):
    reason = FailureReason.NO_USABLE_DIRECTIONS


class UnknownApplication(LaunchError):
    reason = FailureReason.UNKNOWN_APPLICATION


class UnsupportedRepresentation(LaunchError):
    reason = FailureReason.UNSUPPORTED_REPRESENTATION


class ApplicationUnavailable(LaunchError):
    reason = FailureReason.APPLICATION_UNAVAILABLE


class MalformedURL(LaunchError):
    reason = FailureReason.MALFORMED_URL
