"""Exception hierarchy shared by services and routes."""


class MissionPrayerError(Exception):
    """Base class for application errors."""


class SourceNotFoundError(MissionPrayerError):
    """No prayer topic document matched the configured prefix."""


class DocumentReadError(MissionPrayerError):
    """A prayer topic document exists but could not be read or decoded."""


class UpstreamNotConfiguredError(MissionPrayerError):
    """The upstream exec URL is not set."""


class UpstreamError(MissionPrayerError):
    """The upstream endpoint failed or returned an unusable payload."""
