"""Failure categories for profile requests."""

from ..constants import ProfileStatus


class ProfileError(Exception):
    """Base class for categorised profile failures."""

    category = ProfileStatus.LOOKUP_FAILED


class InvalidPathError(ProfileError):
    """The path has fewer points than the operation needs."""

    category = ProfileStatus.INVALID_PATH


class LookupUnavailableError(ProfileError):
    """The elevation service could not be reached."""

    category = ProfileStatus.LOOKUP_UNAVAILABLE


class LookupFailedError(ProfileError):
    """The elevation service answered with an error or an unusable body."""

    category = ProfileStatus.LOOKUP_FAILED


class InvalidSampleCountError(InvalidPathError, ValueError):
    """Fewer samples were requested than a profile needs."""
