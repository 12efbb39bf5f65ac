"""Exceptions raised by hamember."""


class HAMemberError(Exception):
    """Base class for all hamember errors."""


class ConfigurationMismatch(HAMemberError, ValueError):
    """Multi-instance mode is configured but this process cannot be identified.

    Startup must abort: running with an unknown identity in a redundant
    group risks two processes assuming the same role.
    """

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class AmbiguousAddressMatch(ConfigurationMismatch):
    """More than one configured address matched the target address."""

    def __init__(self, message: str, key: str | None = None, matches=()):
        super().__init__(message, key=key)
        self.matches = tuple(matches)


class ConfigFileError(HAMemberError, ValueError):
    """A configuration file could not be parsed."""
