"""
Exception types raised by credcodec.
"""


class CredCodecError(Exception):
    """Base class for all credcodec errors."""


class InvalidArgumentError(CredCodecError, ValueError):
    """An input is outside the domain of the operation (never truncated)."""


class ConfigError(CredCodecError):
    """A configuration file could not be turned into a Config."""
