"""Custom exception classes for upconf."""


class UpconfError(Exception):
    """Base exception for all upconf errors."""
    pass


class ConfigurationError(UpconfError):
    """Raised when store options are invalid or missing."""
    pass


class StoreIOError(UpconfError):
    """Raised when the configuration file cannot be read or written."""
    pass


class ParseError(UpconfError):
    """Raised when the configuration file contents cannot be parsed."""

    MESSAGE = "Error parsing your configuration file."

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)
