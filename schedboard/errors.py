"""Custom exceptions."""


class SchedboardError(Exception):
    """Base exception for schedboard."""


class UnsupportedResourceError(SchedboardError):
    """Raised when a master list name is not one of the known resources."""


class InvalidConfigError(SchedboardError):
    """Raised when a configuration value cannot be parsed."""


class DuplicateItemError(SchedboardError):
    """Raised when a master list already holds an entry with the same name."""
