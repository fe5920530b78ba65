"""Custom exceptions for mdtree."""


class MdtreeError(Exception):
    """Base exception for mdtree operations."""


class ConversionError(MdtreeError):
    """A node outside the supported element set reached a renderer."""


class ConfigurationError(MdtreeError):
    """Invalid configuration value."""
