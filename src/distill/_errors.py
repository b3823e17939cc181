"""Distill error hierarchy.

All distill-specific errors inherit from DistillError for easy catching.
"""


class DistillError(Exception):
    """Base error for all distill operations."""


class ConfigError(DistillError):
    """Invalid or missing configuration."""


class ContentError(DistillError):
    """Error while turning a source document into plain text."""


class CollectionError(DistillError):
    """The document collection could not be retrieved."""


class ExportError(DistillError):
    """Error while writing llms.txt output files."""
