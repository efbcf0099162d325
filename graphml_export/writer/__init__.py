"""Low-level markup writing."""

from .markup import XmlEventWriter

__all__ = ["XmlEventWriter"]
