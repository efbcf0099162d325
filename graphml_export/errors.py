"""Failure taxonomy for GraphML serialization."""
from __future__ import annotations


class GraphMlError(Exception):
    """Base class for every error raised by :mod:`graphml_export`."""


class SinkError(GraphMlError, OSError):
    """The destination sink rejected a write.

    This is the only failure surfaced to callers of
    :meth:`graphml_export.graphml.GraphMl.to_writer`. The document may already
    be partially written to the sink.
    """


class InvariantViolation(GraphMlError, AssertionError):
    """An internal invariant of the serializer was broken.

    Raised for malformed element nesting, invalid element names or writes
    after the document is closed. These indicate a bug and are never handled
    inside the package.
    """


__all__ = ["GraphMlError", "InvariantViolation", "SinkError"]
