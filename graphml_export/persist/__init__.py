"""Persistence utilities for graph exports."""

from .export import GraphExporter

__all__ = ["GraphExporter"]
