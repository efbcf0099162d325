"""Weight exporters mapping node or edge weights to GraphML attributes."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Collection, Iterable, List, Protocol, Tuple


class WeightExporter(Protocol):
    """Callable turning a weight into ordered ``(name, value)`` pairs.

    Names may repeat; every pair becomes its own ``<data>`` element while the
    ``<key>`` declaration is written once.
    """

    def __call__(self, weight: Any) -> Iterable[Tuple[str, str]]:  # pragma: no cover - interface
        ...


def display_exporter(name: str = "weight", *, skip_none: bool = False) -> WeightExporter:
    """Return an exporter producing ``[(name, str(weight))]``.

    With ``skip_none`` a ``None`` weight yields no pairs instead of ``"None"``.
    """

    def export(weight: Any) -> List[Tuple[str, str]]:
        if skip_none and weight is None:
            return []
        return [(name, str(weight))]

    return export


def attributes_exporter(exclude: Collection[str] = ()) -> WeightExporter:
    """Return an exporter emitting one pair per item of a mapping weight.

    Items keep the mapping's order. Keys listed in ``exclude`` are skipped and
    a ``None`` weight yields no pairs.
    """

    excluded = frozenset(exclude)

    def export(weight: Any) -> List[Tuple[str, str]]:
        if weight is None:
            return []
        if not isinstance(weight, Mapping):
            raise TypeError(f"attributes_exporter expects a mapping, got {type(weight).__name__}")
        return [(str(key), str(value)) for key, value in weight.items() if key not in excluded]

    return export


__all__ = ["WeightExporter", "attributes_exporter", "display_exporter"]
