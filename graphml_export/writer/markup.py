"""Event style XML writer used by the GraphML emitters.

The writer streams every event straight to a binary sink. Opening tags are
deferred until the first child or text is written so that elements without
content can be closed as ``<name attr="..." />``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, List, Optional, Tuple
from xml.sax.saxutils import escape

from graphml_export.errors import InvariantViolation, SinkError

_NAME_RE = re.compile(r"^[A-Za-z_][\w.\-]*(:[A-Za-z_][\w.\-]*)?$")
_ATTRIBUTE_ENTITIES = {'"': "&quot;"}
# Characters outside the XML 1.0 Char production, lone surrogates included.
_INVALID_CHAR_RE = re.compile("[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")
INDENT = "  "

Attributes = Iterable[Tuple[str, str]]


@dataclass
class _Frame:
    name: str
    has_children: bool = False
    has_text: bool = False


@dataclass
class XmlEventWriter:
    """Write XML events to ``sink`` with optional pretty printing.

    Usage:
        writer = XmlEventWriter(sink, pretty_print=True)
        writer.write_document_header()
        writer.start_element("graphml", [("xmlns", NAMESPACE)])
        writer.end_element()
        writer.close()
    """

    sink: BinaryIO
    pretty_print: bool = True
    encoding: str = "UTF-8"
    _stack: List[_Frame] = field(default_factory=list, init=False, repr=False)
    _pending: bool = field(default=False, init=False, repr=False)
    _started: bool = field(default=False, init=False, repr=False)
    _finished: bool = field(default=False, init=False, repr=False)

    def write_document_header(self, version: str = "1.0") -> None:
        """Emit the ``<?xml ...?>`` declaration; must be the first event."""

        if self._started:
            raise InvariantViolation("The XML declaration must be the first event")
        self._write(f'<?xml version="{version}" encoding="{self.encoding}"?>')
        self._started = True

    def start_element(self, name: str, attributes: Optional[Attributes] = None) -> None:
        """Open ``name``; the tag is flushed lazily."""

        if not _NAME_RE.match(name):
            raise InvariantViolation(f"Invalid element name: {name!r}")
        if self._finished:
            raise InvariantViolation(f"Cannot start <{name}> after the root element is closed")

        parts = [f"<{name}"]
        for attr_name, value in attributes or ():
            if not _NAME_RE.match(attr_name):
                raise InvariantViolation(f"Invalid attribute name: {attr_name!r}")
            _check_content(value, f"attribute {attr_name!r} of <{name}>")
            parts.append(f' {attr_name}="{escape(value, _ATTRIBUTE_ENTITIES)}"')

        if self._stack:
            self._flush_pending(closing=False)
            self._stack[-1].has_children = True
        self._newline()
        self._write("".join(parts))
        self._stack.append(_Frame(name))
        self._pending = True
        self._started = True

    def characters(self, text: str) -> None:
        """Write escaped text content inside the current element."""

        if not self._stack:
            raise InvariantViolation("Text content outside of any element")
        _check_content(text, f"text of <{self._stack[-1].name}>")
        self._flush_pending(closing=False)
        self._stack[-1].has_text = True
        self._write(escape(text))

    def end_element(self) -> None:
        """Close the innermost open element."""

        if not self._stack:
            raise InvariantViolation("end_element() called with no open element")
        if self._pending:
            self._flush_pending(closing=True)
            self._stack.pop()
        else:
            frame = self._stack.pop()
            if frame.has_children and not frame.has_text:
                self._newline()
            self._write(f"</{frame.name}>")
        if not self._stack:
            self._finished = True

    def close(self) -> None:
        """Verify that every opened element has been closed."""

        if self._stack:
            open_names = ", ".join(frame.name for frame in self._stack)
            raise InvariantViolation(f"Unclosed elements at end of document: {open_names}")

    @property
    def depth(self) -> int:
        return len(self._stack)

    def _flush_pending(self, *, closing: bool) -> None:
        if not self._pending:
            return
        self._pending = False
        self._write(" />" if closing else ">")

    def _newline(self) -> None:
        if self.pretty_print and self._started:
            self._write("\n" + INDENT * len(self._stack))

    def _write(self, chunk: str) -> None:
        try:
            data = chunk.encode(self.encoding)
        except UnicodeEncodeError as exc:
            raise InvariantViolation(f"Cannot encode output as {self.encoding}: {exc}") from exc
        try:
            self.sink.write(data)
        except (OSError, ValueError) as exc:
            raise SinkError(f"Sink rejected a write: {exc}") from exc


def _check_content(value: str, where: str) -> None:
    match = _INVALID_CHAR_RE.search(value)
    if match:
        raise InvariantViolation(
            f"Character {match.group()!r} at offset {match.start()} in {where} is not allowed in XML"
        )


__all__ = ["INDENT", "XmlEventWriter"]
