"""Architecture objects: identifiers, positions, classes, functions and more."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

DOT_JOINER = "."


def _join_path(*parts: str) -> str:
    joined = "/".join(part for part in parts if part)
    if not joined:
        return ""
    cleaned = posixpath.normpath(joined)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


@dataclass(eq=False)
class Ident:
    """Name of an object within its package."""

    name: str = ""
    pkg: str = ""

    def id(self) -> str:
        return _join_path(self.pkg, self.name)

    def dir(self) -> str:
        return self.pkg

    def name_separator_length(self) -> int:
        return len(DOT_JOINER)

    def fix_tmp_name(self) -> None:
        """Drop a ``$``-suffix that marks an anonymous function."""
        self.name = self.name.split("$")[0]


def new_identifier(meta) -> Ident:
    name = meta.name
    if meta.has_parent():
        name = f"{meta.parent}{DOT_JOINER}{name}"
    return Ident(name=name, pkg=meta.pkg)


@dataclass(frozen=True)
class Pos:
    """A location in a source file; line -1 marks an unknown location."""

    filename: str = ""
    offset: int = 0
    line: int = 0
    column: int = 0

    def valid(self) -> bool:
        return self.line != -1

    def is_equal(self, other) -> bool:
        return (
            self.filename == other.filename
            and self.offset == other.offset
            and self.line == other.line
            and self.column == other.column
        )


def new_position(position) -> Pos:
    return Pos(position.filename, position.offset, position.line, position.column)


def empty_position() -> Pos:
    return Pos(filename="", offset=0, line=-1, column=0)


@dataclass(eq=False)
class Obj:
    """An identified object at a position."""

    id: Ident = field(default_factory=Ident)
    pos: Pos = field(default_factory=Pos)

    def identifier(self) -> Ident:
        return self.id

    def position(self) -> Pos:
        return self.pos


class General(Obj):
    """A plain named type."""


@dataclass(eq=False)
class MissingReceiver(Obj):
    """A receiver type whose methods were seen before its declaration."""

    method_ids: List[Ident] = field(default_factory=list)

    def append_method(self, ident: Ident) -> None:
        self.method_ids.append(ident)


@dataclass(eq=False)
class Class(Obj):
    attrs: List[Ident] = field(default_factory=list)
    method_ids: List[Ident] = field(default_factory=list)

    def attributes(self) -> List[Ident]:
        return self.attrs

    def append_attribute(self, ident: Ident) -> None:
        self.attrs.append(ident)

    def methods(self) -> List[Ident]:
        return self.method_ids

    def append_method(self, ident: Ident) -> None:
        self.method_ids.append(ident)


@dataclass(eq=False)
class Function(Obj):
    receiver: Optional[Ident] = None


class Attr(Obj):
    """A field of a class."""


class InterfaceMethod(Obj):
    """A method declared by an interface."""


@dataclass(eq=False)
class Interface(Obj):
    method_ids: List[Ident] = field(default_factory=list)

    def append(self, method: InterfaceMethod) -> None:
        self.method_ids.append(method.id)

    def methods(self) -> List[Ident]:
        return self.method_ids


class StringObj(Obj):
    """An object that stands for a bare string value."""


def _copy_parts(o) -> Tuple[Ident, Pos]:
    ident = o.identifier()
    return Ident(name=ident.name, pkg=ident.dir()), new_position(o.position())


def _copy_ident(ident) -> Ident:
    return Ident(name=ident.name, pkg=ident.dir())


def new_obj(o) -> Obj:
    return Obj(*_copy_parts(o))


def new_class(o, attrs: Iterable, methods: Iterable) -> Class:
    cla = Class(*_copy_parts(o))
    for attr in attrs:
        cla.append_attribute(_copy_ident(attr))
    for method in methods:
        cla.append_method(_copy_ident(method))
    return cla


def new_function(o, receiver) -> Function:
    rec = _copy_ident(receiver) if receiver is not None else None
    return Function(*_copy_parts(o), receiver=rec)


def new_attr(o) -> Attr:
    return Attr(*_copy_parts(o))


def new_interface(o, methods: Iterable) -> Interface:
    iface = Interface(*_copy_parts(o))
    for method in methods:
        iface.append(InterfaceMethod(*_copy_parts(method)))
    return iface


def new_general(o) -> General:
    return General(*_copy_parts(o))


def new_string_obj(value: str) -> StringObj:
    return StringObj(Ident(name=value, pkg=""), empty_position())