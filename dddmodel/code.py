"""Nodes, links and metadata produced while walking source code."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import Callable, Optional, Protocol


class RelationShip(IntEnum):
    """Cardinality of a link between two nodes."""

    ONE_ONE = 1
    ONE_MANY = 2


class NodeType(IntFlag):
    """Kind of a declaration found in the code."""

    GEN_IDENT = 1 << 0
    GEN_FUNC = 1 << 1
    GEN_ARRAY = 1 << 2
    GEN_MAP = 1 << 3
    GEN_STRUCT = 1 << 4
    GEN_STRUCT_FIELD = 1 << 5
    GEN_STRUCT_EMBEDDED_FIELD = 1 << 6
    GEN_INTERFACE = 1 << 7
    GEN_INTERFACE_METHOD = 1 << 8
    FUNC = 1 << 9
    ANY = 1 << 10
    NONE = 1 << 11


class CallGraphType(str, Enum):
    """Algorithm used to build a call graph."""

    STATIC = "static"
    CHA = "cha"
    RTA = "rta"
    POINTER = "pointer"


class CallGraphMode(IntEnum):
    """How thoroughly calls are analysed."""

    FAST = 1
    DEEP = 2


@dataclass(frozen=True)
class Meta:
    """Package, name and optional parent name of a declaration."""

    pkg: str
    name: str
    parent: str = ""

    def has_parent(self) -> bool:
        return self.parent != ""


def new_meta(pkg: str, name: str) -> Meta:
    return Meta(pkg=pkg, name=name)


def new_meta_with_parent(pkg: str, name: str, parent_name: str) -> Meta:
    return Meta(pkg=pkg, name=name, parent=parent_name)


@dataclass(frozen=True)
class Param:
    """A type parameter of a generic declaration."""

    name: str


class Params(list):
    """A list of type parameters."""

    def contains(self, name: str) -> bool:
        return any(param.name == name for param in self)


@dataclass(frozen=True)
class Position:
    """A location in a source file."""

    filename: str
    offset: int
    line: int
    column: int


@dataclass(eq=False)
class Node:
    """A declaration met while visiting the code."""

    meta: Meta
    pos: Optional[Position] = None
    parent: Optional["Node"] = None
    kind: NodeType = NodeType.GEN_IDENT


@dataclass(eq=False)
class Link:
    """A directed connection between two nodes."""

    source: Node
    target: Node
    relation: RelationShip = RelationShip.ONE_ONE


NodeCallback = Callable[[Node], None]
LinkCallback = Callable[[Link], None]


class Handler(Protocol):
    """Receives the nodes and links found in the code."""

    def node_handler(self, node: Node) -> None:
        """Handle one node."""

    def link_handler(self, link: Link) -> None:
        """Handle one link."""


__all__ = [
    "RelationShip",
    "NodeType",
    "CallGraphType",
    "CallGraphMode",
    "Meta",
    "new_meta",
    "new_meta_with_parent",
    "Param",
    "Params",
    "Position",
    "Node",
    "Link",
    "Handler",
    "NodeCallback",
    "LinkCallback",
    "field",
]