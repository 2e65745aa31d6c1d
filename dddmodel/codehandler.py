"""Turns visited code nodes and links into architecture objects and relations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol

from .code import Link, Node, NodeType
from .objects import (
    Attr,
    Class,
    Function,
    General,
    Ident,
    Interface,
    InterfaceMethod,
    MissingReceiver,
    Obj,
    Pos,
    empty_position,
    new_identifier,
    new_position,
)
from .relation import (
    Relation,
    new_association,
    new_composition,
    new_dependence,
    new_embedding,
    new_implementation,
)


class ObjectRepository(Protocol):
    def find(self, ident: Any) -> Optional[Any]: ...

    def insert(self, obj: Any) -> None: ...


class RelationRepository(Protocol):
    def insert(self, relation: Relation) -> None: ...


_GENERAL_KINDS = (
    NodeType.GEN_IDENT,
    NodeType.GEN_FUNC,
    NodeType.GEN_ARRAY,
    NodeType.GEN_MAP,
)

_ASSOCIATION = (
    NodeType.GEN_STRUCT_FIELD | NodeType.ANY,
    NodeType.GEN_STRUCT_EMBEDDED_FIELD | NodeType.ANY,
)
_IMPLEMENTATION = NodeType.ANY | NodeType.GEN_INTERFACE
_DEPENDENCE = NodeType.FUNC
_COMPOSITION = (
    NodeType.GEN_STRUCT | NodeType.GEN_STRUCT_FIELD,
    NodeType.ANY | NodeType.FUNC,
    NodeType.GEN_INTERFACE | NodeType.GEN_INTERFACE_METHOD,
)
_EMBEDDING = NodeType.GEN_STRUCT | NodeType.GEN_STRUCT_EMBEDDED_FIELD


def _position_of(position) -> Pos:
    return new_position(position) if position is not None else empty_position()


@dataclass(eq=False)
class CodeHandler:
    """Collects objects and relations; repository failures are kept in ``errors``."""

    scope: str = ""
    obj_repo: Optional[ObjectRepository] = None
    rel_repo: Optional[RelationRepository] = None
    errors: List[Exception] = field(default_factory=list)

    def _insert_obj(self, obj: Any) -> bool:
        try:
            self.obj_repo.insert(obj)
        except Exception as err:  # repository failures are collected, not fatal
            self.errors.append(err)
            return False
        return True

    def node_handler(self, node: Node) -> None:
        ident = new_identifier(node.meta)
        pos = _position_of(node.pos)
        kind = node.kind

        if kind in _GENERAL_KINDS:
            self._insert_obj(General(ident, pos))
        elif kind == NodeType.GEN_STRUCT:
            self._handle_class(ident, pos)
        elif kind in (NodeType.GEN_STRUCT_FIELD, NodeType.GEN_STRUCT_EMBEDDED_FIELD):
            if node.parent is None:
                self.errors.append(ValueError(f"struct field:{ident.name} without parent"))
                return
            self._handle_attribute(ident, pos, new_identifier(node.parent.meta))
        elif kind == NodeType.GEN_INTERFACE:
            self._insert_obj(Interface(ident, pos))
        elif kind == NodeType.GEN_INTERFACE_METHOD:
            if node.parent is None:
                self.errors.append(
                    ValueError(f"interface method:{ident.name} without parent")
                )
                return
            self._handle_interface_method(ident, pos, new_identifier(node.parent.meta))
        elif kind == NodeType.FUNC:
            if node.parent is not None:
                self._handle_func(
                    ident,
                    pos,
                    new_identifier(node.parent.meta),
                    _position_of(node.parent.pos),
                )
            else:
                self._handle_func(ident, pos, None, None)
        else:
            self._insert_obj(General(ident, pos))

    def _handle_class(self, ident: Ident, pos: Pos) -> None:
        cla = Class(ident, pos)
        existing = self.obj_repo.find(cla.identifier())
        if isinstance(existing, MissingReceiver):
            for method in existing.method_ids:
                cla.append_method(method)
        self._insert_obj(cla)

    def _handle_attribute(self, ident: Ident, pos: Pos, parent_id: Ident) -> None:
        attr = Attr(ident, pos)
        if not self._insert_obj(attr):
            return
        parent = self.obj_repo.find(parent_id)
        if isinstance(parent, Class):
            parent.append_attribute(attr.id)

    def _handle_func(
        self,
        ident: Ident,
        pos: Pos,
        parent_id: Optional[Ident],
        parent_pos: Optional[Pos],
    ) -> None:
        if not self._insert_obj(Function(ident, pos, receiver=parent_id)):
            return
        if parent_id is None:
            return
        parent = self.obj_repo.find(parent_id)
        if isinstance(parent, (Class, MissingReceiver)):
            parent.append_method(ident)
        elif parent is None:
            missing = MissingReceiver(
                parent_id, parent_pos or empty_position(), method_ids=[ident]
            )
            self._insert_obj(missing)

    def _handle_interface_method(self, ident: Ident, pos: Pos, parent_id: Ident) -> None:
        method = InterfaceMethod(ident, pos)
        if not self._insert_obj(method):
            return
        parent = self.obj_repo.find(parent_id)
        if isinstance(parent, Interface):
            parent.append(method)

    def link_handler(self, link: Link) -> None:
        source, target = link.source, link.target
        if self.scope not in source.meta.pkg or self.scope not in target.meta.pkg:
            return

        from_id = new_identifier(source.meta)
        from_id.fix_tmp_name()
        to_id = new_identifier(target.meta)
        to_id.fix_tmp_name()
        from_obj = Obj(from_id, _position_of(source.pos))
        to_obj = Obj(to_id, _position_of(target.pos))

        combined = source.kind | target.kind
        if combined in _ASSOCIATION:
            relation = new_association(from_obj, to_obj, link.relation)
        elif combined == _IMPLEMENTATION:
            relation = new_implementation(from_obj, to_obj)
        elif combined == _DEPENDENCE:
            relation = new_dependence(from_obj, to_obj)
        elif combined in _COMPOSITION:
            relation = new_composition(from_obj, to_obj)
        elif combined == _EMBEDDING:
            relation = new_embedding(from_obj, to_obj)
        else:
            return

        try:
            self.rel_repo.insert(relation)
        except Exception as err:  # repository failures are collected, not fatal
            self.errors.append(err)