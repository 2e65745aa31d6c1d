"""Relations between architecture objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List, Optional

from .objects import Obj


class RelationType(IntEnum):
    DEPENDENCY = 1
    COMPOSITION = 2
    EMBEDDING = 3
    IMPLEMENTATION = 4
    ASSOCIATION = 5


@dataclass(eq=False)
class Relation:
    """A typed relation from one object to another."""

    source: Obj
    target: Optional[Obj]
    rel_type: RelationType


class Dependence(Relation):
    def depends_on(self) -> Optional[Obj]:
        return self.target


class Composition(Relation):
    def child(self) -> Optional[Obj]:
        return self.target


class Embedding(Relation):
    def embedded(self) -> Optional[Obj]:
        return self.target


@dataclass(eq=False)
class Implementation(Relation):
    targets: List[Obj] = field(default_factory=list)

    def implements(self) -> List[Obj]:
        return self.targets

    def implemented(self, ifc: Obj) -> None:
        self.targets.append(ifc)


@dataclass(eq=False)
class Association(Relation):
    ship: Any = None

    def refer(self) -> Optional[Obj]:
        return self.target

    def association_type(self) -> Any:
        return self.ship


def new_dependence(source: Obj, target: Obj) -> Dependence:
    return Dependence(source, target, RelationType.DEPENDENCY)


def new_composition(source: Obj, target: Obj) -> Composition:
    return Composition(source, target, RelationType.COMPOSITION)


def new_embedding(source: Obj, target: Obj) -> Embedding:
    return Embedding(source, target, RelationType.EMBEDDING)


def new_implementation(source: Obj, target: Obj) -> Implementation:
    impl = Implementation(source, None, RelationType.IMPLEMENTATION)
    impl.implemented(target)
    return impl


def new_association(source: Obj, target: Obj, relationship: Any) -> Association:
    return Association(source, target, RelationType.ASSOCIATION, ship=relationship)


@dataclass(eq=False)
class RelationPos:
    """Positions of both ends of a relation."""

    source: Any = None
    target: Any = None


def new_relation_pos(source: Any, target: Any) -> RelationPos:
    return RelationPos(source, target)


def new_empty_relation_pos() -> RelationPos:
    return RelationPos()


@dataclass(eq=False)
class RelationMeta:
    """Relation type together with the positions of its ends."""

    rel_type: RelationType
    position: RelationPos


def new_relation_meta(rel_type: RelationType, source_pos: Any, target_pos: Any) -> RelationMeta:
    return RelationMeta(rel_type, RelationPos(source_pos, target_pos))