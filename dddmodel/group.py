"""Groups of architecture objects and their domain views."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from .domain import (
    Aggregate,
    DomainAttr,
    DomainClass,
    DomainFunction,
    DomainGeneral,
    DomainInterface,
    Entity,
    ValueObject,
    new_domain_class,
)
from .objects import Attr, Class, Function, General, Ident, Interface, InterfaceMethod


class ComponentType(str, Enum):
    GENERAL = "general"
    FUNCTION = "function"
    CLASS = "class"
    INTERFACE = "interface"
    ENTITY = "entity"
    VALUE_OBJECT = "valueobject"
    REPOSITORY = "repository"
    FACTORY = "factory"


class AggregateNotFoundError(LookupError):
    """Raised when an aggregate group holds no aggregate."""


@dataclass(eq=False)
class Group:
    """A named collection of objects with nested groups."""

    name: str = ""
    objs: List[Any] = field(default_factory=list)
    sub_groups: List["Group"] = field(default_factory=list)

    def objects(self) -> List[Any]:
        return self.objs

    def append_groups(self, *args: "Group") -> None:
        self.sub_groups.extend(args)

    def append_objects(self, *args: Any) -> None:
        self.objs.extend(args)

    def classes(self) -> List[Class]:
        return [o for o in self.objs if isinstance(o, Class)]

    def generals(self) -> List[General]:
        return [o for o in self.objs if isinstance(o, General)]

    def functions(self) -> List[Function]:
        return [o for o in self.objs if isinstance(o, Function) and o.receiver is None]

    def interfaces(self) -> List[Interface]:
        return [o for o in self.objs if isinstance(o, Interface)]


def new_group(name: str, *args: Any) -> Group:
    return Group(name=name, objs=list(args))


@dataclass(eq=False)
class DomainGroup(Group):
    """A group whose objects belong to one domain."""

    domain: str = ""

    def _matching(self, ident: Ident):
        target = ident.id()
        return [o for o in self.objs if o.identifier().id() == target]

    def _domain_attr(self, ident: Ident) -> Optional[DomainAttr]:
        found = None
        for o in self._matching(ident):
            if isinstance(o, Attr):
                found = DomainAttr(obj=o, domain=self.domain)
        return found

    def _domain_function(self, ident: Ident) -> Optional[DomainFunction]:
        found = None
        for o in self._matching(ident):
            if isinstance(o, Function) and o.receiver is not None:
                found = DomainFunction(obj=o, domain=self.domain)
        return found

    def _interface_function(self, ident: Ident) -> Optional[DomainFunction]:
        found = None
        for o in self._matching(ident):
            if isinstance(o, InterfaceMethod):
                found = DomainFunction(obj=o, domain=self.domain)
        return found

    def domain_classes(self) -> List[DomainClass]:
        result = []
        for cla in self.classes():
            attrs = [a for a in map(self._domain_attr, cla.attributes()) if a is not None]
            methods = [m for m in map(self._domain_function, cla.methods()) if m is not None]
            result.append(new_domain_class(cla, self.domain, attrs, methods))
        return result

    def domain_generals(self) -> List[DomainGeneral]:
        return [DomainGeneral(obj=g, domain=self.domain) for g in self.generals()]

    def domain_functions(self) -> List[DomainFunction]:
        return [DomainFunction(obj=f, domain=self.domain) for f in self.functions()]

    def domain_interfaces(self) -> List[DomainInterface]:
        result = []
        for iface in self.interfaces():
            methods = [
                m for m in map(self._interface_function, iface.methods()) if m is not None
            ]
            result.append(DomainInterface(obj=iface, domain=self.domain, methods=methods))
        return result


class Entities(list):
    """A list of entities."""

    def objects(self) -> List[Any]:
        return list(self)


class ValueObjects(list):
    """A list of value objects."""

    def objects(self) -> List[Any]:
        return list(self)


class EntityGroup(DomainGroup):
    def entities(self) -> Entities:
        return Entities(Entity(dc) for dc in self.domain_classes())


class VOGroup(DomainGroup):
    def value_objects(self) -> ValueObjects:
        return ValueObjects(ValueObject(dc) for dc in self.domain_classes())


def new_entity_group(domain: str, *args: Any) -> EntityGroup:
    return EntityGroup(name=ComponentType.ENTITY.value, objs=list(args), domain=domain)


def new_vo_group(domain: str, *args: Any) -> VOGroup:
    return VOGroup(name=ComponentType.VALUE_OBJECT.value, objs=list(args), domain=domain)


class AggregateGroup(DomainGroup):
    def domain_name(self) -> str:
        return self.domain

    def aggregate(self) -> Aggregate:
        """Return the aggregate, resolving its root entity from entity subgroups."""
        for o in self.objs:
            if isinstance(o, Aggregate):
                if o.entity is None:
                    wanted = o.name.lower()
                    for sub in self.sub_groups:
                        if isinstance(sub, EntityGroup):
                            for entity in sub.entities():
                                if entity.identifier().name.lower() == wanted:
                                    o.entity = entity
                                    break
                return o
        raise AggregateNotFoundError(f"aggregate {self.name} not found")

    def is_valid(self) -> bool:
        try:
            agg = self.aggregate()
        except AggregateNotFoundError:
            return False
        return agg.entity is not None


def new_aggregate_group(aggregate: Aggregate, domain: str) -> AggregateGroup:
    return AggregateGroup(name=aggregate.name, objs=[aggregate], domain=domain)