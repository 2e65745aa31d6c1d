"""Architecture objects placed inside a named domain."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import List, Optional

from .objects import Attr, Class, Function, General, Ident, Interface, Obj, Pos


def _base(path: str) -> str:
    if path == "":
        return "."
    stripped = path.rstrip("/")
    if stripped == "":
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _join(*parts: str) -> str:
    joined = "/".join(part for part in parts if part)
    if not joined:
        return ""
    cleaned = posixpath.normpath(joined)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


@dataclass(eq=False)
class DomainIdent:
    """An identifier whose id is given relative to its domain."""

    ident: Ident
    domain: str = ""

    @property
    def name(self) -> str:
        return self.ident.name

    @property
    def pkg(self) -> str:
        return self.ident.pkg

    def dir(self) -> str:
        return self.ident.dir()

    def name_separator_length(self) -> int:
        return self.ident.name_separator_length()

    def id(self) -> str:
        full = self.ident.id()
        if full.startswith(self.domain):
            full = full[len(self.domain):]
        return _join(_base(self.domain), full)


@dataclass(eq=False)
class DomainObj:
    """An object together with the domain it belongs to."""

    obj: Obj
    domain: str = ""

    def identifier(self) -> DomainIdent:
        return DomainIdent(ident=self.obj.id, domain=self.domain)

    def origin_identifier(self) -> Ident:
        return self.obj.identifier()

    def position(self) -> Pos:
        return self.obj.position()


class DomainGeneral(DomainObj):
    """A plain named type in a domain."""


class DomainFunction(DomainObj):
    """A function or method in a domain."""


class DomainAttr(DomainObj):
    """A class field in a domain."""


@dataclass(eq=False)
class DomainInterface(DomainObj):
    methods: List[DomainFunction] = field(default_factory=list)


@dataclass(eq=False)
class DomainClass(DomainObj):
    attributes: List[DomainAttr] = field(default_factory=list)
    methods: List[DomainFunction] = field(default_factory=list)


@dataclass(eq=False)
class _ClassView:
    domain_class: DomainClass

    @property
    def domain(self) -> str:
        return self.domain_class.domain

    @property
    def attributes(self) -> List[DomainAttr]:
        return self.domain_class.attributes

    @property
    def methods(self) -> List[DomainFunction]:
        return self.domain_class.methods

    def identifier(self) -> DomainIdent:
        return self.domain_class.identifier()

    def origin_identifier(self) -> Ident:
        return self.domain_class.origin_identifier()

    def position(self) -> Pos:
        return self.domain_class.position()


class Entity(_ClassView):
    """A domain class with an identity."""


class ValueObject(_ClassView):
    """A domain class defined by its values."""


@dataclass(eq=False)
class Aggregate:
    """A named aggregate whose root entity may be found later."""

    entity: Optional[Entity]
    name: str

    def identifier(self) -> DomainIdent:
        if self.entity is None:
            raise LookupError(f"aggregate {self.name} has no root entity")
        return self.entity.identifier()

    def position(self) -> Pos:
        if self.entity is None:
            raise LookupError(f"aggregate {self.name} has no root entity")
        return self.entity.position()


def new_domain_class(cla: Class, domain: str, attrs, methods) -> DomainClass:
    return DomainClass(
        obj=cla,
        domain=domain,
        attributes=list(attrs or []),
        methods=list(methods or []),
    )


def new_domain_attr(attr: Attr, domain: str) -> DomainAttr:
    return DomainAttr(obj=attr, domain=domain)


def new_domain_function(func: Function, domain: str) -> DomainFunction:
    return DomainFunction(obj=func, domain=domain)


def new_domain_interface(iface: Interface, domain: str, methods) -> DomainInterface:
    return DomainInterface(obj=iface, domain=domain, methods=list(methods or []))


def new_domain_general(general: General, domain: str) -> DomainGeneral:
    return DomainGeneral(obj=general, domain=domain)


def new_entity(cla: DomainClass) -> Entity:
    return Entity(cla)


def new_aggregate(entity: Optional[Entity], name: str) -> Aggregate:
    return Aggregate(entity=entity, name=name)


def new_value_object(cla: DomainClass) -> ValueObject:
    return ValueObject(cla)