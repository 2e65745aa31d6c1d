import pytest

from dddmodel.domain import Aggregate, DomainClass, Entity, ValueObject
from dddmodel.group import (
    AggregateGroup,
    AggregateNotFoundError,
    DomainGroup,
    Entities,
    EntityGroup,
    Group,
    ValueObjects,
    VOGroup,
    new_aggregate_group,
    new_entity_group,
    new_group,
    new_vo_group,
)
from dddmodel.objects import (
    Attr,
    Class,
    Function,
    General,
    Ident,
    Interface,
    InterfaceMethod,
    Obj,
    Pos,
)

DOMAIN = "example.com"


def test_group_basics():
    g = Group(name="testGroup")
    assert g.name == "testGroup"
    sub = Group(name="subGroup")
    g.append_groups(sub)
    assert len(g.sub_groups) == 1 and g.sub_groups[0] is sub
    cla = Class()
    g.append_objects(cla)
    assert len(g.objects()) == 1 and g.objects()[0] is cla


def test_new_group():
    a, b = General(), Class()
    g = new_group("g", a, b)
    assert g.name == "g"
    assert g.objects() == [a, b]
    assert g.sub_groups == []


def test_group_filters():
    g = Group(name="testGroup")
    c1, c2 = Class(), Class()
    g.append_objects(c1, c2)
    assert g.classes() == [c1, c2]
    g1, g2 = General(), General()
    g.append_objects(g1, g2)
    assert g.generals() == [g1, g2]
    f1, f2 = Function(), Function()
    g.append_objects(f1, f2, Function(receiver=Ident("R", "p")))
    assert g.functions() == [f1, f2]
    i1, i2 = Interface(), Interface()
    g.append_objects(i1, i2)
    assert g.interfaces() == [i1, i2]


def _mk(cls, name, **kw):
    return cls(Ident(name=name, pkg="testpkg"), Pos(), **kw)


def test_domain_group_methods():
    dg = DomainGroup(name="testGroup", domain=DOMAIN)
    cla = _mk(Class, "TestClass")
    gen = _mk(General, "TestGeneral")
    fn = _mk(Function, "TestFunction")
    iface = _mk(Interface, "TestInterface")
    dg.append_objects(cla, gen, fn, iface)

    classes = dg.domain_classes()
    assert len(classes) == 1 and classes[0].obj is cla
    generals = dg.domain_generals()
    assert len(generals) == 1 and generals[0].obj is gen
    functions = dg.domain_functions()
    assert len(functions) == 1 and functions[0].obj is fn
    interfaces = dg.domain_interfaces()
    assert len(interfaces) == 1 and interfaces[0].obj is iface
    assert classes[0].domain == DOMAIN


def test_domain_group_resolves_members():
    dg = DomainGroup(name="testGroup", domain=DOMAIN)
    attr = _mk(Attr, "TestAttr")
    method = _mk(Function, "TestFunction", receiver=Ident())
    free = _mk(Function, "FreeFunction")
    im = _mk(InterfaceMethod, "TestInterfaceMethod")
    cla = _mk(Class, "TestClass")
    cla.append_attribute(Ident("TestAttr", "testpkg"))
    cla.append_method(Ident("TestFunction", "testpkg"))
    cla.append_method(Ident("FreeFunction", "testpkg"))
    iface = _mk(Interface, "TestInterface")
    iface.append(InterfaceMethod(Ident("TestInterfaceMethod", "testpkg"), Pos()))
    dg.append_objects(attr, method, free, im, cla, iface)

    dc = dg.domain_classes()[0]
    assert [a.obj for a in dc.attributes] == [attr]
    assert [m.obj for m in dc.methods] == [method]
    di = dg.domain_interfaces()[0]
    assert [m.obj for m in di.methods] == [im]


def test_entity_group_construction():
    eg = new_entity_group(DOMAIN)
    assert eg.domain == DOMAIN
    assert eg.name == "entity"
    assert eg.objs == []
    objs = [Obj(), Obj(), Obj()]
    eg2 = new_entity_group(DOMAIN, *objs)
    assert len(eg2.objs) == 3
    assert all(a is b for a, b in zip(eg2.objs, objs))


def _two_classes():
    c1 = Class(Ident(name="i1", pkg="p1"), Pos())
    c2 = Class(Ident(name="i2", pkg="p2"), Pos())
    return c1, c2


def test_entities_methods():
    c1, c2 = _two_classes()
    entities = Entities([Entity(DomainClass(obj=c1)), Entity(DomainClass(obj=c2))])
    objects = entities.objects()
    assert len(objects) == 2
    assert objects[0] is entities[0] and objects[1] is entities[1]

    eg = EntityGroup(objs=[c1, c2])
    got = eg.entities()
    assert [e.identifier().id() for e in got] == [
        e.identifier().id() for e in entities
    ]
    assert [e.identifier().id() for e in got] == ["p1/i1", "p2/i2"]


def test_vo_group_construction():
    vg = new_vo_group(DOMAIN)
    assert vg.domain == DOMAIN
    assert vg.name == "valueobject"
    objs = [Obj(), Obj()]
    vg2 = new_vo_group(DOMAIN, *objs)
    assert len(vg2.objs) == 2
    assert all(a is b for a, b in zip(vg2.objs, objs))


def test_value_objects_objects():
    vos = ValueObjects([ValueObject(DomainClass(obj=Obj())), ValueObject(DomainClass(obj=Obj()))])
    objects = vos.objects()
    assert len(objects) == 2
    assert objects[0] is vos[0] and objects[1] is vos[1]


def test_vo_group_value_objects():
    c1, c2 = _two_classes()
    vg = VOGroup(objs=[c1, c2])
    got = vg.value_objects()
    assert [v.identifier().id() for v in got] == ["p1/i1", "p2/i2"]


def test_aggregate_group_construction():
    agg = Aggregate(entity=None, name="TestAggregate")
    ag = new_aggregate_group(agg, DOMAIN)
    assert ag.domain == DOMAIN
    assert ag.name == "TestAggregate"
    assert len(ag.objs) == 1 and ag.objs[0] is agg
    assert ag.domain_name() == DOMAIN


def _entity_group():
    entity = Class(Ident(name="TestAggregate"), Pos())
    return EntityGroup(objs=[entity], domain=DOMAIN)


def test_aggregate_group_resolves_entity():
    agg = Aggregate(entity=None, name="TestAggregate")
    ag = AggregateGroup(objs=[agg], sub_groups=[_entity_group()], domain=DOMAIN)
    got = ag.aggregate()
    assert got is agg
    assert got.entity is not None
    assert got.entity.identifier().name == "TestAggregate"


def test_aggregate_group_is_valid():
    agg = Aggregate(entity=None, name="TestAggregate")
    without = AggregateGroup(objs=[agg], domain=DOMAIN)
    assert without.is_valid() is False

    agg2 = Aggregate(entity=None, name="TestAggregate")
    with_entity = AggregateGroup(objs=[agg2], sub_groups=[_entity_group()], domain=DOMAIN)
    assert with_entity.is_valid() is True


def test_aggregate_group_without_aggregate():
    ag = AggregateGroup(name="missing", domain=DOMAIN)
    with pytest.raises(AggregateNotFoundError):
        ag.aggregate()
    assert ag.is_valid() is False