import pytest

from dddmodel.code import Position
from dddmodel.objects import Ident, Obj, Pos
from dddmodel.relation import (
    Association,
    Composition,
    Dependence,
    Embedding,
    Implementation,
    Relation,
    RelationPos,
    RelationType,
    new_association,
    new_composition,
    new_dependence,
    new_embedding,
    new_empty_relation_pos,
    new_implementation,
    new_relation_meta,
    new_relation_pos,
)


@pytest.fixture
def source():
    return Obj(Ident("fromObj", "package1"), Pos("file1.txt", 100, 5, 10))


@pytest.fixture
def target():
    return Obj(Ident("toObj", "package2"), Pos("file2.txt", 200, 8, 15))


@pytest.mark.parametrize("rel_type", [RelationType.ASSOCIATION, RelationType.COMPOSITION])
def test_relation_fields(source, target, rel_type):
    rel = Relation(source, target, rel_type)
    assert rel.rel_type == rel_type
    assert rel.source is source


def test_dependence_depends_on(source, target):
    dep = Dependence(source, target, RelationType.ASSOCIATION)
    assert dep.depends_on() is target


def test_new_dependence(source, target):
    dep = new_dependence(source, target)
    assert dep.rel_type == RelationType.DEPENDENCY
    assert dep.source is source
    assert dep.depends_on() is target


def test_composition_child(source, target):
    assert Composition(source, target, RelationType.COMPOSITION).child() is target


def test_new_composition(source, target):
    comp = new_composition(source, target)
    assert comp.rel_type == RelationType.COMPOSITION
    assert comp.source is source
    assert comp.child() is target


def test_embedding_embedded(source, target):
    assert Embedding(source, target, RelationType.EMBEDDING).embedded() is target


def test_new_embedding(source, target):
    emb = new_embedding(source, target)
    assert emb.rel_type == RelationType.EMBEDDING
    assert emb.source is source
    assert emb.embedded() is target


def test_implementation_implemented(source, target):
    other = Obj(Ident("toObj2", "package3"), Pos("file3.txt", 300, 12, 20))
    impl = Implementation(source, None, RelationType.IMPLEMENTATION)
    impl.implemented(target)
    impl.implemented(other)
    assert impl.implements() == [target, other]


def test_new_implementation(source, target):
    impl = new_implementation(source, target)
    assert impl.rel_type == RelationType.IMPLEMENTATION
    assert impl.source is source
    assert impl.implements() == [target]
    assert impl.target is None


def test_association_methods(source, target):
    assoc = Association(source, target, RelationType.ASSOCIATION, ship=RelationType.ASSOCIATION)
    assert assoc.refer() is target
    assert assoc.association_type() == RelationType.ASSOCIATION


def test_new_association(source, target):
    assoc = new_association(source, target, RelationType.ASSOCIATION)
    assert assoc.rel_type == RelationType.ASSOCIATION
    assert assoc.source is source
    assert assoc.association_type() == RelationType.ASSOCIATION


def test_new_relation_meta():
    from_pos = Position("from_file.txt", 100, 5, 10)
    to_pos = Position("to_file.txt", 200, 8, 15)
    meta = new_relation_meta(RelationType.ASSOCIATION, from_pos, to_pos)
    assert meta.rel_type == RelationType.ASSOCIATION
    assert meta.position.source is from_pos
    assert meta.position.target is to_pos


def test_relation_pos_fields():
    from_pos = Position("from_file.txt", 100, 5, 10)
    to_pos = Position("to_file.txt", 200, 8, 15)
    rpos = RelationPos(from_pos, to_pos)
    assert rpos.source is from_pos
    assert rpos.target is to_pos


def test_new_relation_pos():
    from_pos = Position("from_file.txt", 100, 5, 10)
    to_pos = Position("to_file.txt", 200, 8, 15)
    rpos = new_relation_pos(from_pos, to_pos)
    assert rpos.source is from_pos
    assert rpos.target is to_pos


def test_new_empty_relation_pos():
    rpos = new_empty_relation_pos()
    assert rpos.source is None
    assert rpos.target is None