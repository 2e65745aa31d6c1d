# dddmodel

`dddmodel` turns a stream of code facts into an architecture model for
domain-driven design. The facts are declarations (nodes) and the links between
them. The model is made of classes, interfaces, functions and the relations
between them, plus DDD groupings such as entities, value objects and aggregates.

## Install

```
pip install dddmodel
```

To run the tests:

```
pip install "dddmodel[test]"
pytest
```

## Modules

- `dddmodel.code` is the language-neutral code model:
  - `Node` has the fields `meta`, `pos`, `parent` and `kind`.
  - `Link` has the fields `source`, `target` and `relation`.
  - `NodeType` is a flag enum. `RelationShip` has the members `ONE_ONE` and `ONE_MANY`.
  - `CallGraphType` and `CallGraphMode` are enums.
  - `Meta` is built with `new_meta(pkg, name)` or `new_meta_with_parent(pkg, name, parent_name)`, and has `has_parent()`.
  - `Param` and `Params` hold type parameters. `Params.contains(name)` looks one up by name.
  - `Position` holds a filename, offset, line and column.
  - `Handler` is a protocol with `node_handler(node)` and `link_handler(link)`.
- `dddmodel.expr` works on type expressions:
  - `Ident`, `SelectorExpr`, `StarExpr`, `ArrayType` and `MapType` are small expression nodes. `ImportSpec` is an import clause.
  - `extract_expr`, `get_expr_info` and `get_exprs_info` break an expression into selector, name and cardinality (`ExprInfo`).
  - A map used as a key or value, such as a map of maps, raises `UnsupportedExpressionError`.
  - `Expression.visit(callback)` calls `callback(path, name, ship)` for each referenced type. It skips basic types (`is_basic_type`) and resolves selectors through the imports (`get_path`, `trim_double_quote`). Errors are collected in `Expression.errors`.
- `dddmodel.objects` holds the architecture objects:
  - `Ident` has `id()`, `dir()` and `fix_tmp_name()`. `Pos` has `valid()` and `is_equal()`. `Obj` is the base object.
  - The object kinds are `General`, `Class`, `Function`, `Attr`, `Interface`, `InterfaceMethod`, `MissingReceiver` and `StringObj`.
  - The constructors `new_identifier`, `new_position`, `empty_position`, `new_obj`, `new_class`, `new_function`, `new_attr`, `new_interface`, `new_general` and `new_string_obj` build these.
- `dddmodel.relation` holds the relations:
  - `Dependence`, `Composition`, `Embedding`, `Implementation` and `Association`, with the matching `new_*` constructors.
  - `RelationType` is the enum of relation kinds.
  - `RelationPos` and `RelationMeta` are built with `new_relation_pos`, `new_empty_relation_pos` and `new_relation_meta`.
- `dddmodel.domain` places objects inside a named domain:
  - `DomainObj` and `DomainIdent`. A `DomainIdent.id()` is relative to the last segment of the domain.
  - `DomainGeneral`, `DomainFunction`, `DomainAttr`, `DomainInterface`, `DomainClass`, `Entity`, `ValueObject` and `Aggregate`, with the `new_*` constructors.
- `dddmodel.group` holds the groupings:
  - `Group` (`new_group`) and `DomainGroup`.
  - `EntityGroup` (`new_entity_group`, `entities()`) and `VOGroup` (`new_vo_group`, `value_objects()`).
  - `AggregateGroup` (`new_aggregate_group`). Its `aggregate()` finds the root entity in entity subgroups by case-insensitive name. It raises `AggregateNotFoundError` when the group holds no aggregate. `is_valid()` reports whether a root entity was found.
- `dddmodel.codehandler` has `CodeHandler`, a `Handler` that stores objects and relations in repositories you supply.

## Example

```python
from dddmodel.code import Link, Node, NodeType, Position, new_meta, new_meta_with_parent
from dddmodel.codehandler import CodeHandler
from dddmodel.group import new_entity_group


class MemoryObjects:
    def __init__(self):
        self.items = {}

    def insert(self, obj):
        self.items[obj.identifier().id()] = obj

    def find(self, ident):
        return self.items.get(ident.id())


class MemoryRelations(list):
    def insert(self, relation):
        self.append(relation)


objects, relations = MemoryObjects(), MemoryRelations()
handler = CodeHandler(scope="shop", obj_repo=objects, rel_repo=relations)

order = Node(meta=new_meta("shop/order", "Order"),
             pos=Position("order.go", 20, 3, 6), kind=NodeType.GEN_STRUCT)
lines = Node(meta=new_meta_with_parent("shop/order", "Lines", "Order"),
             pos=Position("order.go", 40, 4, 2), parent=order,
             kind=NodeType.GEN_STRUCT_FIELD)

handler.node_handler(order)
handler.node_handler(lines)
handler.link_handler(Link(order, lines))

cla = objects.items["shop/order/Order"]
print([a.name for a in cla.attributes()])   # ['Order.Lines']
print(type(relations[0]).__name__)          # Composition

group = new_entity_group("shop/order", cla, objects.items["shop/order/Order.Lines"])
entity = group.entities()[0]
print(entity.identifier().id())             # order/Order
print(len(entity.attributes))               # 1
```

A repository needs two methods:

- `insert(obj)` stores an object. It raises an exception when it cannot store the object.
- `find(identifier)` returns the stored object or `None`.

`CodeHandler` records every exception from `insert` in its `errors` list and carries on. The same goes for fields and interface methods that arrive without a parent. One bad declaration does not stop the walk.

Links are kept only when the package paths of both ends contain `scope`. Links whose kinds do not form a known relation are dropped.

## What this package does not do

`dddmodel` does not read or parse source files. It does not build call graphs or find interface implementations. The nodes and links must come from your own code walker.

It has no storage of its own: objects and relations go to the repositories you pass in.

It has no command-line tool and does not draw diagrams.