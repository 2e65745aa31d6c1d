"""Extraction of referenced type names from type expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

from .code import RelationShip

_BASIC_TYPES = (
    "bool string int int8 int16 int32 int64 uint uint8 uint16 uint32 uint64 uintptr "
    "byte rune float32 float64 complex64 complex128 any interface{} error"
)


@dataclass
class Ident:
    name: str


@dataclass
class SelectorExpr:
    x: "Expr"
    sel: Ident


@dataclass
class StarExpr:
    x: "Expr"


@dataclass
class ArrayType:
    elt: "Expr"


@dataclass
class MapType:
    key: Optional["Expr"] = None
    value: Optional["Expr"] = None


Expr = Union[Ident, SelectorExpr, StarExpr, ArrayType, MapType]


@dataclass
class ImportSpec:
    """An import clause: the quoted path and an optional alias."""

    path: str
    name: Optional[str] = None


@dataclass(frozen=True)
class ExprInfo:
    sel: str
    val: str
    ship: Optional[RelationShip]


class UnsupportedExpressionError(ValueError):
    """Raised for type expressions that cannot be analysed."""


def extract_expr(expr: Expr) -> Tuple[str, str, Optional[RelationShip]]:
    """Return selector, name and cardinality of a type expression."""
    sel, val, ship = "", "", None
    if isinstance(expr, StarExpr):
        inner = expr.x
        if isinstance(inner, SelectorExpr):
            if isinstance(inner.x, Ident):
                sel = inner.x.name
            val, ship = inner.sel.name, RelationShip.ONE_ONE
        elif isinstance(inner, Ident):
            val, ship = inner.name, RelationShip.ONE_ONE
    elif isinstance(expr, SelectorExpr):
        if isinstance(expr.x, Ident):
            sel = expr.x.name
        val, ship = expr.sel.name, RelationShip.ONE_ONE
    elif isinstance(expr, Ident):
        val, ship = expr.name, RelationShip.ONE_ONE
    elif isinstance(expr, ArrayType):
        if isinstance(expr.elt, Ident):
            val, ship = expr.elt.name, RelationShip.ONE_MANY
    elif isinstance(expr, MapType):
        raise UnsupportedExpressionError(
            "map currently not supported yet, ignore at this time"
        )
    return sel, val, ship


def get_expr_info(expr: Expr) -> ExprInfo:
    return ExprInfo(*extract_expr(expr))


def get_exprs_info(expr: Expr) -> List[ExprInfo]:
    if isinstance(expr, MapType):
        return [get_expr_info(part) for part in (expr.key, expr.value)]
    return [get_expr_info(expr)]


def is_basic_type(name: str) -> bool:
    return name in _BASIC_TYPES


def _base(path: str) -> str:
    if path == "":
        return "."
    stripped = path.rstrip("/")
    if stripped == "":
        return "/"
    return stripped.rsplit("/", 1)[-1]


def trim_double_quote(text: str) -> str:
    return text.removesuffix('"').removeprefix('"')


def get_path(imports: List[ImportSpec], name: str) -> str:
    """Return the import path that the selector ``name`` refers to."""
    for spec in imports:
        path = trim_double_quote(spec.path)
        if spec.name is not None and spec.name == name:
            return path
        if spec.name is None and _base(path) == name:
            return path
    return ""


@dataclass
class Expression:
    """A field type expression within a package and its file's imports."""

    expr: Expr
    pkg_id: str
    imports: List[ImportSpec] = field(default_factory=list)
    errors: List[Exception] = field(default_factory=list)

    def visit(self, callback: Callable[[str, str, Optional[RelationShip]], None]) -> None:
        """Call ``callback(path, name, ship)`` for each referenced type."""
        try:
            infos = get_exprs_info(self.expr)
        except UnsupportedExpressionError as err:
            self.errors.append(err)
            return
        for info in infos:
            if info.sel == "":
                if is_basic_type(info.val):
                    continue
                path = self.pkg_id
            else:
                path = get_path(self.imports, info.sel)
            if path:
                callback(path, info.val, info.ship)