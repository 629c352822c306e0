"""
Test collecting names from renamed trees
"""
from alpha_rename import Name, collect_names, free_names, rename_expr, rename_module
from alpha_rename.nodes import (
    Alternative, Apply, Binding, Case, Constructor, ConstructorPattern,
    DataDefinition, Identifier, IdentifierPattern, Lambda, Located, Module,
    TypedExpr,
)
from alpha_rename.visitors import NameContext


def ident(s):
    return TypedExpr(Identifier(s))


def _renamed():
    # \xs -> case xs of Cons y ys -> map y ys
    alt = Alternative(
        Located(ConstructorPattern('Cons', [IdentifierPattern('y'), IdentifierPattern('ys')])),
        TypedExpr(Apply(TypedExpr(Apply(ident('map'), ident('y'))), ident('ys'))),
    )
    return rename_expr(TypedExpr(Lambda('xs', TypedExpr(Case(ident('xs'), [alt])))))


def test_collect_names():
    tree = _renamed()
    xs, y, ys = Name('xs', 2), Name('y', 3), Name('ys', 4)
    assert collect_names(tree, NameContext.BIND) == {xs, y, ys}
    assert collect_names(tree, NameContext.LOAD) == {xs, y, ys, Name('map', 0)}
    assert collect_names(tree, NameContext.CONSTRUCTOR) == {Name('Cons', 0)}
    assert collect_names(tree) == {xs, y, ys, Name('map', 0), Name('Cons', 0)}
    assert collect_names(tree, [NameContext.BIND, NameContext.CONSTRUCTOR]) == {xs, y, ys, Name('Cons', 0)}


def test_free_names():
    assert free_names(_renamed()) == {Name('map', 0)}


def test_collect_module_names():
    module = rename_module(Module(
        'M',
        data_definitions=[DataDefinition([Constructor('Nil')])],
        bindings=[Binding('main', ident('Nil'))],
    ))
    assert collect_names(module, NameContext.BIND) == {Name('M', 2), Name('main', 0)}
    assert collect_names(module, NameContext.CONSTRUCTOR) == {Name('Nil', 0)}
    assert free_names(module) == {Name('Nil', 0)}


def test_annotations_ignored():
    tree = TypedExpr(Identifier(Name('x', 0)), Identifier(Name('t', 7)))
    assert collect_names(tree) == {Name('x', 0)}
