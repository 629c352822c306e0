"""
Test renaming of whole modules
"""
from alpha_rename import Name, ModuleRenamer, rename_expr, rename_module
from alpha_rename.nodes import (
    Apply, Binding, Constructor, DataDefinition, Do, DoLet, Identifier,
    Instance, Lambda, Let, Module, Number, TypedExpr,
)


def ident(s):
    return TypedExpr(Identifier(s))

def lam(arg, body):
    return TypedExpr(Lambda(arg, body))

def app(f, a):
    return TypedExpr(Apply(f, a))


def test_rename_module():
    module = Module(
        name='Main',
        classes=('class Show a',),
        data_definitions=[DataDefinition(
            [
                Constructor('Nil', typ='List a', tag=0, arity=0),
                Constructor('Cons', typ='a -> List a -> List a', tag=1, arity=2),
            ],
            typ='List a',
            parameters=('a',),
        )],
        type_declarations=('main :: a -> a',),
        bindings=[
            Binding('main', lam('y', app(ident('helper'), ident('y'))), type_decl='main :: a -> a', arity=1),
            Binding('helper', lam('z', ident('z')), arity=1),
        ],
        instances=[Instance(
            [Binding('show', lam('x', ident('x')), arity=1)],
            constraints=(),
            typ='Int',
            classname='Show',
        )],
    )

    # instances first, then top level bindings, then the module name
    assert rename_module(module) == Module(
        name=Name('Main', 5),
        classes=('class Show a',),
        data_definitions=[DataDefinition(
            [
                Constructor(Name('Nil', 0), typ='List a', tag=0, arity=0),
                Constructor(Name('Cons', 0), typ='a -> List a -> List a', tag=1, arity=2),
            ],
            typ='List a',
            parameters=('a',),
        )],
        type_declarations=('main :: a -> a',),
        bindings=[
            Binding(Name('main', 0),
                    lam(Name('y', 3), app(ident(Name('helper', 0)), ident(Name('y', 3)))),
                    type_decl='main :: a -> a', arity=1),
            Binding(Name('helper', 0), lam(Name('z', 4), ident(Name('z', 4))), arity=1),
        ],
        instances=[Instance(
            [Binding(Name('show', 0), lam(Name('x', 2), ident(Name('x', 2))), arity=1)],
            constraints=(),
            typ='Int',
            classname='Show',
        )],
    )


def test_empty_module():
    assert rename_module(Module('Empty')) == Module(Name('Empty', 2))


def test_top_level_binding_is_global():
    rec = lam('x', app(ident('f'), ident('x')))
    module = Module('M', bindings=[Binding('f', rec)])
    binding = rename_module(module).bindings[0]
    assert binding.name == Name('f', 0)
    assert binding.expression == lam(Name('x', 2), app(ident(Name('f', 0)), ident(Name('x', 2))))

    # the same binding in a let gets a local uid
    let = rename_expr(TypedExpr(Let([Binding('f', rec)], ident('f'))))
    assert let.expr.bindings[0].name == Name('f', 2)
    assert let.expr.body == ident(Name('f', 2))


def test_instance_bindings_not_registered():
    instance = Instance([
        Binding('a', ident('b')),
        Binding('b', ident('a')),
    ], classname='C')
    renamed = rename_module(Module('M', instances=[instance])).instances[0]
    assert renamed.bindings == (
        Binding(Name('a', 0), ident(Name('b', 0))),
        Binding(Name('b', 0), ident(Name('a', 0))),
    )
    assert renamed.classname == 'C'


def test_top_level_do_leaks_into_module_scope():
    module = Module('M', bindings=[
        Binding('first', TypedExpr(Do([DoLet([Binding('v', TypedExpr(Number(1)))])], ident('v')))),
        Binding('second', ident('v')),
    ])
    renamed = rename_module(module)
    assert renamed.bindings[1] == Binding(Name('second', 0), ident(Name('v', 2)))
    assert renamed.name == Name('M', 3)


def test_module_scopes_balanced():
    renamer = ModuleRenamer()
    renamer.visit(Module('M', bindings=[
        Binding('f', lam('x', TypedExpr(Let([Binding('y', ident('x'))], ident('y'))))),
    ]))
    assert renamer.table.depth == 0
    assert dict(renamer.table) == {'M': Name('M', 4)}
