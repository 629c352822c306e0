import logging
import typing as tp

from alpha_rename import nodes
from alpha_rename.allocator import NameAllocator
from alpha_rename.name import Name
from alpha_rename.stack import SymbolTable

__ALL__ = ['Renamer', 'UnboundBindingError', 'rename_expr']


class UnboundBindingError(RuntimeError): pass


# nodes whose children are renamed in field order with no scope change
_PASS_THROUGH = (
    nodes.Number,
    nodes.Rational,
    nodes.String,
    nodes.Char,
    nodes.Apply,
    nodes.Do,
    nodes.DoExpr,
    nodes.DoBind,
    nodes.NumberPattern,
    nodes.WildCardPattern,
)


class Renamer(nodes.NodeTransformer):
    '''
    Replaces the symbols of an expression tree with unique names

    Every binding occurrence gets a fresh uid and every reference gets the
    name of the innermost binding of its symbol. References with no
    enclosing binding are assumed to be globals and get uid 0.

    Lambda, let and case alternatives each open a scope. A do block does
    not: its let groups and pattern binds are registered in whatever scope
    is current and stay visible until that scope is closed.

    Types and locations are carried over as they are.
    '''
    table: SymbolTable
    allocator: NameAllocator

    def __init__(self):
        self.table = SymbolTable()
        self.allocator = NameAllocator(self.table)

    def rename(self, expr: nodes.TypedExpr) -> nodes.TypedExpr:
        return self.visit(expr)

    def rename_pattern(self, pattern: nodes.Pattern) -> nodes.Pattern:
        return self.visit(pattern)

    def make_unique(self, symbol: tp.Hashable) -> Name:
        return self.allocator.fresh(symbol)

    def get_name(self, symbol: tp.Hashable) -> Name:
        name = self.table.lookup(symbol)
        if name is None:
            return Name.global_(symbol)
        return name

    def rename_bindings(self, bindings: tp.Sequence[nodes.Binding]):
        """
        Renames a binding group in the current scope.
        Used with `yield from` inside a visit method.
        """
        # register the whole group first so bindings can refer to each other
        for binding in bindings:
            self.make_unique(binding.name)

        renamed = []
        for binding in bindings:
            name = self.table.lookup(binding.name)
            if name is None:
                logging.error(f'binding {binding.name} was not registered')
                raise UnboundBindingError(f'Undefined variable {binding.name}')
            expression = yield binding.expression
            renamed.append(binding.replace(name=name, expression=expression))
        return tuple(renamed)

    def generic_visit(self, node: nodes.Node):
        if not isinstance(node, _PASS_THROUGH):
            raise TypeError(f'Unsupported node {node}')
        return super().generic_visit(node)

    def visit_TypedExpr(self, node: nodes.TypedExpr):
        expr = yield node.expr
        return node.replace(expr=expr)

    def visit_Located(self, node: nodes.Located):
        inner = yield node.node
        return node.replace(node=inner)

    def visit_Identifier(self, node: nodes.Identifier) -> nodes.Identifier:
        return nodes.Identifier(self.get_name(node.name))

    def visit_Lambda(self, node: nodes.Lambda):
        with self.table.scope():
            arg = self.make_unique(node.arg)
            body = yield node.body
            return nodes.Lambda(arg, body)

    def visit_Let(self, node: nodes.Let):
        with self.table.scope():
            bindings = yield from self.rename_bindings(node.bindings)
            body = yield node.body
            return nodes.Let(bindings, body)

    def visit_Case(self, node: nodes.Case):
        alternatives = yield from self.descend(node.alternatives)
        expr = yield node.expr
        return nodes.Case(expr, alternatives)

    def visit_Alternative(self, node: nodes.Alternative):
        with self.table.scope():
            pattern = yield node.pattern
            expression = yield node.expression
            return nodes.Alternative(pattern, expression)

    def visit_DoLet(self, node: nodes.DoLet):
        bindings = yield from self.rename_bindings(node.bindings)
        return nodes.DoLet(bindings)

    def visit_ConstructorPattern(self, node: nodes.ConstructorPattern):
        patterns = yield from self.descend(node.patterns)
        return nodes.ConstructorPattern(Name.global_(node.name), patterns)

    def visit_IdentifierPattern(self,
            node: nodes.IdentifierPattern,
            ) -> nodes.IdentifierPattern:
        return nodes.IdentifierPattern(self.make_unique(node.name))


def rename_expr(expr: nodes.TypedExpr) -> nodes.TypedExpr:
    """
    Renames a single expression with fresh renaming state
    """
    return Renamer().rename(expr)
