"""
Defines a visitor that collects all names contained in a renamed tree
"""

import collections.abc
import enum
import typing as tp

from alpha_rename import nodes
from alpha_rename.name import Name


class NameContext(enum.Enum):
    BIND = enum.auto()
    LOAD = enum.auto()
    CONSTRUCTOR = enum.auto()


_Context = tp.Union[tp.Iterable[NameContext], NameContext]


class NameCollector(nodes.NodeVisitor):
    """
    Collect all instances of `Name` in a renamed tree.
    """

    def __init__(self, ctx: _Context = ()):
        """
        Set `ctx` to `BIND`, `LOAD` or `CONSTRUCTOR` (or an iterable of
        them) to filter names. The default collects every name.
        """
        self.names: tp.MutableSet[Name] = set()
        if ctx == ():
            ctx = frozenset(NameContext)
        elif isinstance(ctx, collections.abc.Iterable):
            ctx = frozenset(ctx)
        else:
            ctx = frozenset((ctx,))
        self.ctx = ctx

    def _add(self, name: Name, ctx: NameContext):
        if ctx in self.ctx:
            self.names.add(name)

    def visit_TypedExpr(self, node: nodes.TypedExpr):
        # types and locations hold no names
        yield node.expr

    def visit_Identifier(self, node: nodes.Identifier):
        self._add(node.name, NameContext.LOAD)

    def visit_Lambda(self, node: nodes.Lambda):
        self._add(node.arg, NameContext.BIND)
        yield from self.generic_visit(node)

    def visit_IdentifierPattern(self, node: nodes.IdentifierPattern):
        self._add(node.name, NameContext.BIND)

    def visit_Binding(self, node: nodes.Binding):
        self._add(node.name, NameContext.BIND)
        yield from self.generic_visit(node)

    def visit_Module(self, node: nodes.Module):
        self._add(node.name, NameContext.BIND)
        yield from self.generic_visit(node)

    def visit_ConstructorPattern(self, node: nodes.ConstructorPattern):
        self._add(node.name, NameContext.CONSTRUCTOR)
        yield from self.generic_visit(node)

    def visit_Constructor(self, node: nodes.Constructor):
        self._add(node.name, NameContext.CONSTRUCTOR)


def collect_names(tree: nodes.Node, ctx: _Context = ()) -> tp.AbstractSet[Name]:
    """
    Convenience wrapper for NameCollector
    """
    visitor = NameCollector(ctx)
    visitor.visit(tree)
    return visitor.names


def free_names(tree: nodes.Node) -> tp.AbstractSet[Name]:
    """
    Referenced names that resolved to no local binding
    """
    return {n for n in collect_names(tree, NameContext.LOAD) if n.is_global}
