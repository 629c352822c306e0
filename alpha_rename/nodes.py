"""
Immutable nodes of the functional language tree

The same node classes are used before and after renaming; only the
identifier payload changes (symbols before, `Name`s after).
Types, locations, classes and type declarations are opaque payload and are
never inspected.
"""
import inspect
import typing as tp

__ALL__ = [
    'Node', 'NodeVisitor', 'NodeTransformer',
    'Location', 'Located', 'TypedExpr',
    'Expr', 'Number', 'Rational', 'String', 'Char', 'Identifier', 'Apply',
    'Lambda', 'Let', 'Case', 'Do', 'Alternative',
    'DoBinding', 'DoExpr', 'DoLet', 'DoBind',
    'Pattern', 'NumberPattern', 'ConstructorPattern', 'IdentifierPattern',
    'WildCardPattern',
    'Binding', 'Constructor', 'DataDefinition', 'Instance', 'Module',
]


class Node:
    _fields: tp.ClassVar[tp.Tuple[str, ...]] = ()
    _defaults: tp.ClassVar[tp.Mapping[str, tp.Any]] = {}

    def __init__(self, *args, **kwargs):
        cls_name = type(self).__name__
        if len(args) > len(self._fields):
            raise TypeError(f'{cls_name} takes at most {len(self._fields)} '
                            f'positional arguments ({len(args)} given)')

        values = dict(zip(self._fields, args))
        for field, value in kwargs.items():
            if field not in self._fields:
                raise TypeError(f'{cls_name} has no field {field!r}')
            if field in values:
                raise TypeError(f'{cls_name} got multiple values for field {field!r}')
            values[field] = value

        for field in self._fields:
            try:
                value = values[field]
            except KeyError:
                try:
                    value = self._defaults[field]
                except KeyError:
                    raise TypeError(f'{cls_name} missing field {field!r}') from None
            # sequences are frozen so nodes stay hashable
            if isinstance(value, list):
                value = tuple(value)
            object.__setattr__(self, field, value)

    def __setattr__(self, attr, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, attr):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def iter_fields(self) -> tp.Iterator[tp.Tuple[str, tp.Any]]:
        for field in self._fields:
            yield field, getattr(self, field)

    def replace(self, **changes) -> 'Node':
        values = dict(self.iter_fields())
        values.update(changes)
        return type(self)(**values)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self._fields)

    def __hash__(self) -> int:
        return hash((type(self), *(getattr(self, f) for f in self._fields)))

    def __repr__(self) -> str:
        args = ', '.join(f'{f}={v!r}' for f, v in self.iter_fields())
        return f'{type(self).__name__}({args})'


class NodeVisitor:
    """
    Walks a tree calling `visit_<NodeType>` where defined and
    `generic_visit` otherwise.

    A visit method may return its result directly or be a generator.
    A generator yields child nodes; each `yield` evaluates to the result
    of visiting that child and the generator's return value is the result
    for the node. Children are visited from an explicit work stack, so the
    depth of a tree is not limited by the interpreter's recursion limit.
    """
    def visit(self, node: Node):
        result = self._dispatch(node)
        if not inspect.isgenerator(result):
            return result

        stack = [result]
        value = None
        try:
            while stack:
                try:
                    child = stack[-1].send(value)
                except StopIteration as stop:
                    stack.pop()
                    value = stop.value
                    continue
                value = self._dispatch(child)
                if inspect.isgenerator(value):
                    stack.append(value)
                    value = None
        except BaseException:
            # unwind innermost first so `with` blocks exit in order
            for gen in reversed(stack):
                gen.close()
            raise
        return value

    def _dispatch(self, node: Node):
        visitor = getattr(self, 'visit_' + type(node).__name__, self.generic_visit)
        return visitor(node)

    def descend(self, items: tp.Iterable[Node]) -> tp.Generator[Node, tp.Any, tp.Tuple]:
        results = []
        for item in items:
            results.append((yield item))
        return tuple(results)

    def generic_visit(self, node: Node):
        for _, value in node.iter_fields():
            if isinstance(value, Node):
                yield value
            elif isinstance(value, tuple):
                for item in value:
                    if isinstance(item, Node):
                        yield item


class NodeTransformer(NodeVisitor):
    """
    Like NodeVisitor but `generic_visit` rebuilds the node from the
    results of visiting its children (in field order)
    """
    def generic_visit(self, node: Node):
        changes = {}
        for field, value in node.iter_fields():
            if isinstance(value, Node):
                changes[field] = yield value
            elif isinstance(value, tuple):
                items = []
                for item in value:
                    if isinstance(item, Node):
                        item = yield item
                    items.append(item)
                changes[field] = tuple(items)
        return node.replace(**changes)


class Location(Node):
    _fields = ('row', 'column', 'absolute')
    _defaults = {'absolute': 0}


class Located(Node):
    _fields = ('node', 'location')
    _defaults = {'location': None}


class TypedExpr(Node):
    _fields = ('expr', 'typ', 'location')
    _defaults = {'typ': None, 'location': None}


# Expressions

class Expr(Node): pass


class Number(Expr):
    _fields = ('value',)


class Rational(Expr):
    _fields = ('value',)


class String(Expr):
    _fields = ('value',)


class Char(Expr):
    _fields = ('value',)


class Identifier(Expr):
    _fields = ('name',)


class Apply(Expr):
    _fields = ('func', 'arg')


class Lambda(Expr):
    _fields = ('arg', 'body')


class Let(Expr):
    _fields = ('bindings', 'body')


class Case(Expr):
    _fields = ('expr', 'alternatives')


class Do(Expr):
    _fields = ('bindings', 'expr')


class Alternative(Node):
    _fields = ('pattern', 'expression')


# Statements of a do block

class DoBinding(Node): pass


class DoExpr(DoBinding):
    _fields = ('expr',)


class DoLet(DoBinding):
    _fields = ('bindings',)


class DoBind(DoBinding):
    _fields = ('pattern', 'expr')


# Patterns

class Pattern(Node): pass


class NumberPattern(Pattern):
    _fields = ('value',)


class ConstructorPattern(Pattern):
    _fields = ('name', 'patterns')
    _defaults = {'patterns': ()}


class IdentifierPattern(Pattern):
    _fields = ('name',)


class WildCardPattern(Pattern): pass


# Declarations

class Binding(Node):
    _fields = ('name', 'expression', 'type_decl', 'arity')
    _defaults = {'type_decl': None, 'arity': 0}


class Constructor(Node):
    _fields = ('name', 'typ', 'tag', 'arity')
    _defaults = {'typ': None, 'tag': 0, 'arity': 0}


class DataDefinition(Node):
    _fields = ('constructors', 'typ', 'parameters')
    _defaults = {'typ': None, 'parameters': ()}


class Instance(Node):
    _fields = ('bindings', 'constraints', 'typ', 'classname')
    _defaults = {'constraints': (), 'typ': None, 'classname': None}


class Module(Node):
    _fields = ('name', 'classes', 'data_definitions', 'type_declarations',
               'bindings', 'instances')
    _defaults = {
        'classes': (),
        'data_definitions': (),
        'type_declarations': (),
        'bindings': (),
        'instances': (),
    }
