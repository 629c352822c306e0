import logging

from alpha_rename import nodes
from alpha_rename.name import Name
from .renamer import Renamer

__ALL__ = ['ModuleRenamer', 'rename_module']


class ModuleRenamer(Renamer):
    '''
    Renames a whole module

    Top level and instance bindings are globals: their names get uid 0 and
    are never registered, references to them resolve by symbol. Constructor
    names are globals as well. Only the module name itself gets a fresh uid.
    '''

    def rename_binding(self, binding: nodes.Binding):
        expression = yield binding.expression
        return binding.replace(name=Name.global_(binding.name), expression=expression)

    def visit_Module(self, node: nodes.Module):
        logging.debug(f'renaming module {node.name}')
        data_definitions = yield from self.descend(node.data_definitions)
        instances = yield from self.descend(node.instances)
        bindings = []
        for binding in node.bindings:
            bindings.append((yield from self.rename_binding(binding)))
        return node.replace(
            name=self.make_unique(node.name),
            data_definitions=data_definitions,
            bindings=tuple(bindings),
            instances=instances,
        )

    def visit_DataDefinition(self, node: nodes.DataDefinition):
        constructors = yield from self.descend(node.constructors)
        return node.replace(constructors=constructors)

    def visit_Constructor(self, node: nodes.Constructor) -> nodes.Constructor:
        return node.replace(name=Name.global_(node.name))

    def visit_Instance(self, node: nodes.Instance):
        bindings = []
        for binding in node.bindings:
            bindings.append((yield from self.rename_binding(binding)))
        return node.replace(bindings=tuple(bindings))


def rename_module(module: nodes.Module) -> nodes.Module:
    """
    Renames a module with fresh renaming state
    """
    return ModuleRenamer().visit(module)
