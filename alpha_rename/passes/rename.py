import typing as tp

from alpha_rename import nodes
from alpha_rename.transformers import ModuleRenamer, Renamer
from . import Pass, PASS_ARGS_T

__ALL__ = ['rename']


class rename(Pass):
    '''
    Renames a module or a single expression with fresh renaming state.
    Records the last uid issued as `metadata['last_uid']`.
    '''
    def rewrite(self,
            tree: nodes.Node,
            metadata: tp.MutableMapping) -> PASS_ARGS_T:
        if isinstance(tree, nodes.Module):
            renamer = ModuleRenamer()
        elif isinstance(tree, nodes.TypedExpr):
            renamer = Renamer()
        else:
            raise TypeError('rename must be run on a Module or a TypedExpr')

        tree = renamer.visit(tree)
        metadata['last_uid'] = renamer.allocator.counter
        return tree, metadata
