import logging
import typing as tp

from alpha_rename.nodes import Node
from . import Pass, PASS_ARGS_T

__ALL__ = ['apply_passes']


class apply_passes:
    '''
    Applies a sequence of passes to a tree
    '''
    passes: tp.Sequence[Pass]
    metadata: tp.MutableMapping

    def __init__(self,
                 passes: tp.Sequence[Pass],
                 metadata: tp.Optional[tp.MutableMapping] = None,
            ):
        if metadata is None:
            metadata = {}
        self.passes = passes
        self.metadata = metadata

    def prologue(self, tree: Node, metadata: tp.MutableMapping) -> PASS_ARGS_T:
        return tree, metadata

    def epilogue(self, tree: Node, metadata: tp.MutableMapping) -> PASS_ARGS_T:
        return tree, metadata

    def __call__(self, tree: Node) -> Node:
        self.i_tree = tree

        args = self.prologue(tree, self.metadata)
        for p in self.passes:
            try:
                args = p(args)
            except Exception as e:
                logging.exception(f"Error in pass {type(p).__name__}")
                raise e from None
        tree, metadata = self.epilogue(*args)

        self.f_tree = tree
        self.metadata = metadata
        return tree
