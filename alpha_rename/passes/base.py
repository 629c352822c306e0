from abc import ABCMeta, abstractmethod
import typing as tp

from alpha_rename.nodes import Node

__ALL__ = ['Pass', 'PASS_ARGS_T']

PASS_ARGS_T = tp.Tuple[Node, tp.MutableMapping]


class Pass(metaclass=ABCMeta):
    """
    Abstract base class for passes
    Mostly a convience to unpack arguments
    """

    def __call__(self, args: PASS_ARGS_T) -> PASS_ARGS_T:
        return self.rewrite(*args)

    @abstractmethod
    def rewrite(self,
                tree: Node,
                metadata: tp.MutableMapping,
                ) -> PASS_ARGS_T:
        return tree, metadata
