'''
Scoped symbol table used while renaming
'''

import logging
import typing as tp

from collections import ChainMap
from contextlib import contextmanager

from alpha_rename.name import Name

__ALL__ = ['SymbolTable', 'ScopeError']


class ScopeError(RuntimeError): pass


class SymbolTable(tp.Mapping[tp.Hashable, Name]):
    """
    A stack of frames mapping symbols to names.

    Lookups see the innermost binding of a symbol. Inserts always go into
    the innermost frame. The bottom frame holds module level bindings and
    is never popped.
    """
    frames: tp.ChainMap[tp.Hashable, Name]

    def __init__(self):
        self.frames = ChainMap()

    @property
    def depth(self) -> int:
        # number of frames pushed on top of the module frame
        return len(self.frames.maps) - 1

    def enter_scope(self) -> None:
        self.frames = self.frames.new_child()
        logging.debug(f'enter scope {self.depth}')

    def exit_scope(self) -> None:
        if not self.depth:
            raise ScopeError('exit_scope called without a matching enter_scope')
        logging.debug(f'exit scope {self.depth}')
        self.frames = self.frames.parents

    @contextmanager
    def scope(self) -> tp.Iterator['SymbolTable']:
        self.enter_scope()
        try:
            yield self
        finally:
            self.exit_scope()

    def insert(self, symbol: tp.Hashable, name: Name) -> None:
        self.frames.maps[0][symbol] = name

    def lookup(self, symbol: tp.Hashable) -> tp.Optional[Name]:
        return self.frames.get(symbol)

    def __getitem__(self, symbol):
        return self.frames[symbol]

    def __iter__(self):
        yield from self.frames

    def __len__(self):
        return len(self.frames)

    def __repr__(self):
        return f'{type(self).__name__}({self.frames.maps!r})'
