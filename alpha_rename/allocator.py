import logging
import typing as tp

from alpha_rename.name import Name
from alpha_rename.stack import SymbolTable

__ALL__ = ['NameAllocator', 'INITIAL_UID']

# the counter is bumped before use so the first uid issued is INITIAL_UID + 1
INITIAL_UID = 1


class NameAllocator:
    """
    Issues fresh names and registers them in the innermost scope of `table`
    """
    table: SymbolTable
    counter: int

    def __init__(self, table: SymbolTable):
        self.table = table
        self.counter = INITIAL_UID

    def fresh(self, symbol: tp.Hashable) -> Name:
        self.counter += 1
        name = Name(symbol, self.counter)
        self.table.insert(symbol, name)
        logging.debug(f'bound {symbol} to uid {name.uid} at depth {self.table.depth}')
        return name
