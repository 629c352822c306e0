"""
alpha_rename top level package
"""
__all__ = [
    "Name", "GLOBAL_UID", "SymbolTable", "NameAllocator",
    "Renamer", "ModuleRenamer", "rename_expr", "rename_module",
    "NameCollector", "collect_names", "free_names",
]

from .name import Name, GLOBAL_UID
from .stack import SymbolTable
from .allocator import NameAllocator
from .transformers import Renamer, ModuleRenamer, rename_expr, rename_module
from .visitors import NameCollector, collect_names, free_names
from . import nodes
