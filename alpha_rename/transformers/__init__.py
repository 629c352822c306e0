"""
NodeTransformers that rename expressions and modules
"""
from .renamer import Renamer, UnboundBindingError, rename_expr
from .module_renamer import ModuleRenamer, rename_module
