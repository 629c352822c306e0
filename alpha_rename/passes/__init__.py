from .base import * # This MUST be first

from .debug import debug
from .rename import rename
from .util import apply_passes
