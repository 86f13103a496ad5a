# __init__.py
#
# Date: 2026-10-17

# pyright: ignore [reportUnusedImport, reportUnusedClass]
#

from .errors import *
from .identity import *
from .weakkey import *
from .registry import *
