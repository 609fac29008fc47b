"""CLI commands"""

from . import publish
from . import classify
from . import pom

__all__ = [
    "publish",
    "classify",
    "pom",
]
