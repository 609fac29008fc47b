"""Utility functions"""

from .async_utils import run_async
from .hash_utils import generate_checksums

__all__ = [
    "generate_checksums",
    "run_async",
]
