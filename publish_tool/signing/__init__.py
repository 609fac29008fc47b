"""Signing capabilities for publish-tool"""

from .base import Signer
from .gpg import GpgSigner

__all__ = [
    'Signer',
    'GpgSigner',
]
