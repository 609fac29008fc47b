# publish_tool/signing/base.py
"""Signing capability abstract base class"""

from abc import ABC, abstractmethod

from ..constants import SIGNATURE_EXTENSION


class Signer(ABC):
    """Produces detached signatures for byte content"""

    #: File extension of the produced signature files
    signature_extension: str = SIGNATURE_EXTENSION

    @abstractmethod
    def sign(self, data: bytes) -> bytes:
        """
        Create a detached signature

        Args:
            data: Content to sign

        Returns:
            Signature bytes

        Raises:
            SigningFailedError: If the key, passphrase or signing process fails
        """
        pass
