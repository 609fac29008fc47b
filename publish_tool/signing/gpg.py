"""GPG detached signature capability"""

import logging
import os
import shutil
import subprocess
from typing import List, Optional

from .base import Signer
from ..api.exceptions import SigningFailedError
from ..constants import DEFAULT_GPG_BINARY, ENV_GPG_BINARY, ENV_GPG_PASSPHRASE
from ..models import SigningConfig

logger = logging.getLogger(__name__)


class GpgSigner(Signer):
    """Signs content with the gpg command line tool (ASCII-armored, detached)"""

    def __init__(self,
                 key_id: Optional[str] = None,
                 passphrase: Optional[str] = None,
                 gpg: Optional[str] = None,
                 timeout: Optional[float] = None):
        """
        Initialize GPG signer

        Args:
            key_id: Key to sign with (gpg default key if omitted)
            passphrase: Key passphrase, falls back to GPG_PASSPHRASE
            gpg: gpg binary, falls back to the GPG environment variable
            timeout: Seconds to wait for one signature
        """
        self.key_id = key_id
        self.passphrase = passphrase if passphrase is not None else os.environ.get(ENV_GPG_PASSPHRASE)
        self.gpg = gpg or os.environ.get(ENV_GPG_BINARY) or DEFAULT_GPG_BINARY
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: SigningConfig) -> 'GpgSigner':
        return cls(key_id=config.key_id, passphrase=config.passphrase, gpg=config.gpg)

    def build_command(self) -> List[str]:
        """Build the gpg command line; content is read from stdin"""
        binary = shutil.which(self.gpg)
        if binary is None:
            raise SigningFailedError(reason=f"gpg binary not found: {self.gpg}")

        command = [binary, "--batch", "--yes", "--armor", "--detach-sign", "--output", "-"]
        if self.key_id:
            command.extend(["--local-user", self.key_id])
        if self.passphrase:
            command.extend(["--pinentry-mode", "loopback", "--passphrase", self.passphrase])
        return command

    def sign(self, data: bytes) -> bytes:
        command = self.build_command()

        try:
            result = subprocess.run(
                command,
                input=data,
                capture_output=True,
                timeout=self.timeout
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise SigningFailedError(reason=str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise SigningFailedError(reason=stderr or f"gpg exited with code {result.returncode}")

        logger.debug("Signed %d bytes with %s", len(data), self.key_id or "default key")
        return result.stdout
