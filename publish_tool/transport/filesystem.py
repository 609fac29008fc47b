"""Local directory repository transport"""

import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

import aiofiles

from .base import Transport
from ..api.exceptions import UploadError
from ..models import Credentials

logger = logging.getLogger(__name__)


class FilesystemTransport(Transport):
    """Writes files into a local repository directory addressed by a file:// URL

    Credentials are accepted for interface parity and otherwise unused.
    """

    @staticmethod
    def base_path(endpoint_url: str) -> Path:
        parsed = urlparse(endpoint_url)
        if parsed.scheme not in ("file", ""):
            raise UploadError(f"Not a file URL: {endpoint_url}")
        return Path(unquote(parsed.path if parsed.scheme else endpoint_url))

    async def upload_file(self,
                          endpoint_url: str,
                          credentials: Credentials,
                          path: str,
                          content: bytes) -> None:
        base_path = self.base_path(endpoint_url)
        target_path = base_path / path

        try:
            # Keep writes inside the repository directory
            target_path.resolve().relative_to(base_path.resolve())
        except ValueError:
            raise UploadError(f"Path escapes repository: {path}", path=path)

        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(target_path, 'wb') as f:
                await f.write(content)
        except OSError as e:
            raise UploadError(f"Failed to write {target_path}: {e}", path=path) from e

        logger.debug("Wrote %s (%d bytes)", target_path, len(content))
