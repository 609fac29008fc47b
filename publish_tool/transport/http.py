"""HTTP(S) repository transport"""

import logging
from typing import Any, Dict, Optional

import httpx

from .base import Transport
from ..api.exceptions import UploadError
from ..constants import DEFAULT_UPLOAD_TIMEOUT, MEDIA_TYPES
from ..models import Credentials

logger = logging.getLogger(__name__)

# Longest response body carried into an UploadError message
MAX_ERROR_BODY = 500


class HttpTransport(Transport):
    """Uploads files with HTTP PUT and basic authentication, as Maven repositories expect"""

    def __init__(self, config: Dict[str, Any] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize HTTP transport

        Args:
            config: Configuration including:
                - timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        super().__init__(config)
        self.timeout = float(self.config.get('timeout', DEFAULT_UPLOAD_TIMEOUT))
        self._transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def _do_initialize(self) -> None:
        """Open the HTTP client session"""
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            follow_redirects=True
        )

    async def _do_close(self) -> None:
        if self.client is not None:
            await self.client.aclose()
            self.client = None

    @staticmethod
    def file_url(endpoint_url: str, path: str) -> str:
        return f"{endpoint_url.rstrip('/')}/{path.lstrip('/')}"

    async def upload_file(self,
                          endpoint_url: str,
                          credentials: Credentials,
                          path: str,
                          content: bytes) -> None:
        await self.initialize()

        url = self.file_url(endpoint_url, path)
        extension = path.rsplit('.', 1)[-1]
        headers = {"Content-Type": MEDIA_TYPES.get(extension, "application/octet-stream")}

        try:
            response = await self.client.put(
                url,
                content=content,
                headers=headers,
                auth=(credentials.username or "", credentials.password or "")
            )
        except httpx.HTTPError as e:
            raise UploadError(f"Network error uploading {path}: {e}", path=path) from e

        if response.status_code >= 400:
            body = response.text.strip()[:MAX_ERROR_BODY]
            if response.status_code in (401, 403):
                reason = "Authentication rejected"
            else:
                reason = "Upload rejected"
            message = f"{reason} uploading {path}: HTTP {response.status_code} {response.reason_phrase}"
            if body:
                message = f"{message}: {body}"
            raise UploadError(message, path=path, status_code=response.status_code)

        logger.debug("Uploaded %s (%d bytes) -> HTTP %d", url, len(content), response.status_code)
