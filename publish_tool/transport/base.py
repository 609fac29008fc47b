# publish_tool/transport/base.py
"""Transport abstract base class"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Mapping, Optional

from ..models import Credentials


class Transport(ABC):
    """Abstract base class for all upload transports"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize transport

        Args:
            config: Transport-specific configuration
        """
        self.config = config or {}
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize transport (e.g., open a client session)"""
        if not self._initialized:
            await self._do_initialize()
            self._initialized = True

    async def _do_initialize(self) -> None:
        """Actual initialization logic, overridden by subclasses that need it"""
        pass

    @abstractmethod
    async def upload_file(self,
                          endpoint_url: str,
                          credentials: Credentials,
                          path: str,
                          content: bytes) -> None:
        """
        Upload one file

        Args:
            endpoint_url: Repository base URL
            credentials: Repository credentials
            path: Repository-relative file path
            content: File content

        Raises:
            UploadError: With the verbatim failure reason
        """
        pass

    async def upload(self,
                     endpoint_url: str,
                     credentials: Credentials,
                     files: Mapping[str, bytes],
                     callback: Optional[Callable[[str, int, int], None]] = None) -> None:
        """
        Upload a complete file map

        Files are sent in mapping order; the first failure aborts the upload.

        Args:
            endpoint_url: Repository base URL
            credentials: Repository credentials
            files: Repository-relative path -> content
            callback: Progress callback (path, files_done, total_files)

        Raises:
            UploadError: If any file is rejected or cannot be sent
        """
        async with self:
            total = len(files)
            for index, (path, content) in enumerate(files.items(), 1):
                await self.upload_file(endpoint_url, credentials, path, content)
                if callback:
                    callback(path, index, total)

    async def close(self) -> None:
        """Close transport connections"""
        if self._initialized:
            await self._do_close()
            self._initialized = False

    async def _do_close(self) -> None:
        """Actual cleanup logic to be implemented by subclasses"""
        pass

    async def __aenter__(self):
        """Async context manager entry"""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()
