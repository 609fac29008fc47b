"""Transport factory"""

from typing import Any, Dict, Type
from urllib.parse import urlparse

from .base import Transport
from .filesystem import FilesystemTransport
from .http import HttpTransport
from ..api.exceptions import UploadError
from ..constants import TransportType


class TransportFactory:
    """Factory for creating transport instances"""

    # Registry of transports
    _transports: Dict[TransportType, Type[Transport]] = {
        TransportType.HTTP: HttpTransport,
        TransportType.FILESYSTEM: FilesystemTransport,
    }

    _schemes: Dict[str, TransportType] = {
        "http": TransportType.HTTP,
        "https": TransportType.HTTP,
        "file": TransportType.FILESYSTEM,
    }

    @classmethod
    def create_for_url(cls, endpoint_url: str, config: Dict[str, Any] = None) -> Transport:
        """Create a transport able to reach an endpoint URL

        Args:
            endpoint_url: Repository URL
            config: Transport configuration

        Returns:
            Transport instance

        Raises:
            UploadError: If the URL scheme is not supported
        """
        scheme = urlparse(endpoint_url).scheme.lower()
        transport_type = cls._schemes.get(scheme)
        if transport_type is None:
            raise UploadError(f"Unsupported repository URL scheme: '{scheme}' in {endpoint_url}")

        return cls._transports[transport_type](config)

    @classmethod
    def register_transport(cls, scheme: str, transport_type: TransportType,
                           transport_class: Type[Transport]):
        """Register a transport for a URL scheme"""
        cls._schemes[scheme.lower()] = transport_type
        cls._transports[transport_type] = transport_class

    @classmethod
    def is_supported(cls, endpoint_url: str) -> bool:
        return urlparse(endpoint_url).scheme.lower() in cls._schemes
