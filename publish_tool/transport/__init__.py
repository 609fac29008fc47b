# publish_tool/transport/__init__.py
"""Upload transports for publish-tool"""

from .base import Transport
from .filesystem import FilesystemTransport
from .http import HttpTransport
from .factory import TransportFactory

__all__ = [
    'Transport',
    'FilesystemTransport',
    'HttpTransport',
    'TransportFactory',
]
