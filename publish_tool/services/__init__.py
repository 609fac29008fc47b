# publish_tool/services/__init__.py
"""Services for publish-tool"""

from .config_service import ConfigService

__all__ = [
    "ConfigService",
]
