"""CLI utility functions"""

from .output import (
    console,
    format_publish_result,
    format_error,
    format_version_info,
    format_xml,
)

__all__ = [
    'console',
    'format_publish_result',
    'format_error',
    'format_version_info',
    'format_xml',
]
