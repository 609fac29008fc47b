"""Checksum helpers for repository side files"""

import hashlib
from typing import Dict, Iterable


def generate_checksums(content: bytes, algorithms: Iterable[str]) -> Dict[str, str]:
    """
    Hex digests of content for each algorithm, in the order given

    Args:
        content: Content bytes
        algorithms: hashlib algorithm names (e.g. "md5", "sha1")

    Returns:
        Dictionary of algorithm -> lowercase hex digest
    """
    return {algo: hashlib.new(algo, content).hexdigest() for algo in algorithms}
