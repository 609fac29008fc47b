# publish_tool/core/__init__.py
"""Core publishing decision logic"""

from .version_classifier import classify, is_snapshot
from .artifact_assembler import ArtifactAssembler, assemble
from .metadata_builder import build as build_metadata
from .pom_writer import render_pom
from .signer_gate import sign
from .repository_selector import select as select_repository
from .layout import RepositoryLayout

__all__ = [
    "classify",
    "is_snapshot",
    "ArtifactAssembler",
    "assemble",
    "build_metadata",
    "render_pom",
    "sign",
    "select_repository",
    "RepositoryLayout",
]
