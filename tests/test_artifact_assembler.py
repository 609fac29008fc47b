"""Tests for artifact assembly."""

import pytest

from publish_tool.api.exceptions import DuplicateArtifactError, MissingArtifactError
from publish_tool.core import ArtifactAssembler, assemble
from publish_tool.models import Artifact


class TestAssemble:

    def test_three_slots(self):
        artifacts = assemble(b"bin", b"src", b"doc")

        assert [a.classifier for a in artifacts] == ["", "sources", "javadoc"]
        assert [a.content for a in artifacts] == [b"bin", b"src", b"doc"]
        assert all(a.extension == "jar" for a in artifacts)
        assert artifacts[0].is_primary

    def test_paths(self, tmp_path):
        binary = tmp_path / "nbt-2.2.0.jar"
        binary.write_bytes(b"classes")
        sources = tmp_path / "nbt-2.2.0-sources.jar"
        sources.write_bytes(b"sources")
        docs = tmp_path / "nbt-2.2.0-javadoc.zip"
        docs.write_bytes(b"html")

        artifacts = assemble(binary, str(sources), docs)

        assert artifacts[0].content == b"classes"
        assert artifacts[2].extension == "zip"
        assert artifacts[2].media_type == "application/zip"

    def test_missing_primary(self):
        with pytest.raises(MissingArtifactError) as exc_info:
            assemble(None, b"src", b"doc")
        assert exc_info.value.classifier == ""

    @pytest.mark.parametrize("slot", ["sources", "javadoc"])
    def test_missing_auxiliary(self, slot):
        handles = {"primary": b"bin", "sources": b"src", "javadoc": b"doc"}
        handles[slot] = None

        with pytest.raises(MissingArtifactError) as exc_info:
            assemble(handles["primary"], handles["sources"], handles["javadoc"])
        assert exc_info.value.classifier == slot

    def test_empty_content(self):
        with pytest.raises(MissingArtifactError):
            assemble(b"", b"src", b"doc")

    def test_missing_file(self, tmp_path):
        with pytest.raises(MissingArtifactError) as exc_info:
            assemble(tmp_path / "absent.jar", b"src", b"doc")
        assert "file not found" in str(exc_info.value)

    def test_duplicate_sources(self):
        extra = Artifact(classifier="sources", content=b"more sources")

        with pytest.raises(DuplicateArtifactError) as exc_info:
            assemble(b"bin", b"src", b"doc", extras=[extra])
        assert exc_info.value.classifier == "sources"

    def test_extra_artifact(self):
        extra = Artifact(classifier="kdoc", content=b"kdoc html")

        artifacts = assemble(b"bin", b"src", b"doc", extras=[extra])

        assert [a.classifier for a in artifacts] == ["", "sources", "javadoc", "kdoc"]

    def test_artifact_in_wrong_slot(self):
        wrong = Artifact(classifier="javadoc", content=b"doc")

        with pytest.raises(MissingArtifactError):
            ArtifactAssembler().assemble(b"bin", wrong, b"doc")

    def test_artifact_handle_passthrough(self):
        primary = Artifact(classifier="", content=b"bin", extension="aar")

        artifacts = assemble(primary, b"src", b"doc")

        assert artifacts[0] is primary
