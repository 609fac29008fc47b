"""Shared test configuration and fixtures for publish-tool test suite."""

import hashlib
from typing import Dict, List, Mapping, Optional

import pytest

from publish_tool.api.exceptions import SigningFailedError
from publish_tool.models import BinaryInputs, Credentials, PublishConfig
from publish_tool.signing import Signer
from publish_tool.transport import Transport


class FakeSigner(Signer):
    """Deterministic signer producing a digest-based signature"""

    def __init__(self):
        self.signed: List[bytes] = []

    def sign(self, data: bytes) -> bytes:
        self.signed.append(data)
        return b"SIG:" + hashlib.sha1(data).hexdigest().encode("ascii")


class FailingSigner(FakeSigner):
    """Signer that fails for one specific payload"""

    def __init__(self, fail_on: bytes, error: Optional[Exception] = None):
        super().__init__()
        self.fail_on = fail_on
        self.error = error or SigningFailedError(reason="bad passphrase")

    def sign(self, data: bytes) -> bytes:
        if data == self.fail_on:
            raise self.error
        return super().sign(data)


class FakeTransport(Transport):
    """Records upload calls instead of sending anything"""

    def __init__(self, error: Optional[Exception] = None):
        super().__init__()
        self.calls: List[Dict] = []
        self.error = error

    async def upload(self, endpoint_url: str, credentials: Credentials,
                     files: Mapping[str, bytes], callback=None) -> None:
        self.calls.append({
            "endpoint_url": endpoint_url,
            "credentials": credentials,
            "files": dict(files),
        })
        if self.error is not None:
            raise self.error

    async def upload_file(self, endpoint_url, credentials, path, content) -> None:
        raise AssertionError("upload_file is not used by FakeTransport")


@pytest.fixture
def config_data():
    return {
        "project": {
            "group": "me.nullicorn",
            "name": "nbt",
            "description": "Minecraft NBT library",
            "author_url": "github.com/TheNullicorn",
            "license": {
                "name": "MIT License",
                "url": "https://opensource.org/licenses/mit-license.php",
            },
            "developers": [
                {"name": "TheNullicorn", "email": "bennullicorn@gmail.com"},
            ],
        },
        "credentials": {"username": "deployer", "password": "s3cret"},
        "repositories": {
            "snapshot": {
                "name": "ossrh-snapshots",
                "url": "https://repo.example.org/snapshots/",
            },
            "staging": {
                "name": "ossrh-staging",
                "url": "https://repo.example.org/staging/",
            },
        },
        "upload": {"checksums": ["md5", "sha1"]},
    }


@pytest.fixture
def publish_config(config_data):
    return PublishConfig.from_dict(config_data)


@pytest.fixture
def inputs():
    return BinaryInputs(
        primary=b"PK-binary-classes",
        sources=b"PK-sources",
        javadoc=b"PK-javadoc-html",
    )


@pytest.fixture
def signer():
    return FakeSigner()


@pytest.fixture
def transport():
    return FakeTransport()
