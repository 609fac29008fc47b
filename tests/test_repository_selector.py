"""Tests for repository target selection."""

import pytest

from publish_tool.api.exceptions import MissingCredentialsError, UnknownRepositoryError
from publish_tool.constants import Classification
from publish_tool.core import select_repository
from publish_tool.models import Credentials, PublishConfig, RepositoryConfig
from publish_tool.services import ConfigService


def _repo(key, url="https://repo.example.org/x/", username="user", password="pass", name=None):
    return RepositoryConfig(
        key=key,
        url=url,
        name=name,
        credentials=Credentials(username=username, password=password),
    )


class TestSelectRepository:

    def test_snapshot(self, publish_config):
        target = select_repository(Classification.SNAPSHOT, publish_config.repositories)

        assert target.name == "ossrh-snapshots"
        assert target.endpoint_url == "https://repo.example.org/snapshots/"
        assert target.credentials == Credentials("deployer", "s3cret")

    def test_release_uses_staging(self, publish_config):
        target = select_repository(Classification.RELEASE, publish_config.repositories)

        assert target.name == "ossrh-staging"
        assert target.endpoint_url == "https://repo.example.org/staging/"

    def test_release_entry_preferred_over_staging(self):
        repositories = {
            "staging": _repo("staging", url="https://staging/"),
            "release": _repo("release", url="https://release/"),
        }

        target = select_repository(Classification.RELEASE, repositories)

        assert target.endpoint_url == "https://release/"
        assert target.name == "release"

    def test_missing_release_entry(self):
        repositories = {"snapshot": _repo("snapshot")}

        with pytest.raises(UnknownRepositoryError) as exc_info:
            select_repository(Classification.RELEASE, repositories)
        assert exc_info.value.repository_id == "release"

    def test_missing_snapshot_entry(self):
        with pytest.raises(UnknownRepositoryError):
            select_repository(Classification.SNAPSHOT, {"staging": _repo("staging")})

    def test_entry_without_url(self):
        with pytest.raises(UnknownRepositoryError):
            select_repository(Classification.SNAPSHOT, {"snapshot": _repo("snapshot", url=None)})

    def test_release_entry_without_url_falls_back_to_staging(self):
        repositories = {
            "release": _repo("release", url=None),
            "staging": _repo("staging", url="https://staging/"),
        }

        target = select_repository(Classification.RELEASE, repositories)

        assert target.endpoint_url == "https://staging/"

    def test_unset_release_url_from_config(self, monkeypatch):
        monkeypatch.delenv("RELEASE_URL", raising=False)
        config = ConfigService.parse(
            "credentials: {username: deployer, password: s3cret}\n"
            "repositories:\n"
            "  release: {url: '${RELEASE_URL}'}\n"
            "  staging: {url: 'https://staging/'}\n"
        )

        target = select_repository(Classification.RELEASE, config.repositories)

        assert target.name == "staging"

    def test_no_entry_with_url(self):
        repositories = {
            "release": _repo("release", url=None),
            "staging": _repo("staging", url=""),
        }

        with pytest.raises(UnknownRepositoryError) as exc_info:
            select_repository(Classification.RELEASE, repositories)
        assert exc_info.value.repository_id == "release"

    def test_empty_password(self):
        repositories = {"staging": _repo("staging", password="")}

        with pytest.raises(MissingCredentialsError) as exc_info:
            select_repository(Classification.RELEASE, repositories)
        assert exc_info.value.field_name == "password"

    def test_unset_username(self):
        repositories = {"snapshot": _repo("snapshot", username=None, name="ossrh")}

        with pytest.raises(MissingCredentialsError) as exc_info:
            select_repository(Classification.SNAPSHOT, repositories)
        assert exc_info.value.field_name == "username"
        assert exc_info.value.repository_name == "ossrh"

    def test_additional_keys_are_ignored(self):
        repositories = {
            "snapshot": _repo("snapshot", url="https://snap/"),
            "nightly": _repo("nightly", url="https://nightly/"),
        }

        target = select_repository(Classification.SNAPSHOT, repositories)

        assert target.endpoint_url == "https://snap/"

    def test_per_repository_credentials_override_shared(self):
        config = PublishConfig.from_dict({
            "project": {"name": "nbt", "author_url": "github.com/x"},
            "credentials": {"username": "shared", "password": "shared-pw"},
            "repositories": {
                "snapshot": {
                    "url": "https://snap/",
                    "credentials": {"password": "own-pw"},
                },
            },
        })

        target = select_repository(Classification.SNAPSHOT, config.repositories)

        assert target.credentials == Credentials("shared", "own-pw")

    def test_credentials_never_defaulted(self):
        config = PublishConfig.from_dict({
            "project": {"name": "nbt", "author_url": "github.com/x"},
            "repositories": {"snapshot": "https://snap/"},
        })

        with pytest.raises(MissingCredentialsError):
            select_repository(Classification.SNAPSHOT, config.repositories)
