"""Tests for configuration loading"""

import pytest

from publish_tool.api.exceptions import ConfigError
from publish_tool.services import ConfigService

CONFIG_YAML = """
project:
  group: me.nullicorn
  name: nbt
  author_url: github.com/TheNullicorn
  license:
    name: MIT License
    url: https://opensource.org/licenses/mit-license.php
  developers:
    - name: TheNullicorn
      email: bennullicorn@gmail.com

credentials:
  username: ${OSSRH_USERNAME}
  password: ${OSSRH_PASSWORD}

repositories:
  snapshot:
    name: ossrh-snapshots
    url: https://s01.oss.sonatype.org/content/repositories/snapshots/
  staging:
    name: ossrh-staging
    url: https://s01.oss.sonatype.org/service/local/staging/deploy/maven2/

signing:
  key_id: ABCD1234

upload:
  timeout: 30
  checksums: [MD5, sha1]
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "publish.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


def test_load_config(config_file, monkeypatch):
    monkeypatch.setenv("OSSRH_USERNAME", "deployer")
    monkeypatch.setenv("OSSRH_PASSWORD", "s3cret")

    config = ConfigService(config_file).config

    assert config.project.group == "me.nullicorn"
    assert config.project.license.name == "MIT License"
    assert config.project.developers[0].email == "bennullicorn@gmail.com"
    assert config.repositories["snapshot"].display_name == "ossrh-snapshots"
    assert config.repositories["staging"].credentials.username == "deployer"
    assert config.repositories["staging"].credentials.password == "s3cret"
    assert config.signing.key_id == "ABCD1234"
    assert config.upload.timeout == 30.0
    assert config.upload.checksums == ["md5", "sha1"]


def test_unset_variables_are_unset(config_file, monkeypatch):
    monkeypatch.delenv("OSSRH_USERNAME", raising=False)
    monkeypatch.delenv("OSSRH_PASSWORD", raising=False)

    config = ConfigService(config_file).config

    assert config.repositories["snapshot"].credentials.username is None
    assert config.repositories["snapshot"].credentials.password is None


def test_dollar_in_password_is_literal(monkeypatch):
    monkeypatch.delenv("ecret42", raising=False)

    config = ConfigService.parse(
        "credentials: {username: deployer, password: '$ecret42'}\n"
        "repositories:\n"
        "  snapshot: https://repo.example.org/snapshots/\n"
    )

    assert config.repositories["snapshot"].credentials.password == "$ecret42"


def test_credentials_are_not_stripped():
    config = ConfigService.parse(
        "credentials: {username: deployer, password: '  spaced out  '}\n"
        "repositories:\n"
        "  snapshot: https://repo.example.org/snapshots/\n"
        "signing: {passphrase: ' pass phrase '}\n"
    )

    assert config.repositories["snapshot"].credentials.password == "  spaced out  "
    assert config.signing.passphrase == " pass phrase "


def test_placeholder_resolved_without_loader(monkeypatch):
    monkeypatch.setenv("OSSRH_PASSWORD", "from-env")

    config = ConfigService.from_dict({
        "credentials": {"username": "deployer", "password": "${OSSRH_PASSWORD}"},
        "repositories": {"snapshot": "https://repo.example.org/snapshots/"},
    })

    assert config.repositories["snapshot"].credentials.password == "from-env"


def test_config_is_loaded_once(config_file):
    service = ConfigService(config_file)

    assert service.config is service.config


def test_path_from_environment(config_file, monkeypatch):
    monkeypatch.setenv("PUBLISH_TOOL_CONFIG", str(config_file))

    assert ConfigService().config_path == config_file


def test_default_path(monkeypatch):
    monkeypatch.delenv("PUBLISH_TOOL_CONFIG", raising=False)

    assert str(ConfigService().config_path) == ".publish-tool.yaml"


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        ConfigService(tmp_path / "absent.yaml").load_config()


def test_invalid_yaml():
    with pytest.raises(ConfigError, match="Invalid YAML"):
        ConfigService.parse("project: [unclosed")


def test_root_must_be_mapping():
    with pytest.raises(ConfigError, match="mapping"):
        ConfigService.parse("- just\n- a list\n")


def test_empty_document():
    config = ConfigService.parse("")

    assert config.project.name is None
    assert config.repositories == {}


def test_repository_shorthand_and_own_credentials():
    config = ConfigService.parse(
        "credentials: {username: shared, password: shared-pw}\n"
        "repositories:\n"
        "  snapshot: https://repo.example.org/snapshots/\n"
        "  release:\n"
        "    url: https://repo.example.org/releases/\n"
        "    credentials: {username: releaser}\n"
    )

    snapshot = config.repositories["snapshot"]
    release = config.repositories["release"]
    assert snapshot.url == "https://repo.example.org/snapshots/"
    assert snapshot.credentials.username == "shared"
    assert release.credentials.username == "releaser"
    assert release.credentials.password == "shared-pw"


def test_invalid_values_become_config_error():
    with pytest.raises(ConfigError, match="Invalid configuration"):
        ConfigService.parse("upload:\n  timeout: soon\n")
