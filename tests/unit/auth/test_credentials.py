"""Tests for GitHub credentials and their resolution.

The resolver looks for values in priority order: explicit value,
environment variable (including .env values), then default.
"""

import base64
import logging
import os

import pytest

from github_api_client.auth import Credential, CredentialResolver
from github_api_client.auth.exceptions import CredentialFileError, CredentialNotFoundError


class TestCredential:
    """Test the Credential value."""

    def test_authorization_header_is_basic_auth(self):
        credential = Credential("alice", "ghp_secret")

        header = credential.authorization_header()

        assert header.startswith("Basic ")
        assert base64.b64decode(header.removeprefix("Basic ")) == b"alice:ghp_secret"

    def test_repr_masks_api_key(self):
        credential = Credential("alice", "ghp_secret")

        assert "ghp_secret" not in repr(credential)
        assert "alice" in repr(credential)

    def test_is_immutable(self):
        credential = Credential("alice", "ghp_secret")

        with pytest.raises(AttributeError):
            credential.username = "mallory"


class TestCredentialResolverResolve:
    """Test single-value resolution."""

    def test_init_skip_dotenv(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert not resolver._dotenv_loaded

    def test_resolve_from_explicit_value(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert resolver.resolve(value="explicit-value-123") == "explicit-value-123"

    def test_resolve_from_environment_variable(self, monkeypatch):
        monkeypatch.setenv("GITHUB_API_KEY", "env-value-456")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="GITHUB_API_KEY") == "env-value-456"

    def test_explicit_value_overrides_all(self, monkeypatch):
        monkeypatch.setenv("GITHUB_API_KEY", "env-value")
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(value="explicit-value", env_var_name="GITHUB_API_KEY", default="default-value")

        assert result == "explicit-value"

    def test_environment_overrides_default(self, monkeypatch):
        monkeypatch.setenv("GITHUB_API_KEY", "env-value")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="GITHUB_API_KEY", default="default-value") == "env-value"

    def test_default_used_when_nothing_else_set(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="NONEXISTENT_VAR", default="default-value") == "default-value"

    def test_resolve_returns_none_when_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="NONEXISTENT_VAR") is None

    def test_resolve_raises_when_required_and_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve(env_var_name="NONEXISTENT_VAR", required=True)

        assert "Required credential not found" in str(exc_info.value)
        assert exc_info.value.env_var_name == "NONEXISTENT_VAR"

    def test_resolve_from_dotenv_file(self, tmp_path, monkeypatch):
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("GITHUB_USERNAME=dotenv-user\n")
        monkeypatch.delenv("GITHUB_USERNAME", raising=False)

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))
        try:
            assert resolver._dotenv_loaded
            assert resolver.resolve(env_var_name="GITHUB_USERNAME") == "dotenv-user"
        finally:
            os.environ.pop("GITHUB_USERNAME", None)


class TestCredentialResolverFromFile:
    """Test file-based resolution."""

    def test_resolve_from_file_strips_whitespace(self, tmp_path):
        cred_file = tmp_path / "api_key.txt"
        cred_file.write_text("  file-credential-abc123  \n")

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(cred_file)) == "file-credential-abc123"

    def test_resolve_from_file_with_env_var_path(self, tmp_path, monkeypatch):
        cred_file = tmp_path / "secret.txt"
        cred_file.write_text("secret-from-env-path")
        monkeypatch.setenv("GITHUB_API_KEY_FILE", str(cred_file))

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(env_var_name="GITHUB_API_KEY_FILE") == "secret-from-env-path"

    def test_resolve_from_file_with_tilde_expansion(self, tmp_path, monkeypatch):
        fake_home = tmp_path / "home"
        cred_file = fake_home / ".config" / "github_token"
        cred_file.parent.mkdir(parents=True)
        cred_file.write_text("home-dir-credential")
        monkeypatch.setenv("HOME", str(fake_home))

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="~/.config/github_token") == "home-dir-credential"

    def test_resolve_from_file_with_env_var_expansion(self, tmp_path, monkeypatch):
        (tmp_path / "api_key").write_text("env-var-expanded-credential")
        monkeypatch.setenv("TEST_CONFIG_DIR", str(tmp_path))

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="$TEST_CONFIG_DIR/api_key") == "env-var-expanded-credential"

    def test_resolve_from_file_missing(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="/nonexistent/path/to/file.txt") is None
        with pytest.raises(CredentialFileError) as exc_info:
            resolver.resolve_from_file(file_path="/nonexistent/path/to/file.txt", required=True)
        assert "not found" in str(exc_info.value)

    def test_resolve_from_file_directory_is_read_error(self, tmp_path):
        not_a_file = tmp_path / "dir_not_file"
        not_a_file.mkdir()
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(not_a_file)) is None
        with pytest.raises(CredentialFileError):
            resolver.resolve_from_file(file_path=str(not_a_file), required=True)

    def test_resolve_from_file_no_path_provided(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file() is None
        with pytest.raises(CredentialFileError) as exc_info:
            resolver.resolve_from_file(env_var_name="NONEXISTENT_ENV_VAR", required=True)
        assert "NONEXISTENT_ENV_VAR" in str(exc_info.value)


class TestResolveCredential:
    """Test building a Credential from the environment."""

    def test_from_explicit_values(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_credential(username="alice", api_key="k") == Credential("alice", "k")

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("GITHUB_USERNAME", "alice")
        monkeypatch.setenv("GITHUB_API_KEY", "env-key")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_credential() == Credential("alice", "env-key")

    def test_api_key_from_file(self, tmp_path, monkeypatch):
        key_file = tmp_path / "token"
        key_file.write_text("file-key\n")
        monkeypatch.setenv("GITHUB_USERNAME", "alice")
        monkeypatch.setenv("GITHUB_API_KEY_FILE", str(key_file))
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_credential() == Credential("alice", "file-key")

    def test_missing_username(self, monkeypatch):
        monkeypatch.setenv("GITHUB_API_KEY", "env-key")
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve_credential()

        assert exc_info.value.env_var_name == "GITHUB_USERNAME"

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.setenv("GITHUB_USERNAME", "alice")
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve_credential()

        assert exc_info.value.env_var_name == "GITHUB_API_KEY"
        assert "GITHUB_API_KEY_FILE" in str(exc_info.value)


class TestCredentialMasking:
    """Test credential masking in logs."""

    def test_credential_value_is_masked_in_debug_logs(self, caplog):
        caplog.set_level(logging.DEBUG)

        CredentialResolver(load_dotenv=False).resolve(value="super-secret-key-123")

        assert "super-secret-key-123" not in caplog.text
        assert "***" in caplog.text

    def test_credential_masking_can_be_disabled(self, caplog):
        caplog.set_level(logging.DEBUG)

        CredentialResolver(load_dotenv=False).resolve(value="public-value", mask_in_logs=False)

        assert "public-value" in caplog.text

    def test_resolved_credential_key_is_never_logged(self, tmp_path, caplog, monkeypatch):
        caplog.set_level(logging.DEBUG)
        key_file = tmp_path / "token"
        key_file.write_text("file-secret-xyz")
        monkeypatch.setenv("GITHUB_API_KEY_FILE", str(key_file))

        CredentialResolver(load_dotenv=False).resolve_credential(username="alice")

        assert "file-secret-xyz" not in caplog.text
