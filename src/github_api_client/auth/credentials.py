"""GitHub credentials and their resolution from the environment.

A ``Credential`` is the (username, API key) pair a ``GithubClient`` signs
every request with. ``CredentialResolver`` finds the pieces of one from
several sources, highest priority first:

1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment)
4. Default value

The API key can also be read from a file (``GITHUB_API_KEY_FILE``), which is
convenient for container secrets.

Example:
    ```python
    from github_api_client.auth import CredentialResolver

    resolver = CredentialResolver()
    credential = resolver.resolve_credential()  # GITHUB_USERNAME / GITHUB_API_KEY

    # Explicit values win over the environment
    credential = resolver.resolve_credential(username="alice", api_key="ghp_...")
    ```

Security Considerations:
    - API keys are never logged; only their source is (masked with ***)
    - ``Credential.__repr__`` masks the key
    - File-based keys have surrounding whitespace stripped
"""

import base64
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from github_api_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

USERNAME_ENV_VAR = "GITHUB_USERNAME"
API_KEY_ENV_VAR = "GITHUB_API_KEY"
API_KEY_FILE_ENV_VAR = "GITHUB_API_KEY_FILE"


@dataclass(frozen=True)
class Credential:
    """A GitHub username and personal access token (or password)."""

    username: str
    api_key: str

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, api_key='***')"

    def authorization_header(self) -> str:
        """HTTP Basic ``Authorization`` header value for this credential."""
        token = base64.b64encode(f"{self.username}:{self.api_key}".encode()).decode("ascii")
        return f"Basic {token}"


class CredentialResolver:
    """Resolve credential values from multiple sources with priority ordering.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Set to False to skip .env loading (useful in tests).
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve one value; the first source that has it wins.

        Args:
            value: Explicit value (highest priority).
            env_var_name: Environment variable to check (includes .env values).
            default: Fallback when nothing else provides a value.
            required: Raise instead of returning None when unresolved.
            mask_in_logs: Log ``***`` instead of the value.

        Returns:
            Resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and not found anywhere.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a value from a file whose path is given directly or via an env var.

        ``~`` and ``$VAR`` in the path are expanded; the content is stripped.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = None
        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False)

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content

    def resolve_credential(
        self,
        *,
        username: str | None = None,
        api_key: str | None = None,
        username_env_var: str = USERNAME_ENV_VAR,
        api_key_env_var: str = API_KEY_ENV_VAR,
        api_key_file_env_var: str = API_KEY_FILE_ENV_VAR,
    ) -> Credential:
        """Build a ``Credential`` from explicit values, the environment or a key file.

        The API key is looked up as: explicit ``api_key``, ``$GITHUB_API_KEY``,
        then the file named by ``$GITHUB_API_KEY_FILE``.

        Raises:
            CredentialNotFoundError: If the username or API key cannot be found.
        """
        resolved_username = self.resolve(
            value=username, env_var_name=username_env_var, required=True, mask_in_logs=False
        )
        resolved_key = self.resolve(value=api_key, env_var_name=api_key_env_var)
        if resolved_key is None:
            resolved_key = self.resolve_from_file(env_var_name=api_key_file_env_var)
        if resolved_key is None:
            raise CredentialNotFoundError(
                f"Required credential not found (checked env vars: {api_key_env_var}, {api_key_file_env_var})",
                env_var_name=api_key_env_var,
            )
        return Credential(username=resolved_username, api_key=resolved_key)
