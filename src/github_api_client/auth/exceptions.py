"""Exceptions raised while resolving GitHub credentials.

Example:
    ```python
    from github_api_client.auth.exceptions import CredentialNotFoundError

    try:
        credential = resolver.resolve_credential()
    except CredentialNotFoundError as e:
        print(f"Set {e.env_var_name} to use the live API")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential resolution errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """A required credential value was not found in any source.

    Attributes:
        env_var_name: The environment variable that was checked, if any.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """A credential file could not be read."""

    pass
