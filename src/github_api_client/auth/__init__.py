"""Credentials for the GitHub API.

Example:
    ```python
    from github_api_client.auth import Credential, CredentialResolver

    credential = Credential("alice", "ghp_...")
    credential = CredentialResolver().resolve_credential()
    ```
"""

from github_api_client.auth.credentials import Credential, CredentialResolver
from github_api_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "Credential",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
