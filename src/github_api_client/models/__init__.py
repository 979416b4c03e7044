"""Typed records for GitHub resources.

Every field is optional: GitHub omits members depending on the caller's
scope and plan, and an absent member decodes as ``None``.
"""

from github_api_client.models.base import Record, decode_json
from github_api_client.models.rate_limits import Limits, Rate, ResourcesLimit
from github_api_client.models.repo import RepoInfoStructure, RepoPermissionsStructure
from github_api_client.models.user import UserInfoStructure, UserPlanStructure, UserUpdateStructure

__all__ = [
    "Limits",
    "Rate",
    "Record",
    "RepoInfoStructure",
    "RepoPermissionsStructure",
    "ResourcesLimit",
    "UserInfoStructure",
    "UserPlanStructure",
    "UserUpdateStructure",
    "decode_json",
]
