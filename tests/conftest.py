"""Pytest configuration and shared fixtures for github-api-client tests."""

import httpx
import pytest

from github_api_client.testing import create_mock_client


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear GitHub and test-related environment variables before each test.

    This prevents a developer's real credentials leaking into credential
    resolution tests.
    """
    import os

    test_prefixes = ("TEST_", "API_", "GITHUB_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the ``mock_github`` factory's transport."""
    return []


@pytest.fixture
def mock_github(recorded_requests):
    """Factory for a ``GithubClient`` (user ``alice``) answering with ``handler``.

    Every request is appended to ``recorded_requests``.
    """

    def factory(handler, **kwargs):
        def recording_handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return create_mock_client(recording_handler, **kwargs)

    return factory
